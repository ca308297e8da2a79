# Text direction values for the `dir` attribute
LTR = "ltr"
RTL = "rtl"
AUTO = "auto"

METHOD_GET = "get"
METHOD_POST = "post"

ENCTYPE_URLENCODED = "application/x-www-form-urlencoded"
ENCTYPE_MULTIPART = "multipart/form-data"
ENCTYPE_TEXT_PLAIN = "text/plain"

# Global scalar attributes, in emission order: (field name, attribute name)
SCALAR_ATTRIBUTES: tuple[tuple[str, str], ...] = (
    ("access_key", "accesskey"),
    ("id", "id"),
    ("dir", "dir"),
    ("lang", "lang"),
    ("style", "style"),
    ("tab_index", "tabindex"),
    ("title", "title"),
    ("translate", "translate"),
)

# Form attributes that are always emitted, even when empty. Names are the
# HTML attribute names, so accept_charset becomes accept-charset.
FORM_ATTRIBUTES: tuple[tuple[str, str], ...] = (
    ("accept_charset", "accept-charset"),
    ("enctype", "enctype"),
    ("action", "action"),
    ("method", "method"),
    ("name", "name"),
    ("target", "target"),
)

ARIA_PREFIX = "aria-"
