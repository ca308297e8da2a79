"""
htmlform: declare HTML5 forms in code.

A Form owns an ordered list of controls. It can be projected into an element
tree (BeautifulSoup nodes) for rendering, and its current state can be
extracted into the name/values pairs a browser would submit.

    form = new_form("signup", "/signup").add(
        Text(name="user"),
        Checkbox(name="terms", value="yes", checked=True),
        Submit(value="Sign up"),
    )
    node = form.element()
    values = form.as_values()
"""

from htmlform.models import (
    HTMLAttributes,
    TriState,
    URL,
    Button,
    ButtonInput,
    Checkable,
    Checkbox,
    Color,
    Container,
    Control,
    ControlError,
    Date,
    DateTimeLocal,
    Div,
    Email,
    FieldSet,
    FormError,
    Hidden,
    Image,
    Input,
    Label,
    Month,
    Number,
    OptGroup,
    Option,
    Output,
    Password,
    Radio,
    Range,
    Search,
    Select,
    Submit,
    Tel,
    Text,
    TextArea,
    TextContent,
    Time,
    ValueKind,
    Week,
)
from htmlform.value_extractor import FormValues, as_values
from htmlform.models.form import Form, new_form

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Form",
    "FormValues",
    "as_values",
    "new_form",
    "HTMLAttributes",
    "TriState",
    "URL",
    "Button",
    "ButtonInput",
    "Checkable",
    "Checkbox",
    "Color",
    "Container",
    "Control",
    "ControlError",
    "Date",
    "DateTimeLocal",
    "Div",
    "Email",
    "FieldSet",
    "FormError",
    "Hidden",
    "Image",
    "Input",
    "Label",
    "Month",
    "Number",
    "OptGroup",
    "Option",
    "Output",
    "Password",
    "Radio",
    "Range",
    "Search",
    "Select",
    "Submit",
    "Tel",
    "Text",
    "TextArea",
    "TextContent",
    "Time",
    "ValueKind",
    "Week",
]
