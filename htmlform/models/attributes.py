"""
Global attributes shared by every form control and by the form itself.

These are the Global, ARIA and data attributes of HTML5. Because all of them
can be applied to any form content, each control carries one bundle (as its
`html` field) rather than redeclaring them. Values are rarely forced to conform
to the HTML spec; typing is as close as we get to enforcement.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Union

from bs4 import Tag

from htmlform.config import ARIA_PREFIX, SCALAR_ATTRIBUTES
from htmlform.element_builder import set_attr, set_if


class TriState(Enum):
    """A flag that can be left unset, which is not the same as false."""

    UNSET = "unset"
    TRUE = "true"
    FALSE = "false"

    @classmethod
    def coerce(cls, value: Union["TriState", bool, None]) -> "TriState":
        if isinstance(value, TriState):
            return value
        if value is None:
            return cls.UNSET
        if value is True:
            return cls.TRUE
        if value is False:
            return cls.FALSE
        raise ValueError(f"Cannot interpret {value!r} as a tri-state flag.")

    @property
    def is_set(self) -> bool:
        return self is not TriState.UNSET


@dataclass
class HTMLAttributes:
    """Attributes common across all HTML elements."""

    classes: List[str] = field(default_factory=list)
    access_key: str = ""
    id: str = ""
    dir: str = ""
    lang: str = ""
    style: str = ""
    tab_index: str = ""
    title: str = ""
    translate: str = ""
    content_editable: TriState = TriState.UNSET
    hidden: TriState = TriState.UNSET
    role: str = ""
    # Emitted under their own keys, e.g. {"data-row": "3"}.
    data: Dict[str, str] = field(default_factory=dict)
    # Keys with or without the "aria-" prefix.
    aria: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.content_editable = TriState.coerce(self.content_editable)
        self.hidden = TriState.coerce(self.hidden)

    def ensure_id(self, seed: Optional[str] = "") -> str:
        """
        Resolve an id for the element.

        Returns the bundle's own id, falling back to `seed`. When both are
        empty the result is "" and the caller has to cope with a missing id;
        no identifier is generated here.
        """
        if self.id:
            return self.id
        if seed:
            return seed
        return ""

    def attach(self, node: Tag) -> None:
        """
        Attach the populated attributes to `node`.

        Attributes already present on the node win over the bundle: a name is
        never emitted twice and never overwritten.
        """
        for attr_name, flag in (("contenteditable", self.content_editable), ("hidden", self.hidden)):
            flag = TriState.coerce(flag)
            if flag.is_set:
                set_attr(node, attr_name, flag.value)

        for key in sorted(self.data):
            set_attr(node, key, self.data[key])

        if self.classes:
            set_attr(node, "class", " ".join(self.classes))

        for field_name, attr_name in SCALAR_ATTRIBUTES:
            set_if(node, attr_name, getattr(self, field_name))

        set_if(node, "role", self.role)

        for key in sorted(self.aria):
            attr_name = key if key.startswith(ARIA_PREFIX) else ARIA_PREFIX + key
            set_attr(node, attr_name, self.aria[key])
