"""
The Form aggregate.

A form is declared in code, either with `new_form()` or by instantiating
`Form` directly, filled with `add()`, and then consumed read-only: `element()`
projects it into an element tree node and `as_values()` extracts the
name/values pairs a browser would submit for its current state.
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field
from typing import List

from bs4 import Tag

from htmlform.config import FORM_ATTRIBUTES
from htmlform.element_builder import append_children, new_node, set_attr
from htmlform.models.attributes import HTMLAttributes
from htmlform.models.controls import Control, adopt_items
from htmlform.value_extractor import FormValues, as_values

logger = logging.getLogger(__name__)


@dataclass
class Form:
    """Describes an HTML5 form and the ordered controls it owns."""

    name: str = ""
    action: str = ""
    accept_charset: str = ""
    enctype: str = ""
    method: str = ""
    target: str = ""
    autocomplete: bool = False
    novalidate: bool = False
    controls: List[Control] = field(default_factory=list)
    html: HTMLAttributes = field(default_factory=HTMLAttributes)

    def __post_init__(self) -> None:
        adopt_items(self, self.controls, (Control,))

    def add(self, *controls: Control) -> "Form":
        """Append any number of controls, keeping declaration order."""
        adopt_items(self, controls, (Control,))
        self.controls.extend(controls)
        return self

    def element(self, include_controls: bool = False) -> Tag:
        """
        Build the <form> node.

        The six form attributes are always emitted, even when empty. The id
        falls back to the form name; the form itself is left untouched.

        Args:
            include_controls: Also append one child node per control. Off by
                default, leaving the controls to the rendering pipeline.

        Returns:
            The detached <form> element.
        """
        node = new_node("form")
        for field_name, attr_name in FORM_ATTRIBUTES:
            node[attr_name] = getattr(self, field_name)
        if self.autocomplete:
            set_attr(node, "autocomplete", "on")
        if self.novalidate:
            set_attr(node, "novalidate", "")

        # Try to at least set an id.
        resolved = dataclasses.replace(self.html, id=self.html.ensure_id(self.name))
        resolved.attach(node)

        if include_controls:
            append_children(node, self.controls)

        logger.debug("built <form> %r with %d attributes", self.name, len(node.attrs))
        return node

    def as_values(self) -> FormValues:
        """Convert the form's current state to its name/values pairs."""
        return as_values(self.controls)


def new_form(name: str, action: str) -> Form:
    """Create a form with its name and action set."""
    return Form(name=name, action=action)
