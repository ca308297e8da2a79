"""
Form controls.

Every control can express itself as an element tree node through `element()`.
Each concrete class also declares a `value_kind`, which tells the value
extractor how the control contributes to submitted values. A control class
that does not resolve a `value_kind` is rejected when it is defined, so a new
kind cannot silently fall through the extractor.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Iterable, List, Tuple, Union

from bs4 import NavigableString, Tag

from htmlform.element_builder import (
    append_children,
    append_text,
    input_node,
    new_node,
    new_text,
    set_attr,
    set_flag,
    set_if,
)
from htmlform.models.attributes import HTMLAttributes


class FormError(Exception):
    """Base class for errors raised while declaring a form."""


class ControlError(FormError, TypeError):
    """Raised when something that is not an acceptable control is added to a form tree."""


class ValueKind(Enum):
    """How a control contributes to the extracted name/values mapping."""

    NONE = "none"            # contributes nothing
    CONTAINER = "container"  # recurse into nested controls
    CHECKABLE = "checkable"  # (name, value) when checked
    SELECT = "select"        # (name, value) per selected option
    SINGLE = "single"        # name is set to value, last one wins


class Control(ABC):
    """Any form element capable of expression as an element tree node."""

    value_kind: ClassVar[ValueKind]
    # Set once the control is added to a container, select or form.
    _owner = None

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if not isinstance(getattr(cls, "value_kind", None), ValueKind):
            raise TypeError(f"{cls.__name__} must declare a ValueKind as value_kind")

    @abstractmethod
    def element(self) -> Union[Tag, NavigableString]:
        """Build the node for this control."""


def adopt_items(owner: object, items: Iterable, allowed: Tuple[type, ...]) -> None:
    """Validate `items` and record `owner` as their single owner."""
    items = list(items)
    seen = set()
    for item in items:
        if not isinstance(item, allowed):
            names = ", ".join(kind.__name__ for kind in allowed)
            raise ControlError(
                f"{type(owner).__name__} accepts {names}, not {type(item).__name__}."
            )
        if id(item) in seen or item._owner is not None:
            raise ControlError(f"{type(item).__name__} already belongs to another control.")
        ancestor = owner
        while ancestor is not None:
            if ancestor is item:
                raise ControlError(f"{type(owner).__name__} cannot contain itself.")
            ancestor = getattr(ancestor, "_owner", None)
        seen.add(id(item))
    for item in items:
        item._owner = owner


# ===== CONTAINERS =====

@dataclass
class Container(Control):
    """A grouping construct owning an ordered sequence of controls."""

    value_kind = ValueKind.CONTAINER
    tag_name: ClassVar[str] = "div"

    controls: List[Control] = field(default_factory=list)
    html: HTMLAttributes = field(default_factory=HTMLAttributes)

    def __post_init__(self) -> None:
        adopt_items(self, self.controls, (Control,))

    def add(self, *controls: Control) -> "Container":
        """Append controls in order and return the container for chaining."""
        adopt_items(self, controls, (Control,))
        self.controls.extend(controls)
        return self

    def _decorate(self, node: Tag) -> None:
        """Hook for kind-specific attributes and leading children."""

    def element(self) -> Tag:
        node = new_node(self.tag_name)
        self._decorate(node)
        self.html.attach(node)
        append_children(node, self.controls)
        return node


@dataclass
class Div(Container):
    tag_name: ClassVar[str] = "div"


@dataclass
class FieldSet(Container):
    tag_name: ClassVar[str] = "fieldset"

    name: str = ""
    legend: str = ""
    disabled: bool = False

    def _decorate(self, node: Tag) -> None:
        set_if(node, "name", self.name)
        set_flag(node, "disabled", self.disabled)
        if self.legend:
            legend = new_node("legend")
            append_text(legend, self.legend)
            node.append(legend)


# ===== CHOICE CONTROLS =====

@dataclass
class Checkable(Control):
    """An <input> that only submits its value while checked."""

    value_kind = ValueKind.CHECKABLE
    input_type: ClassVar[str] = "checkbox"

    name: str = ""
    value: str = ""
    checked: bool = False
    html: HTMLAttributes = field(default_factory=HTMLAttributes)

    def element(self) -> Tag:
        node = input_node(self.input_type, self.name, self.value)
        set_flag(node, "checked", self.checked)
        self.html.attach(node)
        return node


@dataclass
class Checkbox(Checkable):
    input_type: ClassVar[str] = "checkbox"


@dataclass
class Radio(Checkable):
    input_type: ClassVar[str] = "radio"


@dataclass
class Option(Control):
    """A selectable entry of a Select or OptGroup."""

    value_kind = ValueKind.NONE

    value: str = ""
    label: str = ""
    selected: bool = False
    disabled: bool = False
    html: HTMLAttributes = field(default_factory=HTMLAttributes)

    def element(self) -> Tag:
        node = new_node("option")
        # An empty value is still meaningful for an option.
        node["value"] = self.value
        set_flag(node, "selected", self.selected)
        set_flag(node, "disabled", self.disabled)
        self.html.attach(node)
        append_text(node, self.label)
        return node


@dataclass
class OptGroup(Control):
    value_kind = ValueKind.NONE

    label: str = ""
    options: List[Option] = field(default_factory=list)
    disabled: bool = False
    html: HTMLAttributes = field(default_factory=HTMLAttributes)

    def __post_init__(self) -> None:
        adopt_items(self, self.options, (Option,))

    def add(self, *options: Option) -> "OptGroup":
        adopt_items(self, options, (Option,))
        self.options.extend(options)
        return self

    def element(self) -> Tag:
        node = new_node("optgroup")
        set_if(node, "label", self.label)
        set_flag(node, "disabled", self.disabled)
        self.html.attach(node)
        append_children(node, self.options)
        return node


@dataclass
class Select(Control):
    """A single or multiple choice list of options and option groups."""

    value_kind = ValueKind.SELECT

    name: str = ""
    options: List[Union[Option, OptGroup]] = field(default_factory=list)
    multiple: bool = False
    html: HTMLAttributes = field(default_factory=HTMLAttributes)

    def __post_init__(self) -> None:
        adopt_items(self, self.options, (Option, OptGroup))

    def add(self, *options: Union[Option, OptGroup]) -> "Select":
        adopt_items(self, options, (Option, OptGroup))
        self.options.extend(options)
        return self

    def element(self) -> Tag:
        node = new_node("select")
        set_if(node, "name", self.name)
        set_flag(node, "multiple", self.multiple)
        self.html.attach(node)
        append_children(node, self.options)
        return node


# ===== SINGLE-VALUE INPUTS =====

@dataclass
class Input(Control):
    """An <input> carrying a name and a single value."""

    value_kind = ValueKind.SINGLE
    input_type: ClassVar[str] = "text"

    name: str = ""
    value: str = ""
    html: HTMLAttributes = field(default_factory=HTMLAttributes)

    def _decorate(self, node: Tag) -> None:
        """Hook for attributes specific to one input type."""

    def element(self) -> Tag:
        node = input_node(self.input_type, self.name, self.value)
        self._decorate(node)
        self.html.attach(node)
        return node


class Text(Input):
    input_type = "text"


class Password(Input):
    input_type = "password"


class Email(Input):
    input_type = "email"


class Tel(Input):
    input_type = "tel"


class URL(Input):
    input_type = "url"


class Search(Input):
    input_type = "search"


class Date(Input):
    input_type = "date"


class Time(Input):
    input_type = "time"


class DateTimeLocal(Input):
    input_type = "datetime-local"


class Month(Input):
    input_type = "month"


class Week(Input):
    input_type = "week"


class Number(Input):
    input_type = "number"


class Range(Input):
    input_type = "range"


class Color(Input):
    input_type = "color"


class Hidden(Input):
    input_type = "hidden"


@dataclass
class TextArea(Control):
    """Multi-line text; the value is carried as the element's content."""

    value_kind = ValueKind.SINGLE

    name: str = ""
    value: str = ""
    rows: str = ""
    cols: str = ""
    placeholder: str = ""
    html: HTMLAttributes = field(default_factory=HTMLAttributes)

    def element(self) -> Tag:
        node = new_node("textarea")
        set_if(node, "name", self.name)
        set_if(node, "rows", self.rows)
        set_if(node, "cols", self.cols)
        set_if(node, "placeholder", self.placeholder)
        self.html.attach(node)
        append_text(node, self.value)
        return node


# ===== ACTION CONTROLS =====

class Submit(Input):
    input_type = "submit"


class ButtonInput(Input):
    input_type = "button"


@dataclass
class Image(Input):
    """A graphical submit button."""

    input_type: ClassVar[str] = "image"

    src: str = ""
    alt: str = ""

    def _decorate(self, node: Tag) -> None:
        set_if(node, "src", self.src)
        set_if(node, "alt", self.alt)


@dataclass
class Button(Control):
    """A <button> element; `label` becomes its content."""

    value_kind = ValueKind.SINGLE

    name: str = ""
    value: str = ""
    label: str = ""
    type: str = "submit"
    html: HTMLAttributes = field(default_factory=HTMLAttributes)

    def element(self) -> Tag:
        node = new_node("button")
        set_if(node, "type", self.type)
        set_if(node, "name", self.name)
        set_if(node, "value", self.value)
        self.html.attach(node)
        append_text(node, self.label)
        return node


# ===== NON-VALUED CONTROLS =====

@dataclass
class Output(Control):
    value_kind = ValueKind.NONE

    name: str = ""
    for_ids: List[str] = field(default_factory=list)
    value: str = ""
    html: HTMLAttributes = field(default_factory=HTMLAttributes)

    def element(self) -> Tag:
        node = new_node("output")
        set_if(node, "name", self.name)
        if self.for_ids:
            set_attr(node, "for", " ".join(self.for_ids))
        self.html.attach(node)
        append_text(node, self.value)
        return node


@dataclass
class Label(Control):
    value_kind = ValueKind.NONE

    text: str = ""
    for_id: str = ""
    html: HTMLAttributes = field(default_factory=HTMLAttributes)

    def element(self) -> Tag:
        node = new_node("label")
        set_if(node, "for", self.for_id)
        self.html.attach(node)
        append_text(node, self.text)
        return node


@dataclass
class TextContent(Control):
    """Character data that can be embedded anywhere in a control list."""

    value_kind = ValueKind.NONE

    text: str = ""

    def element(self) -> NavigableString:
        return new_text(self.text)
