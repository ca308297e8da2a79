"""Typed form model: the shared attribute bundle and every control kind."""

from .attributes import HTMLAttributes, TriState
from .controls import (
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

__all__ = [
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
