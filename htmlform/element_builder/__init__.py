from .builder import (
    append_children,
    append_text,
    input_node,
    new_node,
    new_text,
    set_attr,
    set_flag,
    set_if,
)

__all__ = [
    "append_children",
    "append_text",
    "input_node",
    "new_node",
    "new_text",
    "set_attr",
    "set_flag",
    "set_if",
]
