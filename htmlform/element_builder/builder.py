"""
Helpers for building element tree nodes.

Nodes are BeautifulSoup tags, so any consumer that already speaks bs4 can
serialize, query or splice them into a parsed document.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from bs4 import BeautifulSoup, NavigableString, Tag

logger = logging.getLogger(__name__)

# Only used as a tag factory; nothing is ever inserted into it.
_factory = BeautifulSoup("", "html.parser")


def new_node(tag_name: str) -> Tag:
    """Create a detached element node."""
    return _factory.new_tag(tag_name)


def new_text(text: str) -> NavigableString:
    """Create a detached text node."""
    return NavigableString(text)


def set_attr(node: Tag, name: str, value: str) -> bool:
    """
    Set an attribute unless the node already carries one with that name.

    Returns:
        True if the attribute was written, False if it was skipped.
    """
    if node.has_attr(name):
        logger.debug("skipping duplicate attribute %r on <%s>", name, node.name)
        return False
    node[name] = value
    return True


def set_if(node: Tag, name: str, value: Optional[str]) -> None:
    """Set an attribute only when its value is non-empty."""
    if value:
        set_attr(node, name, value)


def set_flag(node: Tag, name: str, enabled: bool) -> None:
    """Set a boolean attribute (rendered as name="") when enabled."""
    if enabled:
        set_attr(node, name, "")


def input_node(input_type: str, name: str, value: str) -> Tag:
    """Create an <input> node carrying its type, then name and value when set."""
    node = new_node("input")
    node["type"] = input_type
    set_if(node, "name", name)
    set_if(node, "value", value)
    return node


def append_text(node: Tag, text: str) -> None:
    if text:
        node.append(new_text(text))


def append_children(node: Tag, children: Iterable) -> None:
    """Build and append one child node per element-producing item, in order."""
    for child in children:
        node.append(child.element())
