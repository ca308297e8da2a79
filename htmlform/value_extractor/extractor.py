"""
Convert a control tree to its name/value pairs.

This is a lossy conversion. Only controls with a meaningful notion of value
(text-like inputs, selects, buttons, checkboxes) contribute; grouping
controls are walked through and things like labels, outputs and free text are
skipped. Traversal follows declaration order, which is also the order of the
values collected under one name.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, Optional
from urllib.parse import urlencode

from htmlform.models.controls import Control, OptGroup, Option, ValueKind

logger = logging.getLogger(__name__)


class FormValues(dict):
    """A mapping of field names to their ordered values."""

    def add(self, name: str, value: str) -> None:
        """Append a value under `name`."""
        self.setdefault(name, []).append(value)

    def set(self, name: str, value: str) -> None:
        """Replace every value under `name` with `value`."""
        self[name] = [value]

    def get_first(self, name: str, default: Optional[str] = None) -> Optional[str]:
        values = self.get(name)
        return values[0] if values else default

    def encode(self) -> str:
        """Return the values as application/x-www-form-urlencoded text."""
        return urlencode(self, doseq=True)


def _skip(control: Control, values: FormValues) -> None:
    pass


def _container(control: Control, values: FormValues) -> None:
    _collect(control.controls, values)


def _checkable(control: Control, values: FormValues) -> None:
    if control.checked:
        values.add(control.name, control.value)


def _select(control: Control, values: FormValues) -> None:
    for entry in control.options:
        if isinstance(entry, OptGroup):
            # Every grouped option is taken, selected or not.
            for option in entry.options:
                values.add(control.name, option.value)
        elif isinstance(entry, Option) and entry.selected:
            values.add(control.name, entry.value)


def _single(control: Control, values: FormValues) -> None:
    values.set(control.name, control.value)


_HANDLERS: Dict[ValueKind, Callable[[Control, FormValues], None]] = {
    ValueKind.NONE: _skip,
    ValueKind.CONTAINER: _container,
    ValueKind.CHECKABLE: _checkable,
    ValueKind.SELECT: _select,
    ValueKind.SINGLE: _single,
}

_unhandled = set(ValueKind) - set(_HANDLERS)
if _unhandled:
    raise RuntimeError(f"No value handler for {sorted(kind.name for kind in _unhandled)}")


def _collect(controls: Iterable[Control], values: FormValues) -> None:
    for control in controls:
        _HANDLERS[control.value_kind](control, values)


def as_values(controls: Iterable[Control]) -> FormValues:
    """
    Extract the name/values pairs for a sequence of controls.

    Checkboxes, radios and select options append values; controls that only
    admit one value (text, textarea, buttons, ...) set it, so the last
    control with a given name wins.

    Args:
        controls: Top-level controls in declaration order.

    Returns:
        A FormValues mapping each name to its ordered values.
    """
    values = FormValues()
    _collect(controls, values)
    logger.debug("extracted values for %d names", len(values))
    return values
