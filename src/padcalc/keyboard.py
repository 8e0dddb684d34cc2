"""Keyboard bindings: translate key names into calculator events."""

from __future__ import annotations

import re

from padcalc.events import ChooseOperation, Clear, Delete, Digit, Evaluate, Event
from padcalc.models import DIGITS, Operation

KEY_BINDINGS: dict[str, Event] = {
    "+": ChooseOperation(Operation.ADD),
    "-": ChooseOperation(Operation.SUBTRACT),
    "*": ChooseOperation(Operation.MULTIPLY),
    "×": ChooseOperation(Operation.MULTIPLY),
    "/": ChooseOperation(Operation.DIVIDE),
    "÷": ChooseOperation(Operation.DIVIDE),
    "Enter": Evaluate(),
    "=": Evaluate(),
    "Backspace": Delete(),
    "Escape": Clear(),
}
KEY_BINDINGS.update({d: Digit(d) for d in DIGITS})

# Named keys inside a keystroke string, e.g. "12{Backspace}3"
_TOKEN = re.compile(r"\{(\w+)\}|(\S)")


def event_for_key(key: str) -> Event | None:
    """Return the event bound to a key, or None if the key is unbound."""
    return KEY_BINDINGS.get(key)


def tokenize(text: str) -> list[str]:
    """
    Split a keystroke string into key names.

    Single characters are keys of their own, `{Name}` spells a named key
    and whitespace is ignored.

    Example:
        >>> tokenize("7 + 3{Enter}")
        ['7', '+', '3', 'Enter']
    """
    return [named or char for named, char in _TOKEN.findall(text)]
