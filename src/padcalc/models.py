"""Data models for padcalc.

Operation enum and the immutable CalculatorState that flows through
machine → session → CLI.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

# Marker written into the display when an arithmetic operation fails
ERROR = "Error"

DIGITS = "0123456789."


class Operation(str, Enum):
    """The four binary operators, valued by their display symbol."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "×"
    DIVIDE = "÷"

    def __str__(self) -> str:
        return self.value


# Keyboard-friendly spellings accepted wherever a symbol is
OPERATION_ALIASES = {
    "*": Operation.MULTIPLY,
    "/": Operation.DIVIDE,
}


@dataclass(frozen=True)
class CalculatorState:
    """
    Snapshot of the calculator input.

    Attributes:
        current_value: Number being entered or just computed, "0", or ERROR
        previous_value: Pending left operand, "" when there is none
        operation: Pending operator, None when none has been chosen
        overwrite: Whether the next digit replaces current_value
    """

    current_value: str = "0"
    previous_value: str = ""
    operation: Operation | None = None
    overwrite: bool = True

    @property
    def pending_line(self) -> str:
        """The pending operand and operator, blank when nothing is pending."""
        parts = [p for p in (self.previous_value, str(self.operation or "")) if p]
        return " ".join(parts)

    @property
    def is_error(self) -> bool:
        """Whether the display shows the error marker."""
        return self.current_value == ERROR

    def evolve(self, **changes: object) -> CalculatorState:
        """Return a copy of this state with the given fields replaced."""
        return replace(self, **changes)

    def __str__(self) -> str:
        if self.pending_line:
            return f"{self.pending_line} {self.current_value}"
        return self.current_value


INITIAL_STATE = CalculatorState()
