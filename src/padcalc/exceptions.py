"""
Errors raised by padcalc operations, validators and event constructors.

`transition` and `evaluate` never let these escape: arithmetic failures
become the ERROR marker on the display and unparseable operands fall
back to "0".
"""

from typing import Any


class CalculatorError(Exception):
    """Base exception for all padcalc errors."""

    def __init__(self, message: str, value: Any = None) -> None:
        self.message = message
        self.value = value
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.value is None:
            return self.message
        return f"{self.message} (got {self.value!r})"


class DivisionByZeroError(CalculatorError):
    """The right operand of ÷ is zero; the display shows ERROR instead."""

    def __init__(self, numerator: float) -> None:
        super().__init__(f"Cannot divide {numerator!r} by a zero operand")
        self.numerator = numerator


class OverflowError(CalculatorError):
    """An arithmetic result does not fit in a finite float."""

    def __init__(self, operation: str, *operands: float) -> None:
        super().__init__(f"Result of {operation} is not finite", operands)
        self.operation = operation
        self.operands = operands


class InvalidInputError(CalculatorError):
    """A key, digit, operator or display operand that cannot be used."""

    def __init__(self, value: Any, reason: str = "invalid input") -> None:
        super().__init__(reason, value)
        self.reason = reason
