"""Input validation for digits, operators and display operands."""

from __future__ import annotations

import math
from typing import TypeVar

from padcalc.exceptions import InvalidInputError
from padcalc.models import DIGITS, ERROR, OPERATION_ALIASES, Operation

T = TypeVar("T", int, float)


def validate_number(value: T) -> T:
    """
    Validate that a value is a finite number.

    Args:
        value: The value to validate

    Returns:
        The validated value

    Raises:
        InvalidInputError: If value is NaN, Inf, or not a number
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInputError(value, f"Expected number, got {type(value).__name__}")

    if isinstance(value, float):
        if math.isnan(value):
            raise InvalidInputError(value, "NaN is not allowed")
        if math.isinf(value):
            raise InvalidInputError(value, "Infinity is not allowed")

    return value


def validate_digit(value: str) -> str:
    """
    Validate a single digit key.

    Args:
        value: One of "0"-"9" or "."

    Returns:
        The validated digit

    Raises:
        InvalidInputError: If value is not a single digit or decimal point
    """
    if not isinstance(value, str) or len(value) != 1 or value not in DIGITS:
        raise InvalidInputError(value, "Expected a digit or decimal point")
    return value


def validate_operation(value: Operation | str) -> Operation:
    """
    Resolve an operator symbol to an Operation.

    Accepts enum members, their display symbols, and the ASCII
    aliases "*" and "/".

    Raises:
        InvalidInputError: If value names no operation
    """
    if isinstance(value, Operation):
        return value
    if isinstance(value, str):
        if value in OPERATION_ALIASES:
            return OPERATION_ALIASES[value]
        try:
            return Operation(value)
        except ValueError:
            pass
    raise InvalidInputError(value, "Unknown operation")


def parse_operand(text: str) -> float:
    """
    Parse a display string into a finite float.

    Raises:
        InvalidInputError: If text is empty, the error marker, not a
            decimal literal, or not finite
    """
    if not text or text == ERROR:
        raise InvalidInputError(text, "No numeric operand")

    try:
        value = float(text)
    except ValueError as e:
        raise InvalidInputError(text, "Not a decimal literal") from e

    return validate_number(value)
