"""Binary arithmetic operations with zero-division and overflow protection."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from padcalc.exceptions import DivisionByZeroError, OverflowError
from padcalc.models import Operation
from padcalc.validators import validate_number, validate_operation

if TYPE_CHECKING:
    from collections.abc import Callable


def _finite(result: float, operation: str, a: float, b: float) -> float:
    if math.isinf(result):
        raise OverflowError(operation, a, b)
    return result


def add(a: float, b: float) -> float:
    """
    Add two numbers.

    Properties:
        - Commutative: add(a, b) == add(b, a)
        - Identity: add(a, 0) == a

    Raises:
        InvalidInputError: If inputs are invalid
        OverflowError: If the sum is not finite
    """
    validate_number(a)
    validate_number(b)
    return _finite(a + b, "addition", a, b)


def subtract(a: float, b: float) -> float:
    """
    Subtract b from a.

    Properties:
        - Anti-commutative: subtract(a, b) == -subtract(b, a)
        - Self-inverse: subtract(a, a) == 0

    Raises:
        InvalidInputError: If inputs are invalid
        OverflowError: If the difference is not finite
    """
    validate_number(a)
    validate_number(b)
    return _finite(a - b, "subtraction", a, b)


def multiply(a: float, b: float) -> float:
    """
    Multiply two numbers.

    Properties:
        - Commutative: multiply(a, b) == multiply(b, a)
        - Identity: multiply(a, 1) == a
        - Zero: multiply(a, 0) == 0

    Raises:
        InvalidInputError: If inputs are invalid
        OverflowError: If the product is not finite
    """
    validate_number(a)
    validate_number(b)
    return _finite(a * b, "multiplication", a, b)


def divide(a: float, b: float) -> float:
    """
    Divide a by b.

    Args:
        a: Dividend
        b: Divisor

    Returns:
        Quotient of a and b

    Raises:
        InvalidInputError: If inputs are invalid
        DivisionByZeroError: If b is zero
        OverflowError: If the quotient is not finite
    """
    validate_number(a)
    validate_number(b)

    if b == 0:
        raise DivisionByZeroError(a)

    return _finite(a / b, "division", a, b)


OPERATIONS: dict[Operation, Callable[[float, float], float]] = {
    Operation.ADD: add,
    Operation.SUBTRACT: subtract,
    Operation.MULTIPLY: multiply,
    Operation.DIVIDE: divide,
}


def apply(operation: Operation, a: float, b: float) -> float:
    """Apply the binary function behind an operator symbol or Operation."""
    return OPERATIONS[validate_operation(operation)](a, b)
