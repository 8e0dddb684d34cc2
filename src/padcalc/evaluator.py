"""Collapse a pending `previous OP current` into a single display value."""

from __future__ import annotations

import logging
import math
from decimal import Decimal

from padcalc.exceptions import CalculatorError, InvalidInputError
from padcalc.models import ERROR, Operation
from padcalc.operations import apply
from padcalc.validators import parse_operand, validate_operation

logger = logging.getLogger(__name__)

# Positions of the decimal point, relative to the first significant digit,
# outside which results switch to exponent notation
MAX_PLAIN_POINT = 21
MIN_PLAIN_POINT = -6


def format_number(value: float) -> str:
    """
    Render a float the way the display shows it.

    Uses the shortest digits that round-trip. Magnitudes from 1e-6 up to
    1e21 are written positionally ("20", "0.00001",
    "1152921504606847000"); anything else gets an exponent ("1e-7",
    "1.5e+21"). Negative zero prints as "0".

    Example:
        >>> format_number(20.0)
        '20'
        >>> format_number(0.1 + 0.2)
        '0.30000000000000004'
        >>> format_number(1e-7)
        '1e-7'
    """
    value = float(value)
    if not math.isfinite(value):
        return repr(value)
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(value))).normalize().as_tuple()
    digits = "".join(map(str, digit_tuple))
    point = exponent + len(digits)

    if len(digits) <= point <= MAX_PLAIN_POINT:
        return sign + digits + "0" * (point - len(digits))
    if 0 < point <= MAX_PLAIN_POINT:
        return f"{sign}{digits[:point]}.{digits[point:]}"
    if MIN_PLAIN_POINT < point <= 0:
        return f"{sign}0.{'0' * -point}{digits}"

    mantissa = digits if len(digits) == 1 else f"{digits[0]}.{digits[1:]}"
    return f"{sign}{mantissa}e{point - 1:+d}"


def evaluate(
    previous_value: str,
    current_value: str,
    operation: Operation | str | None,
) -> str:
    """
    Evaluate `previous_value operation current_value`.

    Never raises. Unparseable operands or a missing operator yield "0";
    division by zero and non-finite results yield the ERROR marker.

    Args:
        previous_value: Left operand as shown on the display
        current_value: Right operand as shown on the display
        operation: Operator to apply

    Returns:
        The result as a display string
    """
    try:
        prev = parse_operand(previous_value)
        current = parse_operand(current_value)
        op = validate_operation(operation)
    except InvalidInputError as e:
        logger.debug("Cannot evaluate %r %s %r: %s", previous_value, operation, current_value, e)
        return "0"

    try:
        result = apply(op, prev, current)
    except CalculatorError as e:
        logger.debug("Arithmetic failure: %s", e)
        return ERROR

    return format_number(result)
