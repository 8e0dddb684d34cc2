"""
Two-operand calculator built around a pure input-state machine.

Digits, operators and commands are events; `transition` maps a state
and an event to the next state, and `evaluate` collapses a pending
`previous OP current` into a display string.
"""

from padcalc.core import Calculator
from padcalc.evaluator import evaluate, format_number
from padcalc.events import ChooseOperation, Clear, Delete, Digit, Evaluate, Event
from padcalc.exceptions import (
    CalculatorError,
    DivisionByZeroError,
    InvalidInputError,
    OverflowError,
)
from padcalc.keyboard import event_for_key, tokenize
from padcalc.machine import transition
from padcalc.models import ERROR, INITIAL_STATE, CalculatorState, Operation
from padcalc.operations import add, apply, divide, multiply, subtract
from padcalc.validators import (
    parse_operand,
    validate_digit,
    validate_number,
    validate_operation,
)

__all__ = [
    "ERROR",
    "INITIAL_STATE",
    "Calculator",
    "CalculatorError",
    "CalculatorState",
    "ChooseOperation",
    "Clear",
    "Delete",
    "Digit",
    "DivisionByZeroError",
    "Evaluate",
    "Event",
    "InvalidInputError",
    "Operation",
    "OverflowError",
    "add",
    "apply",
    "divide",
    "evaluate",
    "event_for_key",
    "format_number",
    "multiply",
    "parse_operand",
    "subtract",
    "tokenize",
    "transition",
    "validate_digit",
    "validate_number",
    "validate_operation",
]

__version__ = "0.1.0"
