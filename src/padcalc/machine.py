"""
The calculator input-state machine.

`transition` is pure and total: every (state, event) pair yields a new
CalculatorState, and inputs that make no sense in the current state
(a second decimal point, an operator before any number, evaluating with
nothing pending) return the state unchanged.

Operators fold strictly left to right with no precedence:
`2 + 3 × 4 =` shows 20.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from padcalc.evaluator import evaluate
from padcalc.events import ChooseOperation, Clear, Delete, Digit, Evaluate, Event
from padcalc.models import INITIAL_STATE, CalculatorState

if TYPE_CHECKING:
    from collections.abc import Callable


def _add_digit(state: CalculatorState, event: Digit) -> CalculatorState:
    digit = event.digit

    if state.overwrite:
        return state.evolve(current_value=digit, overwrite=False)

    if digit == "." and "." in state.current_value:
        return state

    if state.current_value == "0" and digit != ".":
        return state.evolve(current_value=digit)

    return state.evolve(current_value=state.current_value + digit)


def _choose_operation(state: CalculatorState, event: ChooseOperation) -> CalculatorState:
    if state.current_value == "0" and state.previous_value == "":
        return state

    if state.previous_value == "":
        return state.evolve(
            previous_value=state.current_value,
            operation=event.operation,
            current_value="0",
            overwrite=True,
        )

    if state.operation is not None:
        result = evaluate(state.previous_value, state.current_value, state.operation)
        return state.evolve(
            previous_value=result,
            operation=event.operation,
            current_value="0",
            overwrite=True,
        )

    return state


def _clear(state: CalculatorState, event: Clear) -> CalculatorState:
    return INITIAL_STATE


def _delete(state: CalculatorState, event: Delete) -> CalculatorState:
    if state.overwrite or len(state.current_value) <= 1:
        return state.evolve(current_value="0", overwrite=True)

    return state.evolve(current_value=state.current_value[:-1])


def _awaiting_operand(state: CalculatorState) -> bool:
    # "0" left by ChooseOperation or Delete, not a zero the user typed
    return state.current_value == "0" and state.overwrite


def _evaluate(state: CalculatorState, event: Evaluate) -> CalculatorState:
    if state.operation is None or state.previous_value == "" or _awaiting_operand(state):
        return state

    return state.evolve(
        current_value=evaluate(state.previous_value, state.current_value, state.operation),
        previous_value="",
        operation=None,
        overwrite=True,
    )


_HANDLERS: dict[type, Callable[[CalculatorState, Event], CalculatorState]] = {
    Digit: _add_digit,
    ChooseOperation: _choose_operation,
    Clear: _clear,
    Delete: _delete,
    Evaluate: _evaluate,
}


def transition(state: CalculatorState, event: Event) -> CalculatorState:
    """
    Apply one input event to a state.

    Args:
        state: The current state
        event: Digit, ChooseOperation, Clear, Delete or Evaluate

    Returns:
        The next state; `state` itself when the event is a no-op or of
        an unknown kind
    """
    handler = _HANDLERS.get(type(event))
    if handler is None:
        return state
    return handler(state, event)
