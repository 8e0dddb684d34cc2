"""Calculator session owning the single input state."""

from __future__ import annotations

import logging

from padcalc.events import ChooseOperation, Clear, Delete, Digit, Evaluate, Event
from padcalc.keyboard import event_for_key, tokenize
from padcalc.machine import transition
from padcalc.models import INITIAL_STATE, CalculatorState, Operation

logger = logging.getLogger(__name__)


class Calculator:
    """
    A calculator session driven by input events.

    The session is the only writer of its state: every event replaces
    the state wholesale with the result of `transition`. Callers feeding
    events from several threads must serialise them before `dispatch`.

    Example:
        >>> calc = Calculator()
        >>> calc.digit("7").choose("+").digit("3").evaluate().display
        '10'
        >>> calc.type("2")
        >>> calc.display
        '2'
    """

    def __init__(self, state: CalculatorState = INITIAL_STATE) -> None:
        self._state = state

    @property
    def state(self) -> CalculatorState:
        """Current input state."""
        return self._state

    @property
    def display(self) -> str:
        """The primary value line."""
        return self._state.current_value

    @property
    def pending_line(self) -> str:
        """The pending operand and operator line."""
        return self._state.pending_line

    def dispatch(self, event: Event) -> CalculatorState:
        """Apply an event and return the new state."""
        self._state = transition(self._state, event)
        logger.debug("%r -> %r", event, self._state)
        return self._state

    def digit(self, digit: str) -> Calculator:
        """Enter a digit or decimal point."""
        self.dispatch(Digit(digit))
        return self

    def choose(self, operation: Operation | str) -> Calculator:
        """Choose an operator, folding any pending operation first."""
        self.dispatch(ChooseOperation(operation))
        return self

    def clear(self) -> Calculator:
        """Reset to the initial state."""
        self.dispatch(Clear())
        return self

    def delete(self) -> Calculator:
        """Remove the last entered character."""
        self.dispatch(Delete())
        return self

    def evaluate(self) -> Calculator:
        """Collapse the pending operation into the display."""
        self.dispatch(Evaluate())
        return self

    def press(self, key: str) -> bool:
        """
        Dispatch the event bound to a key.

        Returns:
            False if the key is unbound, in which case nothing happens
        """
        event = event_for_key(key)
        if event is None:
            logger.debug("Ignoring unbound key %r", key)
            return False
        self.dispatch(event)
        return True

    def type(self, keys: str) -> None:
        """Press every key of a keystroke string in order."""
        for key in tokenize(keys):
            self.press(key)

    def __repr__(self) -> str:
        return f"Calculator(state={self._state!r})"
