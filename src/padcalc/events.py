"""Input events accepted by the calculator state machine."""

from __future__ import annotations

from dataclasses import dataclass

from padcalc.models import Operation
from padcalc.validators import validate_digit, validate_operation


@dataclass(frozen=True)
class Digit:
    """A digit or decimal point key."""

    digit: str

    def __post_init__(self) -> None:
        validate_digit(self.digit)


@dataclass(frozen=True)
class ChooseOperation:
    """An operator key; symbols are normalised to an Operation."""

    operation: Operation

    def __post_init__(self) -> None:
        object.__setattr__(self, "operation", validate_operation(self.operation))


@dataclass(frozen=True)
class Clear:
    pass


@dataclass(frozen=True)
class Delete:
    pass


@dataclass(frozen=True)
class Evaluate:
    pass


Event = Digit | ChooseOperation | Clear | Delete | Evaluate
