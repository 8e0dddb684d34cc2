"""Pytest configuration and shared fixtures."""

import os

import pytest
from hypothesis import Verbosity, settings

# Configure Hypothesis profiles
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, verbosity=Verbosity.verbose)

# Load profile from environment or default to "dev"
profile = os.environ.get("HYPOTHESIS_PROFILE", "dev")
settings.load_profile(profile)


@pytest.fixture
def calculator():
    """Provide a fresh Calculator session."""
    from padcalc import Calculator

    return Calculator()


@pytest.fixture
def pending_addition():
    """Provide a state holding `7 +` and waiting for the right operand."""
    from padcalc import CalculatorState, Operation

    return CalculatorState(
        current_value="0",
        previous_value="7",
        operation=Operation.ADD,
        overwrite=True,
    )


@pytest.fixture
def sample_operands():
    """Display strings that parse as interesting operands."""
    return [
        "0",
        "1",
        "0.5",
        "5.",
        "-3",
        "100",
        "1e+21",
        "0.30000000000000004",
    ]
