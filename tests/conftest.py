"""Pytest configuration and shared fixtures."""

import os

import pytest
from hypothesis import Verbosity, settings

# Configure Hypothesis profiles
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, verbosity=Verbosity.verbose)

# Load profile from environment or default to "dev"
settings.load_profile(os.environ.get("HYPOTHESIS_PROFILE", "dev"))


@pytest.fixture
def engine():
    """Provide a fresh engine with default symbols."""
    from calculite import EquationEngine, Symbols

    return EquationEngine(max_digits=30, symbols=Symbols(decimal=".", grouping=","))


@pytest.fixture
def press(engine):
    """Press a sequence of keypad buttons and return the last transition."""
    from calculite import press_button

    def _press(*buttons: str):
        transition = None
        for button in buttons:
            transition = press_button(engine, button)
        return transition

    return _press


@pytest.fixture
def tiny_operand():
    """Operand text for 1e-29, the smallest magnitude 30 digits can type."""
    return "0." + "0" * 28 + "1"
