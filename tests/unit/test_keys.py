"""Unit tests for button and keyboard dispatch."""

import pytest

from calculite import EquationEngine, InvalidInputError, Operator, press_button, press_key


class TestPressButton:
    """Tests for press_button."""

    def test_digits_and_operators(self, engine):
        for button in ("4", "÷", "8", "="):
            transition = press_button(engine, button)
        assert transition.display.main == "0.5"

    def test_unknown_button(self, engine):
        with pytest.raises(InvalidInputError):
            press_button(engine, "M+")


class TestPressKey:
    """Tests for press_key."""

    def test_typing_an_equation(self, engine):
        for key in ("1", "2", ".", "5", "*", "2", "Enter"):
            transition = press_key(engine, key)
        assert transition.display.main == "25"

    @pytest.mark.parametrize(
        ("key", "operator"),
        [
            ("+", Operator.ADD),
            ("-", Operator.SUBTRACT),
            ("*", Operator.MULTIPLY),
            ("/", Operator.DIVIDE),
            ("p", Operator.ADD),
            ("O", Operator.SUBTRACT),
            ("x", Operator.MULTIPLY),
            ("T", Operator.MULTIPLY),
            ("y", Operator.DIVIDE),
        ],
    )
    def test_operator_keys(self, engine, key, operator):
        press_key(engine, "3")
        press_key(engine, key)
        assert engine.state.current_operator is operator

    def test_shifted_plus(self, engine):
        press_key(engine, "3")
        press_key(engine, "+", shift=True)
        assert engine.state.current_operator is Operator.ADD

    def test_equals_key(self, engine):
        press_key(engine, "3")
        assert press_key(engine, "=").display.main == "3"

    def test_backspace(self, engine):
        for key in ("1", "2", "3"):
            press_key(engine, key)
        assert press_key(engine, "Backspace").display.main == "12"
        assert press_key(engine, "Backspace", shift=True).display.main == "2"

    def test_clear_keys(self, engine):
        press_key(engine, "9")
        press_key(engine, "c")
        assert engine.state.current_input is None
        press_key(engine, "9")
        press_key(engine, "Escape")
        assert engine.state.current_input is None

    def test_clear_entry_keys(self, engine):
        for key in ("9", "+", "8"):
            press_key(engine, key)
        press_key(engine, "Delete")
        assert engine.state.current_input is None
        assert engine.state.current_result == 9
        press_key(engine, "7")
        press_key(engine, "Escape", shift=True)
        assert engine.state.current_input is None
        assert engine.state.current_operator is Operator.ADD

    def test_sign_toggle_keys(self, engine):
        press_key(engine, "6")
        assert press_key(engine, "F9").display.main == "−6"
        assert press_key(engine, "-", alt=True).display.main == "6"

    def test_locale_decimal_key(self):
        from calculite import Symbols

        engine = EquationEngine(symbols=Symbols(decimal=",", grouping="."))
        press_key(engine, "1")
        press_key(engine, ",")
        assert engine.state.current_input == "1."

    def test_unknown_key(self, engine):
        assert press_key(engine, "F1") is None
        assert press_key(engine, "9", alt=True) is None
