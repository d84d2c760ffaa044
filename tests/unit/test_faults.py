"""Unit tests for arithmetic fault detection and error mode."""

import pytest

from calculite import (
    DivisionByZeroError,
    EquationState,
    FaultDetector,
    Operator,
    OverflowError,
    UnderflowError,
)


class TestFaultDetector:
    """Tests for FaultDetector.inspect."""

    @pytest.fixture
    def detector(self):
        return FaultDetector()

    def test_division_by_zero(self, detector):
        state = EquationState(previous_result=5.0, current_result=float("inf"))
        with pytest.raises(DivisionByZeroError):
            detector.inspect(state, Operator.DIVIDE, 0.0)

    def test_division_by_zero_takes_priority(self, detector):
        state = EquationState(
            previous_result=0.0,
            previous_operator=Operator.DIVIDE,
            previous_input=0.0,
            current_result=float("nan"),
        )
        with pytest.raises(DivisionByZeroError):
            detector.inspect(state, Operator.DIVIDE, 0.0)

    def test_underflow(self, detector):
        state = EquationState(
            previous_result=1e-300,
            previous_operator=Operator.MULTIPLY,
            previous_input=1e-100,
            current_result=0.0,
        )
        with pytest.raises(UnderflowError):
            detector.inspect(state, Operator.MULTIPLY, 1e-100)

    def test_zero_sum_is_not_underflow(self, detector):
        state = EquationState(
            previous_result=9.0,
            previous_operator=Operator.SUBTRACT,
            previous_input=9.0,
            current_result=0.0,
        )
        detector.inspect(state, Operator.SUBTRACT, 9.0)

    def test_zero_factor_is_not_underflow(self, detector):
        state = EquationState(
            previous_result=9.0,
            previous_operator=Operator.MULTIPLY,
            previous_input=0.0,
            current_result=0.0,
        )
        detector.inspect(state, Operator.MULTIPLY, 0.0)

    def test_overflow(self, detector):
        state = EquationState(current_result=float("-inf"))
        with pytest.raises(OverflowError):
            detector.inspect(state, Operator.MULTIPLY, 10.0)

    def test_largest_float_is_fine(self, detector):
        state = EquationState(current_result=1.7976931348623157e308)
        detector.inspect(state, None, None)


class TestErrorMode:
    """Tests for how the engine surfaces faults."""

    def test_divide_by_zero(self, press, engine):
        transition = press("5", "÷", "0", "=")
        assert transition.display.error
        assert transition.display.main == "Cannot divide by zero"
        assert transition.display.sub == "5 ÷ 0 ="
        assert not transition.repeatable
        assert engine.state.current_error == "Cannot divide by zero"
        assert engine.state.current_result is None
        assert engine.state.current_operator is None
        assert engine.state.current_input is None

    def test_divide_by_zero_on_operator(self, press):
        transition = press("5", "÷", "0", "+")
        assert transition.display.main == "Cannot divide by zero"
        assert transition.display.sub == "5 ÷ 0 ="

    def test_zero_divided_by_itself(self, press):
        transition = press("0", "÷", "=")
        assert transition.display.main == "Cannot divide by zero"

    def test_underflow_from_repeated_multiplication(self, press, engine, tiny_operand):
        press(*tiny_operand, "×", *tiny_operand)
        transition = press("=")
        assert not transition.display.error

        for _ in range(20):
            transition = press("=")
            if transition.display.error:
                break
        assert transition.display.main == "Number too small"
        assert engine.state.current_error == "Number too small"

    def test_small_product_is_not_underflow(self, press, engine):
        transition = press(*"0.0000001", "×", *"0.00000000001", "=")
        assert not transition.display.error
        assert 0 < engine.state.current_result < 1e-17

    def test_overflow(self, press, engine):
        press(*("9" * 30), "×")
        transition = None
        for _ in range(20):
            transition = press("=")
            if transition.display.error:
                break
        assert transition.display.main == "Number too large"
        assert engine.state.current_error == "Number too large"

    @pytest.mark.parametrize("button", ["7", ".", "±", "+", "=", "⌫"])
    def test_presses_ignored_or_cleared(self, press, engine, button):
        press("5", "÷", "0", "=")
        transition = press(button)
        if button == "⌫":
            assert not transition.display.error
            assert transition.display.main == "0"
            assert engine.state.current_error is None
        else:
            assert transition.display.error
            assert engine.state.current_error == "Cannot divide by zero"

    def test_clear_exits_error(self, press, engine):
        press("5", "÷", "0", "=")
        transition = press("C")
        assert not transition.display.error
        assert transition.display.sub == "0"
        assert engine.state.current_error is None

    def test_clear_entry_exits_error(self, press, engine):
        press("5", "÷", "0", "=")
        assert not press("CE").display.error
        assert engine.state.current_error is None
