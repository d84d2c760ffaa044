"""Equation state machine driving the two calculator display lines."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any

from calculite import config
from calculite.entry import DigitEntryBuffer
from calculite.exceptions import (
    CalculatorError,
    InvalidInputError,
    InvalidPasteError,
    TooManyDigitsError,
)
from calculite.faults import FaultDetector
from calculite.formatting import NumberFormatter, Symbols, Token
from calculite.operations import Operator, evaluate, or_zero
from calculite.validators import parse_operand, parse_pasted, validate_operand_text

logger = logging.getLogger(__name__)

_OPERATOR_FIELDS = ("previous_operator", "current_operator")
_NUMBER_FIELDS = ("previous_result", "previous_input", "current_result")


@dataclass
class EquationState:
    """
    Mutable record of one equation in progress.

    The previous_* fields describe the last completed step and feed
    repeat-equals and the history line. The current_* fields describe the
    step being built. current_input is the raw operand text, never a number.
    """

    previous_result: float | None = None
    previous_operator: Operator | None = None
    previous_input: float | None = None
    current_result: float | None = None
    current_operator: Operator | None = None
    current_input: str | None = None
    current_error: str | None = None

    @property
    def has_error(self) -> bool:
        return self.current_error is not None

    def reset(self) -> None:
        """Forget the whole equation."""
        for field in fields(self):
            setattr(self, field.name, None)

    def reset_current(self) -> None:
        """Forget the step being built, keeping the last completed step."""
        self.current_result = None
        self.current_operator = None
        self.current_input = None
        self.current_error = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize the seven fields; operators are stored as their glyph."""
        data = {field.name: getattr(self, field.name) for field in fields(self)}
        for key in _OPERATOR_FIELDS:
            if data[key] is not None:
                data[key] = data[key].glyph
        return data

    @classmethod
    def from_dict(
        cls, data: Mapping[str, Any] | None, max_digits: int = config.MAX_DIGITS
    ) -> EquationState:
        """
        Rebuild state from the output of to_dict.

        Missing keys are treated as absent, and anything other than a
        mapping yields an empty state.

        Args:
            data: Mapping produced by to_dict
            max_digits: Digit ceiling the restored operand text must respect

        Raises:
            InvalidInputError: If a field holds a value of the wrong kind, or
                current_input is not operand text within max_digits digits
        """
        if not isinstance(data, Mapping):
            return cls()

        values: dict[str, Any] = {}
        for key in _NUMBER_FIELDS:
            value = data.get(key)
            if value is not None:
                if isinstance(value, bool) or not isinstance(value, (int, float)):
                    raise InvalidInputError(value, f"{key} must be a number")
                value = float(value)
            values[key] = value
        for key in _OPERATOR_FIELDS:
            value = data.get(key)
            values[key] = None if value is None else Operator.from_symbol(value)
        value = data.get("current_input")
        values["current_input"] = (
            None if value is None else validate_operand_text(value, max_digits)
        )
        value = data.get("current_error")
        values["current_error"] = None if value is None else str(value)
        return cls(**values)


@dataclass(frozen=True)
class Display:
    """Rendered text of both display lines."""

    main: str
    sub: str
    error: bool = False
    has_history: bool = False


@dataclass(frozen=True)
class Transition:
    """
    Outcome of one key press.

    repeatable tells a caller implementing press-and-hold whether pressing
    the same key again would still change anything.
    """

    display: Display
    repeatable: bool = False


class EquationEngine:
    """
    Four-function calculator driven by one method call per key press.

    Example:
        >>> engine = EquationEngine()
        >>> _ = engine.append_digit(3)
        >>> engine.apply_operator(Operator.ADD).display.main
        '3'
        >>> engine.append_digit(4).display.main
        '4'
        >>> engine.apply_equals().display.main
        '7'
        >>> engine.apply_equals().display.main
        '11'
    """

    def __init__(self, max_digits: int | None = None, symbols: Symbols | None = None) -> None:
        self.state = EquationState()
        self.entry = DigitEntryBuffer(config.MAX_DIGITS if max_digits is None else max_digits)
        self.formatter = NumberFormatter(symbols)
        self.detector = FaultDetector()
        self._history: list[Token] | None = None
        self._display = self._render(None)

    @property
    def display(self) -> Display:
        """The most recently rendered display."""
        return self._display

    @property
    def max_digits(self) -> int:
        return self.entry.max_digits

    # Clearing

    def clear(self) -> Transition:
        """Reset the equation and both display lines."""
        self._reset()
        return self._show(None)

    def clear_entry(self) -> Transition:
        """Drop the operand being typed, or everything when no operator is pending."""
        if self.state.current_operator is None:
            return self.clear()

        self.state.current_input = None
        return self._show(None)

    def backspace(self, from_start: bool = False) -> Transition:
        """
        Delete one character of the operand being typed.

        An active error is cleared instead.

        Args:
            from_start: Delete the first character rather than the last
        """
        state = self.state
        if state.has_error:
            return self.clear()
        if not state.current_input:
            return Transition(self._display)

        state.current_input = self.entry.backspace(state.current_input, from_start)
        return self._show(state.current_input, repeatable=state.current_input is not None)

    # Operand entry

    def append_digit(self, digit: int) -> Transition:
        """
        Type a digit into the operand.

        Starting an operand with no operator pending begins a new equation.
        Once the operand holds max_digits digits further digits are ignored.
        """
        state = self.state
        if state.has_error:
            return self._ignore("digit")
        if state.current_input and self.entry.is_full(state.current_input):
            return Transition(self._display)

        text = self.entry.append_digit(state.current_input, digit)
        if not state.current_input and state.current_operator is None:
            self._reset()
        state.current_input = text
        return self._show(text, repeatable=not self.entry.is_full(text))

    def append_decimal(self) -> Transition:
        state = self.state
        if state.has_error:
            return self._ignore("decimal")

        if not state.current_input and state.current_operator is None:
            self._reset()
        state.current_input = self.entry.append_decimal(state.current_input)
        return self._show(state.current_input)

    def toggle_sign(self) -> Transition:
        """
        Negate the operand being typed, or a finished result.

        A finished result is negated in place without starting a new step,
        so a following repeat-equals continues from the negated value.
        """
        state = self.state
        if state.has_error:
            return self._ignore("sign toggle")

        if state.current_input:
            state.current_input = self.entry.toggle_sign(state.current_input)
            shown: float | str = state.current_input
        elif state.current_result is not None and state.current_operator is None:
            state.current_result = -state.current_result
            shown = state.current_result
        else:
            state.current_input = self.entry.toggle_sign(None)
            shown = state.current_input
        return self._show(shown)

    def paste(self, text: str) -> Transition:
        """
        Replace the operand with a number extracted from pasted text.

        A finished equation is cleared first. Rejected text leaves no operand
        and shows a message, without entering error mode.
        """
        state = self.state
        if state.current_operator is None:
            self._reset()

        try:
            state.current_input = parse_pasted(
                text, self.formatter.symbols.decimal, self.max_digits
            )
        except (InvalidPasteError, TooManyDigitsError) as rejection:
            logger.info("Rejected pasted text: %s", rejection)
            state.current_input = None
            return self._show(rejection.message, error=True)

        return self._show(state.current_input)

    # Arithmetic

    def apply_operator(self, operator: Operator | str) -> Transition:
        """
        Complete the pending step and wait for an operand for operator.

        Args:
            operator: The operator, or its glyph or ASCII symbol

        Raises:
            InvalidInputError: If operator names no operator
        """
        if not isinstance(operator, Operator):
            operator = Operator.from_symbol(operator)

        state = self.state
        if state.has_error:
            return self._ignore("operator")

        pending = state.current_operator
        typed = state.current_input
        operand = parse_operand(typed)

        state.previous_result = state.current_result
        state.previous_input = operand
        if pending is not None:
            state.previous_operator = pending

        if typed:
            if pending is not None:
                state.current_result = evaluate(state.current_result, pending, operand)
            else:
                state.current_result = operand
        elif state.current_result is None:
            state.current_result = 0.0

        try:
            self.detector.inspect(state, pending, operand if typed else None)
        except CalculatorError as fault:
            return self._fail(fault)

        state.current_input = None
        state.current_operator = operator
        self._history = [state.current_result, operator]
        return self._show(state.current_result)

    def apply_equals(self) -> Transition:
        """
        Finish the equation, or repeat the last step when nothing new was entered.

        Returns:
            A transition whose repeatable flag says whether pressing equals
            again would change the result
        """
        state = self.state
        if state.has_error:
            return self._ignore("equals")

        pending = state.current_operator
        typed = state.current_input
        operand: float | None = None
        state.previous_result = state.current_result

        if pending is not None or typed:
            # An operator without an operand applies the result to itself
            operand = parse_operand(typed) if typed else or_zero(state.previous_result)
            if pending is not None:
                result = evaluate(state.previous_result, pending, operand)
            else:
                result = operand
            state.previous_input = operand
            state.previous_operator = pending
        elif state.previous_input and state.previous_operator is not None:
            result = evaluate(state.previous_result, state.previous_operator, state.previous_input)
        elif state.current_result is None:
            result = 0.0
            state.previous_input = 0.0
            state.previous_operator = None
        else:
            result = state.current_result
        state.current_result = result

        try:
            self.detector.inspect(state, pending, operand)
        except CalculatorError as fault:
            return self._fail(fault)

        state.current_operator = None
        state.current_input = None
        self._history = self._completed_history()
        return self._show(state.current_result, repeatable=self._can_repeat())

    # Persistence

    def snapshot(self) -> dict[str, Any]:
        """Serializable copy of the equation state."""
        return self.state.to_dict()

    def restore(self, data: Mapping[str, Any] | None) -> Transition:
        """
        Load state produced by snapshot and redraw both lines from it.

        Raises:
            InvalidInputError: If data holds values of the wrong kind
        """
        self.state = EquationState.from_dict(data, self.max_digits)
        state = self.state

        if state.current_operator is not None and not state.has_error:
            self._history = [state.current_result, state.current_operator]
        elif state.previous_operator is not None or state.previous_input is not None:
            self._history = self._completed_history()
        else:
            self._history = None

        if state.has_error:
            return self._show(state.current_error, error=True)
        return self._show(state.current_input or state.current_result)

    # Internals

    def _reset(self) -> None:
        self.state.reset()
        self._history = None

    def _fail(self, fault: CalculatorError) -> Transition:
        logger.info("Arithmetic fault: %s", fault)
        history = self._completed_history()
        self.state.reset_current()
        self.state.current_error = fault.message
        self._history = history
        return self._show(fault.message, error=True)

    def _ignore(self, press: str) -> Transition:
        logger.debug("Ignoring %s while showing %r", press, self.state.current_error)
        return Transition(self._display)

    def _completed_history(self) -> list[Token]:
        state = self.state
        if state.previous_operator is not None:
            return [state.previous_result, state.previous_operator, state.previous_input, "="]
        return [state.previous_input, "="]

    def _can_repeat(self) -> bool:
        state = self.state
        operator = state.previous_operator
        if operator is None:
            return False
        if operator.is_additive:
            return state.previous_input != 0
        return state.previous_result != 0 and state.previous_input not in (0, 1)

    def _render(self, value: float | str | None, error: bool = False) -> Display:
        self._display = Display(
            main=self.formatter.format_value(value, is_error=error),
            sub=self.formatter.format_history(self._history),
            error=error,
            has_history=self._history is not None,
        )
        return self._display

    def _show(
        self, value: float | str | None, repeatable: bool = False, error: bool = False
    ) -> Transition:
        return Transition(self._render(value, error=error), repeatable)
