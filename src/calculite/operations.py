"""Binary operators and the arithmetic behind them."""

from __future__ import annotations

import math
from enum import Enum

from calculite.exceptions import InvalidInputError

_ASCII_SYMBOLS = {"+": "+", "-": "−", "*": "×", "/": "÷"}


class Operator(Enum):
    """The four operators of the keypad, valued by their display glyph."""

    ADD = "+"
    SUBTRACT = "−"
    MULTIPLY = "×"
    DIVIDE = "÷"

    @property
    def glyph(self) -> str:
        return self.value

    @property
    def is_additive(self) -> bool:
        return self in (Operator.ADD, Operator.SUBTRACT)

    @property
    def is_multiplicative(self) -> bool:
        return self in (Operator.MULTIPLY, Operator.DIVIDE)

    @classmethod
    def from_symbol(cls, symbol: str) -> Operator:
        """
        Look up an operator by its glyph or its ASCII symbol.

        Args:
            symbol: One of ``+ − × ÷`` or ``+ - * /``

        Returns:
            The matching operator

        Raises:
            InvalidInputError: If the symbol names no operator
        """
        try:
            return cls(_ASCII_SYMBOLS.get(symbol, symbol))
        except ValueError as e:
            raise InvalidInputError(symbol, "Unknown operator") from e

    def __str__(self) -> str:
        return self.value


def or_zero(value: float | None) -> float:
    """Treat an absent operand as zero."""
    return 0.0 if value is None else value


def divide(a: float, b: float) -> float:
    """
    Divide a by b with IEEE-754 semantics.

    Division by zero gives a signed infinity, or NaN for 0/0, so that the
    fault detector rather than the interpreter decides what happens next.
    """
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def evaluate(a: float | None, operator: Operator | None, b: float | None) -> float:
    """
    Apply an operator to two operands.

    Args:
        a: Left operand, zero when absent
        operator: The operator to apply; no operator gives zero
        b: Right operand, zero when absent

    Returns:
        The result, which may be infinite or NaN
    """
    a = or_zero(a)
    b = or_zero(b)
    if operator is Operator.ADD:
        return a + b
    if operator is Operator.SUBTRACT:
        return a - b
    if operator is Operator.MULTIPLY:
        return a * b
    if operator is Operator.DIVIDE:
        return divide(a, b)
    return 0.0
