"""Rendering of numbers and equation history for the two display lines."""

from __future__ import annotations

import locale
import math
from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal

from calculite import config
from calculite.operations import Operator

# Positional notation is used for decimal exponents in [-6, 21)
_MAX_POSITIONAL_EXPONENT = 21
_MIN_POSITIONAL_EXPONENT = -6

Token = float | int | str | Operator | None


def number_to_text(value: float) -> str:
    """
    Convert a number to its shortest display text.

    Integers lose their trailing ``.0``, very large and very small
    magnitudes switch to exponent notation (``1e+21``, ``1.5e-7``) and
    negative zero renders as ``0``.

    Args:
        value: The number to render

    Returns:
        ASCII text using ``.`` and ``-``
    """
    value = float(value)
    if value == 0:
        return "0"
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"

    sign = "-" if value < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(value))).normalize().as_tuple()
    digits = "".join(map(str, digit_tuple))
    k = len(digits)
    n = k + exponent  # position of the decimal point relative to the digits

    if k <= n <= _MAX_POSITIONAL_EXPONENT:
        body = digits + "0" * (n - k)
    elif 0 < n <= _MAX_POSITIONAL_EXPONENT:
        body = f"{digits[:n]}.{digits[n:]}"
    elif _MIN_POSITIONAL_EXPONENT < n <= 0:
        body = "0." + "0" * -n + digits
    else:
        mantissa = digits if k == 1 else f"{digits[0]}.{digits[1:]}"
        body = f"{mantissa}e{'+' if n > 0 else '-'}{abs(n - 1)}"

    return sign + body


@dataclass(frozen=True)
class Symbols:
    """
    Locale symbols substituted into display text.

    The minus sign is the subtract glyph, so negative numbers and the
    subtract operator read the same on both lines.
    """

    decimal: str = config.DECIMAL_SYMBOL
    grouping: str = config.GROUPING_SYMBOL

    @property
    def minus(self) -> str:
        return Operator.SUBTRACT.glyph

    @classmethod
    def from_locale(cls) -> Symbols:
        """Build symbols from the process locale, falling back to config."""
        conventions = locale.localeconv()
        return cls(
            decimal=conventions.get("decimal_point") or config.DECIMAL_SYMBOL,
            grouping=conventions.get("thousands_sep") or config.GROUPING_SYMBOL,
        )


class NumberFormatter:
    """Produces the main display line and the history line."""

    def __init__(self, symbols: Symbols | None = None) -> None:
        self.symbols = symbols or Symbols()

    def format_value(self, value: float | str | None, is_error: bool = False) -> str:
        """
        Render a value for the main display.

        Args:
            value: A result, operand text being typed, or an error message
            is_error: Render value verbatim as an error message

        Returns:
            Display text with locale symbols and digit grouping
        """
        if is_error:
            return str(value)
        if value is None:
            return "0"

        text = value if isinstance(value, str) else number_to_text(value)
        text = text.replace("-", self.symbols.minus).replace(".", self.symbols.decimal, 1)

        # Exponent notation passes through ungrouped
        if "e" in text:
            return text
        return self._group(text)

    def _group(self, text: str) -> str:
        first = 1 if text.startswith(self.symbols.minus) else 0
        point = text.find(self.symbols.decimal)
        if point < 0:
            point = len(text)

        for i in range(point - 3, first, -3):
            text = text[:i] + self.symbols.grouping + text[i:]
        return text

    def format_history(self, tokens: Iterable[Token] | None) -> str:
        """
        Render the equation history line.

        Absent tokens are skipped. With no history at all the line reads
        ``"0"`` so that it keeps its height when hidden.
        """
        if tokens is None:
            return "0"

        parts = []
        for token in tokens:
            if token is None:
                continue
            if isinstance(token, Operator):
                parts.append(token.glyph)
            elif isinstance(token, str):
                parts.append(token)
            else:
                parts.append(number_to_text(token))

        return (
            " ".join(parts)
            .replace(".", self.symbols.decimal)
            .replace("-", self.symbols.minus)
        )
