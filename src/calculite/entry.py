"""Accumulation of the operand currently being typed."""

from __future__ import annotations

from calculite import config
from calculite.exceptions import InvalidInputError
from calculite.validators import count_digits


class DigitEntryBuffer:
    """
    Text transforms for the operand being typed.

    Operand text holds a sign, digits and at most one ``.``; it is never a
    parsed number, so partial entries like ``"-0."`` survive intact. Absent
    text is represented by None.

    Example:
        >>> buffer = DigitEntryBuffer(max_digits=3)
        >>> buffer.append_digit(buffer.append_decimal(None), 5)
        '0.5'
    """

    def __init__(self, max_digits: int = config.MAX_DIGITS) -> None:
        if max_digits < 1:
            raise InvalidInputError(max_digits, "max_digits must be positive")
        self.max_digits = max_digits

    def is_full(self, text: str | None) -> bool:
        """Whether text already holds the maximum number of digits."""
        return count_digits(text) >= self.max_digits

    def append_digit(self, text: str | None, digit: int) -> str | None:
        """
        Append a digit, replacing a lone leading zero.

        Args:
            text: Current operand text
            digit: Digit from 0 to 9

        Returns:
            The new text, unchanged when the digit ceiling is reached

        Raises:
            InvalidInputError: If digit is not 0-9
        """
        if not isinstance(digit, int) or not 0 <= digit <= 9:
            raise InvalidInputError(digit, "Digit must be 0-9")
        if not text:
            return str(digit)
        if self.is_full(text):
            return text
        if text in ("0", "-0"):
            text = text[:-1]
        return text + str(digit)

    def append_decimal(self, text: str | None) -> str:
        if not text:
            return "0."
        if "." in text:
            return text
        return text + "."

    def toggle_sign(self, text: str | None) -> str:
        if not text:
            return "-0"
        if text.startswith("-"):
            return text[1:]
        return "-" + text

    def backspace(self, text: str | None, from_start: bool = False) -> str | None:
        """
        Remove one character from the end, or from the start.

        Returns None once no digit remains, leaving nothing like ``"-"`` or
        ``"."`` behind.
        """
        if not text:
            return None
        text = text[1:] if from_start else text[:-1]
        if count_digits(text) == 0:
            return None
        return text
