"""Parsing and validation of operand text."""

import math
import re

from calculite.exceptions import InvalidInputError, InvalidPasteError, TooManyDigitsError

_DIGIT = re.compile(r"\d")
_BARE_POINT = re.compile(r"^(-?)\.")
_OPERAND_TEXT = re.compile(r"-?([0-9]+\.?[0-9]*|\.[0-9]+)")


def count_digits(text: str | None) -> int:
    """Count the digit characters in a piece of operand text."""
    if not text:
        return 0
    return len(_DIGIT.findall(text))


def parse_operand(text: str | None) -> float:
    """
    Convert typed operand text to a number.

    Args:
        text: Operand text such as ``"12"``, ``"-0."`` or ``"3.25"``

    Returns:
        The parsed value, or 0.0 when no text has been typed
    """
    if not text:
        return 0.0
    return float(text)


def validate_operand_text(text: str, max_digits: int) -> str:
    """
    Validate text restored as the operand being typed.

    Accepts an optional sign, at least one digit and at most one ``.``,
    the same shapes the entry buffer produces.

    Raises:
        InvalidInputError: If text is not operand text or holds more than
            max_digits digits
    """
    if not isinstance(text, str) or not _OPERAND_TEXT.fullmatch(text):
        raise InvalidInputError(text, "current_input must be operand text")
    if count_digits(text) > max_digits:
        raise InvalidInputError(text, f"current_input holds more than {max_digits} digits")
    return text


def parse_pasted(text: str, decimal_symbol: str, max_digits: int) -> str:
    """
    Reduce pasted text to operand text.

    Every character other than digits, ``-`` and the decimal symbol is
    removed, the decimal symbol is normalised to ``.`` and a bare leading point
    gains a zero (``.5`` becomes ``0.5``).

    Args:
        text: Raw pasted text
        decimal_symbol: The locale decimal symbol
        max_digits: Maximum number of digits in one operand

    Returns:
        Operand text suitable for the entry buffer

    Raises:
        InvalidPasteError: If nothing numeric remains or it is not finite
        TooManyDigitsError: If the number has more than max_digits digits
    """
    numeric = re.sub(f"[^-0-9{re.escape(decimal_symbol)}]", "", text)
    numeric = numeric.replace(decimal_symbol, ".")
    numeric = _BARE_POINT.sub(r"\g<1>0.", numeric)
    if not numeric:
        raise InvalidPasteError(text)

    try:
        value = float(numeric)
    except ValueError as e:
        raise InvalidPasteError(text) from e

    if not math.isfinite(value):
        raise InvalidPasteError(text)
    if count_digits(numeric) > max_digits:
        raise TooManyDigitsError(text, max_digits)

    return numeric
