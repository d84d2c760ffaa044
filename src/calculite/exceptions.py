"""Arithmetic faults and input rejections raised inside the engine."""

from typing import Any


class CalculatorError(Exception):
    """Base exception for all calculator errors."""

    def __init__(self, message: str, value: Any = None) -> None:
        self.message = message
        self.value = value
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.message}: {self.value}"
        return self.message


class InvalidInputError(CalculatorError):
    """Raised when a caller passes a value the engine cannot interpret."""

    def __init__(self, value: Any, reason: str = "invalid input") -> None:
        super().__init__(reason, value)
        self.reason = reason


class DivisionByZeroError(CalculatorError):
    """Raised when the operand of a division is zero."""

    def __init__(self, numerator: float | None) -> None:
        super().__init__("Cannot divide by zero", numerator)
        self.numerator = numerator


class UnderflowError(CalculatorError):
    """Raised when multiplying or dividing two non-zero numbers gives exactly zero."""

    def __init__(self, *operands: float | None) -> None:
        super().__init__("Number too small", operands)
        self.operands = operands


class OverflowError(CalculatorError):
    """Raised when a result is larger than the largest finite float."""

    def __init__(self, result: float) -> None:
        super().__init__("Number too large", result)
        self.result = result


class InvalidPasteError(CalculatorError):
    """Raised when pasted text does not hold a finite number."""

    def __init__(self, text: str) -> None:
        super().__init__("Invalid number", text)
        self.text = text


class TooManyDigitsError(CalculatorError):
    """Raised when pasted text holds more digits than one operand may."""

    def __init__(self, text: str, max_digits: int) -> None:
        super().__init__(f"Maximum of {max_digits} digits", text)
        self.text = text
        self.max_digits = max_digits
