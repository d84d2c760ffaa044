"""
Calculite: the equation engine of a four-function calculator.

Turns key presses into equation state and two display lines, with
repeat-equals and detection of division by zero, underflow and overflow.
"""

from calculite.core import Display, EquationEngine, EquationState, Transition
from calculite.entry import DigitEntryBuffer
from calculite.exceptions import (
    CalculatorError,
    DivisionByZeroError,
    InvalidInputError,
    InvalidPasteError,
    OverflowError,
    TooManyDigitsError,
    UnderflowError,
)
from calculite.faults import FaultDetector
from calculite.formatting import NumberFormatter, Symbols, number_to_text
from calculite.keys import press_button, press_key
from calculite.operations import Operator, evaluate, or_zero
from calculite.validators import count_digits, parse_operand, parse_pasted

__all__ = [
    "CalculatorError",
    "DigitEntryBuffer",
    "Display",
    "DivisionByZeroError",
    "EquationEngine",
    "EquationState",
    "FaultDetector",
    "InvalidInputError",
    "InvalidPasteError",
    "NumberFormatter",
    "Operator",
    "OverflowError",
    "Symbols",
    "TooManyDigitsError",
    "Transition",
    "UnderflowError",
    "count_digits",
    "evaluate",
    "number_to_text",
    "or_zero",
    "parse_operand",
    "parse_pasted",
    "press_button",
    "press_key",
]

__version__ = "0.1.0"
