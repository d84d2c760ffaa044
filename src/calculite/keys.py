"""Button identifiers and keyboard shortcuts mapped onto engine presses."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from calculite.exceptions import InvalidInputError
from calculite.operations import Operator

if TYPE_CHECKING:
    from calculite.core import EquationEngine, Transition

logger = logging.getLogger(__name__)

# Button IDs
CLEAR = "C"
CLEAR_ENTRY = "CE"
BACK = "⌫"
NEGATE = "±"
EQUALS = "="
DIGITS = tuple(str(digit) for digit in range(10))

Press = Callable[["EquationEngine"], "Transition"]


def _digit(digit: int) -> Press:
    return lambda engine: engine.append_digit(digit)


def _operator(operator: Operator) -> Press:
    return lambda engine: engine.apply_operator(operator)


def _append_decimal(engine: EquationEngine) -> Transition:
    return engine.append_decimal()


_BUTTONS: dict[str, Press] = {
    CLEAR: lambda engine: engine.clear(),
    CLEAR_ENTRY: lambda engine: engine.clear_entry(),
    BACK: lambda engine: engine.backspace(),
    NEGATE: lambda engine: engine.toggle_sign(),
    EQUALS: lambda engine: engine.apply_equals(),
    **{label: _digit(int(label)) for label in DIGITS},
    **{operator.glyph: _operator(operator) for operator in Operator},
}

# Keys that fire regardless of modifiers
_ANY_MODIFIER_KEYS: dict[str, Press] = {
    "+": _operator(Operator.ADD),
    "-": _operator(Operator.SUBTRACT),
    "*": _operator(Operator.MULTIPLY),
    "/": _operator(Operator.DIVIDE),
    "=": lambda engine: engine.apply_equals(),
}

_PLAIN_KEYS: dict[str, Press] = {
    "C": lambda engine: engine.clear(),
    "ESCAPE": lambda engine: engine.clear(),
    "DELETE": lambda engine: engine.clear_entry(),
    "BACKSPACE": lambda engine: engine.backspace(),
    "F9": lambda engine: engine.toggle_sign(),
    "P": _operator(Operator.ADD),
    "O": _operator(Operator.SUBTRACT),
    "X": _operator(Operator.MULTIPLY),
    "T": _operator(Operator.MULTIPLY),
    "Y": _operator(Operator.DIVIDE),
    "ENTER": lambda engine: engine.apply_equals(),
    **{label: _digit(int(label)) for label in DIGITS},
}

_SHIFT_KEYS: dict[str, Press] = {
    "ESCAPE": lambda engine: engine.clear_entry(),
    "BACKSPACE": lambda engine: engine.backspace(from_start=True),
}

_ALT_KEYS: dict[str, Press] = {
    "-": lambda engine: engine.toggle_sign(),
}


def press_button(engine: EquationEngine, button_id: str) -> Transition:
    """
    Dispatch a keypad button to the engine.

    Args:
        engine: The engine receiving the press
        button_id: A button label such as ``"7"``, ``"×"`` or ``"CE"``; the
            engine's decimal symbol names the decimal point button

    Returns:
        The resulting transition

    Raises:
        InvalidInputError: If no button has that id
    """
    if button_id == engine.formatter.symbols.decimal:
        return engine.append_decimal()
    try:
        press = _BUTTONS[button_id]
    except KeyError as e:
        raise InvalidInputError(button_id, "Unknown button") from e
    return press(engine)


def press_key(
    engine: EquationEngine, key: str, shift: bool = False, alt: bool = False
) -> Transition | None:
    """
    Dispatch a keyboard shortcut to the engine.

    Args:
        engine: The engine receiving the press
        key: Key name as reported by the keyboard, e.g. ``"7"``, ``"Enter"``
        shift: Whether Shift was held
        alt: Whether Alt was held

    Returns:
        The resulting transition, or None if the key has no shortcut
    """
    name = key.upper() if len(key) > 1 or key.isalpha() else key

    if alt:
        press = _ALT_KEYS.get(name) or _ANY_MODIFIER_KEYS.get(name)
    elif shift:
        press = _SHIFT_KEYS.get(name) or _ANY_MODIFIER_KEYS.get(name)
    elif key == engine.formatter.symbols.decimal:
        press = _append_decimal
    else:
        press = _PLAIN_KEYS.get(name) or _ANY_MODIFIER_KEYS.get(name)

    if press is None:
        logger.debug("No shortcut for key %r (shift=%s, alt=%s)", key, shift, alt)
        return None
    return press(engine)
