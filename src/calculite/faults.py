"""Classification of arithmetic faults after each computed step."""

from __future__ import annotations

import math
import sys
from typing import TYPE_CHECKING

from calculite.exceptions import DivisionByZeroError, OverflowError, UnderflowError
from calculite.operations import Operator, or_zero

if TYPE_CHECKING:
    from calculite.core import EquationState


class FaultDetector:
    """
    Inspects a freshly computed result for arithmetic faults.

    Checks run in priority order and stop at the first match:
    division by zero, underflow to zero, overflow.
    """

    def inspect(
        self, state: EquationState, operator: Operator | None, operand: float | None
    ) -> None:
        """
        Raise the first fault the latest step produced.

        Args:
            state: Equation state with current_result and the previous_*
                fields already updated for this step
            operator: The operator that was pending during this step
            operand: The right-hand operand used with that operator

        Raises:
            DivisionByZeroError: If a division used a zero operand
            UnderflowError: If a multiplication or division of non-zero
                numbers produced exactly zero
            OverflowError: If the result exceeds the largest finite float
        """
        if operator is Operator.DIVIDE and operand is not None and operand == 0:
            raise DivisionByZeroError(state.previous_result)

        result = state.current_result
        if result is None:
            return

        if result == 0 and self._underflowed(state):
            raise UnderflowError(state.previous_result, state.previous_input)

        if math.isnan(result) or abs(result) > sys.float_info.max:
            raise OverflowError(result)

    @staticmethod
    def _underflowed(state: EquationState) -> bool:
        operands_non_zero = (
            or_zero(state.previous_result) != 0 and or_zero(state.previous_input) != 0
        )
        operator = state.previous_operator
        return operands_non_zero and operator is not None and operator.is_multiplicative
