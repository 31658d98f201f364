"""Number mutation operator.

This operator shifts, negates and scales numeric values and probes the
limits of integers that survive a round trip through a JSON number.
"""

from __future__ import annotations

from typing import Final

from ethereum_dsl.operators.protocol import TypedMutationOperator
from ethereum_dsl.types.primitive import NumberType


MAX_SAFE_INTEGER: Final[int] = 2**53 - 1
MIN_SAFE_INTEGER: Final[int] = -(2**53 - 1)


class NumberMutator(TypedMutationOperator):
    """Mutate numeric values.

    Mutations:
        - x -> 0
        - x -> x + 1, x - 1
        - x -> -x
        - x -> x * 2, x // 2
        - x -> 2**53 - 1, -(2**53 - 1)
    """

    type = NumberType()

    @property
    def name(self) -> str:
        return 'NumberMutator'

    @property
    def description(self) -> str:
        return 'Shift, negate and scale numbers, and probe safe integer limits'

    def mutate(self, value: float) -> list[float]:
        return [
            0,
            value + 1,
            value - 1,
            -value,
            value * 2,
            value // 2,
            MAX_SAFE_INTEGER,
            MIN_SAFE_INTEGER,
        ]
