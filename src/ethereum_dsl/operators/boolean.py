"""Boolean mutation operator.

This operator flips boolean values (True -> False, False -> True).
"""

from __future__ import annotations

from ethereum_dsl.operators.protocol import TypedMutationOperator
from ethereum_dsl.types.primitive import BooleanType


class BooleanMutator(TypedMutationOperator):
    """Negate boolean values.

    Mutations:
        - True -> False
        - False -> True
    """

    type = BooleanType()

    @property
    def name(self) -> str:
        return 'BooleanMutator'

    @property
    def description(self) -> str:
        return 'Negate boolean values (True/False)'

    def mutate(self, value: bool) -> list[bool]:  # noqa: FBT001
        return [not value]
