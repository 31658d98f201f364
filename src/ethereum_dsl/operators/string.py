"""String mutation operator."""

from __future__ import annotations

from ethereum_dsl.operators.protocol import TypedMutationOperator
from ethereum_dsl.types.primitive import StringType


class StringMutator(TypedMutationOperator):
    """Mutate string values.

    Mutations:
        - "abc" -> ""
        - "abc" -> "abcX"
        - "abc" -> "ab"
        - "abc" -> "ABC", "abc"
        - "abc" -> "cba"
    """

    type = StringType()

    @property
    def name(self) -> str:
        return 'StringMutator'

    @property
    def description(self) -> str:
        return 'Empty, extend, truncate, re-case and reverse strings'

    def mutate(self, value: str) -> list[str]:
        return [
            '',
            value + 'X',
            value[:-1],
            value.upper(),
            value.lower(),
            value[::-1],
        ]
