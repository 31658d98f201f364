"""32-byte hash mutation operator."""

from __future__ import annotations

from typing import Final

from ethereum_dsl.operators.protocol import TypedMutationOperator
from ethereum_dsl.types.primitive import Hex32Type


ZERO_HASH: Final[str] = '0x' + '0' * 64


class HashMutator(TypedMutationOperator):
    """Mutate block and transaction hashes.

    Mutations:
        - character at index 10 -> 'X' (non-hex character)
        - 0x... -> 0X... (wrong prefix marker)
        - the zero hash
        - last character dropped (63 hex digits)
        - '0' appended (65 hex digits)
    """

    type = Hex32Type()

    @property
    def name(self) -> str:
        return 'HashMutator'

    @property
    def description(self) -> str:
        return 'Corrupt, zero, truncate and extend 32-byte hashes'

    def mutate(self, value: str) -> list[str]:
        return [
            value[:10] + 'X' + value[11:],
            '0X' + value[2:],
            ZERO_HASH,
            value[:65],
            value + '0',
        ]
