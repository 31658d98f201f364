"""Address mutation operator.

This operator produces malformed and edge-case variants of an Ethereum address.
"""

from __future__ import annotations

from typing import Final

from ethereum_dsl.operators.protocol import TypedMutationOperator
from ethereum_dsl.types.primitive import AddressType


ZERO_ADDRESS: Final[str] = '0x' + '0' * 40


class AddressMutator(TypedMutationOperator):
    """Mutate Ethereum addresses.

    Mutations:
        - 0xC02aaA39... -> 0xc02aaa39... (checksum casing lost)
        - last character replaced with '0' (length kept, content shifted)
        - 0x... -> 0X... (wrong prefix marker)
        - the zero address
        - character at index 10 -> 'X' (non-hex character)
    """

    type = AddressType()

    @property
    def name(self) -> str:
        return 'AddressMutator'

    @property
    def description(self) -> str:
        return 'Break address checksum, length, prefix and characters'

    def mutate(self, value: str) -> list[str]:
        return [
            value.lower(),
            value[:41] + '0',
            '0X' + value[2:],
            ZERO_ADDRESS,
            value[:10] + 'X' + value[11:],
        ]
