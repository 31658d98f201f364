"""Block identifier mutation operators.

These operators mutate block tags and block numbers.
"""

from __future__ import annotations

from typing import Final

from ethereum_dsl.operators.protocol import TypedMutationOperator
from ethereum_dsl.types.primitive import BLOCK_TAGS, BlockNumberType, BlockTagType


MAX_UINT64: Final[int] = 2**64 - 1


class BlockTagMutator(TypedMutationOperator):
    """Swap a block tag for each of the other tags.

    Mutations:
        - latest -> earliest, pending, safe, finalized
    """

    type = BlockTagType()

    @property
    def name(self) -> str:
        return 'BlockTagMutator'

    @property
    def description(self) -> str:
        return 'Swap a block tag for every other block tag'

    def mutate(self, value: str) -> list[str]:
        return [tag for tag in BLOCK_TAGS if tag != value]


class BlockNumberMutator(TypedMutationOperator):
    """Probe block number boundaries.

    Mutations:
        - 0, 1 (chain start)
        - n + 1, n - 1 (off-by-one)
        - 2**64 - 1 (largest uint64)
        - -1 (never a valid block number)
    """

    type = BlockNumberType()

    @property
    def name(self) -> str:
        return 'BlockNumberMutator'

    @property
    def description(self) -> str:
        return 'Shift block numbers to chain boundaries and by +/- 1'

    def mutate(self, value: int) -> list[int]:
        return [0, 1, value + 1, value - 1, MAX_UINT64, -1]
