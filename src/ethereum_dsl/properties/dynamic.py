"""Properties backed by a live chain.

These properties ask a chain client for real values (nonces, block numbers,
hashes, indices) and cache every value they hand out as verified. Once a
property has a verified value, later calls reuse one instead of querying the
chain again.

The client is anything implementing ChainClient; the library does not ship
one. Blocks are mappings keyed by JSON-RPC field names.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from ethereum_dsl.properties.base import VerifiableProperty


if TYPE_CHECKING:
    from collections.abc import Mapping
    import random


logger = logging.getLogger(__name__)


@runtime_checkable
class ChainClient(Protocol):
    """Async read-only view of a chain, as needed by the dynamic properties."""

    async def get_transaction_count(self, address: str) -> int:
        """Return the nonce of an address at the latest block."""
        ...

    async def get_block_number(self) -> int:
        """Return the latest block number."""
        ...

    async def get_block(
        self,
        block_number: int | None = None,
        include_transactions: bool = False,  # noqa: FBT001, FBT002
    ) -> Mapping[str, Any]:
        """Return a block, the latest one when ``block_number`` is None."""
        ...


def _tx_hash(tx: Any) -> str:
    """Return the hash of a transaction given as a hash or a transaction object."""
    if isinstance(tx, str):
        return tx
    return tx['hash']


class ChainProperty(VerifiableProperty):
    """Base class for properties that query a chain client."""

    def __init__(self, client: ChainClient, rng: random.Random | None = None) -> None:
        super().__init__(rng)
        self._client = client

    async def generate(self) -> Any:
        verified = self.get_verified_value()
        if verified is not None:
            return verified

        value = await self._fetch()
        logger.debug('%s fetched %r from chain', self.name, value)
        self.add_verified_value(value)
        return value

    async def _fetch(self) -> Any:  # pragma: no cover
        raise NotImplementedError


class NonceProperty(ChainProperty):
    """Current nonce of one address."""

    name = '<Nonce>'

    def __init__(self, address: str, client: ChainClient, rng: random.Random | None = None) -> None:
        super().__init__(client, rng)
        self._address = address

    async def _fetch(self) -> int:
        return int(await self._client.get_transaction_count(self._address))


class ChainBlockNumberProperty(ChainProperty):
    """Random block number between 0 and the chain head.

    Args:
        max_block: Upper bound (exclusive). Looked up from the chain on
            first use when not given.
    """

    name = '<BlockNumber>'

    def __init__(self, client: ChainClient, max_block: int | None = None, rng: random.Random | None = None) -> None:
        super().__init__(client, rng)
        self._max_block = max_block or 0

    async def _fetch(self) -> int:
        if self._max_block == 0:
            self._max_block = await self._client.get_block_number()

        if self._max_block <= 0:
            return 0
        return self._rng.randrange(self._max_block)


class TxHashProperty(ChainProperty):
    """Hash of a random transaction in the latest block."""

    name = '<TxHash>'

    async def _fetch(self) -> str:
        block = await self._client.get_block(include_transactions=True)
        transactions = block.get('transactions') or []
        if not transactions:
            msg = 'No transactions found in the latest block'
            raise LookupError(msg)
        return _tx_hash(self._rng.choice(transactions))


class BlockHashProperty(ChainProperty):
    """Hash of a random block between 1 and the chain head."""

    name = '<BlockHash>'

    async def _fetch(self) -> str:
        head = await self._client.get_block_number()
        block_number = self._rng.randint(1, head) if head > 0 else 0
        block = await self._client.get_block(block_number=block_number)
        return block['hash']


class TxIndexProperty(ChainProperty):
    """Random transaction index within a given block."""

    name = '<TxIndex>'

    def __init__(self, client: ChainClient, block_number: int, rng: random.Random | None = None) -> None:
        super().__init__(client, rng)
        self._block_number = block_number

    async def _fetch(self) -> int:
        block = await self._client.get_block(block_number=self._block_number, include_transactions=True)
        transactions = block.get('transactions') or []
        if not transactions:
            msg = f'No transactions found in block {self._block_number}'
            raise LookupError(msg)
        return self._rng.randrange(len(transactions))


class UncleIndexProperty(ChainProperty):
    """Random uncle index within a given block."""

    name = '<UncleIndex>'

    def __init__(self, client: ChainClient, block_number: int, rng: random.Random | None = None) -> None:
        super().__init__(client, rng)
        self._block_number = block_number

    async def _fetch(self) -> int:
        block = await self._client.get_block(block_number=self._block_number)
        uncles = block.get('uncles') or []
        if not uncles:
            msg = f'No uncles found in block {self._block_number}'
            raise LookupError(msg)
        return self._rng.randrange(len(uncles))
