"""Primitive Ethereum and scalar types.

Hex-encoded values follow the JSON-RPC convention: a lowercase ``0x`` prefix
followed by hex digits. Block numbers and other quantities are Python ints.
"""

from __future__ import annotations

import re
from typing import Final

from eth_utils import is_address

from ethereum_dsl.types.base import Type


BLOCK_TAGS: Final[tuple[str, ...]] = ('latest', 'earliest', 'pending', 'safe', 'finalized')

_HEX_PATTERN = re.compile(r'^0x[0-9a-fA-F]*$')
_ADDRESS_PATTERN = re.compile(r'^0x[0-9a-fA-F]{40}$')
HEX32_LENGTH: Final[int] = 66


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class AddressType(Type):
    """Ethereum address: ``0x`` followed by 40 hex characters.

    All-lowercase and all-uppercase bodies are accepted as-is. A mixed-case
    body must carry a valid EIP-55 checksum.
    """

    name = 'Address'

    def is_valid(self, value: object) -> bool:
        if not isinstance(value, str) or not _ADDRESS_PATTERN.match(value):
            return False
        return is_address(value)


class HexType(Type):
    """Any ``0x``-prefixed hex string, including the empty ``0x``."""

    name = 'Hex'

    def is_valid(self, value: object) -> bool:
        return isinstance(value, str) and _HEX_PATTERN.match(value) is not None


class Hex32Type(Type):
    """32-byte hex string such as a block or transaction hash."""

    name = 'Hex32'

    def is_valid(self, value: object) -> bool:
        return HexType().is_valid(value) and len(value) == HEX32_LENGTH  # type: ignore[arg-type]


class BlockTagType(Type):
    """Named block identifier accepted by JSON-RPC methods."""

    name = 'BlockTag'

    def is_valid(self, value: object) -> bool:
        return isinstance(value, str) and value in BLOCK_TAGS


class BlockNumberType(Type):
    """Non-negative integer block number."""

    name = 'BlockNumber'

    def is_valid(self, value: object) -> bool:
        return _is_int(value) and value >= 0  # type: ignore[operator]


class BooleanType(Type):
    name = 'Boolean'

    def is_valid(self, value: object) -> bool:
        return isinstance(value, bool)


class NumberType(Type):
    """Plain numeric value (int or float). Booleans are excluded."""

    name = 'Number'

    def is_valid(self, value: object) -> bool:
        return isinstance(value, (int, float)) and not isinstance(value, bool)


class StringType(Type):
    name = 'String'

    def is_valid(self, value: object) -> bool:
        return isinstance(value, str)


class NullType(Type):
    name = 'Null'

    def is_valid(self, value: object) -> bool:
        return value is None
