"""Types for structured chain objects.

Chain objects are mappings keyed by their JSON-RPC field names (``parentHash``,
``blockNumber``, ...), with quantities already decoded to ints. Membership only
checks the handful of fields that identify the object; flattening exposes the
fields most useful when diffing two objects.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, ClassVar

from ethereum_dsl.types.base import Type


def _has_int(obj: Mapping[str, Any], key: str) -> bool:
    value = obj.get(key)
    return isinstance(value, int) and not isinstance(value, bool)


class ObjectType(Type):
    """Base class for mapping-shaped chain objects.

    Subclasses declare the fields required for membership and the fields
    surfaced by ``flatten``.
    """

    string_fields: ClassVar[tuple[str, ...]] = ()
    int_fields: ClassVar[tuple[str, ...]] = ()
    list_fields: ClassVar[tuple[str, ...]] = ()
    flatten_fields: ClassVar[tuple[str, ...]] = ()

    def is_valid(self, value: object) -> bool:
        if not isinstance(value, Mapping):
            return False
        return (
            all(isinstance(value.get(key), str) for key in self.string_fields)
            and all(_has_int(value, key) for key in self.int_fields)
            and all(isinstance(value.get(key), list) for key in self.list_fields)
        )

    def flatten(self, value: Mapping[str, Any]) -> dict[str, Any]:
        result: dict[str, Any] = {'rv': value}
        for key in self.flatten_fields:
            result[f'rv.{key}'] = value.get(key)
        return result


class BlockType(ObjectType):
    name = 'Block'
    string_fields = ('hash',)
    int_fields = ('number', 'timestamp')
    flatten_fields = ('hash', 'number', 'timestamp', 'parentHash', 'miner')


class TransactionType(ObjectType):
    name = 'Transaction'
    string_fields = ('hash', 'from')
    flatten_fields = ('hash', 'from', 'to', 'value', 'nonce')


class TransactionReceiptType(ObjectType):
    name = 'TransactionReceipt'
    string_fields = ('transactionHash',)
    int_fields = ('blockNumber',)
    list_fields = ('logs',)
    flatten_fields = ('transactionHash', 'blockNumber', 'status')


class LogType(ObjectType):
    """Event log emitted by a contract."""

    name = 'Log'
    string_fields = ('address',)
    int_fields = ('blockNumber',)
    list_fields = ('topics',)
    flatten_fields = ('address', 'blockNumber', 'data')


class FeeHistoryType(ObjectType):
    """Result of ``eth_feeHistory``."""

    name = 'FeeHistory'
    int_fields = ('oldestBlock',)
    list_fields = ('baseFeePerGas', 'gasUsedRatio')
    flatten_fields = ('oldestBlock',)
