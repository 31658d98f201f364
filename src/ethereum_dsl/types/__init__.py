"""Typed value model for Ethereum primitives.

Every type is a descriptor implementing the TypeDescriptor protocol:
a name, a membership predicate, a mutability check and a flattening
function used in reports.
"""

from ethereum_dsl.types.base import Type, TypeDescriptor
from ethereum_dsl.types.composite import ArrayType, OptionalType, RecordType, UnionType
from ethereum_dsl.types.objects import (
    BlockType,
    FeeHistoryType,
    LogType,
    ObjectType,
    TransactionReceiptType,
    TransactionType,
)
from ethereum_dsl.types.primitive import (
    BLOCK_TAGS,
    AddressType,
    BlockNumberType,
    BlockTagType,
    BooleanType,
    Hex32Type,
    HexType,
    NullType,
    NumberType,
    StringType,
)


__all__ = [
    'BLOCK_TAGS',
    'AddressType',
    'ArrayType',
    'BlockNumberType',
    'BlockTagType',
    'BlockType',
    'BooleanType',
    'FeeHistoryType',
    'Hex32Type',
    'HexType',
    'LogType',
    'NullType',
    'NumberType',
    'ObjectType',
    'OptionalType',
    'RecordType',
    'StringType',
    'TransactionReceiptType',
    'TransactionType',
    'Type',
    'TypeDescriptor',
    'UnionType',
]
