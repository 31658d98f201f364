"""Value generators ("properties") for ethereum-dsl.

Static properties draw from fixed pools of realistic values. Chain
properties query a ChainClient and remember what they have seen.
"""

from ethereum_dsl.properties.base import BaseProperty, Property, VerifiableProperty
from ethereum_dsl.properties.dynamic import (
    BlockHashProperty,
    ChainBlockNumberProperty,
    ChainClient,
    ChainProperty,
    NonceProperty,
    TxHashProperty,
    TxIndexProperty,
    UncleIndexProperty,
)
from ethereum_dsl.properties.static import (
    AddressProperty,
    BlockTagProperty,
    BooleanProperty,
    ConstProperty,
    GasPriceProperty,
    GasProperty,
    NullProperty,
    RangeProperty,
    StorageIndexProperty,
    ValueProperty,
)


__all__ = [
    'AddressProperty',
    'BaseProperty',
    'BlockHashProperty',
    'BlockTagProperty',
    'BooleanProperty',
    'ChainBlockNumberProperty',
    'ChainClient',
    'ChainProperty',
    'ConstProperty',
    'GasPriceProperty',
    'GasProperty',
    'NonceProperty',
    'NullProperty',
    'Property',
    'RangeProperty',
    'StorageIndexProperty',
    'TxHashProperty',
    'TxIndexProperty',
    'UncleIndexProperty',
    'ValueProperty',
    'VerifiableProperty',
]
