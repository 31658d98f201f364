"""Mutation operators for ethereum-dsl.

This package provides the operator system for producing deliberately
invalid or boundary variants of typed Ethereum values.
"""

from ethereum_dsl.operators.address import AddressMutator
from ethereum_dsl.operators.array import ArrayMutator
from ethereum_dsl.operators.block import BlockNumberMutator, BlockTagMutator
from ethereum_dsl.operators.boolean import BooleanMutator
from ethereum_dsl.operators.hash import HashMutator
from ethereum_dsl.operators.number import NumberMutator
from ethereum_dsl.operators.protocol import MutationOperator, TypedMutationOperator
from ethereum_dsl.operators.registry import MutationRegistry, create_default_registry
from ethereum_dsl.operators.string import StringMutator


__all__ = [
    'AddressMutator',
    'ArrayMutator',
    'BlockNumberMutator',
    'BlockTagMutator',
    'BooleanMutator',
    'HashMutator',
    'MutationOperator',
    'MutationRegistry',
    'NumberMutator',
    'StringMutator',
    'TypedMutationOperator',
    'create_default_registry',
]
