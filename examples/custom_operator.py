"""Example custom mutation operators for ethereum-dsl.

This module shows how to write operators for types that have no built-in
operator, or to replace a built-in operator with a stricter one, and how to
run a validator against them.

Usage:
    1. Copy this file to your project
    2. Modify the operators to match the values your code validates
    3. Register them on the ``mutation_registry`` fixture or your own registry

Example registration in conftest.py:
    import pytest

    from examples.custom_operator import CalldataMutator


    @pytest.fixture
    def mutation_registry(mutation_registry):
        mutation_registry.register(CalldataMutator())
        return mutation_registry
"""

from __future__ import annotations

import asyncio
from typing import ClassVar

from eth_utils import is_checksum_address

from ethereum_dsl.operators import ArrayMutator, MutationRegistry, TypedMutationOperator
from ethereum_dsl.reporting import ConsoleReporter
from ethereum_dsl.testing import MutationTestCase, MutationTestRunner
from ethereum_dsl.types import AddressType, ArrayType, HexType


# =============================================================================
# Example 1: Operator for a type without a built-in operator
# =============================================================================


class CalldataMutator(TypedMutationOperator):
    """Mutate ABI-encoded calldata.

    Mutations:
        - selector only (arguments dropped)
        - one byte short (odd-length hex)
        - last byte dropped
        - selector zeroed
        - empty calldata

    Why this matters:
        Code that decodes calldata often checks the selector and trusts the
        rest. If truncated arguments are accepted, this mutation survives.

    Example:
        >>> operator = CalldataMutator()
        >>> operator.mutate('0xa9059cbb' + '00' * 4)[0]
        '0xa9059cbb'
    """

    type = HexType()

    @property
    def name(self) -> str:
        return 'CalldataMutator'

    @property
    def description(self) -> str:
        return 'Truncate calldata and zero its function selector'

    def mutate(self, value: str) -> list[str]:
        return [
            value[:10],
            value[:-1],
            value[:-2],
            '0x00000000' + value[10:],
            '0x',
        ]


# =============================================================================
# Example 2: Replacing a built-in operator
# =============================================================================


class KnownAddressMutator(TypedMutationOperator):
    """Swap an address for other well-known addresses.

    Registering this replaces the built-in AddressMutator, since the registry
    keeps one operator per type.
    """

    KNOWN: ClassVar[tuple[str, ...]] = (
        '0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2',  # WETH
        '0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48',  # USDC
        '0x000000000000000000000000000000000000dEaD',
    )

    type = AddressType()

    def mutate(self, value: str) -> list[str]:
        return [address for address in self.KNOWN if address.lower() != value.lower()]


# =============================================================================
# Running the examples
# =============================================================================


def build_registry() -> MutationRegistry:
    """Registry with the built-in operators plus the examples."""
    registry = MutationRegistry()
    registry.register(CalldataMutator())
    registry.register(ArrayMutator(AddressType()))
    return registry


def is_transfer_calldata(value: str) -> bool:
    """Accept ERC-20 ``transfer(address,uint256)`` calldata."""
    return value.startswith('0xa9059cbb') and len(value) == 2 + 8 + 64 * 2


async def main() -> None:
    runner = MutationTestRunner(build_registry())
    transfer = '0xa9059cbb' + '00' * 12 + 'ab' * 20 + '00' * 31 + '01'
    allowlist = ['0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2']

    results = await runner.test_all([
        MutationTestCase('transfer calldata', transfer, HexType(), is_transfer_calldata),
        MutationTestCase(
            'allowlist',
            allowlist,
            ArrayType(AddressType()),
            lambda addresses: len(addresses) > 0 and all(is_checksum_address(a) for a in addresses),
        ),
    ])
    results['known addresses'] = await runner.test_with_operator(allowlist[0], KnownAddressMutator(), is_checksum_address)
    ConsoleReporter().write_report(results)


if __name__ == '__main__':
    asyncio.run(main())
