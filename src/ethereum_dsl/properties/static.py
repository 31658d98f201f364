"""Properties that generate values without touching a chain."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final

from eth_utils import to_wei

from ethereum_dsl.properties.base import BaseProperty
from ethereum_dsl.types.primitive import BLOCK_TAGS


if TYPE_CHECKING:
    from collections.abc import Sequence
    import random


ETHER_AMOUNTS: Final[tuple[str, ...]] = ('0.01', '0.1', '1', '10', '100')
GAS_LIMITS: Final[tuple[int, ...]] = (
    21_000,  # plain transfer
    100_000,  # simple contract call
    200_000,  # complex contract call
    500_000,  # contract deployment
    1_000_000,  # large contract deployment
)
GAS_PRICES_GWEI: Final[tuple[int, ...]] = (1, 5, 10, 20, 50, 100)


def _require_choices(choices: Sequence[Any], what: str) -> None:
    if not choices:
        msg = f'{what} must not be empty'
        raise ValueError(msg)


class AddressProperty(BaseProperty):
    """Pick an address from a fixed list."""

    name = '<Address>'

    def __init__(self, addresses: Sequence[str], rng: random.Random | None = None) -> None:
        super().__init__(rng)
        _require_choices(addresses, 'addresses')
        self._addresses = list(addresses)

    def generate(self) -> str:
        return self._rng.choice(self._addresses)


class BlockTagProperty(BaseProperty):
    name = '<BlockTag>'

    def generate(self) -> str:
        return self._rng.choice(BLOCK_TAGS)


class ValueProperty(BaseProperty):
    """Ether amount in wei, drawn from a handful of round values."""

    name = '<Value>'

    def generate(self) -> int:
        return to_wei(self._rng.choice(ETHER_AMOUNTS), 'ether')


class GasProperty(BaseProperty):
    """Gas limit typical of common transaction kinds."""

    name = '<Gas>'

    def generate(self) -> int:
        return self._rng.choice(GAS_LIMITS)


class GasPriceProperty(BaseProperty):
    """Gas price in wei."""

    name = '<GasPrice>'

    def generate(self) -> int:
        return to_wei(self._rng.choice(GAS_PRICES_GWEI), 'gwei')


class BooleanProperty(BaseProperty):
    name = '<Boolean>'

    def generate(self) -> bool:
        return self._rng.random() > 0.5  # noqa: PLR2004


class NullProperty(BaseProperty):
    name = '<Null>'

    def generate(self) -> None:
        return None


class RangeProperty(BaseProperty):
    """Integer between ``minimum`` and ``maximum``, both inclusive."""

    def __init__(self, minimum: int, maximum: int, rng: random.Random | None = None) -> None:
        super().__init__(rng)
        if minimum > maximum:
            msg = f'minimum must not exceed maximum, got {minimum} > {maximum}'
            raise ValueError(msg)
        self._minimum = minimum
        self._maximum = maximum
        self.name = f'<Range({minimum},{maximum})>'

    def generate(self) -> int:
        return self._rng.randint(self._minimum, self._maximum)


class ConstProperty(BaseProperty):
    """Always the same value."""

    def __init__(self, value: Any, rng: random.Random | None = None) -> None:
        super().__init__(rng)
        self._value = value
        self.name = f'<Const({value})>'

    def generate(self) -> Any:
        return self._value


class StorageIndexProperty(BaseProperty):
    """Storage slot of a contract as a 32-byte hex string.

    Slots may be given with or without a ``0x`` prefix and are left-padded
    with zeros to 64 hex digits.

    Example:
        >>> StorageIndexProperty(['0x1']).generate()
        '0x0000000000000000000000000000000000000000000000000000000000000001'
    """

    name = '<StorageIdx>'

    def __init__(self, slots: Sequence[str], rng: random.Random | None = None) -> None:
        super().__init__(rng)
        _require_choices(slots, 'slots')
        self._slots = list(slots)

    def generate(self) -> str:
        slot = self._rng.choice(self._slots)
        return '0x' + slot.removeprefix('0x').zfill(64)
