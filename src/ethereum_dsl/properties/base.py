"""Protocol and base classes for properties.

A property is a named generator of values of one type. Static properties
produce values locally; chain-backed properties query a node and remember
the values they have seen so later draws can reuse them.
"""

from __future__ import annotations

import random
from typing import (
    Any,
    Protocol,
    runtime_checkable,
)


@runtime_checkable
class Property(Protocol):
    """Protocol for all properties.

    Attributes:
        name: Display name, conventionally in angle brackets (e.g. '<Address>').
    """

    @property
    def name(self) -> str:
        """Return display name for this property."""
        ...

    def generate(self) -> Any:
        """Return a generated value, or an awaitable resolving to one."""
        ...


class BaseProperty:
    """Base class for properties.

    Holds the random source so runs can be reproduced from a seed.
    """

    name: str = '<Property>'

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()  # noqa: S311

    def reseed(self, seed: int) -> None:
        """Reset the random source so the next draws follow ``seed``."""
        self._rng.seed(seed)

    def generate(self) -> Any:  # pragma: no cover
        raise NotImplementedError

    def __repr__(self) -> str:
        return f'<{self.__class__.__name__} {self.name}>'


class VerifiableProperty(BaseProperty):
    """Property that remembers values confirmed to be valid.

    Verified values are kept as a set; ``get_verified_value`` returns one of
    them at random, or None when none has been recorded yet.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        super().__init__(rng)
        self.verified_values: set[Any] = set()

    def add_verified_value(self, value: Any) -> None:
        self.verified_values.add(value)

    def get_verified_value(self) -> Any | None:
        if not self.verified_values:
            return None
        # Sorted by repr so a seeded rng picks the same value across runs.
        return self._rng.choice(sorted(self.verified_values, key=repr))
