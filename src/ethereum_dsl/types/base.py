"""Protocol and base class for type descriptors.

A type descriptor names a semantic value type and knows how to recognise,
compare and decompose values of that type. Descriptors are the keys by which
mutation operators are looked up, so two descriptors with the same name are
treated as the same type.
"""

from __future__ import annotations

from typing import (
    Any,
    Protocol,
    runtime_checkable,
)


@runtime_checkable
class TypeDescriptor(Protocol):
    """Protocol for all type descriptors.

    Attributes:
        name: Unique identifier for the type (e.g., 'Address', 'Array(Hex32)').
    """

    @property
    def name(self) -> str:
        """Return unique identifier for this type."""
        ...

    def is_valid(self, value: object) -> bool:
        """Return True if the value is a member of this type.

        Must never raise, whatever the input.
        """
        ...

    def mutable_to(self, other: TypeDescriptor) -> bool:
        """Return True if values of this type can be compared against the other type."""
        ...

    def flatten(self, value: Any) -> dict[str, Any]:
        """Decompose a value into path-keyed entries for diffing and reports.

        The whole value is always present under the 'rv' key.
        """
        ...


class Type:
    """Base class for type descriptors.

    Subclasses set ``name`` and implement ``is_valid``. Equality and hashing
    go through the name only.
    """

    name: str = ''

    def is_valid(self, value: object) -> bool:  # pragma: no cover
        raise NotImplementedError

    def mutable_to(self, other: TypeDescriptor) -> bool:
        return other.name == self.name

    def flatten(self, value: Any) -> dict[str, Any]:
        return {'rv': value}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TypeDescriptor):
            return NotImplemented
        return other.name == self.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self) -> str:
        return f'<{type(self).__name__} {self.name}>'
