"""Composite types built from other type descriptors.

Composite names embed the names of their parts, so ``ArrayType(AddressType())``
is named ``Array(Address)`` and is a different registry key from the generic
``Array``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from ethereum_dsl.types.base import Type


if TYPE_CHECKING:
    from ethereum_dsl.types.base import TypeDescriptor


class ArrayType(Type):
    """List of elements, optionally constrained to one element type.

    Without an element type any list is a member and the type is named
    ``Array``.

    Example:
        >>> from ethereum_dsl.types.primitive import StringType
        >>> ArrayType(StringType()).flatten(['a', 'b'])
        {'rv': ['a', 'b'], 'rv[0]': 'a', 'rv[1]': 'b'}
    """

    def __init__(self, element: TypeDescriptor | None = None) -> None:
        self.element = element
        self.name = 'Array' if element is None else f'Array({element.name})'

    def is_valid(self, value: object) -> bool:
        if not isinstance(value, list):
            return False
        if self.element is None:
            return True
        return all(self.element.is_valid(item) for item in value)

    def flatten(self, value: list[Any]) -> dict[str, Any]:
        result: dict[str, Any] = {'rv': value}
        for index, item in enumerate(value):
            result[f'rv[{index}]'] = item
        return result


class UnionType(Type):
    """Value that belongs to either of two types."""

    def __init__(self, first: TypeDescriptor, second: TypeDescriptor) -> None:
        self.first = first
        self.second = second
        self.name = f'({first.name} | {second.name})'

    def is_valid(self, value: object) -> bool:
        return self.first.is_valid(value) or self.second.is_valid(value)

    def mutable_to(self, other: TypeDescriptor) -> bool:
        return self.first.mutable_to(other) or self.second.mutable_to(other)

    def flatten(self, value: Any) -> dict[str, Any]:
        if self.first.is_valid(value):
            return self.first.flatten(value)
        if self.second.is_valid(value):
            return self.second.flatten(value)
        return {'rv': value}


class OptionalType(Type):
    """Value of the wrapped type, or None."""

    def __init__(self, inner: TypeDescriptor) -> None:
        self.inner = inner
        self.name = f'Optional({inner.name})'

    def is_valid(self, value: object) -> bool:
        return value is None or self.inner.is_valid(value)

    def flatten(self, value: Any) -> dict[str, Any]:
        if value is None:
            return {'rv': None}
        return self.inner.flatten(value)


class RecordType(Type):
    """Mapping with string keys whose values all share one type."""

    def __init__(self, value_type: TypeDescriptor) -> None:
        self.value_type = value_type
        self.name = f'Record({value_type.name})'

    def is_valid(self, value: object) -> bool:
        if not isinstance(value, Mapping):
            return False
        return all(self.value_type.is_valid(item) for item in value.values())

    def flatten(self, value: Mapping[str, Any]) -> dict[str, Any]:
        result: dict[str, Any] = {'rv': value}
        for key, item in value.items():
            result[f'rv.{key}'] = item
        return result
