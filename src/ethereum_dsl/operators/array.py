"""Array mutation operator.

This operator removes, duplicates and reorders list elements.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ethereum_dsl.operators.protocol import TypedMutationOperator
from ethereum_dsl.types.composite import ArrayType


if TYPE_CHECKING:
    from ethereum_dsl.types.base import TypeDescriptor


class ArrayMutator(TypedMutationOperator):
    """Mutate list values.

    Without an element type the operator is bound to the generic ``Array``
    type. Pass an element type to bind it to a typed array such as
    ``Array(Address)``.

    Mutations:
        - [a, b, c] -> []
        - [a, b, c] -> [b, c], [a, b]
        - [a, b, c] -> [a, b, c, a]
        - [a, b, c] -> [c, b, a]
        - [a, b, c] -> [a]
        - [] -> [None]

    Example:
        >>> ArrayMutator().mutate([])
        [[None]]
    """

    def __init__(self, element: TypeDescriptor | None = None) -> None:
        self.type = ArrayType(element)

    @property
    def name(self) -> str:
        return 'ArrayMutator'

    @property
    def description(self) -> str:
        return 'Empty, trim, duplicate and reverse list elements'

    def mutate(self, value: list[Any]) -> list[list[Any]]:
        if not value:
            return [[None]]

        return [
            [],
            value[1:],
            value[:-1],
            [*value, value[0]],
            value[::-1],
            [value[0]],
        ]
