"""Protocol definition for mutation operators.

All mutation operators must implement the MutationOperator protocol.
"""

from __future__ import annotations

from typing import (
    TYPE_CHECKING,
    Any,
    Protocol,
    runtime_checkable,
)


if TYPE_CHECKING:
    from ethereum_dsl.types.base import TypeDescriptor


@runtime_checkable
class MutationOperator(Protocol):
    """Protocol for all mutation operators.

    A MutationOperator is bound to one type and turns a valid seed value of
    that type into a finite list of variants probing known failure classes
    (boundaries, malformed encodings, off-by-one, case and truncation).

    Attributes:
        name: Identifier for this operator, used in diagnostics.
        description: Human-readable description for reports.
        type: The type descriptor this operator mutates.
    """

    @property
    def name(self) -> str:
        """Return identifier for this operator."""
        ...

    @property
    def description(self) -> str:
        """Return human-readable description for reports."""
        ...

    @property
    def type(self) -> TypeDescriptor:
        """Return the type descriptor this operator is bound to."""
        ...

    def is_applicable(self, value: object) -> bool:
        """Return True if this operator can mutate the given value.

        Args:
            value: The candidate seed value.

        Returns:
            True if the value is a member of the bound type.
        """
        ...

    def mutate(self, value: Any) -> list[Any]:
        """Return all mutated variants of this value.

        Must depend on the seed only, must not modify it in place and must
        not raise for any value accepted by ``is_applicable``.

        Args:
            value: A valid seed value.

        Returns:
            List of new values, one for each mutation.
        """
        ...


class TypedMutationOperator:
    """Base class for operators bound to a type descriptor.

    Provides ``is_applicable`` by delegating to the bound type.
    """

    type: TypeDescriptor

    @property
    def name(self) -> str:
        return self.__class__.__name__

    @property
    def description(self) -> str:
        return f'Mutate {self.type.name} values'

    def is_applicable(self, value: object) -> bool:
        return self.type.is_valid(value)

    def mutate(self, value: Any) -> list[Any]:  # pragma: no cover
        raise NotImplementedError
