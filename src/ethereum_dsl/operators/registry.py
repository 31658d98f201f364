"""Central registry for mutation operators.

This module provides the MutationRegistry class which maps type names to
the operator that mutates values of that type.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ethereum_dsl.operators.address import AddressMutator
from ethereum_dsl.operators.array import ArrayMutator
from ethereum_dsl.operators.block import BlockNumberMutator, BlockTagMutator
from ethereum_dsl.operators.boolean import BooleanMutator
from ethereum_dsl.operators.hash import HashMutator
from ethereum_dsl.operators.number import NumberMutator
from ethereum_dsl.operators.string import StringMutator


if TYPE_CHECKING:
    from collections.abc import Callable

    from ethereum_dsl.operators.protocol import MutationOperator
    from ethereum_dsl.types.base import TypeDescriptor


logger = logging.getLogger(__name__)


class MutationRegistry:
    """Central registry for mutation operators.

    Operators are keyed by the name of the type they are bound to. There is
    at most one operator per type name and the last registration wins, so a
    test suite can override a built-in operator by registering its own.

    Example:
        >>> from ethereum_dsl.types import BooleanType
        >>> registry = MutationRegistry()
        >>> registry.mutate(True, BooleanType())
        [False]
        >>> 'Boolean' in registry.available()
        True
    """

    def __init__(self, include_defaults: bool = True) -> None:  # noqa: FBT001, FBT002
        """Initialize the registry.

        Args:
            include_defaults: Pre-register the built-in operators.
        """
        self._operators: dict[str, MutationOperator] = {}
        if include_defaults:
            self._register_defaults()

    def register(self, operator: MutationOperator) -> None:
        """Register an operator under the name of its bound type.

        Args:
            operator: The operator to register. Replaces any operator
                      already registered for the same type name.
        """
        key = operator.type.name
        if key in self._operators:
            logger.debug('Replacing operator for %s with %s', key, operator.name)
        self._operators[key] = operator

    def register_decorator(self) -> Callable[[type[Any]], type[Any]]:
        """Decorator to register an operator class.

        The class is instantiated with no arguments and the instance is
        registered.

        Returns:
            Decorator function that registers the class.

        Example:
            >>> registry = MutationRegistry(include_defaults=False)
            >>> @registry.register_decorator()
            ... class UpperOnly(StringMutator):
            ...     def mutate(self, value):
            ...         return [value.upper()]
            >>> registry.available()
            ['String']
        """

        def decorator(operator_class: type[Any]) -> type[Any]:
            self.register(operator_class())
            return operator_class

        return decorator

    def get_operator(self, type_descriptor: TypeDescriptor) -> MutationOperator | None:
        """Get the operator registered for a type.

        Args:
            type_descriptor: The type to look up, matched by name.

        Returns:
            The operator, or None if no operator is registered for the type.
        """
        return self._operators.get(type_descriptor.name)

    def get_all_operators(self) -> list[MutationOperator]:
        """Get a snapshot of all registered operators.

        Returns:
            List of operator instances.
        """
        return list(self._operators.values())

    def available(self) -> list[str]:
        """List all registered type names.

        Returns:
            List of type names that have an operator.
        """
        return list(self._operators.keys())

    def mutate(self, value: Any, type_descriptor: TypeDescriptor) -> list[Any]:
        """Generate mutations of a value.

        Falls back to treating the value as immutable when no operator is
        registered for the type or the operator does not accept the value.

        Args:
            value: The seed value.
            type_descriptor: The type of the seed value.

        Returns:
            The operator's mutations, or a single-element list holding the
            original value.
        """
        operator = self.get_operator(type_descriptor)
        if operator is not None and operator.is_applicable(value):
            return operator.mutate(value)

        logger.debug('No applicable operator for %s, leaving value unchanged', type_descriptor.name)
        return [value]

    def __contains__(self, type_name: object) -> bool:
        return type_name in self._operators

    def __len__(self) -> int:
        return len(self._operators)

    def _register_defaults(self) -> None:
        """Register the built-in operators."""
        self.register(AddressMutator())
        self.register(BlockTagMutator())
        self.register(BlockNumberMutator())
        self.register(HashMutator())
        self.register(BooleanMutator())
        self.register(NumberMutator())
        self.register(StringMutator())
        self.register(ArrayMutator())


def create_default_registry() -> MutationRegistry:
    """Create a registry with the built-in operators registered.

    Returns:
        A new MutationRegistry.
    """
    return MutationRegistry(include_defaults=True)
