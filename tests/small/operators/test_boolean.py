"""Tests for the BooleanMutator."""

from __future__ import annotations

import pytest

from ethereum_dsl.operators import BooleanMutator, MutationOperator


class TestBooleanMutatorProtocol:
    """Test that BooleanMutator implements the MutationOperator protocol."""

    def test_implements_mutation_operator_protocol(self):
        assert isinstance(BooleanMutator(), MutationOperator)

    def test_name_is_boolean_mutator(self):
        assert BooleanMutator().name == 'BooleanMutator'

    def test_description_describes_the_operator(self):
        assert 'boolean' in BooleanMutator().description.lower()


class TestBooleanMutatorMutate:
    """Test the mutate method."""

    @pytest.mark.parametrize(('value', 'expected'), [(True, [False]), (False, [True])])
    def test_negates_value(self, value, expected):
        assert BooleanMutator().mutate(value) == expected

    def test_not_applicable_to_integers(self):
        assert BooleanMutator().is_applicable(1) is False
