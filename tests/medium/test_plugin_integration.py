"""Integration tests for the ethereum-dsl pytest plugin.

These tests verify the fixtures and command-line options end to end using
pytester.
"""

from __future__ import annotations

import pytest


@pytest.mark.medium
class TestPluginOptions:
    """Test command-line option registration."""

    def test_help_lists_options(self, pytester: pytest.Pytester):
        result = pytester.runpytest('--help')

        result.stdout.fnmatch_lines([
            '*ethereum-dsl*',
            '*--eth-mutation-timeout*',
            '*--eth-verbose*',
        ])

    def test_defaults_without_configuration(self, pytester: pytest.Pytester):
        pytester.makepyfile(
            """
def test_defaults(mutation_options):
    assert mutation_options.timeout == 5000
    assert mutation_options.verbose is False
    assert mutation_options.max_concurrency == 1
"""
        )

        result = pytester.runpytest()

        result.assert_outcomes(passed=1)

    def test_pyproject_configuration_is_loaded(self, pytester: pytest.Pytester):
        pytester.makepyprojecttoml(
            """
[tool.ethereum-dsl]
timeout = 250
max_concurrency = 3
num_runs = 7
seed = 99
"""
        )
        pytester.makepyfile(
            """
def test_configured(ethereum_dsl_config, mutation_options):
    assert mutation_options.timeout == 250
    assert mutation_options.max_concurrency == 3
    assert ethereum_dsl_config.property_options().num_runs == 7
    assert ethereum_dsl_config.property_options().seed == 99
"""
        )

        result = pytester.runpytest()

        result.assert_outcomes(passed=1)

    def test_command_line_overrides_pyproject(self, pytester: pytest.Pytester):
        pytester.makepyprojecttoml(
            """
[tool.ethereum-dsl]
timeout = 250
"""
        )
        pytester.makepyfile(
            """
def test_overridden(mutation_options):
    assert mutation_options.timeout == 100
    assert mutation_options.verbose is True
"""
        )

        result = pytester.runpytest('--eth-mutation-timeout=100', '--eth-verbose')

        result.assert_outcomes(passed=1)

    def test_invalid_timeout_errors_the_test(self, pytester: pytest.Pytester):
        pytester.makepyfile(
            """
def test_uses_options(mutation_options):
    pass
"""
        )

        result = pytester.runpytest('--eth-mutation-timeout=0')

        result.assert_outcomes(errors=1)


@pytest.mark.medium
class TestPluginFixtures:
    """Test the runner and registry fixtures inside a real test session."""

    def test_mutation_runner_fixture_runs_mutations(self, pytester: pytest.Pytester):
        pytester.makepyfile(
            """
import asyncio

from ethereum_dsl.types import NumberType


def test_number_validator(mutation_runner, mutation_options):
    result = asyncio.run(mutation_runner.test(42, NumberType(), lambda v: v == 42, mutation_options))
    assert result.summary.total == 8
    assert result.summary.uncaught == 0
"""
        )

        result = pytester.runpytest()

        result.assert_outcomes(passed=1)

    def test_registry_fixture_is_private_to_each_test(self, pytester: pytest.Pytester):
        pytester.makepyfile(
            """
from ethereum_dsl.operators import TypedMutationOperator
from ethereum_dsl.types import StringType


class Constant(TypedMutationOperator):
    type = StringType()

    def mutate(self, value):
        return ['constant']


def test_registers_override(mutation_registry):
    mutation_registry.register(Constant())
    assert mutation_registry.mutate('abc', StringType()) == ['constant']


def test_sees_builtin_operator(mutation_registry):
    assert mutation_registry.mutate('abc', StringType()) != ['constant']
"""
        )

        result = pytester.runpytest()

        result.assert_outcomes(passed=2)

    def test_runner_uses_registry_fixture(self, pytester: pytest.Pytester):
        pytester.makepyfile(
            """
def test_same_registry(mutation_runner, mutation_registry):
    assert mutation_runner.registry is mutation_registry
"""
        )

        result = pytester.runpytest()

        result.assert_outcomes(passed=1)
