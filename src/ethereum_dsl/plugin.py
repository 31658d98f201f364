"""pytest plugin for ethereum-dsl.

This module provides the pytest hooks and fixtures that make the mutation
runner available inside a test suite.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from ethereum_dsl.config import DslConfig, MutationTestOptions, load_config, merge_configs
from ethereum_dsl.operators.registry import MutationRegistry, create_default_registry
from ethereum_dsl.testing.mutation_runner import MutationTestRunner


def pytest_addoption(parser: pytest.Parser) -> None:
    """Add command-line options for ethereum-dsl."""
    group = parser.getgroup('ethereum-dsl', 'Ethereum property and mutation testing')
    group.addoption(
        '--eth-mutation-timeout',
        action='store',
        type=float,
        default=None,
        dest='eth_mutation_timeout',
        help='Per-mutation validator timeout in milliseconds (default: 5000)',
    )
    group.addoption(
        '--eth-verbose',
        action='store_true',
        default=False,
        dest='eth_verbose',
        help='Log every mutation outcome at INFO level',
    )


@pytest.fixture(scope='session')
def ethereum_dsl_config(pytestconfig: pytest.Config) -> DslConfig:
    """Configuration from pyproject.toml merged with command-line options."""
    file_config = load_config(Path(pytestconfig.rootpath))
    return merge_configs(
        file_config,
        cli_timeout=pytestconfig.getoption('eth_mutation_timeout'),
        cli_verbose=pytestconfig.getoption('eth_verbose'),
    )


@pytest.fixture
def mutation_options(ethereum_dsl_config: DslConfig) -> MutationTestOptions:
    """Mutation test options for the current run."""
    return ethereum_dsl_config.mutation_options()


@pytest.fixture
def mutation_registry() -> MutationRegistry:
    """A fresh registry with the built-in operators, private to one test."""
    return create_default_registry()


@pytest.fixture
def mutation_runner(mutation_registry: MutationRegistry) -> MutationTestRunner:
    """A mutation runner backed by the ``mutation_registry`` fixture."""
    return MutationTestRunner(mutation_registry)
