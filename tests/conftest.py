"""Shared pytest configuration and fixtures for ethereum-dsl tests."""

from __future__ import annotations

import pytest

from ethereum_dsl.config import MutationTestOptions


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line('markers', 'small: Fast, isolated unit tests (< 100ms)')
    config.addinivalue_line('markers', 'medium: Integration tests with real resources (< 10s)')
    config.addinivalue_line('markers', 'large: End-to-end system tests (< 60s)')


@pytest.fixture
def fast_options() -> MutationTestOptions:
    """Mutation options with a short timeout for timeout tests."""
    return MutationTestOptions(timeout=50)
