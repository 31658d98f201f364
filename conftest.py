"""Root pytest configuration for ethereum-dsl.

This conftest.py applies size markers to ALL collected items, doctests from
``src/`` included. The tests/conftest.py registers the markers and holds
shared fixtures.
"""

from __future__ import annotations

from pathlib import Path

import pytest


def _has_size_marker(item: pytest.Item) -> bool:
    """Check if an item already has a size marker."""
    return any(marker.name in ('small', 'medium', 'large') for marker in item.iter_markers())


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config,  # noqa: ARG001
    items: list[pytest.Item],
) -> None:
    """Apply a size marker to every item that does not declare one."""
    for item in items:
        if _has_size_marker(item):
            continue

        path_parts = Path(str(item.fspath)).parts

        if 'small' in path_parts:
            item.add_marker(pytest.mark.small)
        elif 'medium' in path_parts:
            item.add_marker(pytest.mark.medium)
        elif 'large' in path_parts:
            item.add_marker(pytest.mark.large)
        elif 'src' in path_parts:
            # Doctests are pure functions of their inputs
            item.add_marker(pytest.mark.small)
