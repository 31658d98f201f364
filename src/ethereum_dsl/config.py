"""Configuration loading for ethereum-dsl.

This module defines the option objects consumed by the test runners and
reads defaults for them from the pyproject.toml [tool.ethereum-dsl] section.
"""

from __future__ import annotations

from dataclasses import dataclass
import tomllib
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from pathlib import Path


DEFAULT_TIMEOUT_MS = 5000
DEFAULT_NUM_RUNS = 100


@dataclass(frozen=True)
class MutationTestOptions:
    """Options for mutation testing.

    Attributes:
        timeout: Per-mutation validator budget in milliseconds. Defaults to 5000.
        verbose: Log each mutation outcome at INFO instead of DEBUG.
            Never changes results.
        max_concurrency: Number of ``test_all`` entries allowed to run at
            once. Defaults to 1 (sequential).

    Example:
        >>> MutationTestOptions(timeout=250).timeout_seconds
        0.25
    """

    timeout: float = DEFAULT_TIMEOUT_MS
    verbose: bool = False
    max_concurrency: int = 1

    def __post_init__(self) -> None:
        """Validate option values.

        Raises:
            ValueError: If any option value is invalid.
        """
        if self.timeout <= 0:
            msg = f'timeout must be positive, got {self.timeout}'
            raise ValueError(msg)

        if self.max_concurrency < 1:
            msg = f'max_concurrency must be at least 1, got {self.max_concurrency}'
            raise ValueError(msg)

    @property
    def timeout_seconds(self) -> float:
        """Return the timeout in seconds."""
        return self.timeout / 1000


@dataclass(frozen=True)
class PropertyTestOptions:
    """Options for property testing.

    Attributes:
        num_runs: Requested number of runs. Defaults to 100.
        timeout: Timeout in milliseconds, recorded for callers.
        seed: Seed applied to the property's random source before drawing.
            A time-based seed is used when None; either way it is recorded
            in the result so the run can be replayed.
        verbose: Log each generated value.
    """

    num_runs: int = DEFAULT_NUM_RUNS
    timeout: float | None = None
    seed: int | None = None
    verbose: bool = False

    def __post_init__(self) -> None:
        """Validate option values.

        Raises:
            ValueError: If any option value is invalid.
        """
        if self.num_runs < 1:
            msg = f'num_runs must be at least 1, got {self.num_runs}'
            raise ValueError(msg)

        if self.timeout is not None and self.timeout <= 0:
            msg = f'timeout must be positive, got {self.timeout}'
            raise ValueError(msg)


@dataclass
class DslConfig:
    """File-level configuration for ethereum-dsl.

    All fields are optional and default to None, meaning the built-in
    defaults of the option objects apply.

    Attributes:
        timeout: Per-mutation timeout in milliseconds.
        verbose: Verbose diagnostic logging.
        max_concurrency: Concurrent ``test_all`` entries.
        num_runs: Property test runs.
        seed: Property test random seed.
    """

    timeout: float | None = None
    verbose: bool | None = None
    max_concurrency: int | None = None
    num_runs: int | None = None
    seed: int | None = None

    def mutation_options(self) -> MutationTestOptions:
        """Build MutationTestOptions, using defaults for unset fields."""
        return MutationTestOptions(
            timeout=self.timeout if self.timeout is not None else DEFAULT_TIMEOUT_MS,
            verbose=bool(self.verbose),
            max_concurrency=self.max_concurrency if self.max_concurrency is not None else 1,
        )

    def property_options(self) -> PropertyTestOptions:
        """Build PropertyTestOptions, using defaults for unset fields."""
        return PropertyTestOptions(
            num_runs=self.num_runs if self.num_runs is not None else DEFAULT_NUM_RUNS,
            seed=self.seed,
            verbose=bool(self.verbose),
        )


def load_config(rootdir: Path) -> DslConfig:
    """Load configuration from pyproject.toml.

    Reads the [tool.ethereum-dsl] section from pyproject.toml in the given
    directory. Returns default configuration if the file or section does
    not exist.

    Args:
        rootdir: Directory containing pyproject.toml.

    Returns:
        DslConfig with values from pyproject.toml or defaults.
    """
    pyproject_path = rootdir / 'pyproject.toml'

    if not pyproject_path.exists():
        return DslConfig()

    with pyproject_path.open('rb') as f:
        data = tomllib.load(f)

    tool_config = data.get('tool', {}).get('ethereum-dsl', {})

    return DslConfig(
        timeout=tool_config.get('timeout'),
        verbose=tool_config.get('verbose'),
        max_concurrency=tool_config.get('max_concurrency'),
        num_runs=tool_config.get('num_runs'),
        seed=tool_config.get('seed'),
    )


def merge_configs(
    file_config: DslConfig,
    cli_timeout: float | None = None,
    cli_verbose: bool | None = None,  # noqa: FBT001
) -> DslConfig:
    """Merge CLI arguments with file configuration.

    CLI arguments take precedence over pyproject.toml configuration.
    None and False on the command line are treated as not provided.

    Args:
        file_config: Configuration loaded from pyproject.toml.
        cli_timeout: Timeout from CLI (--eth-mutation-timeout).
        cli_verbose: Verbose flag from CLI (--eth-verbose).

    Returns:
        DslConfig with CLI values overriding file config where provided.
    """
    return DslConfig(
        timeout=cli_timeout if cli_timeout is not None else file_config.timeout,
        verbose=True if cli_verbose else file_config.verbose,
        max_concurrency=file_config.max_concurrency,
        num_runs=file_config.num_runs,
        seed=file_config.seed,
    )
