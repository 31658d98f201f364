"""Summary calculation for mutation test results.

The catch rate represents how well a validator rejects bad input:
  percentage = caught / total * 100

Errors and timeouts count as caught, since the validator did not accept the
mutated value.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from collections.abc import Iterable

    from ethereum_dsl.reporting.results import MutationResult


@dataclass(frozen=True)
class MutationSummary:
    """Aggregated counts for one mutation test.

    Invariants: ``caught + uncaught == total`` and ``errors <= caught``.

    Attributes:
        total: Number of mutations tested.
        caught: Number of mutations the validator rejected, raised on or timed out on.
        uncaught: Number of mutations the validator accepted.
        errors: Number of mutations where the validator raised or timed out.
        timeouts: Number of those errors that were timeouts.
    """

    total: int = 0
    caught: int = 0
    uncaught: int = 0
    errors: int = 0
    timeouts: int = 0

    @classmethod
    def from_results(cls, results: Iterable[MutationResult]) -> MutationSummary:
        """Fold a sequence of MutationResults into a summary.

        Args:
            results: MutationResult objects to aggregate.

        Returns:
            MutationSummary with counts for each outcome.
        """
        total = caught = errors = timeouts = 0
        for result in results:
            total += 1
            if result.caught:
                caught += 1
            if result.error is not None:
                errors += 1
                if result.is_timeout:
                    timeouts += 1

        return cls(
            total=total,
            caught=caught,
            uncaught=total - caught,
            errors=errors,
            timeouts=timeouts,
        )

    @property
    def percentage(self) -> float:
        """Calculate the catch rate as a percentage.

        Returns:
            Catch rate percentage (0.0 to 100.0).
        """
        if self.total == 0:
            return 0.0
        return self.caught / self.total * 100
