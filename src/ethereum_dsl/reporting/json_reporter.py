"""JSON reporter for mutation testing results.

Produces machine-readable JSON output for CI integration
and automated analysis of mutation testing results.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from ethereum_dsl.reporting.summary import MutationSummary


if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from ethereum_dsl.reporting.results import ErrorInfo, MutationResult, MutationTestResult


_JSON_SCALARS = (str, int, float, bool, type(None))


def _json_value(value: Any) -> Any:
    """Return value unchanged if JSON can encode it faithfully, else its repr."""
    if isinstance(value, _JSON_SCALARS):
        return value
    if isinstance(value, list):
        return [_json_value(item) for item in value]
    return repr(value)


class JsonReporter:
    """Reporter that produces JSON output for CI integration.

    JSON structure:
        {
            "summary": {"total": 13, "caught": 12, "uncaught": 1, "errors": 0, "percentage": 92.3},
            "tests": {
                "address_validator": {
                    "original_value": "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2",
                    "type": "Address",
                    "operator": "AddressMutator",
                    "summary": {...},
                    "mutations": [
                        {"value": "0x0000...", "outcome": "caught", "caught": true},
                        ...
                    ]
                }
            }
        }
    """

    def to_json(self, results: Mapping[str, MutationTestResult]) -> str:
        """Convert mutation test results to a JSON string.

        Args:
            results: Mutation test results keyed by test name.

        Returns:
            Pretty-printed JSON string.
        """
        data = self._build_report_data(results)
        return json.dumps(data, indent=2)

    def write_report(self, results: Mapping[str, MutationTestResult], output_path: Path) -> None:
        """Write mutation report to a JSON file.

        Args:
            results: Mutation test results keyed by test name.
            output_path: Path to the output JSON file.
        """
        output_path.write_text(self.to_json(results))

    def _build_report_data(self, results: Mapping[str, MutationTestResult]) -> dict[str, Any]:
        """Build the complete report data structure."""
        all_mutations = [m for result in results.values() for m in result.mutations]
        return {
            'summary': self._build_summary(MutationSummary.from_results(all_mutations)),
            'tests': {name: self._build_test(result) for name, result in results.items()},
        }

    def _build_summary(self, summary: MutationSummary) -> dict[str, Any]:
        """Build a summary section."""
        return {
            'total': summary.total,
            'caught': summary.caught,
            'uncaught': summary.uncaught,
            'errors': summary.errors,
            'timeouts': summary.timeouts,
            'percentage': summary.percentage,
        }

    def _build_test(self, result: MutationTestResult) -> dict[str, Any]:
        """Build the entry for one test."""
        entry: dict[str, Any] = {
            'original_value': _json_value(result.original_value),
            'type': result.type_name,
            'operator': result.operator_name,
            'summary': self._build_summary(result.summary),
            'mutations': [self._build_mutation(m) for m in result.mutations],
        }
        if result.setup_error is not None:
            entry['setup_error'] = self._build_error(result.setup_error)
        return entry

    def _build_mutation(self, mutation: MutationResult) -> dict[str, Any]:
        """Build a single mutation entry."""
        entry: dict[str, Any] = {
            'value': _json_value(mutation.value),
            'outcome': mutation.outcome.value,
            'caught': mutation.caught,
        }
        if mutation.error is not None:
            entry['error'] = self._build_error(mutation.error)
        if mutation.execution_time_ms is not None:
            entry['execution_time_ms'] = mutation.execution_time_ms
        return entry

    def _build_error(self, error: ErrorInfo) -> dict[str, Any]:
        entry: dict[str, Any] = {'kind': error.kind.value, 'message': error.message}
        if error.exception_type is not None:
            entry['exception_type'] = error.exception_type
        return entry
