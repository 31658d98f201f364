"""Console reporter for mutation testing results.

Produces human-readable output for terminal display with summary
statistics and the mutations each validator accepted.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO


if TYPE_CHECKING:
    from collections.abc import Mapping

    from ethereum_dsl.reporting.results import MutationTestResult


class ConsoleReporter:
    """Reporter that writes mutation testing results to the console.

    Produces output in the following format:

        =================== ethereum-dsl mutation report ===================

        address_validator (Address via AddressMutator)
          Caught: 4 of 5 mutations (80%)
          Errors: 0
          Uncaught mutations:
            '0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2'

        ====================================================================

    Attributes:
        output: The file-like object to write to.
    """

    BORDER_CHAR = '='
    BORDER_WIDTH = 70
    MAX_UNCAUGHT = 10

    def __init__(self, output: TextIO | None = None) -> None:
        """Initialize the console reporter.

        Args:
            output: File-like object to write to. Defaults to sys.stdout.
        """
        self.output = output or sys.stdout

    def write_report(self, results: Mapping[str, MutationTestResult]) -> None:
        """Write the mutation testing report to the output.

        Args:
            results: Mutation test results keyed by test name.
        """
        self._write_header()
        self._write_blank_line()

        if not results:
            self._write_line('No mutation tests run.')
        else:
            for name, result in results.items():
                self._write_result(name, result)
                self._write_blank_line()

        self._write_footer()

    def _write_header(self) -> None:
        """Write the report header."""
        title = ' ethereum-dsl mutation report '
        border_len = (self.BORDER_WIDTH - len(title)) // 2
        header = f'{self.BORDER_CHAR * border_len}{title}{self.BORDER_CHAR * border_len}'
        self._write_line(header)

    def _write_footer(self) -> None:
        """Write the report footer."""
        self._write_line(self.BORDER_CHAR * self.BORDER_WIDTH)

    def _write_result(self, name: str, result: MutationTestResult) -> None:
        """Write the section for one test."""
        operator = result.operator_name or 'no operator'
        self._write_line(f'{name} ({result.type_name} via {operator})')

        if result.setup_error is not None:
            self._write_line(f'  Setup failed: {result.setup_error.message}')
            return

        summary = result.summary
        self._write_line(
            f'  Caught: {summary.caught} of {summary.total} mutations ({round(summary.percentage)}%)'
        )
        self._write_line(f'  Errors: {summary.errors}')
        self._write_uncaught(result)

    def _write_uncaught(self, result: MutationTestResult) -> None:
        """Write the mutations the validator accepted."""
        uncaught = result.uncaught()[: self.MAX_UNCAUGHT]
        if not uncaught:
            return

        self._write_line('  Uncaught mutations:')
        for mutation in uncaught:
            self._write_line(f'    {mutation.value!r}')

    def _write_blank_line(self) -> None:
        """Write a blank line."""
        self.output.write('\n')

    def _write_line(self, text: str) -> None:
        """Write a line of text followed by newline."""
        self.output.write(text + '\n')
