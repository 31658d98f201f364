"""Reporting module for ethereum-dsl mutation testing results.

This module provides the result data structures and reporters for
presenting mutation testing results on the console or as JSON.
"""

from ethereum_dsl.reporting.console import ConsoleReporter
from ethereum_dsl.reporting.json_reporter import JsonReporter
from ethereum_dsl.reporting.results import (
    ErrorInfo,
    ErrorKind,
    MutationOutcome,
    MutationResult,
    MutationTestResult,
)
from ethereum_dsl.reporting.summary import MutationSummary


__all__ = [
    'ConsoleReporter',
    'ErrorInfo',
    'ErrorKind',
    'JsonReporter',
    'MutationOutcome',
    'MutationResult',
    'MutationSummary',
    'MutationTestResult',
]
