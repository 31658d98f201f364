"""Result dataclasses for tracking mutation test outcomes.

Each MutationResult represents the outcome of validating a single mutated
value. A mutation is caught when the validator rejected it (or failed while
looking at it) and uncaught when the validator accepted it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from ethereum_dsl.reporting.summary import MutationSummary


class ErrorKind(Enum):
    """Kind of failure recorded for a mutation.

    Attributes:
        EXCEPTION: The validator raised.
        TIMEOUT: The validator did not settle within the timeout.
    """

    EXCEPTION = 'exception'
    TIMEOUT = 'timeout'


class MutationOutcome(Enum):
    """Classification of a single mutation, for reporting.

    Attributes:
        CAUGHT: Validator rejected the mutation (good! validation works)
        UNCAUGHT: Validator accepted the mutation (validation gap found)
        ERROR: Validator raised while checking the mutation
        TIMEOUT: Validator did not answer in time
    """

    CAUGHT = 'caught'
    UNCAUGHT = 'uncaught'
    ERROR = 'error'
    TIMEOUT = 'timeout'


@dataclass(frozen=True)
class ErrorInfo:
    """Details of a validator failure.

    Attributes:
        kind: Whether the validator raised or timed out.
        message: Human-readable failure message.
        exception_type: Class name of the raised exception, if any.
    """

    kind: ErrorKind
    message: str
    exception_type: str | None = None

    @classmethod
    def from_exception(cls, exc: BaseException) -> ErrorInfo:
        """Build an EXCEPTION error from a raised exception."""
        return cls(kind=ErrorKind.EXCEPTION, message=str(exc), exception_type=type(exc).__name__)

    @classmethod
    def timeout(cls, timeout_ms: float) -> ErrorInfo:
        """Build a TIMEOUT error for the given budget in milliseconds."""
        return cls(kind=ErrorKind.TIMEOUT, message=f'Timeout after {timeout_ms:g}ms')

    @classmethod
    def cancelled(cls) -> ErrorInfo:
        """Build an EXCEPTION error for a validator that raised CancelledError."""
        return cls(kind=ErrorKind.EXCEPTION, message='Validator was cancelled', exception_type='CancelledError')


@dataclass(frozen=True)
class MutationResult:
    """Result of validating a single mutated value.

    Attributes:
        value: The mutated value handed to the validator.
        caught: True if the validator rejected the value, raised or timed out.
        error: Failure details when the validator raised or timed out.
        execution_time_ms: Time spent waiting on the validator in milliseconds.
    """

    value: Any
    caught: bool
    error: ErrorInfo | None = None
    execution_time_ms: float | None = None

    @property
    def outcome(self) -> MutationOutcome:
        """Return the reporting classification of this result."""
        if self.error is not None:
            if self.error.kind == ErrorKind.TIMEOUT:
                return MutationOutcome.TIMEOUT
            return MutationOutcome.ERROR
        return MutationOutcome.CAUGHT if self.caught else MutationOutcome.UNCAUGHT

    @property
    def is_uncaught(self) -> bool:
        """Return True if this mutation slipped past the validator."""
        return not self.caught

    @property
    def is_timeout(self) -> bool:
        """Return True if the validator timed out on this mutation."""
        return self.error is not None and self.error.kind == ErrorKind.TIMEOUT


@dataclass(frozen=True)
class MutationTestResult:
    """Result of running every mutation of one seed value.

    The summary is derived from ``mutations`` when the result is built.

    Attributes:
        original_value: The seed value that was mutated.
        mutations: Per-mutation results, in the order they were produced.
        type_name: Name of the type descriptor used, if any.
        operator_name: Name of the operator that produced the mutations, or
            None when the value was left unchanged.
        setup_error: Failure raised before any mutation could run.
        summary: Counts folded from ``mutations``.
    """

    original_value: Any
    mutations: tuple[MutationResult, ...] = ()
    type_name: str | None = None
    operator_name: str | None = None
    setup_error: ErrorInfo | None = None
    summary: MutationSummary = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, 'mutations', tuple(self.mutations))
        object.__setattr__(self, 'summary', MutationSummary.from_results(self.mutations))

    def uncaught(self) -> list[MutationResult]:
        """Return the mutations the validator accepted."""
        return [r for r in self.mutations if r.is_uncaught]
