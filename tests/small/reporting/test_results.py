"""Tests for mutation result dataclasses."""

from __future__ import annotations

import dataclasses

import pytest

from ethereum_dsl.reporting import (
    ErrorInfo,
    ErrorKind,
    MutationOutcome,
    MutationResult,
    MutationTestResult,
)


class TestErrorInfo:
    """Test ErrorInfo construction."""

    def test_from_exception_records_type_and_message(self):
        error = ErrorInfo.from_exception(ValueError('bad value'))

        assert error.kind == ErrorKind.EXCEPTION
        assert error.message == 'bad value'
        assert error.exception_type == 'ValueError'

    def test_timeout_message_uses_milliseconds(self):
        error = ErrorInfo.timeout(5000)

        assert error.kind == ErrorKind.TIMEOUT
        assert error.message == 'Timeout after 5000ms'
        assert error.exception_type is None

    def test_timeout_message_keeps_fractional_milliseconds(self):
        assert ErrorInfo.timeout(12.5).message == 'Timeout after 12.5ms'


class TestMutationResult:
    """Test MutationResult classification."""

    def test_rejected_value_is_caught(self):
        result = MutationResult(value='x', caught=True)

        assert result.outcome == MutationOutcome.CAUGHT
        assert result.is_uncaught is False

    def test_accepted_value_is_uncaught(self):
        result = MutationResult(value='x', caught=False)

        assert result.outcome == MutationOutcome.UNCAUGHT
        assert result.is_uncaught is True

    def test_exception_is_error_outcome(self):
        result = MutationResult(value='x', caught=True, error=ErrorInfo.from_exception(RuntimeError('boom')))

        assert result.outcome == MutationOutcome.ERROR
        assert result.is_timeout is False

    def test_timeout_is_timeout_outcome(self):
        result = MutationResult(value='x', caught=True, error=ErrorInfo.timeout(10))

        assert result.outcome == MutationOutcome.TIMEOUT
        assert result.is_timeout is True

    def test_is_frozen(self):
        result = MutationResult(value='x', caught=True)

        with pytest.raises(dataclasses.FrozenInstanceError):
            result.caught = False  # type: ignore[misc]


class TestMutationTestResult:
    """Test MutationTestResult aggregation."""

    def test_summary_is_computed_from_mutations(self):
        result = MutationTestResult(
            original_value=1,
            mutations=[
                MutationResult(value=0, caught=True),
                MutationResult(value=2, caught=False),
                MutationResult(value=3, caught=True, error=ErrorInfo.timeout(5)),
            ],
        )

        assert result.summary.total == 3
        assert result.summary.caught == 2
        assert result.summary.uncaught == 1
        assert result.summary.errors == 1
        assert result.summary.timeouts == 1

    def test_mutations_are_stored_as_tuple(self):
        result = MutationTestResult(original_value=1, mutations=[MutationResult(value=0, caught=True)])

        assert isinstance(result.mutations, tuple)

    def test_uncaught_returns_accepted_mutations_in_order(self):
        result = MutationTestResult(
            original_value='a',
            mutations=[
                MutationResult(value='b', caught=False),
                MutationResult(value='c', caught=True),
                MutationResult(value='d', caught=False),
            ],
        )

        assert [r.value for r in result.uncaught()] == ['b', 'd']

    def test_empty_result_has_zero_summary(self):
        result = MutationTestResult(original_value=None)

        assert result.summary.total == 0
        assert result.summary.percentage == 0.0

    def test_summary_cannot_be_passed_in(self):
        with pytest.raises(TypeError):
            MutationTestResult(original_value=1, summary=None)  # type: ignore[call-arg]
