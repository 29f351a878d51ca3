r"""Unit tests for run outcomes."""

from __future__ import annotations

import pytest

from aretry.exceptions import RetryCancelledError, RetryExhaustedError
from aretry.outcome import Failure, FailureReason, Interrupted, Success


def describe(outcome: Success | Failure | Interrupted) -> str:
    match outcome:
        case Success(value=value):
            return f"success:{value}"
        case Failure(reason=reason):
            return f"failure:{reason.value}"
        case Interrupted(attempts_made=attempts_made):
            return f"interrupted:{attempts_made}"
    return "unreachable"


def test_success() -> None:
    """Test Success exposes the value."""
    outcome = Success(value=[1, 2], attempts_made=1)
    assert outcome.is_success
    assert outcome.unwrap() == [1, 2]


def test_success_none_value() -> None:
    """Test a task returning None still succeeds."""
    assert Success(value=None, attempts_made=2).unwrap() is None


def test_failure_unwrap_raises_chained_error() -> None:
    """Test Failure.unwrap raises RetryExhaustedError from the
    cause."""
    cause = OSError("boom")
    outcome = Failure(
        cause=cause, attempts_made=2, reason=FailureReason.VETOED, message="vetoed"
    )
    assert not outcome.is_success
    assert not outcome.exhausted
    with pytest.raises(RetryExhaustedError, match=r"vetoed") as exc_info:
        outcome.unwrap()
    assert exc_info.value.__cause__ is cause
    assert exc_info.value.reason is FailureReason.VETOED


def test_failure_exhausted() -> None:
    """Test the exhausted shortcut."""
    outcome = Failure(
        cause=OSError(), attempts_made=5, reason=FailureReason.EXHAUSTED, message="done"
    )
    assert outcome.exhausted
    assert outcome.to_error().attempts_made == 5


def test_interrupted_unwrap_raises_cancelled_error() -> None:
    """Test Interrupted.unwrap raises RetryCancelledError."""
    last_error = TimeoutError()
    outcome = Interrupted(attempts_made=3, last_error=last_error)
    assert not outcome.is_success
    with pytest.raises(RetryCancelledError, match=r"after 3 attempt") as exc_info:
        outcome.unwrap()
    assert exc_info.value.last_error is last_error


def test_outcomes_are_frozen() -> None:
    """Test outcomes are immutable."""
    outcome = Success(value=1, attempts_made=1)
    with pytest.raises(AttributeError):
        outcome.value = 2


def test_outcome_pattern_matching() -> None:
    """Test the union can be handled with structural pattern
    matching."""
    assert describe(Success(value=1, attempts_made=1)) == "success:1"
    assert (
        describe(
            Failure(cause=OSError(), attempts_made=1, reason=FailureReason.EXHAUSTED, message="")
        )
        == "failure:exhausted"
    )
    assert describe(Interrupted(attempts_made=4)) == "interrupted:4"
