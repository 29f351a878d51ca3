r"""Unit tests for exception classes."""

from __future__ import annotations

import pytest

from aretry.exceptions import (
    RetryCancelledError,
    RetryError,
    RetryExhaustedError,
    TaskFailureError,
    ValidationError,
)
from aretry.outcome import FailureReason


def test_validation_error() -> None:
    """Test ValidationError attributes and hierarchy."""
    error = ValidationError("delay_factor", "delay_factor must be > 0, got 0")
    assert error.parameter == "delay_factor"
    assert str(error) == "delay_factor must be > 0, got 0"
    assert isinstance(error, ValueError)
    assert isinstance(error, RetryError)


def test_task_failure_error() -> None:
    """Test TaskFailureError keeps the cause and the attempt index."""
    cause = OSError("disk full")
    error = TaskFailureError(cause, attempt=2)
    assert error.cause is cause
    assert error.attempt == 2
    assert str(error) == "attempt 3 failed: OSError('disk full')"


def test_retry_exhausted_error() -> None:
    """Test RetryExhaustedError attributes."""
    cause = ConnectionError("reset")
    error = RetryExhaustedError(
        message="Failed to execute task [job] after 3 attempts.",
        cause=cause,
        attempts_made=3,
        reason=FailureReason.EXHAUSTED,
    )
    assert error.message == "Failed to execute task [job] after 3 attempts."
    assert error.cause is cause
    assert error.attempts_made == 3
    assert error.reason is FailureReason.EXHAUSTED
    assert isinstance(error, RetryError)


def test_retry_cancelled_error() -> None:
    """Test RetryCancelledError is distinct from
    RetryExhaustedError."""
    error = RetryCancelledError("cancelled", attempts_made=2)
    assert error.attempts_made == 2
    assert error.last_error is None
    assert not isinstance(error, RetryExhaustedError)
    with pytest.raises(RetryError, match=r"cancelled"):
        raise error
