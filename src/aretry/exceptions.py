r"""Exception classes for retryable task execution.

This module defines the error taxonomy used by the retry executors:

- ValidationError: malformed configuration, raised at construction time
- TaskFailureError: one failed attempt, used internally for reporting
- RetryExhaustedError: terminal failure after exhaustion or a policy veto
- RetryCancelledError: the caller cancelled a backoff wait
"""

from __future__ import annotations

__all__ = [
    "RetryCancelledError",
    "RetryError",
    "RetryExhaustedError",
    "TaskFailureError",
    "ValidationError",
]

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from aretry.outcome import FailureReason


class RetryError(Exception):
    """Base class for all errors raised by aretry."""


class ValidationError(RetryError, ValueError):
    """Exception raised when a retry parameter is invalid.

    Args:
        parameter: The name of the offending parameter.
        message: A descriptive error message.

    Example:
        ```pycon
        >>> from aretry.exceptions import ValidationError
        >>> raise ValidationError("max_attempts", "max_attempts must be >= 1, got 0")
        Traceback (most recent call last):
            ...
        aretry.exceptions.ValidationError: max_attempts must be >= 1, got 0

        ```
    """

    def __init__(self, parameter: str, message: str) -> None:
        super().__init__(message)
        self.parameter = parameter


class TaskFailureError(RetryError):
    """Record of a single failed attempt.

    The executors never raise this error to the caller. It is built for
    every failed attempt and handed to the logger and the callbacks so
    the original cause and the attempt index travel together.

    Args:
        cause: The exception raised by the task.
        attempt: The attempt index (0-indexed) that failed.
    """

    def __init__(self, cause: Exception, attempt: int) -> None:
        super().__init__(f"attempt {attempt + 1} failed: {cause!r}")
        self.cause = cause
        self.attempt = attempt


class RetryExhaustedError(RetryError):
    """Exception raised when a task failed for good.

    This covers both the case where the last permitted attempt failed
    and the case where the retry policy vetoed a further attempt. The
    two are told apart by ``reason`` and by the message.

    Args:
        message: A descriptive error message.
        cause: The exception raised by the last attempt.
        attempts_made: The number of task invocations performed.
        reason: Why the executor stopped retrying.

    Example:
        ```pycon
        >>> from aretry.exceptions import RetryExhaustedError
        >>> from aretry.outcome import FailureReason
        >>> error = RetryExhaustedError(
        ...     message="Failed to execute task [fetch] after 3 attempts.",
        ...     cause=OSError("boom"),
        ...     attempts_made=3,
        ...     reason=FailureReason.EXHAUSTED,
        ... )
        >>> error.attempts_made
        3

        ```
    """

    def __init__(
        self,
        message: str,
        cause: Exception,
        attempts_made: int,
        reason: FailureReason,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.attempts_made = attempts_made
        self.reason = reason


class RetryCancelledError(RetryError):
    """Exception raised when a backoff wait was cancelled by the caller.

    This is deliberately not a RetryExhaustedError: it reflects the
    caller's own cancellation request, not a task failure.

    Args:
        message: A descriptive error message.
        attempts_made: The number of task invocations performed.
        last_error: The exception raised by the last attempt, if any.
    """

    def __init__(
        self,
        message: str,
        attempts_made: int,
        last_error: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.attempts_made = attempts_made
        self.last_error = last_error
