r"""Terminal outcomes of a retry run.

Every ``run()`` call produces exactly one of three outcomes:

- Success: the task returned a value
- Failure: the task failed on the last permitted attempt, or the retry
  policy vetoed a further attempt (see FailureReason)
- Interrupted: the caller cancelled a backoff wait

``Outcome`` is the union of the three, so call sites can handle them
exhaustively with ``isinstance`` checks or structural pattern matching.

Example:
    ```pycon
    >>> from aretry.outcome import Failure, FailureReason, Interrupted, Success
    >>> outcome = Success(value=42, attempts_made=2)
    >>> outcome.is_success
    True
    >>> outcome.unwrap()
    42
    >>> Interrupted(attempts_made=1).unwrap()
    Traceback (most recent call last):
        ...
    aretry.exceptions.RetryCancelledError: Retry wait was cancelled after 1 attempt(s)

    ```
"""

from __future__ import annotations

__all__ = ["Failure", "FailureReason", "Interrupted", "Outcome", "Success"]

from dataclasses import dataclass
from enum import Enum
from typing import Generic, NoReturn, TypeVar, Union

from aretry.exceptions import RetryCancelledError, RetryExhaustedError

T = TypeVar("T")


class FailureReason(Enum):
    """Why a run ended with a failure.

    Attributes:
        EXHAUSTED: The last permitted attempt failed.
        VETOED: The retry policy refused a further attempt.
    """

    EXHAUSTED = "exhausted"
    VETOED = "vetoed"


@dataclass(frozen=True)
class Success(Generic[T]):
    """The task returned a value.

    Attributes:
        value: The value returned by the task.
        attempts_made: The number of task invocations (1-indexed).
    """

    value: T
    attempts_made: int

    @property
    def is_success(self) -> bool:
        return True

    def unwrap(self) -> T:
        """Return the value."""
        return self.value


@dataclass(frozen=True)
class Failure:
    """The task failed for good.

    Attributes:
        cause: The exception raised by the last attempt.
        attempts_made: The number of task invocations.
        reason: Whether the budget was exhausted or the policy vetoed.
        message: Human readable diagnostic.
    """

    cause: Exception
    attempts_made: int
    reason: FailureReason
    message: str

    @property
    def is_success(self) -> bool:
        return False

    @property
    def exhausted(self) -> bool:
        """``True`` if every permitted attempt was used."""
        return self.reason is FailureReason.EXHAUSTED

    def to_error(self) -> RetryExhaustedError:
        """Build the exception equivalent of this outcome."""
        return RetryExhaustedError(
            message=self.message,
            cause=self.cause,
            attempts_made=self.attempts_made,
            reason=self.reason,
        )

    def unwrap(self) -> NoReturn:
        """Raise RetryExhaustedError chained to the original cause.

        Raises:
            RetryExhaustedError: Always.
        """
        raise self.to_error() from self.cause


@dataclass(frozen=True)
class Interrupted:
    """A backoff wait was cancelled by the caller.

    Attributes:
        attempts_made: The number of task invocations completed before
            the cancellation.
        last_error: The exception raised by the last attempt, if any.
    """

    attempts_made: int
    last_error: Exception | None = None

    @property
    def is_success(self) -> bool:
        return False

    def to_error(self) -> RetryCancelledError:
        """Build the exception equivalent of this outcome."""
        return RetryCancelledError(
            message=f"Retry wait was cancelled after {self.attempts_made} attempt(s)",
            attempts_made=self.attempts_made,
            last_error=self.last_error,
        )

    def unwrap(self) -> NoReturn:
        """Raise RetryCancelledError.

        Raises:
            RetryCancelledError: Always.
        """
        raise self.to_error() from self.last_error


Outcome = Union[Success[T], Failure, Interrupted]
