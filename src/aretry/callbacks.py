r"""Callback types and data structures for observability.

This module lets users hook into the retry lifecycle for logging,
metrics, and alerting. Five lifecycle hooks are available:

- on_attempt: Called before each attempt
- on_retry: Called before each backoff wait
- on_success: Called when the task succeeds
- on_failure: Called when the run ends with a Failure outcome
- on_interrupt: Called when a backoff wait is cancelled

Attempt numbers in the callback payloads are 1-indexed.

Example:
    ```pycon
    >>> from aretry import RetryExecutor
    >>> from aretry.callbacks import CallbackConfig, RetryInfo
    >>> def log_retry(retry_info: RetryInfo) -> None:
    ...     print(f"Retry {retry_info.attempt}/{retry_info.max_attempts}")
    ...
    >>> executor = RetryExecutor(
    ...     lambda attempt: "ok", callbacks=CallbackConfig(on_retry=log_retry)
    ... )
    >>> executor.call()
    'ok'

    ```
"""

from __future__ import annotations

__all__ = [
    "AttemptInfo",
    "CallbackConfig",
    "CallbackManager",
    "FailureInfo",
    "InterruptInfo",
    "RetryInfo",
    "SuccessInfo",
]

import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.outcome import FailureReason


@dataclass
class AttemptInfo:
    """Information passed to on_attempt callback.

    Attributes:
        task: The name of the task.
        attempt: The current attempt number (1-indexed).
        max_attempts: Maximum number of attempts configured.
    """

    task: str
    attempt: int
    max_attempts: int


@dataclass
class RetryInfo:
    """Information passed to on_retry callback.

    Attributes:
        task: The name of the task.
        attempt: The number of the attempt that will run after the wait
            (1-indexed). The first retry is attempt 2.
        max_attempts: Maximum number of attempts configured.
        wait_time: The backoff delay in seconds before this retry.
        error: The exception that triggered the retry.
    """

    task: str
    attempt: int
    max_attempts: int
    wait_time: float
    error: Exception


@dataclass
class SuccessInfo:
    """Information passed to on_success callback.

    Attributes:
        task: The name of the task.
        attempt: The attempt number that succeeded (1-indexed).
        max_attempts: Maximum number of attempts configured.
        value: The value returned by the task.
        total_time: Total time spent on all attempts including backoff (seconds).
    """

    task: str
    attempt: int
    max_attempts: int
    value: Any
    total_time: float


@dataclass
class FailureInfo:
    """Information passed to on_failure callback.

    Attributes:
        task: The name of the task.
        attempt: The final attempt number (1-indexed).
        max_attempts: Maximum number of attempts configured.
        error: The exception raised by the final attempt.
        reason: Whether the budget was exhausted or the policy vetoed.
        total_time: Total time spent on all attempts including backoff (seconds).
    """

    task: str
    attempt: int
    max_attempts: int
    error: Exception
    reason: FailureReason
    total_time: float


@dataclass
class InterruptInfo:
    """Information passed to on_interrupt callback.

    Attributes:
        task: The name of the task.
        attempt: The number of attempts completed (1-indexed).
        max_attempts: Maximum number of attempts configured.
        error: The exception raised by the last attempt, if any.
        total_time: Total time spent before the cancellation (seconds).
    """

    task: str
    attempt: int
    max_attempts: int
    error: Exception | None
    total_time: float


@dataclass
class CallbackConfig:
    """Configuration for callbacks.

    Attributes:
        on_attempt: Optional callback invoked before each attempt.
        on_retry: Optional callback invoked before each backoff wait.
        on_success: Optional callback invoked when the task succeeds.
        on_failure: Optional callback invoked when the run fails.
        on_interrupt: Optional callback invoked when a wait is cancelled.
    """

    on_attempt: Callable[[AttemptInfo], None] | None = None
    on_retry: Callable[[RetryInfo], None] | None = None
    on_success: Callable[[SuccessInfo], None] | None = None
    on_failure: Callable[[FailureInfo], None] | None = None
    on_interrupt: Callable[[InterruptInfo], None] | None = None


class CallbackManager:
    """Manages callback invocations during the retry lifecycle.

    Every method takes the 0-indexed attempt used by the executors and
    converts it to the 1-indexed number exposed to callbacks. Errors
    raised by a callback propagate to the caller of ``run()``.

    Attributes:
        callbacks: Configuration containing callback functions for lifecycle events.
    """

    def __init__(self, callbacks: CallbackConfig | None = None) -> None:
        self.callbacks = callbacks if callbacks is not None else CallbackConfig()

    def on_attempt(self, task: str, attempt: int, max_attempts: int) -> None:
        if self.callbacks.on_attempt is not None:
            self.callbacks.on_attempt(
                AttemptInfo(task=task, attempt=attempt + 1, max_attempts=max_attempts)
            )

    def on_retry(
        self,
        task: str,
        attempt: int,
        max_attempts: int,
        wait_time: float,
        error: Exception,
    ) -> None:
        """Invoke on_retry callback.

        Args:
            task: The name of the task.
            attempt: The attempt that just failed (0-indexed). The
                callback receives the next attempt number, attempt + 2.
            max_attempts: Maximum number of attempts.
            wait_time: Backoff delay before the retry.
            error: Exception that triggered the retry.
        """
        if self.callbacks.on_retry is not None:
            self.callbacks.on_retry(
                RetryInfo(
                    task=task,
                    attempt=attempt + 2,
                    max_attempts=max_attempts,
                    wait_time=wait_time,
                    error=error,
                )
            )

    def on_success(
        self,
        task: str,
        attempt: int,
        max_attempts: int,
        value: Any,
        start_time: float,
    ) -> None:
        if self.callbacks.on_success is not None:
            self.callbacks.on_success(
                SuccessInfo(
                    task=task,
                    attempt=attempt + 1,
                    max_attempts=max_attempts,
                    value=value,
                    total_time=time.monotonic() - start_time,
                )
            )

    def on_failure(
        self,
        task: str,
        attempt: int,
        max_attempts: int,
        error: Exception,
        reason: FailureReason,
        start_time: float,
    ) -> None:
        if self.callbacks.on_failure is not None:
            self.callbacks.on_failure(
                FailureInfo(
                    task=task,
                    attempt=attempt + 1,
                    max_attempts=max_attempts,
                    error=error,
                    reason=reason,
                    total_time=time.monotonic() - start_time,
                )
            )

    def on_interrupt(
        self,
        task: str,
        attempt: int,
        max_attempts: int,
        error: Exception | None,
        start_time: float,
    ) -> None:
        if self.callbacks.on_interrupt is not None:
            self.callbacks.on_interrupt(
                InterruptInfo(
                    task=task,
                    attempt=attempt + 1,
                    max_attempts=max_attempts,
                    error=error,
                    total_time=time.monotonic() - start_time,
                )
            )
