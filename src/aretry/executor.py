r"""Synchronous retry executor.

This module provides the RetryExecutor class that runs a fallible task
on the calling thread and retries it with a growing delay until it
succeeds, runs out of attempts, is vetoed by the retry policy, or is
cancelled while waiting.
"""

from __future__ import annotations

__all__ = ["RetryExecutor"]

import time
from typing import TYPE_CHECKING, Generic, TypeVar, final

from aretry.backoff.geometric import GeometricBackoff
from aretry.callbacks import CallbackManager
from aretry.config import RetryConfig
from aretry.executor_core import (
    classify_failure,
    log_attempt_failed,
    log_backoff,
    log_failure,
    log_interrupted,
    task_name,
)
from aretry.outcome import Interrupted, Success
from aretry.policy.always import AlwaysRetryPolicy
from aretry.waiter import EventWaiter

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.backoff.base import BaseBackoffStrategy
    from aretry.callbacks import CallbackConfig
    from aretry.outcome import Outcome
    from aretry.policy.base import BaseRetryPolicy
    from aretry.waiter import BaseWaiter

T = TypeVar("T")


class RetryExecutor(Generic[T]):
    """Executes a task with automatic retry logic.

    The task is a callable receiving the attempt index (0-indexed). Any
    ``Exception`` it raises is a failed attempt. Exceptions that are not
    ``Exception`` subclasses, such as ``KeyboardInterrupt`` or
    ``SystemExit``, are not failures and propagate untouched.

    The executor orchestrates the following components, all of which
    are pluggable:
    - RetryConfig: max attempts, initial delay, and delay factor
    - BaseRetryPolicy: decides whether a failure is worth retrying
    - BaseBackoffStrategy: computes the next delay from the previous one
    - BaseWaiter: performs the cancellable wait between attempts
    - CallbackManager: invokes user-defined callbacks at lifecycle events

    The attempt loop itself is not a customization point. All the state
    of a run is local to ``run()``, so one executor may be run
    repeatedly or from several threads at once without locking.

    Args:
        task: The callable to run, ``task(attempt) -> T``.
        config: Retry configuration. Defaults to RetryConfig().
        policy: Retry policy. Defaults to AlwaysRetryPolicy().
        backoff: Backoff strategy. Defaults to GeometricBackoff().
        waiter: Waiter used between attempts. Defaults to an
            EventWaiter with a private CancellationToken.
        callbacks: Optional lifecycle callbacks.
        name: Name used in messages and logs. Defaults to the name of
            the task callable.

    Example:
        ```pycon
        >>> from aretry import RetryConfig, RetryExecutor
        >>> calls = []
        >>> def flaky(attempt):
        ...     calls.append(attempt)
        ...     if attempt < 2:
        ...         raise ConnectionError("try again")
        ...     return "done"
        ...
        >>> executor = RetryExecutor(flaky, RetryConfig(max_attempts=3, initial_delay=0.001))
        >>> outcome = executor.run()
        >>> outcome
        Success(value='done', attempts_made=3)
        >>> calls
        [0, 1, 2]

        ```
    """

    def __init__(
        self,
        task: Callable[[int], T],
        config: RetryConfig | None = None,
        policy: BaseRetryPolicy | None = None,
        backoff: BaseBackoffStrategy | None = None,
        waiter: BaseWaiter | None = None,
        callbacks: CallbackConfig | None = None,
        name: str | None = None,
    ) -> None:
        if not callable(task):
            msg = f"task must be callable, got {type(task).__name__}"
            raise TypeError(msg)
        self.task = task
        self.config: RetryConfig = config if config is not None else RetryConfig()
        self.policy: BaseRetryPolicy = policy if policy is not None else AlwaysRetryPolicy()
        self.backoff: BaseBackoffStrategy = backoff if backoff is not None else GeometricBackoff()
        self.waiter: BaseWaiter = waiter if waiter is not None else EventWaiter()
        self.callbacks: CallbackManager = CallbackManager(callbacks)
        self.name = name if name is not None else task_name(task)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(task={self.name}, config={self.config}, "
            f"policy={self.policy!r}, backoff={self.backoff!r})"
        )

    @final
    def run(self) -> Outcome[T]:
        """Run the task until it reaches a terminal outcome.

        The loop:
        1. Invokes the task. On success, returns Success immediately.
        2. On failure at the last permitted attempt, returns a Failure
           with reason EXHAUSTED.
        3. Otherwise asks the policy. A veto returns a Failure with
           reason VETOED.
        4. Otherwise waits the current delay, then grows it with the
           backoff strategy and goes back to 1. If the wait is
           cancelled, returns Interrupted.

        With an initial delay of 0.1s and a factor of 5.0 the waits are
        0.1s, 0.5s, 2.5s, ...

        Note:
            Cancellation belongs to the waiter and outlives the run. Once
            the token of an EventWaiter is cancelled, every later run of
            this executor ends with Interrupted after its first failed
            attempt, until ``self.waiter.token.reset()`` is called.

        Returns:
            The terminal outcome: Success, Failure, or Interrupted.
        """
        max_attempts = self.config.max_attempts
        delay = self.config.initial_delay
        start_time = time.monotonic()
        last_error: Exception | None = None

        for attempt in range(max_attempts):
            if attempt > 0 and self.waiter.cancelled:
                return self._interrupt(attempt, last_error, start_time)

            self.callbacks.on_attempt(self.name, attempt, max_attempts)
            try:
                value = self.task(attempt)
            except Exception as exc:  # noqa: BLE001
                error = exc
            else:
                self.callbacks.on_success(self.name, attempt, max_attempts, value, start_time)
                return Success(value=value, attempts_made=attempt + 1)

            last_error = error
            log_attempt_failed(self.name, error, attempt, max_attempts)
            failure = classify_failure(self.policy, self.name, error, attempt, max_attempts)
            if failure is not None:
                log_failure(failure, self.name, max_attempts)
                self.callbacks.on_failure(
                    self.name, attempt, max_attempts, error, failure.reason, start_time
                )
                return failure

            log_backoff(self.name, delay, attempt, max_attempts)
            self.callbacks.on_retry(self.name, attempt, max_attempts, delay, error)
            if not self.waiter.wait(delay):
                return self._interrupt(attempt + 1, last_error, start_time)
            delay = self.backoff.next_delay(delay, self.config.delay_factor, attempt)

        # range() ends with the last attempt, which always returns above
        msg = "retry loop ended without an outcome"
        raise AssertionError(msg)

    def call(self) -> T:
        """Run the task and return its value.

        Returns:
            The value returned by the successful attempt.

        Raises:
            RetryExhaustedError: If the run ended with a Failure. The
                original exception is chained as the cause.
            RetryCancelledError: If a backoff wait was cancelled.
        """
        return self.run().unwrap()

    def _interrupt(
        self, attempts_made: int, last_error: Exception | None, start_time: float
    ) -> Interrupted:
        max_attempts = self.config.max_attempts
        log_interrupted(self.name, attempts_made, max_attempts)
        self.callbacks.on_interrupt(
            self.name, attempts_made - 1, max_attempts, last_error, start_time
        )
        return Interrupted(attempts_made=attempts_made, last_error=last_error)
