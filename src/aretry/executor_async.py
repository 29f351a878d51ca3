r"""Asynchronous retry executor.

This module provides the AsyncRetryExecutor class, the asyncio
counterpart of RetryExecutor. The task is a coroutine function and the
backoff waits suspend the calling asyncio task instead of blocking the
thread.
"""

from __future__ import annotations

__all__ = ["AsyncRetryExecutor"]

import asyncio
import logging
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
from aretry.waiter import AsyncSleepWaiter

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from aretry.backoff.base import BaseBackoffStrategy
    from aretry.callbacks import CallbackConfig
    from aretry.outcome import Outcome
    from aretry.policy.base import BaseRetryPolicy
    from aretry.waiter import BaseAsyncWaiter

logger: logging.Logger = logging.getLogger(__name__)

T = TypeVar("T")


class AsyncRetryExecutor(Generic[T]):
    """Executes an async task with automatic retry logic.

    The classification of attempts is the same as for RetryExecutor.
    Cancellation during a backoff wait can come from the waiter (for
    example an AsyncEventWaiter whose event is set) or from cancelling
    the asyncio task running ``run()``: in both cases the run ends with
    an Interrupted outcome instead of a failure. Cancelling the asyncio
    task while the task coroutine itself is running is not a backoff
    cancellation and propagates ``asyncio.CancelledError``.

    Args:
        task: The coroutine function to run, ``await task(attempt)``.
        config: Retry configuration. Defaults to RetryConfig().
        policy: Retry policy. Defaults to AlwaysRetryPolicy().
        backoff: Backoff strategy. Defaults to GeometricBackoff().
        waiter: Async waiter used between attempts. Defaults to
            AsyncSleepWaiter().
        callbacks: Optional lifecycle callbacks.
        name: Name used in messages and logs. Defaults to the name of
            the task callable.

    Example:
        ```pycon
        >>> import asyncio
        >>> from aretry import AsyncRetryExecutor, RetryConfig
        >>> async def flaky(attempt):
        ...     if attempt == 0:
        ...         raise TimeoutError("slow")
        ...     return attempt
        ...
        >>> executor = AsyncRetryExecutor(flaky, RetryConfig(initial_delay=0.001))
        >>> asyncio.run(executor.call())
        1

        ```
    """

    def __init__(
        self,
        task: Callable[[int], Awaitable[T]],
        config: RetryConfig | None = None,
        policy: BaseRetryPolicy | None = None,
        backoff: BaseBackoffStrategy | None = None,
        waiter: BaseAsyncWaiter | None = None,
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
        self.waiter: BaseAsyncWaiter = waiter if waiter is not None else AsyncSleepWaiter()
        self.callbacks: CallbackManager = CallbackManager(callbacks)
        self.name = name if name is not None else task_name(task)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(task={self.name}, config={self.config}, "
            f"policy={self.policy!r}, backoff={self.backoff!r})"
        )

    @final
    async def run(self) -> Outcome[T]:
        """Run the task until it reaches a terminal outcome.

        Note:
            The event of an AsyncEventWaiter stays set after a cancelled
            run, so later runs end with Interrupted after their first
            failed attempt until ``self.waiter.event.clear()`` is called.

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
                value = await self.task(attempt)
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
            try:
                completed = await self.waiter.wait(delay)
            except asyncio.CancelledError:
                logger.debug(f"asyncio task running [{self.name}] was cancelled during backoff")
                completed = False
            if not completed:
                return self._interrupt(attempt + 1, last_error, start_time)
            delay = self.backoff.next_delay(delay, self.config.delay_factor, attempt)

        # range() ends with the last attempt, which always returns above
        msg = "retry loop ended without an outcome"
        raise AssertionError(msg)

    async def call(self) -> T:
        """Run the task and return its value.

        Returns:
            The value returned by the successful attempt.

        Raises:
            RetryExhaustedError: If the run ended with a Failure.
            RetryCancelledError: If a backoff wait was cancelled.
        """
        outcome = await self.run()
        return outcome.unwrap()

    def _interrupt(
        self, attempts_made: int, last_error: Exception | None, start_time: float
    ) -> Interrupted:
        max_attempts = self.config.max_attempts
        log_interrupted(self.name, attempts_made, max_attempts)
        self.callbacks.on_interrupt(
            self.name, attempts_made - 1, max_attempts, last_error, start_time
        )
        return Interrupted(attempts_made=attempts_made, last_error=last_error)
