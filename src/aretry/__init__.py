r"""aretry - Retryable task execution with pluggable policies and backoff.

This package runs an arbitrary fallible operation and, on failure,
automatically re-attempts it up to a configured number of times with a
growing delay between attempts. A run ends when the task succeeds, the
attempt budget is exhausted, the retry policy vetoes a retry, or the
caller cancels a backoff wait.

Key Features:
    - Immutable, validated configuration (max attempts, initial delay, delay factor)
    - Pluggable retry policies: always, never, by exception type, by predicate,
      and transient network errors (stdlib and httpx)
    - Pluggable backoff strategies: geometric (default), constant, linear, jittered
    - Cancellable waits through a thread-safe CancellationToken
    - Terminal outcomes as a closed union: Success, Failure, Interrupted
    - Exception-based API: RetryExhaustedError and RetryCancelledError
    - Sync and asyncio executors, plus a ``retryable`` decorator
    - Callback/Event system and structured logging for observability

Example:
    ```pycon
    >>> from aretry import CancellationToken, EventWaiter, RetryConfig, RetryExecutor
    >>> from aretry.policy import TransientErrorPolicy
    >>> token = CancellationToken()
    >>> executor = RetryExecutor(
    ...     lambda attempt: f"attempt {attempt}",
    ...     config=RetryConfig(max_attempts=3),
    ...     policy=TransientErrorPolicy(),
    ...     waiter=EventWaiter(token),
    ... )
    >>> executor.run()
    Success(value='attempt 0', attempts_made=1)

    ```
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_DELAY_FACTOR",
    "DEFAULT_INITIAL_DELAY",
    "DEFAULT_MAX_ATTEMPTS",
    "AsyncRetryExecutor",
    "CallbackConfig",
    "CancellationToken",
    "EventWaiter",
    "Failure",
    "FailureReason",
    "Interrupted",
    "Outcome",
    "RetryCancelledError",
    "RetryConfig",
    "RetryError",
    "RetryExecutor",
    "RetryExhaustedError",
    "Success",
    "TaskFailureError",
    "ValidationError",
    "__version__",
    "retry_call",
    "retryable",
]

from importlib.metadata import PackageNotFoundError, version

from aretry.callbacks import CallbackConfig
from aretry.config import (
    DEFAULT_DELAY_FACTOR,
    DEFAULT_INITIAL_DELAY,
    DEFAULT_MAX_ATTEMPTS,
    RetryConfig,
)
from aretry.decorators import retry_call, retryable
from aretry.exceptions import (
    RetryCancelledError,
    RetryError,
    RetryExhaustedError,
    TaskFailureError,
    ValidationError,
)
from aretry.executor import RetryExecutor
from aretry.executor_async import AsyncRetryExecutor
from aretry.outcome import Failure, FailureReason, Interrupted, Outcome, Success
from aretry.waiter import CancellationToken, EventWaiter

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
