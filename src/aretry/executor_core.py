r"""Shared core logic for retry executors.

This module provides helper functions used by both the synchronous and
the asynchronous retry executors: task naming, failure classification,
and the log records emitted at every state transition.
"""

from __future__ import annotations

__all__ = [
    "classify_failure",
    "log_attempt_failed",
    "log_backoff",
    "log_failure",
    "log_interrupted",
    "task_name",
]

import functools
import logging
from typing import TYPE_CHECKING, Any

from aretry.exceptions import TaskFailureError
from aretry.outcome import Failure, FailureReason
from aretry.utils.structured_logging import log_structured

if TYPE_CHECKING:
    from aretry.policy.base import BaseRetryPolicy

logger: logging.Logger = logging.getLogger(__name__)


def task_name(task: Any) -> str:
    """Return a readable name for a task, used in messages and logs.

    Args:
        task: The task callable.

    Returns:
        The qualified name of the task, or of the wrapped function for
        ``functools.partial`` objects, or the type name as fallback.

    Example:
        ```pycon
        >>> from aretry.executor_core import task_name
        >>> def fetch(attempt):
        ...     return attempt
        ...
        >>> task_name(fetch)
        'fetch'

        ```
    """
    if isinstance(task, functools.partial):
        return task_name(task.func)
    name = getattr(task, "__qualname__", None) or getattr(task, "__name__", None)
    if name is None:
        return type(task).__qualname__
    return name


def classify_failure(
    policy: BaseRetryPolicy,
    name: str,
    error: Exception,
    attempt: int,
    max_attempts: int,
) -> Failure | None:
    """Decide whether a failed attempt ends the run.

    The last permitted attempt is checked first, with a strict equality
    on the attempt index; the policy is only consulted when at least one
    more attempt is permitted.

    Args:
        policy: The retry policy.
        name: The name of the task.
        error: The exception raised by the attempt.
        attempt: The attempt index (0-indexed) that failed.
        max_attempts: The total number of permitted attempts.

    Returns:
        A Failure outcome if the run is over, ``None`` if the task
        should be retried.
    """
    if attempt == max_attempts - 1:
        return Failure(
            cause=error,
            attempts_made=attempt + 1,
            reason=FailureReason.EXHAUSTED,
            message=f"Failed to execute task [{name}] after {max_attempts} attempts.",
        )
    if not policy.can_retry(error, attempt, max_attempts):
        return Failure(
            cause=error,
            attempts_made=attempt + 1,
            reason=FailureReason.VETOED,
            message=(
                f"An exception occurred while trying to execute task [{name}] "
                f"and the retry policy rejected a retry after {attempt + 1} attempt(s)."
            ),
        )
    return None


def log_attempt_failed(name: str, error: Exception, attempt: int, max_attempts: int) -> None:
    if not logger.isEnabledFor(logging.DEBUG):
        return
    failure = TaskFailureError(error, attempt)
    log_structured(
        logger,
        logging.DEBUG,
        f"Task [{name}] {failure} ({attempt + 1}/{max_attempts})",
        task=name,
        attempt=attempt + 1,
        max_attempts=max_attempts,
        error=error,
    )


def log_backoff(name: str, delay: float, attempt: int, max_attempts: int) -> None:
    log_structured(
        logger,
        logging.DEBUG,
        f"Waiting {delay:.3f}s before retrying task [{name}]",
        task=name,
        attempt=attempt + 1,
        max_attempts=max_attempts,
        delay=delay,
    )


def log_failure(failure: Failure, name: str, max_attempts: int) -> None:
    log_structured(
        logger,
        logging.WARNING,
        failure.message,
        task=name,
        attempt=failure.attempts_made,
        max_attempts=max_attempts,
        reason=failure.reason,
        error=failure.cause,
    )


def log_interrupted(name: str, attempts_made: int, max_attempts: int) -> None:
    log_structured(
        logger,
        logging.INFO,
        f"Retry wait of task [{name}] was cancelled after {attempts_made} attempt(s)",
        task=name,
        attempt=attempts_made,
        max_attempts=max_attempts,
    )
