r"""Abstract base class for retry policies."""

from __future__ import annotations

__all__ = ["BaseRetryPolicy"]

from abc import ABC, abstractmethod


class BaseRetryPolicy(ABC):
    """Abstract base class for retry policies.

    A retry policy decides, after a failed attempt, whether another
    attempt is warranted. It is only consulted when the failed attempt
    was not the last permitted one: failing the last attempt is always
    terminal.
    """

    @abstractmethod
    def can_retry(self, error: Exception, attempt: int, max_attempts: int) -> bool:
        """Decide whether the task should be attempted again.

        Args:
            error: The exception raised by the failed attempt.
            attempt: The attempt index (0-indexed) that failed. Always
                < max_attempts - 1.
            max_attempts: The total number of permitted attempts.

        Returns:
            ``True`` to retry, ``False`` to stop with a failure.
        """
