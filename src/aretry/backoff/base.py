r"""Abstract base class for backoff strategies."""

from __future__ import annotations

__all__ = ["BaseBackoffStrategy"]

from abc import ABC, abstractmethod


class BaseBackoffStrategy(ABC):
    """Abstract base class for backoff strategies.

    A backoff strategy determines how long to wait before the next
    retry, given the delay that was used before the previous one.
    Implementations must be pure: no side effects and no access to the
    task state.
    """

    @abstractmethod
    def next_delay(self, previous_delay: float, delay_factor: float, attempt: int) -> float:
        """Calculate the delay that follows ``previous_delay``.

        Args:
            previous_delay: The last delay in seconds the executor waited for.
            delay_factor: The delay factor of the retry configuration.
                Strategies that don't need it can ignore it.
            attempt: The attempt index (0-indexed) that just failed.

        Returns:
            The next delay in seconds.
        """
