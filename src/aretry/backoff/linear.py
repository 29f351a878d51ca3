r"""Linear backoff strategy."""

from __future__ import annotations

__all__ = ["LinearBackoff"]

from aretry.backoff.base import BaseBackoffStrategy
from aretry.utils.validation import validate_non_negative, validate_positive


class LinearBackoff(BaseBackoffStrategy):
    """Linear backoff strategy.

    Calculates the next delay as: previous_delay + increment, with an
    optional max_delay cap. The delay factor is ignored.

    This strategy provides evenly spaced growth, which can be useful for
    services that recover quickly or when you want predictable timing.

    Args:
        increment: The number of seconds added after every retry
            (default: 0.1).
        max_delay: Optional maximum delay cap in seconds.

    Example:
        ```pycon
        >>> from aretry.backoff import LinearBackoff
        >>> backoff = LinearBackoff(increment=1.0)
        >>> backoff.next_delay(1.0, 5.0, 0)
        2.0
        >>> backoff.next_delay(2.0, 5.0, 1)
        3.0
        >>> backoff = LinearBackoff(increment=2.0, max_delay=5.0)
        >>> backoff.next_delay(4.0, 5.0, 2)
        5.0

        ```
    """

    def __init__(self, increment: float = 0.1, max_delay: float | None = None) -> None:
        validate_non_negative("increment", increment)
        if max_delay is not None:
            validate_positive("max_delay", max_delay)
        self.increment = increment
        self.max_delay = max_delay

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(increment={self.increment}, "
            f"max_delay={self.max_delay})"
        )

    def next_delay(
        self,
        previous_delay: float,
        delay_factor: float,  # noqa: ARG002
        attempt: int,  # noqa: ARG002
    ) -> float:
        delay = previous_delay + self.increment
        if self.max_delay is not None:
            delay = min(delay, self.max_delay)
        return delay
