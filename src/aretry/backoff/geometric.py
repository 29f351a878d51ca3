r"""Geometric backoff strategy."""

from __future__ import annotations

__all__ = ["GeometricBackoff"]

from aretry.backoff.base import BaseBackoffStrategy
from aretry.utils.validation import validate_positive


class GeometricBackoff(BaseBackoffStrategy):
    """Geometric backoff strategy.

    Calculates the next delay as: previous_delay * delay_factor, with an
    optional max_delay cap. The attempt index is ignored.

    This is the default backoff strategy. With an initial delay of 0.1s
    and a factor of 5.0 the waits are 0.1s, 0.5s, 2.5s, ...

    Args:
        max_delay: Optional maximum delay cap in seconds. If specified,
            delays will not exceed this value.

    Example:
        ```pycon
        >>> from aretry.backoff import GeometricBackoff
        >>> backoff = GeometricBackoff()
        >>> backoff.next_delay(0.1, 5.0, 0)
        0.5
        >>> backoff.next_delay(0.5, 5.0, 1)
        2.5
        >>> # With max_delay cap
        >>> backoff = GeometricBackoff(max_delay=1.0)
        >>> backoff.next_delay(0.5, 5.0, 1)
        1.0

        ```
    """

    def __init__(self, max_delay: float | None = None) -> None:
        if max_delay is not None:
            validate_positive("max_delay", max_delay)
        self.max_delay = max_delay

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(max_delay={self.max_delay})"

    def next_delay(
        self,
        previous_delay: float,
        delay_factor: float,
        attempt: int,  # noqa: ARG002
    ) -> float:
        delay = previous_delay * delay_factor
        if self.max_delay is not None:
            delay = min(delay, self.max_delay)
        return delay
