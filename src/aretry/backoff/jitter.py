r"""Jitter decorator for backoff strategies."""

from __future__ import annotations

__all__ = ["JitteredBackoff"]

import logging
import random

from aretry.backoff.base import BaseBackoffStrategy
from aretry.backoff.geometric import GeometricBackoff
from aretry.utils.validation import validate_non_negative

logger: logging.Logger = logging.getLogger(__name__)


class JitteredBackoff(BaseBackoffStrategy):
    """Add random jitter on top of another backoff strategy.

    The jitter is calculated as: random.uniform(0, jitter_factor) * delay,
    and this jitter is ADDED to the delay returned by the wrapped
    strategy. Jitter spreads out retries of many callers that failed at
    the same time.

    Note:
        The jittered value is fed back as ``previous_delay`` on the next
        call, so jitter compounds with geometric growth.

    Args:
        inner: The wrapped strategy. Defaults to GeometricBackoff().
        jitter_factor: Upper bound of the relative jitter (default: 0.1,
            i.e. up to 10% extra delay). Must be >= 0.
        rng: Optional random number generator, mostly useful to make
            tests deterministic.

    Example:
        ```pycon
        >>> import random
        >>> from aretry.backoff import JitteredBackoff
        >>> backoff = JitteredBackoff(jitter_factor=0.0)
        >>> backoff.next_delay(0.1, 5.0, 0)
        0.5
        >>> backoff = JitteredBackoff(jitter_factor=0.1, rng=random.Random(0))
        >>> 0.5 <= backoff.next_delay(0.1, 5.0, 0) <= 0.55
        True

        ```
    """

    def __init__(
        self,
        inner: BaseBackoffStrategy | None = None,
        jitter_factor: float = 0.1,
        rng: random.Random | None = None,
    ) -> None:
        validate_non_negative("jitter_factor", jitter_factor)
        self.inner: BaseBackoffStrategy = inner if inner is not None else GeometricBackoff()
        self.jitter_factor = jitter_factor
        self._rng = rng if rng is not None else random.Random()  # noqa: S311

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(inner={self.inner!r}, "
            f"jitter_factor={self.jitter_factor})"
        )

    def next_delay(self, previous_delay: float, delay_factor: float, attempt: int) -> float:
        delay = self.inner.next_delay(previous_delay, delay_factor, attempt)
        if self.jitter_factor <= 0:
            return delay
        jitter = self._rng.uniform(0, self.jitter_factor) * delay
        logger.debug(f"Adding {jitter:.3f}s of jitter to a {delay:.3f}s delay")
        return delay + jitter
