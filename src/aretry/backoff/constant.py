r"""Constant backoff strategy."""

from __future__ import annotations

__all__ = ["ConstantBackoff"]

from aretry.backoff.base import BaseBackoffStrategy


class ConstantBackoff(BaseBackoffStrategy):
    """Constant/fixed backoff strategy.

    Keeps waiting the initial delay between every pair of attempts and
    ignores the delay factor.

    Example:
        ```pycon
        >>> from aretry.backoff import ConstantBackoff
        >>> backoff = ConstantBackoff()
        >>> backoff.next_delay(0.25, 5.0, 0)
        0.25
        >>> backoff.next_delay(0.25, 5.0, 7)
        0.25

        ```
    """

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}()"

    def next_delay(
        self,
        previous_delay: float,
        delay_factor: float,  # noqa: ARG002
        attempt: int,  # noqa: ARG002
    ) -> float:
        return previous_delay
