r"""Retry policy wrapping a plain callable."""

from __future__ import annotations

__all__ = ["PredicateRetryPolicy"]

from typing import TYPE_CHECKING

from aretry.policy.base import BaseRetryPolicy

if TYPE_CHECKING:
    from collections.abc import Callable


class PredicateRetryPolicy(BaseRetryPolicy):
    """Adapt a function to the retry policy interface.

    Args:
        predicate: Callable with the signature
            ``predicate(error, attempt, max_attempts) -> bool``.

    Example:
        ```pycon
        >>> from aretry.policy import PredicateRetryPolicy
        >>> policy = PredicateRetryPolicy(lambda error, attempt, max_attempts: attempt < 1)
        >>> policy.can_retry(ValueError(), 0, 5)
        True
        >>> policy.can_retry(ValueError(), 1, 5)
        False

        ```
    """

    def __init__(self, predicate: Callable[[Exception, int, int], bool]) -> None:
        if not callable(predicate):
            msg = f"predicate must be callable, got {type(predicate).__name__}"
            raise TypeError(msg)
        self.predicate = predicate

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(predicate={self.predicate!r})"

    def can_retry(self, error: Exception, attempt: int, max_attempts: int) -> bool:
        return bool(self.predicate(error, attempt, max_attempts))
