r"""Retry policies with a fixed answer."""

from __future__ import annotations

__all__ = ["AlwaysRetryPolicy", "NeverRetryPolicy"]

from aretry.policy.base import BaseRetryPolicy


class AlwaysRetryPolicy(BaseRetryPolicy):
    """Retry every failure until the attempt budget is exhausted.

    This is the default policy.

    Example:
        ```pycon
        >>> from aretry.policy import AlwaysRetryPolicy
        >>> AlwaysRetryPolicy().can_retry(PermissionError("denied"), 0, 3)
        True

        ```
    """

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}()"

    def can_retry(
        self,
        error: Exception,  # noqa: ARG002
        attempt: int,  # noqa: ARG002
        max_attempts: int,  # noqa: ARG002
    ) -> bool:
        return True


class NeverRetryPolicy(BaseRetryPolicy):
    """Veto every retry: the first failure is terminal."""

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}()"

    def can_retry(
        self,
        error: Exception,  # noqa: ARG002
        attempt: int,  # noqa: ARG002
        max_attempts: int,  # noqa: ARG002
    ) -> bool:
        return False
