r"""Retry policy based on the type of the raised exception."""

from __future__ import annotations

__all__ = ["RetryOnExceptionPolicy"]

from aretry.policy.base import BaseRetryPolicy


class RetryOnExceptionPolicy(BaseRetryPolicy):
    """Retry only failures raised with selected exception types.

    Args:
        retry_on: Exception types that are worth retrying
            (default: ``(Exception,)``).
        ignore: Exception types that are never retried, even if they
            are also subclasses of a ``retry_on`` type.

    Example:
        ```pycon
        >>> from aretry.policy import RetryOnExceptionPolicy
        >>> policy = RetryOnExceptionPolicy(retry_on=(OSError,), ignore=(PermissionError,))
        >>> policy.can_retry(ConnectionResetError(), 0, 3)
        True
        >>> policy.can_retry(PermissionError(), 0, 3)
        False
        >>> policy.can_retry(ValueError(), 0, 3)
        False

        ```
    """

    def __init__(
        self,
        retry_on: tuple[type[BaseException], ...] = (Exception,),
        ignore: tuple[type[BaseException], ...] = (),
    ) -> None:
        self.retry_on = tuple(retry_on)
        self.ignore = tuple(ignore)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(retry_on={self.retry_on}, "
            f"ignore={self.ignore})"
        )

    def can_retry(
        self,
        error: Exception,
        attempt: int,  # noqa: ARG002
        max_attempts: int,  # noqa: ARG002
    ) -> bool:
        if self.ignore and isinstance(error, self.ignore):
            return False
        return isinstance(error, self.retry_on)
