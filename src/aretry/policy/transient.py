r"""Retry policy for transient network failures.

Tasks that talk to remote services usually fail in two ways: transient
errors (timeouts, dropped connections, throttling, overloaded servers)
that are worth retrying, and fatal errors (bad credentials, missing
permissions, malformed requests) that will fail again no matter how
long we wait. This policy encodes that split for the standard library
and for httpx.
"""

from __future__ import annotations

__all__ = ["RETRYABLE_STATUS_CODES", "TransientErrorPolicy"]

import logging

import httpx

from aretry.policy.base import BaseRetryPolicy

logger: logging.Logger = logging.getLogger(__name__)

# HTTP status codes that indicate a transient server-side problem
# 408: Request Timeout
# 429: Too Many Requests - Rate limiting
# 500: Internal Server Error - Temporary server issue
# 502: Bad Gateway - Upstream server error
# 503: Service Unavailable - Server overloaded or down
# 504: Gateway Timeout - Upstream server timeout
RETRYABLE_STATUS_CODES = (408, 429, 500, 502, 503, 504)


class TransientErrorPolicy(BaseRetryPolicy):
    """Retry transient network errors and veto everything else.

    The following errors are considered transient:
    - ``TimeoutError`` and ``ConnectionError`` (including resets and
      refused connections)
    - ``httpx.TimeoutException`` and ``httpx.TransportError``
    - ``httpx.HTTPStatusError`` whose status code is in
      ``status_forcelist``

    Any other error, for example ``PermissionError`` or a 404 response,
    is vetoed.

    Args:
        status_forcelist: HTTP status codes worth retrying
            (default: RETRYABLE_STATUS_CODES).

    Example:
        ```pycon
        >>> from aretry.policy import TransientErrorPolicy
        >>> policy = TransientErrorPolicy()
        >>> policy.can_retry(TimeoutError(), 0, 3)
        True
        >>> policy.can_retry(PermissionError(), 0, 3)
        False

        ```
    """

    def __init__(self, status_forcelist: tuple[int, ...] = RETRYABLE_STATUS_CODES) -> None:
        self.status_forcelist = tuple(status_forcelist)

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(status_forcelist={self.status_forcelist})"

    def can_retry(
        self,
        error: Exception,
        attempt: int,  # noqa: ARG002
        max_attempts: int,  # noqa: ARG002
    ) -> bool:
        if isinstance(error, httpx.HTTPStatusError):
            status_code = error.response.status_code
            if status_code in self.status_forcelist:
                return True
            logger.debug(f"Not retrying non-retryable status {status_code}")
            return False
        if isinstance(error, (httpx.TimeoutException, httpx.TransportError)):
            return True
        # PermissionError and friends are OSErrors but not ConnectionErrors
        return isinstance(error, (TimeoutError, ConnectionError))
