r"""Cancellable waits between retry attempts.

The backoff wait is the only point where a retry executor suspends. This
module abstracts that wait so it can be cancelled by the caller and
replaced by a recording fake in tests.

Synchronous executors use a ``BaseWaiter``. The default, EventWaiter,
waits on a CancellationToken which another thread can cancel; the wait
then returns immediately instead of running out its full duration.

Example:
    ```pycon
    >>> from aretry.waiter import CancellationToken, EventWaiter
    >>> token = CancellationToken()
    >>> waiter = EventWaiter(token)
    >>> waiter.wait(0.01)  # Completed normally
    True
    >>> token.cancel()
    >>> waiter.wait(60.0)  # Returns at once
    False

    ```
"""

from __future__ import annotations

__all__ = [
    "AsyncEventWaiter",
    "AsyncSleepWaiter",
    "BaseAsyncWaiter",
    "BaseWaiter",
    "CancellationToken",
    "EventWaiter",
    "SleepWaiter",
]

import asyncio
import contextlib
import logging
import threading
import time
from abc import ABC, abstractmethod

logger: logging.Logger = logging.getLogger(__name__)


class CancellationToken:
    """Thread-safe cancellation flag.

    A thin wrapper over ``threading.Event``: any thread may call
    ``cancel()`` to wake up and cancel every wait performed with this
    token.
    """

    def __init__(self) -> None:
        self._event = threading.Event()

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(cancelled={self.is_cancelled})"

    @property
    def is_cancelled(self) -> bool:
        """``True`` once ``cancel()`` was called and until ``reset()``."""
        return self._event.is_set()

    def cancel(self) -> None:
        """Request cancellation."""
        self._event.set()

    def reset(self) -> None:
        """Clear a previous cancellation request."""
        self._event.clear()

    def wait(self, timeout: float | None = None) -> bool:
        """Block until cancelled or until ``timeout`` seconds elapsed.

        Args:
            timeout: Maximum number of seconds to block.

        Returns:
            ``True`` if the token was cancelled, ``False`` on timeout.
        """
        return self._event.wait(timeout)


class BaseWaiter(ABC):
    """Abstract base class for synchronous waiters."""

    @property
    def cancelled(self) -> bool:
        """Whether the caller requested cancellation."""
        return False

    @abstractmethod
    def wait(self, delay: float) -> bool:
        """Wait ``delay`` seconds.

        Args:
            delay: The number of seconds to wait.

        Returns:
            ``True`` if the full delay elapsed, ``False`` if the wait
            was cancelled.
        """


class EventWaiter(BaseWaiter):
    """Waiter that can be cancelled through a CancellationToken.

    Args:
        token: The cancellation token to wait on. A private token is
            created if none is given.
    """

    def __init__(self, token: CancellationToken | None = None) -> None:
        self.token = token if token is not None else CancellationToken()

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(token={self.token!r})"

    @property
    def cancelled(self) -> bool:
        return self.token.is_cancelled

    def wait(self, delay: float) -> bool:
        return not self.token.wait(delay)


class SleepWaiter(BaseWaiter):
    """Waiter based on ``time.sleep``.

    The only way to cancel this wait is ``KeyboardInterrupt`` (Ctrl+C in
    the main thread), which is reported as a cancelled wait.
    """

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}()"

    def wait(self, delay: float) -> bool:
        try:
            time.sleep(delay)
        except KeyboardInterrupt:
            logger.debug("Backoff wait interrupted by KeyboardInterrupt")
            return False
        return True


class BaseAsyncWaiter(ABC):
    """Abstract base class for asynchronous waiters."""

    @property
    def cancelled(self) -> bool:
        """Whether the caller requested cancellation."""
        return False

    @abstractmethod
    async def wait(self, delay: float) -> bool:
        """Wait ``delay`` seconds without blocking the event loop.

        Args:
            delay: The number of seconds to wait.

        Returns:
            ``True`` if the full delay elapsed, ``False`` if the wait
            was cancelled.

        Raises:
            asyncio.CancelledError: If the enclosing task is cancelled.
        """


class AsyncEventWaiter(BaseAsyncWaiter):
    """Asynchronous waiter that can be cancelled through an asyncio.Event.

    Cancelling the enclosing asyncio task also ends the wait; the
    executor maps that ``asyncio.CancelledError`` to an interrupted
    outcome.

    Args:
        event: The event signalling cancellation. A private event is
            created if none is given.
    """

    def __init__(self, event: asyncio.Event | None = None) -> None:
        self.event = event if event is not None else asyncio.Event()

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(cancelled={self.cancelled})"

    @property
    def cancelled(self) -> bool:
        return self.event.is_set()

    def cancel(self) -> None:
        """Request cancellation."""
        self.event.set()

    async def wait(self, delay: float) -> bool:
        if self.event.is_set():
            return False
        with contextlib.suppress(asyncio.TimeoutError):
            await asyncio.wait_for(self.event.wait(), timeout=delay)
        return not self.event.is_set()


class AsyncSleepWaiter(BaseAsyncWaiter):
    """Asynchronous waiter based on ``asyncio.sleep``.

    This is the default waiter of AsyncRetryExecutor. It is only
    cancelled by cancelling the enclosing asyncio task.
    """

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}()"

    async def wait(self, delay: float) -> bool:
        await asyncio.sleep(delay)
        return True
