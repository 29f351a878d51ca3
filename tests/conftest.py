from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import Mock, patch

import pytest

from aretry.waiter import BaseAsyncWaiter, BaseWaiter

if TYPE_CHECKING:
    from collections.abc import Generator


class RecordingWaiter(BaseWaiter):
    """Waiter that records the requested delays instead of sleeping.

    Args:
        cancel_at: Optional 0-indexed wait number that reports a
            cancelled wait.
    """

    def __init__(self, cancel_at: int | None = None) -> None:
        self.delays: list[float] = []
        self.cancel_at = cancel_at
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        self._cancelled = True

    def wait(self, delay: float) -> bool:
        self.delays.append(delay)
        if self.cancel_at is not None and len(self.delays) - 1 == self.cancel_at:
            self._cancelled = True
            return False
        return True


class AsyncRecordingWaiter(BaseAsyncWaiter):
    """Async counterpart of RecordingWaiter."""

    def __init__(self, cancel_at: int | None = None) -> None:
        self.delays: list[float] = []
        self.cancel_at = cancel_at
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    async def wait(self, delay: float) -> bool:
        self.delays.append(delay)
        if self.cancel_at is not None and len(self.delays) - 1 == self.cancel_at:
            self._cancelled = True
            return False
        return True


@pytest.fixture
def waiter() -> RecordingWaiter:
    """Create a waiter recording the backoff delays."""
    return RecordingWaiter()


@pytest.fixture
def async_waiter() -> AsyncRecordingWaiter:
    """Create an async waiter recording the backoff delays."""
    return AsyncRecordingWaiter()


@pytest.fixture
def mock_sleep() -> Generator[Mock, None, None]:
    """Patch time.sleep to make tests run faster."""
    with patch("time.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def mock_asleep() -> Generator[Mock, None, None]:
    """Patch asyncio.sleep to make tests run faster."""
    with patch("asyncio.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def mock_callback() -> Mock:
    """Create a mock callback function for testing callbacks."""
    return Mock()


@pytest.fixture
def waiter_factory() -> type[RecordingWaiter]:
    """Return the recording waiter class, for tests needing cancel_at."""
    return RecordingWaiter


@pytest.fixture
def async_waiter_factory() -> type[AsyncRecordingWaiter]:
    """Return the async recording waiter class."""
    return AsyncRecordingWaiter
