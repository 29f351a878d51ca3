r"""Unit tests for cancellable waiters."""

from __future__ import annotations

import asyncio
import threading
import time
from unittest.mock import Mock, patch

import pytest

from aretry.waiter import (
    AsyncEventWaiter,
    AsyncSleepWaiter,
    BaseWaiter,
    CancellationToken,
    EventWaiter,
    SleepWaiter,
)

############################################
#     Tests for CancellationToken          #
############################################


def test_cancellation_token_lifecycle() -> None:
    token = CancellationToken()
    assert not token.is_cancelled
    token.cancel()
    assert token.is_cancelled
    token.reset()
    assert not token.is_cancelled


def test_cancellation_token_wait_timeout() -> None:
    assert CancellationToken().wait(0.01) is False


def test_cancellation_token_wait_cancelled() -> None:
    token = CancellationToken()
    token.cancel()
    assert token.wait(60.0) is True


def test_cancellation_token_cancel_from_other_thread() -> None:
    """Test another thread can wake up a blocked wait."""
    token = CancellationToken()
    timer = threading.Timer(0.05, token.cancel)
    timer.start()
    start = time.monotonic()
    try:
        assert token.wait(30.0) is True
    finally:
        timer.cancel()
    assert time.monotonic() - start < 10.0


def test_cancellation_token_repr() -> None:
    assert repr(CancellationToken()) == "CancellationToken(cancelled=False)"


############################################
#     Tests for EventWaiter                #
############################################


def test_event_waiter_default_token() -> None:
    waiter = EventWaiter()
    assert isinstance(waiter, BaseWaiter)
    assert isinstance(waiter.token, CancellationToken)
    assert not waiter.cancelled


def test_event_waiter_wait_completes() -> None:
    assert EventWaiter().wait(0.01) is True


def test_event_waiter_shared_token() -> None:
    token = CancellationToken()
    first, second = EventWaiter(token), EventWaiter(token)
    token.cancel()
    assert first.cancelled
    assert second.cancelled
    assert first.wait(60.0) is False


def test_event_waiter_forwards_delay() -> None:
    token = Mock(spec=CancellationToken)
    token.wait.return_value = False
    assert EventWaiter(token).wait(1.5) is True
    token.wait.assert_called_once_with(1.5)


############################################
#     Tests for SleepWaiter                #
############################################


def test_sleep_waiter(mock_sleep: Mock) -> None:
    waiter = SleepWaiter()
    assert waiter.wait(2.5) is True
    assert not waiter.cancelled
    mock_sleep.assert_called_once_with(2.5)


def test_sleep_waiter_keyboard_interrupt() -> None:
    """Test Ctrl+C during the wait is reported as a cancelled wait."""
    with patch("time.sleep", side_effect=KeyboardInterrupt):
        assert SleepWaiter().wait(2.5) is False


def test_sleep_waiter_repr() -> None:
    assert repr(SleepWaiter()) == "SleepWaiter()"


############################################
#     Tests for async waiters              #
############################################


@pytest.mark.asyncio
async def test_async_sleep_waiter(mock_asleep: Mock) -> None:
    assert await AsyncSleepWaiter().wait(3.0) is True
    mock_asleep.assert_called_once_with(3.0)


@pytest.mark.asyncio
async def test_async_event_waiter_wait_completes() -> None:
    waiter = AsyncEventWaiter()
    assert await waiter.wait(0.01) is True
    assert not waiter.cancelled


@pytest.mark.asyncio
async def test_async_event_waiter_already_cancelled() -> None:
    waiter = AsyncEventWaiter()
    waiter.cancel()
    assert waiter.cancelled
    assert await waiter.wait(60.0) is False


@pytest.mark.asyncio
async def test_async_event_waiter_cancel_during_wait() -> None:
    event = asyncio.Event()
    waiter = AsyncEventWaiter(event)
    asyncio.get_running_loop().call_later(0.05, event.set)
    assert await asyncio.wait_for(waiter.wait(30.0), timeout=10.0) is False
