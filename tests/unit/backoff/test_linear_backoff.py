r"""Unit tests for LinearBackoff strategy."""

from __future__ import annotations

import pytest

from aretry.backoff import LinearBackoff
from aretry.exceptions import ValidationError


def test_linear_backoff_basic() -> None:
    """Test basic linear backoff calculation."""
    backoff = LinearBackoff(increment=1.0)
    assert backoff.next_delay(1.0, 5.0, 0) == 2.0
    assert backoff.next_delay(2.0, 5.0, 1) == 3.0
    assert backoff.next_delay(3.0, 5.0, 2) == 4.0


def test_linear_backoff_default_values() -> None:
    backoff = LinearBackoff()
    assert backoff.increment == 0.1
    assert backoff.max_delay is None
    assert backoff.next_delay(0.1, 5.0, 0) == pytest.approx(0.2)


def test_linear_backoff_zero_increment() -> None:
    """Test a zero increment behaves like a constant backoff."""
    assert LinearBackoff(increment=0.0).next_delay(0.5, 5.0, 3) == 0.5


def test_linear_backoff_max_delay() -> None:
    """Test delays are capped at max_delay."""
    backoff = LinearBackoff(increment=2.0, max_delay=5.0)
    assert backoff.next_delay(2.0, 5.0, 0) == 4.0
    assert backoff.next_delay(4.0, 5.0, 1) == 5.0


def test_linear_backoff_invalid_increment() -> None:
    with pytest.raises(ValidationError, match=r"increment must be >= 0"):
        LinearBackoff(increment=-1.0)


def test_linear_backoff_invalid_max_delay() -> None:
    with pytest.raises(ValidationError, match=r"max_delay must be > 0"):
        LinearBackoff(max_delay=0.0)


def test_linear_backoff_repr() -> None:
    assert repr(LinearBackoff(increment=1.0)) == "LinearBackoff(increment=1.0, max_delay=None)"
