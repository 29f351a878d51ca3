r"""Unit tests for RetryOnExceptionPolicy."""

from __future__ import annotations

import pytest

from aretry.policy import RetryOnExceptionPolicy


def test_retry_on_exception_policy_defaults() -> None:
    """Test the default policy retries every Exception."""
    policy = RetryOnExceptionPolicy()
    assert policy.retry_on == (Exception,)
    assert policy.ignore == ()
    assert policy.can_retry(ValueError(), 0, 3)


@pytest.mark.parametrize(
    ("error", "expected"),
    [
        (ConnectionResetError(), True),
        (FileNotFoundError(), True),
        (PermissionError(), False),
        (ValueError(), False),
        (KeyError("key"), False),
    ],
)
def test_retry_on_exception_policy_types(error: Exception, expected: bool) -> None:
    """Test the ignore list has priority over retry_on."""
    policy = RetryOnExceptionPolicy(retry_on=(OSError,), ignore=(PermissionError,))
    assert policy.can_retry(error, 0, 3) is expected


def test_retry_on_exception_policy_accepts_lists() -> None:
    policy = RetryOnExceptionPolicy(retry_on=[TimeoutError], ignore=[])
    assert policy.retry_on == (TimeoutError,)
    assert policy.can_retry(TimeoutError(), 1, 3)


def test_retry_on_exception_policy_repr() -> None:
    policy = RetryOnExceptionPolicy(retry_on=(OSError,))
    assert repr(policy) == "RetryOnExceptionPolicy(retry_on=(<class 'OSError'>,), ignore=())"
