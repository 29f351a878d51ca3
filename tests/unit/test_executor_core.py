r"""Unit tests for the logic shared by the retry executors."""

from __future__ import annotations

import functools
import logging
from unittest.mock import Mock, patch

import pytest

from aretry.executor_core import (
    classify_failure,
    log_attempt_failed,
    log_backoff,
    log_failure,
    log_interrupted,
    task_name,
)
from aretry.outcome import Failure, FailureReason
from aretry.policy import AlwaysRetryPolicy, NeverRetryPolicy


def fetch(attempt: int) -> int:
    return attempt


class Job:
    def run(self, attempt: int) -> int:
        return attempt

    def __call__(self, attempt: int) -> int:
        return attempt


############################################
#     Tests for task_name                  #
############################################


def test_task_name_function() -> None:
    assert task_name(fetch) == "fetch"


def test_task_name_method() -> None:
    assert task_name(Job().run) == "Job.run"


def test_task_name_partial() -> None:
    assert task_name(functools.partial(fetch)) == "fetch"


def test_task_name_callable_instance() -> None:
    assert task_name(Job()) == "Job"


def test_task_name_lambda() -> None:
    assert task_name(lambda attempt: attempt) == "test_task_name_lambda.<locals>.<lambda>"


############################################
#     Tests for classify_failure           #
############################################


def test_classify_failure_retry() -> None:
    assert classify_failure(AlwaysRetryPolicy(), "fetch", OSError(), 0, 3) is None


def test_classify_failure_exhausted() -> None:
    """Test the last attempt is terminal and the policy is not
    consulted."""
    policy = Mock()
    error = OSError("boom")

    failure = classify_failure(policy, "fetch", error, 2, 3)

    assert failure == Failure(
        cause=error,
        attempts_made=3,
        reason=FailureReason.EXHAUSTED,
        message="Failed to execute task [fetch] after 3 attempts.",
    )
    policy.can_retry.assert_not_called()


def test_classify_failure_vetoed() -> None:
    error = PermissionError("denied")
    failure = classify_failure(NeverRetryPolicy(), "fetch", error, 0, 3)
    assert failure == Failure(
        cause=error,
        attempts_made=1,
        reason=FailureReason.VETOED,
        message=(
            "An exception occurred while trying to execute task [fetch] "
            "and the retry policy rejected a retry after 1 attempt(s)."
        ),
    )


def test_classify_failure_single_attempt_is_exhausted() -> None:
    failure = classify_failure(NeverRetryPolicy(), "fetch", OSError(), 0, 1)
    assert failure is not None
    assert failure.reason is FailureReason.EXHAUSTED


############################################
#     Tests for log helpers                #
############################################


def test_log_attempt_failed(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="aretry.executor_core"):
        log_attempt_failed("fetch", OSError("boom"), 0, 3)
    record = caplog.records[0]
    assert record.levelno == logging.DEBUG
    assert record.getMessage() == "Task [fetch] attempt 1 failed: OSError('boom') (1/3)"
    assert record.attempt == 1


def test_log_attempt_failed_disabled(caplog: pytest.LogCaptureFixture) -> None:
    """Test nothing is built when DEBUG is disabled."""
    with (
        caplog.at_level(logging.INFO, logger="aretry.executor_core"),
        patch("aretry.executor_core.TaskFailureError") as failure_cls,
    ):
        log_attempt_failed("fetch", OSError("boom"), 0, 3)
    failure_cls.assert_not_called()
    assert caplog.records == []


def test_log_backoff(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="aretry.executor_core"):
        log_backoff("fetch", 0.5, 1, 3)
    assert caplog.records[0].getMessage() == "Waiting 0.500s before retrying task [fetch]"
    assert caplog.records[0].delay == 0.5


def test_log_failure(caplog: pytest.LogCaptureFixture) -> None:
    failure = Failure(
        cause=OSError(), attempts_made=3, reason=FailureReason.EXHAUSTED, message="gave up"
    )
    with caplog.at_level(logging.WARNING, logger="aretry.executor_core"):
        log_failure(failure, "fetch", 3)
    record = caplog.records[0]
    assert record.levelno == logging.WARNING
    assert record.getMessage() == "gave up"
    assert record.reason is FailureReason.EXHAUSTED


def test_log_interrupted(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="aretry.executor_core"):
        log_interrupted("fetch", 2, 5)
    assert caplog.records[0].getMessage() == (
        "Retry wait of task [fetch] was cancelled after 2 attempt(s)"
    )
