r"""Retry policies deciding whether a failed attempt is retried.

This package provides the policy interface and ready-made policies:
always/never retry, retry by exception type, retry by predicate, and
retry of transient network errors.
"""

from __future__ import annotations

__all__ = [
    "RETRYABLE_STATUS_CODES",
    "AlwaysRetryPolicy",
    "BaseRetryPolicy",
    "NeverRetryPolicy",
    "PredicateRetryPolicy",
    "RetryOnExceptionPolicy",
    "TransientErrorPolicy",
]

from aretry.policy.always import AlwaysRetryPolicy, NeverRetryPolicy
from aretry.policy.base import BaseRetryPolicy
from aretry.policy.exception import RetryOnExceptionPolicy
from aretry.policy.predicate import PredicateRetryPolicy
from aretry.policy.transient import RETRYABLE_STATUS_CODES, TransientErrorPolicy
