r"""Backoff strategies for retry delays.

This package provides strategies that compute the next delay from the
previous one: geometric (the default), constant, linear, and a jitter
decorator that can wrap any of them.
"""

from __future__ import annotations

__all__ = [
    "BaseBackoffStrategy",
    "ConstantBackoff",
    "GeometricBackoff",
    "JitteredBackoff",
    "LinearBackoff",
]

from aretry.backoff.base import BaseBackoffStrategy
from aretry.backoff.constant import ConstantBackoff
from aretry.backoff.geometric import GeometricBackoff
from aretry.backoff.jitter import JitteredBackoff
from aretry.backoff.linear import LinearBackoff
