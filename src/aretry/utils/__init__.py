r"""Utility functions for retry configuration and logging.

This package contains parameter validation helpers and structured
logging support used by the retry executors.
"""

from __future__ import annotations

__all__ = [
    "StructuredFormatter",
    "clear_correlation_id",
    "get_correlation_id",
    "log_structured",
    "set_correlation_id",
    "validate_non_negative",
    "validate_positive",
    "validate_retry_params",
]

from aretry.utils.structured_logging import (
    StructuredFormatter,
    clear_correlation_id,
    get_correlation_id,
    log_structured,
    set_correlation_id,
)
from aretry.utils.validation import (
    validate_non_negative,
    validate_positive,
    validate_retry_params,
)
