r"""Parameter validation utilities for retry configuration.

This module provides validation functions for retry parameters to
ensure they meet the required constraints before any task is run.
"""

from __future__ import annotations

__all__ = ["validate_non_negative", "validate_positive", "validate_retry_params"]

import math

from aretry.exceptions import ValidationError


def _validate_finite(name: str, value: float) -> None:
    if not math.isfinite(value):
        msg = f"{name} must be a finite number, got {value}"
        raise ValidationError(name, msg)


def validate_positive(name: str, value: float) -> None:
    """Validate that a numeric parameter is strictly positive.

    Args:
        name: The parameter name, used in the error message.
        value: The value to check.

    Raises:
        ValidationError: If ``value`` is <= 0 or not finite.

    Example:
        ```pycon
        >>> from aretry.utils.validation import validate_positive
        >>> validate_positive("delay", 0.5)
        >>> validate_positive("delay", 0)
        Traceback (most recent call last):
            ...
        aretry.exceptions.ValidationError: delay must be > 0, got 0

        ```
    """
    _validate_finite(name, value)
    if value <= 0:
        msg = f"{name} must be > 0, got {value}"
        raise ValidationError(name, msg)


def validate_non_negative(name: str, value: float) -> None:
    """Validate that a numeric parameter is >= 0.

    Args:
        name: The parameter name, used in the error message.
        value: The value to check.

    Raises:
        ValidationError: If ``value`` is negative or not finite.
    """
    _validate_finite(name, value)
    if value < 0:
        msg = f"{name} must be >= 0, got {value}"
        raise ValidationError(name, msg)


def validate_retry_params(
    max_attempts: int,
    initial_delay: float,
    delay_factor: float,
) -> None:
    """Validate retry parameters.

    Args:
        max_attempts: Total number of times the task may be invoked.
            Must be >= 1. A value of 1 means no retries.
        initial_delay: Delay in seconds before the first retry.
            Must be > 0.
        delay_factor: Factor applied to the delay after every retry.
            Must be > 0.

    Raises:
        ValidationError: If any parameter is out of range. The error
            names the first offending parameter.

    Example:
        ```pycon
        >>> from aretry.utils.validation import validate_retry_params
        >>> validate_retry_params(max_attempts=3, initial_delay=0.1, delay_factor=5.0)
        >>> validate_retry_params(max_attempts=0, initial_delay=0.1, delay_factor=5.0)
        Traceback (most recent call last):
            ...
        aretry.exceptions.ValidationError: max_attempts must be >= 1, got 0

        ```
    """
    if isinstance(max_attempts, bool) or not isinstance(max_attempts, int):
        msg = f"max_attempts must be an int, got {type(max_attempts).__name__}"
        raise ValidationError("max_attempts", msg)
    if max_attempts < 1:
        msg = f"max_attempts must be >= 1, got {max_attempts}"
        raise ValidationError("max_attempts", msg)
    validate_positive("initial_delay", initial_delay)
    validate_positive("delay_factor", delay_factor)
