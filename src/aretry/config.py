r"""Configuration dataclass and defaults for retry executors.

This module provides configuration constants and an immutable,
validated configuration object shared by RetryExecutor and
AsyncRetryExecutor.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_DELAY_FACTOR",
    "DEFAULT_INITIAL_DELAY",
    "DEFAULT_MAX_ATTEMPTS",
    "RetryConfig",
]

from dataclasses import dataclass, replace
from typing import Any

from aretry.utils.validation import validate_retry_params

# Default total number of task invocations
# Retries = max_attempts - 1
DEFAULT_MAX_ATTEMPTS = 5

# Default delay in seconds before the first retry (100ms)
DEFAULT_INITIAL_DELAY = 0.1

# Default growth factor of the delay between retries
# With 0.1 and 5.0: waits are 0.1s, 0.5s, 2.5s, 12.5s
DEFAULT_DELAY_FACTOR = 5.0


@dataclass(frozen=True)
class RetryConfig:
    """Configuration for retry behavior.

    The configuration is validated once at construction and is immutable
    afterwards, so a single instance can safely back any number of
    sequential or concurrent runs.

    Args:
        max_attempts: Total number of times the task may be invoked.
            Must be >= 1.
        initial_delay: Delay in seconds before the first retry. Must be > 0.
        delay_factor: Factor handed to the backoff strategy to grow the
            delay after every retry. Must be > 0.

    Raises:
        ValidationError: If any parameter fails validation.

    Example:
        ```pycon
        >>> from aretry.config import RetryConfig
        >>> config = RetryConfig()
        >>> config.max_attempts
        5
        >>> config = RetryConfig(max_attempts=3, initial_delay=0.5)
        >>> config.merge(max_attempts=10).max_attempts
        10
        >>> config.max_attempts  # Original unchanged
        3

        ```
    """

    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    initial_delay: float = DEFAULT_INITIAL_DELAY
    delay_factor: float = DEFAULT_DELAY_FACTOR

    def __post_init__(self) -> None:
        validate_retry_params(
            max_attempts=self.max_attempts,
            initial_delay=self.initial_delay,
            delay_factor=self.delay_factor,
        )

    @property
    def max_retries(self) -> int:
        """The number of retries, i.e. attempts after the first one."""
        return self.max_attempts - 1

    def merge(self, **overrides: Any) -> RetryConfig:
        """Create a new config with specified parameters overridden.

        Only non-None override values are applied. The new config is
        validated like any other.

        Args:
            **overrides: Keyword arguments for parameters to override.

        Returns:
            A new RetryConfig instance with overrides applied.

        Example:
            ```pycon
            >>> from aretry.config import RetryConfig
            >>> config = RetryConfig(delay_factor=2.0)
            >>> config.merge(delay_factor=None, initial_delay=1.0)
            RetryConfig(max_attempts=5, initial_delay=1.0, delay_factor=2.0)

            ```
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **filtered_overrides)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary format.

        Returns:
            Dictionary with the retry configuration parameters.
        """
        return {
            "max_attempts": self.max_attempts,
            "initial_delay": self.initial_delay,
            "delay_factor": self.delay_factor,
        }
