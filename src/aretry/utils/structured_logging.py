r"""Structured logging utilities for machine-readable log output.

The retry executors attach their state (task name, attempt, delay,
failure reason) to every log record as ``extra`` fields. This module
provides a JSON formatter that renders those fields, and a correlation
ID stored in a context variable so the records of one logical operation
can be grouped by a log aggregation system.

The structured output is opt-in:

```python
import logging
from aretry.utils.structured_logging import StructuredFormatter

handler = logging.StreamHandler()
handler.setFormatter(StructuredFormatter())
logger = logging.getLogger("aretry")
logger.addHandler(handler)
logger.setLevel(logging.DEBUG)
```
"""

from __future__ import annotations

__all__ = [
    "StructuredFormatter",
    "clear_correlation_id",
    "get_correlation_id",
    "log_structured",
    "set_correlation_id",
]

import contextvars
import json
import logging
import time
from enum import Enum
from typing import Any

# Context variable for correlation ID (thread-safe and async-safe)
_correlation_id: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "aretry_correlation_id", default=None
)

# Attributes every LogRecord has; anything else came from ``extra``
_RECORD_ATTRIBUTES: frozenset[str] = frozenset(
    logging.LogRecord("", logging.NOTSET, "", 0, "", (), None).__dict__
) | {"message", "asctime", "taskName"}


def get_correlation_id() -> str | None:
    """Get the correlation ID of the current context.

    Returns:
        The current correlation ID, or None if not set.
    """
    return _correlation_id.get()


def set_correlation_id(correlation_id: str) -> None:
    """Set the correlation ID for the current context.

    Args:
        correlation_id: The correlation ID to set (e.g. a job ID or a
            trace ID).

    Example:
        ```pycon
        >>> from aretry.utils.structured_logging import (
        ...     clear_correlation_id,
        ...     get_correlation_id,
        ...     set_correlation_id,
        ... )
        >>> set_correlation_id("job-42")
        >>> get_correlation_id()
        'job-42'
        >>> clear_correlation_id()
        >>> get_correlation_id() is None
        True

        ```
    """
    _correlation_id.set(correlation_id)


def clear_correlation_id() -> None:
    """Clear the correlation ID for the current context."""
    _correlation_id.set(None)


def _to_json_value(value: Any) -> Any:
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    if isinstance(value, BaseException):
        return f"{type(value).__name__}: {value}"
    if isinstance(value, Enum):
        return value.value
    return repr(value)


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging.

    Standard fields in the JSON output:
        - timestamp: ISO 8601 timestamp in UTC
        - level: Log level name
        - logger: Logger name
        - message: Log message
        - module, function, line: Where the record was emitted
        - thread: Thread name
        - correlation_id: Only if set in the current context
        - exception: Only if the record carries exception info

    Fields passed with ``extra`` are added as-is when they are JSON
    scalars, and rendered with ``repr`` otherwise.

    Example:
        ```pycon
        >>> import json
        >>> import logging
        >>> from aretry.utils.structured_logging import StructuredFormatter
        >>> record = logging.LogRecord("aretry", logging.INFO, "", 1, "hello", (), None)
        >>> record.attempt = 2
        >>> data = json.loads(StructuredFormatter().format(record))
        >>> data["message"], data["attempt"]
        ('hello', 2)

        ```
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
            "thread": record.threadName,
        }

        correlation_id = get_correlation_id()
        if correlation_id is not None:
            log_data["correlation_id"] = correlation_id

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _RECORD_ATTRIBUTES:
                log_data[key] = _to_json_value(value)

        return json.dumps(log_data)

    def formatTime(  # noqa: N802
        self, record: logging.LogRecord, datefmt: str | None = None  # noqa: ARG002
    ) -> str:
        """Format timestamp as ISO 8601 with millisecond precision."""
        return (
            time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime(record.created))
            + f".{int(record.msecs):03d}Z"
        )


def log_structured(
    logger: logging.Logger,
    level: int,
    message: str,
    **extra: Any,
) -> None:
    """Log a message with structured data.

    The extra fields are attached to the record and included in the JSON
    output when using StructuredFormatter. Nothing is built if the
    logger is not enabled for ``level``.

    Args:
        logger: Logger to use.
        level: Log level (e.g., logging.DEBUG).
        message: Log message.
        **extra: Additional structured fields to include in the log.
    """
    if logger.isEnabledFor(level):
        logger.log(level, message, extra=extra, stacklevel=2)
