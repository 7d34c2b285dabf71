r"""Structured logging utilities for machine-readable retry events.

The retry executor emits its events through ``log_structured`` so the
attempt bookkeeping travels as fields of the log record instead of being
baked into the message. ``StructuredFormatter`` renders those records as
JSON lines, which is useful for log aggregation systems.

Example:
    Emit the retry events of a configuration as JSON:

    ```python
    import logging
    from aretry import RetryConfig, attempt
    from aretry.utils.structured_logging import StructuredFormatter, set_correlation_id

    handler = logging.StreamHandler()
    handler.setFormatter(StructuredFormatter())
    logger = logging.getLogger("my-app.retry")
    logger.addHandler(handler)

    set_correlation_id("job-42")
    config = RetryConfig.with_fixed_delay(delay=0.5, logger=logger)
    result = await attempt(fetch_data, config)
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
from typing import Any

# Context variable for correlation ID, so each asyncio task keeps its own value
_correlation_id: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "correlation_id", default=None
)

# Attributes of every ``logging.LogRecord``, anything else came from ``extra``
_RESERVED_ATTRS = frozenset(
    {
        "args",
        "asctime",
        "created",
        "exc_info",
        "exc_text",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "message",
        "module",
        "msecs",
        "msg",
        "name",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "taskName",
        "thread",
        "threadName",
    }
)


def get_correlation_id() -> str | None:
    """Get the current correlation ID.

    Returns:
        The current correlation ID, or None if not set.
    """
    return _correlation_id.get()


def set_correlation_id(correlation_id: str) -> None:
    """Set the correlation ID for the current context.

    The correlation ID is stored in a context variable, so retry loops
    running in different asyncio tasks do not see each other's ID.

    Args:
        correlation_id: The correlation ID to set (e.g., job ID, trace ID).

    Example:
        ```pycon
        >>> from aretry.utils.structured_logging import (
        ...     get_correlation_id,
        ...     set_correlation_id,
        ... )
        >>> set_correlation_id("request-456")
        >>> get_correlation_id()
        'request-456'

        ```
    """
    _correlation_id.set(correlation_id)


def clear_correlation_id() -> None:
    """Clear the correlation ID for the current context."""
    _correlation_id.set(None)


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging.

    Standard fields in the JSON output:
        - timestamp: ISO 8601 timestamp
        - level: Log level name
        - logger: Logger name
        - message: Log message
        - correlation_id: Optional correlation ID
        - exception: Formatted exception, if any

    Any additional fields added via the ``extra`` parameter (e.g. the
    ``attempt`` and ``max_attempts`` fields of retry events) are included
    as top-level keys. Values that are not JSON serializable are
    rendered with ``str``.

    Example:
        ```pycon
        >>> import json
        >>> import logging
        >>> from io import StringIO
        >>> from aretry.utils.structured_logging import StructuredFormatter
        >>> stream = StringIO()
        >>> handler = logging.StreamHandler(stream)
        >>> handler.setFormatter(StructuredFormatter())
        >>> logger = logging.getLogger("doctest_structured_formatter")
        >>> logger.addHandler(handler)
        >>> logger.warning("Retry attempt failed", extra={"attempt": 1})
        >>> json.loads(stream.getvalue())["attempt"]
        1

        ```
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        correlation_id = get_correlation_id()
        if correlation_id is not None:
            log_data["correlation_id"] = correlation_id

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS:
                log_data[key] = value

        return json.dumps(log_data, default=str)

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:  # noqa: ARG002
        """Format timestamp as ISO 8601 with millisecond precision."""
        return (
            time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime(record.created))
            + f".{int(record.msecs):03d}Z"
        )


def log_structured(
    logger: logging.Logger | logging.LoggerAdapter,
    level: int,
    message: str,
    **extra: Any,
) -> None:
    """Log a message with structured data.

    The extra fields are attached to the log record, and included in the
    JSON output when using ``StructuredFormatter``.

    ``logging.LoggerAdapter.process`` replaces the ``extra`` of each call
    with the adapter's own, so adapters are unwrapped: their ``extra`` is
    merged under the given fields and the record is emitted by the
    underlying logger.

    Args:
        logger: Logger or logger adapter to use.
        level: Log level (e.g., logging.WARNING).
        message: Log message.
        **extra: Additional structured fields to include in the log.

    Example:
        ```pycon
        >>> import logging
        >>> from aretry.utils.structured_logging import log_structured
        >>> adapter = logging.LoggerAdapter(logging.getLogger("my-app"), {"job": "sync"})
        >>> log_structured(adapter, logging.DEBUG, "Retry attempt failed", attempt=1)

        ```
    """
    fields: dict[str, Any] = {}
    while isinstance(logger, logging.LoggerAdapter):
        fields = {**(logger.extra or {}), **fields}
        logger = logger.logger
    fields.update(extra)
    logger.log(level, message, extra=fields)
