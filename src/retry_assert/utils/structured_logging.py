r"""Structured logging utilities for machine-readable retry logs.

The library only emits DEBUG records and never configures handlers.
The JSON formatter below is opt-in, and is useful when retry attempts
from test suites are collected by a log aggregation system.

Example:
    Enable structured logging for retry_assert:

    ```python
    import logging
    from retry_assert.utils.structured_logging import StructuredFormatter

    handler = logging.StreamHandler()
    handler.setFormatter(StructuredFormatter())

    logger = logging.getLogger("retry_assert")
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    ```
"""

from __future__ import annotations

__all__ = ["StructuredFormatter", "log_structured"]

import json
import logging
import time
from typing import Any

# Attributes present on every LogRecord, everything else came from `extra`
_RESERVED_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {
    "message",
    "asctime",
}


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging.

    Each record is rendered as a JSON object with the fields
    ``timestamp``, ``level``, ``logger``, ``message``, ``module``,
    ``function`` and ``line``, followed by any field passed through the
    ``extra`` parameter of the logging call (e.g. ``attempt`` or
    ``strategy``).

    Example:
        ```pycon
        >>> import logging
        >>> from io import StringIO
        >>> from retry_assert.utils.structured_logging import StructuredFormatter
        >>> stream = StringIO()
        >>> handler = logging.StreamHandler(stream)
        >>> handler.setFormatter(StructuredFormatter())
        >>> logger = logging.getLogger("doctest_structured")
        >>> logger.addHandler(handler)
        >>> logger.setLevel(logging.INFO)
        >>> logger.info("attempt failed", extra={"attempt": 2})
        >>> '"attempt": 2' in stream.getvalue()
        True

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
        }
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS:
                log_data[key] = value
        return json.dumps(log_data, default=repr)

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:  # noqa: ARG002
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

    Args:
        logger: Logger to use.
        level: Log level (e.g., logging.DEBUG).
        message: Log message.
        **extra: Additional structured fields to include in the log.
    """
    if logger.isEnabledFor(level):
        logger.log(level, message, extra=extra)
