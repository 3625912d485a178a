"""Structured logging configuration.

Provides JSON logging for production (parseable by log aggregators)
and human-readable logging for development.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

from starter_api.core.context import get_trace_id

# Record attributes copied from ``extra=`` when present
EXTRA_FIELDS = ("error_category", "status_code", "method", "path", "duration_ms", "service")


class StructuredFormatter(logging.Formatter):
    """JSON formatter for production logging.

    Output format:
        {"timestamp": "2024-01-15T10:30:00.000+00:00", "level": "ERROR", "logger": "starter_api.core.presenter",
         "message": "Resource not found", "trace_id": "abc123", "error_category": "NotFound"}
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        trace_id = get_trace_id()
        if trace_id:
            log_data["trace_id"] = trace_id

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key in EXTRA_FIELDS:
            if hasattr(record, key):
                log_data[key] = getattr(record, key)

        return json.dumps(log_data, default=str)


class DevelopmentFormatter(logging.Formatter):
    """Human-readable formatter for local development.

    Output format:
        2024-01-15 10:30:00 [INFO] starter_api.routers.hello: Processing hello request (trace_id=abc123)
    """

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        trace_id = get_trace_id()
        trace_suffix = f" (trace_id={trace_id})" if trace_id else ""
        category = getattr(record, "error_category", None)
        category_prefix = f"[{category}] " if category else ""

        message = (
            f"{timestamp} [{record.levelname}] {record.name}: "
            f"{category_prefix}{record.getMessage()}{trace_suffix}"
        )

        if record.exc_info:
            message += f"\n{self.formatException(record.exc_info)}"

        return message


def configure_logging(
    level: str = "INFO",
    *,
    structured: bool | None = None,
) -> None:
    """Configure application logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        structured: Use JSON format. If None, auto-detect based on environment.
    """
    if structured is None:
        structured = not sys.stderr.isatty()

    formatter = StructuredFormatter() if structured else DevelopmentFormatter()

    root_logger = logging.getLogger()
    root_logger.setLevel(level.upper())

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
