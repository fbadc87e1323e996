"""Logging configuration for applications using the SMS client.

The library only emits records on the ``mollie_sms`` logger. This module
provides formatters for them:
- JSON formatted logs for production
- Human-readable logs for development
- Delivery context (recipient, result code, ...) taken from ``extra``
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from mollie_sms.settings import SmsSettings

# Record attributes set through ``extra=`` by the client
CONTEXT_FIELDS = (
    "recipient",
    "originator",
    "gateway",
    "http_status",
    "result_code",
    "field",
    "error",
)


def mask_recipient(recipient: str | None) -> str | None:
    """Hide all but the last four digits of a telephone number."""
    if not recipient:
        return recipient
    if len(recipient) <= 4:
        return "*" * len(recipient)
    return "*" * (len(recipient) - 4) + recipient[-4:]


def _context(record: logging.LogRecord) -> dict[str, Any]:
    return {key: getattr(record, key) for key in CONTEXT_FIELDS if hasattr(record, key)}


class StructuredFormatter(logging.Formatter):
    """JSON structured log formatter.

    Outputs log records as JSON objects suitable for log aggregation systems.
    """

    def __init__(self, *, include_timestamp: bool = True, include_level: bool = True) -> None:
        """Initialize the formatter.

        Args:
            include_timestamp: Whether to include timestamp in output
            include_level: Whether to include log level in output
        """
        super().__init__()
        self.include_timestamp = include_timestamp
        self.include_level = include_level

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "message": record.getMessage(),
        }

        if self.include_timestamp:
            log_data["timestamp"] = datetime.now(UTC).isoformat()

        if self.include_level:
            log_data["level"] = record.levelname

        log_data["logger"] = record.name
        log_data.update(_context(record))

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        log_data["location"] = f"{record.filename}:{record.lineno}"

        return json.dumps(log_data, default=str)


class HumanReadableFormatter(logging.Formatter):
    """Human-readable log formatter for development."""

    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.now(UTC).strftime("%Y-%m-%d %H:%M:%S")
        color = self.COLORS.get(record.levelname, "")
        level = f"{color}{record.levelname:8}{self.RESET}"

        parts = [f"[{timestamp}] {level} {record.name}: {record.getMessage()}"]

        extra_parts = [f"{key}={value}" for key, value in _context(record).items()]
        if extra_parts:
            parts.append("  " + " ".join(extra_parts))

        if record.exc_info:
            parts.append(self.formatException(record.exc_info))

        return "\n".join(parts)


def configure_logging(
    level: str = "INFO",
    json_format: bool = False,
    loggers: list[str] | None = None,
) -> logging.Handler:
    """Attach a stdout handler to the client's loggers.

    Only ``mollie_sms`` and ``httpx`` (plus any extra names) are configured;
    the root logger is left alone.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_format: Use JSON structured logging
        loggers: Additional loggers to configure

    Returns:
        The handler that was installed
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(StructuredFormatter() if json_format else HumanReadableFormatter())

    loggers_to_configure = ["mollie_sms", "httpx"]
    if loggers:
        loggers_to_configure.extend(loggers)

    for logger_name in loggers_to_configure:
        logger = logging.getLogger(logger_name)
        logger.setLevel(level)
        for existing in logger.handlers[:]:
            logger.removeHandler(existing)
        # Don't propagate to root to avoid duplicate logs
        logger.propagate = False
        logger.addHandler(handler)

    return handler


def configure_from_settings(settings: SmsSettings) -> logging.Handler:
    """Configure logging from ``log_level`` and ``log_json``."""
    return configure_logging(level=settings.log_level, json_format=settings.log_json)

