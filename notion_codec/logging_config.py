"""Structured logging configuration for the codec."""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from .config import CodecConfig


# Attributes every LogRecord carries; anything else came in through ``extra``
_RECORD_ATTRS = {
    "name", "msg", "args", "created", "filename", "funcName",
    "levelname", "levelno", "lineno", "module", "msecs",
    "pathname", "process", "processName", "relativeCreated",
    "thread", "threadName", "getMessage", "exc_info", "exc_text",
    "stack_info", "taskName", "message", "asctime",
}


class StructuredFormatter(logging.Formatter):
    """Custom formatter that outputs structured JSON logs."""

    # Sensitive field names to redact
    SENSITIVE_FIELDS = {
        "api_key", "password", "token", "secret", "authorization",
        "api_token", "access_token", "refresh_token", "private_key"
    }

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON.

        Args:
            record: The log record to format

        Returns:
            JSON-formatted log string
        """
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
            "message": record.getMessage(),
        }

        for key, value in record.__dict__.items():
            if key in _RECORD_ATTRS:
                continue
            if self._is_sensitive_field(key):
                log_data[key] = "[REDACTED]"
            else:
                log_data[key] = value

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)

    def _is_sensitive_field(self, field_name: str) -> bool:
        field_lower = field_name.lower()
        return any(sensitive in field_lower for sensitive in self.SENSITIVE_FIELDS)


def setup_logging(
    format: str = "json",
    level: str = "INFO",
    log_file: Optional[str] = None
) -> None:
    """Configure logging for the codec's loggers.

    Only the ``notion_codec`` logger tree is touched; the host application's
    root logger is left alone.

    Args:
        format: Log format ("json" or "text")
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path to write logs to
    """
    logger = logging.getLogger("notion_codec")
    logger.handlers.clear()
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    if format == "json":
        formatter = StructuredFormatter()
    else:
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)


def setup_logging_from_config(config: CodecConfig, log_file: Optional[str] = None) -> None:
    setup_logging(format=config.log_format, level=config.log_level, log_file=log_file)


def summarize_errors(errors: Any) -> Dict[str, int]:
    """Count validation errors by kind, for log lines."""
    counts: Dict[str, int] = {}
    for error in errors:
        counts[error.kind.value] = counts.get(error.kind.value, 0) + 1
    return counts
