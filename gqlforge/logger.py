"""
Centralized logging system for gqlforge.

This module provides a structured logging system with configurable output formats
and security features to sanitize sensitive information such as the
Authorization header sent to the GraphQL endpoint.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from gqlforge.config import get_settings

_RESERVED_RECORD_KEYS = {
    "name", "msg", "args", "levelname", "levelno", "pathname",
    "filename", "module", "exc_info", "exc_text", "stack_info",
    "lineno", "funcName", "created", "msecs", "relativeCreated",
    "thread", "threadName", "processName", "process", "taskName",
    "message", "asctime"
}


class StructuredFormatter(logging.Formatter):
    """
    Custom formatter for structured JSON logging.

    Converts log records to structured JSON format with consistent fields
    and optional sanitization of sensitive data.
    """

    SENSITIVE_KEYS = {
        "api_key", "apikey", "token", "password", "secret",
        "authorization", "auth", "credential", "graphql_auth_token"
    }

    def __init__(self, sanitize: bool = True):
        """
        Initialize the structured formatter.

        Args:
            sanitize: Whether to sanitize sensitive information from logs
        """
        super().__init__()
        self.sanitize = sanitize

    def format(self, record: logging.LogRecord) -> str:
        """
        Format a log record as structured JSON.

        Args:
            record: The log record to format

        Returns:
            str: JSON-formatted log entry
        """
        log_entry: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        # Context passed through ``extra``
        for key, value in record.__dict__.items():
            if key not in _RESERVED_RECORD_KEYS:
                log_entry[key] = value

        if self.sanitize:
            log_entry = self._sanitize_log_entry(log_entry)

        return json.dumps(log_entry, ensure_ascii=False, separators=(',', ':'), default=str)

    def _sanitize_log_entry(self, log_entry: Dict[str, Any]) -> Dict[str, Any]:
        """
        Redact values stored under sensitive keys, at any nesting depth.

        Args:
            log_entry: The log entry dictionary to sanitize

        Returns:
            Dict[str, Any]: Sanitized log entry
        """
        def sanitize_value(obj: Any) -> Any:
            if isinstance(obj, dict):
                return {
                    k: "[REDACTED]" if str(k).lower() in self.SENSITIVE_KEYS else sanitize_value(v)
                    for k, v in obj.items()
                }
            elif isinstance(obj, (list, tuple)):
                return [sanitize_value(item) for item in obj]
            return obj

        return sanitize_value(log_entry)


class SimpleFormatter(logging.Formatter):
    """Simple, human-readable formatter for development use."""

    def __init__(self):
        super().__init__(
            fmt="%(asctime)s [%(levelname)8s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )


def setup_logger(
    name: Optional[str] = None,
    level: Optional[str] = None,
    log_format: Optional[str] = None
) -> logging.Logger:
    """
    Set up and configure a logger instance.

    Args:
        name: Logger name (defaults to 'gqlforge')
        level: Log level (defaults to settings.log_level)
        log_format: Format type ('structured' or 'simple', defaults to settings.log_format)

    Returns:
        logging.Logger: Configured logger instance
    """
    settings = get_settings()
    logger_name = name or "gqlforge"
    log_level = level or settings.log_level
    format_type = log_format or settings.log_format

    logger = logging.getLogger(logger_name)

    # Only configure if not already configured
    if not logger.handlers:
        logger.setLevel(getattr(logging, log_level.upper()))

        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(getattr(logging, log_level.upper()))

        if format_type == "structured":
            formatter = StructuredFormatter(sanitize=settings.sanitize_logs)
        else:
            formatter = SimpleFormatter()

        handler.setFormatter(formatter)
        logger.addHandler(handler)

        # Prevent duplicate logs from parent loggers
        logger.propagate = False

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a configured logger instance.

    Args:
        name: Logger name (defaults to 'gqlforge')

    Returns:
        logging.Logger: Configured logger instance
    """
    return setup_logger(name)


class StructuredLogger:
    """
    Leveled logging sink taking a message, an optional error and context.

    Wraps a ``logging.Logger`` so that context keys land on the record as
    ``extra`` fields, which ``StructuredFormatter`` emits as JSON keys.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger = logger or get_logger("gqlforge.client")

    def debug(self, message: str, error: Optional[BaseException] = None, /, **context: Any) -> None:
        self._log(logging.DEBUG, message, error, context)

    def info(self, message: str, error: Optional[BaseException] = None, /, **context: Any) -> None:
        self._log(logging.INFO, message, error, context)

    def warning(self, message: str, error: Optional[BaseException] = None, /, **context: Any) -> None:
        self._log(logging.WARNING, message, error, context)

    def error(self, message: str, error: Optional[BaseException] = None, /, **context: Any) -> None:
        self._log(logging.ERROR, message, error, context)

    def _log(
        self,
        level: int,
        message: str,
        error: Optional[BaseException],
        context: Dict[str, Any]
    ) -> None:
        if not message:
            raise ValueError("Log message cannot be empty")

        extra = {
            (f"ctx_{key}" if key in _RESERVED_RECORD_KEYS else key): value
            for key, value in context.items()
        }
        if error is not None:
            extra.setdefault("error", str(error))
            extra["error_type"] = type(error).__name__

        exc_info = error if error is not None and level >= logging.ERROR else None
        self._logger.log(level, message, exc_info=exc_info, extra=extra)

