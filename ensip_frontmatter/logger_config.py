"""Logging setup for the ENSIP frontmatter validator.

Provides a JSON formatter, structured error logging, and a decorator that
traces calls to validation entry points.
"""

import functools
import json
import logging
import traceback
from datetime import datetime
from datetime import timezone
from enum import Enum
from logging.handlers import RotatingFileHandler

from .config import Settings
from .config import get_settings

# --- Loggers ---
logger = logging.getLogger("ensip_frontmatter")
error_logger = logging.getLogger("ensip_frontmatter.errors")

# Extra record attributes copied into structured output when present
_STRUCTURED_FIELDS = (
    "error_category",
    "error_code",
    "operation",
    "function",
    "document_path",
    "line",
    "column",
    "end_column",
    "issues",
)


class ErrorCategory(Enum):
    """Severity categories for structured error logging."""

    CRITICAL = "CRITICAL"
    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"

    @property
    def level(self) -> int:
        return logging.getLevelName(self.value)


class StructuredLogFormatter(logging.Formatter):
    """Format log records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for field in _STRUCTURED_FIELDS:
            if hasattr(record, field):
                log_data[field] = getattr(record, field)

        if record.exc_info and record.exc_info[0] is not None:
            exc_type, exc_value, exc_tb = record.exc_info
            log_data["exception"] = {
                "type": exc_type.__name__,
                "message": str(exc_value),
                "traceback": traceback.format_exception(exc_type, exc_value, exc_tb),
            }

        return json.dumps(log_data, default=str)


def configure_logging(settings: Settings | None = None) -> None:
    """Attach handlers to the package logger according to settings.

    Safe to call more than once; existing handlers are replaced.
    """
    settings = settings or get_settings()

    if settings.structured_logging:
        formatter: logging.Formatter = StructuredLogFormatter()
    else:
        formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    log_path = settings.log_file_path
    if log_path is not None:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            RotatingFileHandler(
                log_path, maxBytes=settings.log_max_bytes, backupCount=settings.log_backup_count
            )
        )

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.setLevel(settings.log_level_value)
    # Prevent logs from propagating to the root logger
    logger.propagate = False


def log_structured_error(
    category: ErrorCategory,
    message: str,
    exception: Exception | None = None,
    context: dict | None = None,
    **kwargs,
) -> None:
    """Log an error with a category and structured context fields."""
    extra = {"error_category": category.value}
    if context:
        extra.update(context)
    extra.update(kwargs)

    error_logger.log(category.level, message, exc_info=exception is not None, extra=extra)


def log_validation_call(func):
    """Trace a validation entry point: arguments, outcome and failures."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        func_name = getattr(func, "__name__", "unknown_function")
        logger.debug(f"Calling {func_name} with args={args!r}, kwargs={kwargs!r}")
        try:
            result = func(*args, **kwargs)
        except Exception as e:
            details = e.to_dict() if hasattr(e, "to_dict") else {}
            log_structured_error(
                category=ErrorCategory.WARNING,
                message=f"{func_name} rejected frontmatter: {e}",
                exception=e,
                operation="frontmatter_validation",
                function=func_name,
                error_code=details.get("error_code", "UNKNOWN_ERROR"),
            )
            raise
        logger.debug(f"{func_name} returned: {result!r}")
        return result

    return wrapper
