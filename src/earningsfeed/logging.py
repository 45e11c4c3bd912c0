"""
Structured logging for the Earnings Feed client.

Provides:
- Context variables for request_id and resource (using contextvars)
- JSONFormatter for machine-readable logs to file
- ContextRichHandler for pretty console output
- ContextLogger wrapper that attaches context to all log calls
- setup_logging() that configures both file and console handlers (opt-in)
- Context manager log_context() for scoped context
- get_logger() factory

Being a library, nothing is printed unless the application configures
logging itself or calls setup_logging().
"""

from __future__ import annotations

import json
import logging
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Generator

from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text
from uuid6 import uuid7

from earningsfeed.config import get_settings

ROOT_LOGGER_NAME = "earningsfeed"

_request_id_var: ContextVar[str | None] = ContextVar("request_id", default=None)
_resource_var: ContextVar[str | None] = ContextVar("resource", default=None)

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def generate_request_id() -> str:
    """Generate a time-ordered request ID using UUID7."""
    return f"req_{uuid7()}"


def get_request_id() -> str | None:
    """Get the current request ID from context."""
    return _request_id_var.get()


def get_resource() -> str | None:
    """Get the current resource name from context."""
    return _resource_var.get()


@contextmanager
def log_context(
    request_id: str | None = None,
    resource: str | None = None,
) -> Generator[None, None, None]:
    """Context manager for scoped logging context.

    Args:
        request_id: Request ID to set in context.
        resource: Resource name (e.g. "filings") to set in context.

    Yields:
        None. Context variables are set for the duration of the context.
    """
    old_request_id = _request_id_var.get()
    old_resource = _resource_var.get()

    try:
        if request_id is not None:
            _request_id_var.set(request_id)
        if resource is not None:
            _resource_var.set(resource)
        yield
    finally:
        _request_id_var.set(old_request_id)
        _resource_var.set(old_resource)


class JSONFormatter(logging.Formatter):
    """JSON formatter for machine-readable log files.

    Produces JSON Lines format with structured context.
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record as JSON."""
        log_obj: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        request_id = get_request_id()
        resource = get_resource()
        if request_id:
            log_obj["request_id"] = request_id
        if resource:
            log_obj["resource"] = resource

        if hasattr(record, "extra"):
            log_obj["extra"] = record.extra

        if record.exc_info:
            log_obj["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_obj, default=str)


class ContextRichHandler(RichHandler):
    """Rich handler that includes context in console output."""

    def get_level_text(self, record: logging.LogRecord) -> Text:
        """Override to add context prefix."""
        level_text = super().get_level_text(record)

        parts: list[str] = []
        request_id = get_request_id()
        resource = get_resource()

        if request_id:
            # Last 8 chars of a uuid7 vary per request; the prefix is a timestamp
            parts.append(f"[dim]{request_id[-8:]}[/dim]")
        if resource:
            parts.append(f"[cyan]{resource}[/cyan]")

        if parts:
            return Text.from_markup(f"{level_text} {' '.join(parts)}")

        return level_text


class ContextLogger:
    """Logger wrapper that automatically attaches context to log calls.

    Keyword arguments other than exc_info/stack_info/stacklevel are collected
    into the record's `extra` mapping.
    """

    def __init__(self, logger: logging.Logger) -> None:
        self._logger = logger

    @property
    def name(self) -> str:
        """Get the logger name."""
        return self._logger.name

    def isEnabledFor(self, level: int) -> bool:
        return self._logger.isEnabledFor(level)

    def _log(
        self,
        level: int,
        msg: str,
        *args: Any,
        exc_info: bool = False,
        **kwargs: Any,
    ) -> None:
        if not self._logger.isEnabledFor(level):
            return

        extra = kwargs.pop("extra", {})

        request_id = get_request_id()
        resource = get_resource()
        if request_id:
            extra["request_id"] = request_id
        if resource:
            extra["resource"] = resource

        for key in list(kwargs.keys()):
            if key not in ("exc_info", "stack_info", "stacklevel"):
                extra[key] = kwargs.pop(key)

        self._logger.log(level, msg, *args, exc_info=exc_info, extra={"extra": extra})

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log debug message."""
        self._log(logging.DEBUG, msg, *args, **kwargs)

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log info message."""
        self._log(logging.INFO, msg, *args, **kwargs)

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log warning message."""
        self._log(logging.WARNING, msg, *args, **kwargs)

    def error(self, msg: str, *args: Any, exc_info: bool = False, **kwargs: Any) -> None:
        """Log error message."""
        self._log(logging.ERROR, msg, *args, exc_info=exc_info, **kwargs)

    def exception(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log exception with traceback."""
        self._log(logging.ERROR, msg, *args, exc_info=True, **kwargs)


_console: Console | None = None


def get_console() -> Console:
    """Get the global rich console."""
    global _console
    if _console is None:
        _console = Console(stderr=True)
    return _console


def setup_logging(
    log_level: str | None = None,
    log_file: Path | None = None,
    console_output: bool = True,
) -> None:
    """Set up logging with JSON file handler and rich console handler.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Defaults to EARNINGSFEED_LOG_LEVEL from settings.
        log_file: Path to log file. If None, only console logging is enabled.
        console_output: Whether to enable console output.
    """
    if log_level is None:
        log_level = get_settings().LOG_LEVEL

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(getattr(logging, log_level.upper()))

    root_logger.handlers.clear()

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setFormatter(JSONFormatter())
        file_handler.setLevel(logging.DEBUG)
        root_logger.addHandler(file_handler)

    if console_output:
        rich_handler = ContextRichHandler(
            console=get_console(),
            show_time=True,
            show_path=False,
            rich_tracebacks=True,
            tracebacks_show_locals=False,
            markup=True,
        )
        rich_handler.setLevel(getattr(logging, log_level.upper()))
        root_logger.addHandler(rich_handler)

    if not root_logger.handlers:
        root_logger.addHandler(logging.NullHandler())

    root_logger.propagate = False

    for noisy_logger in ["httpx", "httpcore"]:
        logging.getLogger(noisy_logger).setLevel(logging.WARNING)


def get_logger(name: str) -> ContextLogger:
    """Get a context-aware logger.

    Args:
        name: Logger name (usually __name__).

    Returns:
        ContextLogger wrapper around the standard logger.
    """
    if not name.startswith(ROOT_LOGGER_NAME):
        name = f"{ROOT_LOGGER_NAME}.{name}"

    return ContextLogger(logging.getLogger(name))
