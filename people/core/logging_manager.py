#!/usr/bin/env python3
"""
logging_manager.py
--------------------
Rotating file logs for people log commands.

Every command run appends to two files in the operations log directory:

    <component>.log   operations and per-file/per-person progress (DEBUG+)
    errors.log        parse, config and write failures with tracebacks

Console output is left to the commands themselves (click.echo), so these
loggers only write to files.

Pipeline functions take `logger: Optional[PeopleLogger]` and call it
through `safe_logger(logger)`, which substitutes a no-op logger when none
is given.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import json
import logging
import sys
import traceback
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional

# --- Third party imports ---
import click


FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(funcName)s:%(lineno)d] - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _describe(error: Exception) -> str:
    return f"{type(error).__name__}: {error}"


class PeopleLogger:
    """
    File logger for one CLI component.

    Attributes:
        log_dir: Directory holding the log files
        component_name: Prefix of the logger names and of the component log
        main_logger: `<component>.operations`, written to `<component>.log`
        error_logger: `<component>.errors`, written to `errors.log`
    """

    def __init__(
        self,
        log_dir: Path,
        component_name: str = "people",
        max_bytes: int = 5 * 1024 * 1024,
        backup_count: int = 3,
    ) -> None:
        """
        Args:
            log_dir: Directory for log files, created if missing
            component_name: Component name (e.g. 'people')
            max_bytes: Size at which a log file is rotated (default: 5MB)
            backup_count: Rotated files kept per log (default: 3)
        """
        self.log_dir = Path(log_dir)
        self.component_name = component_name
        self.max_bytes = max_bytes
        self.backup_count = backup_count

        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.main_logger = self._file_logger(
            "operations", f"{component_name}.log", logging.DEBUG
        )
        self.error_logger = self._file_logger("errors", "errors.log", logging.ERROR)

    def _file_logger(self, channel: str, file_name: str, level: int) -> logging.Logger:
        file_logger = logging.getLogger(f"{self.component_name}.{channel}")
        file_logger.setLevel(level)

        # A new instance for the same component replaces the previous files
        for handler in list(file_logger.handlers):
            file_logger.removeHandler(handler)
            handler.close()

        handler = RotatingFileHandler(
            self.log_dir / file_name,
            maxBytes=self.max_bytes,
            backupCount=self.backup_count,
            encoding="utf-8",
        )
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
        file_logger.addHandler(handler)
        return file_logger

    def log_operation(
        self, operation: str, details: Optional[Dict[str, Any]] = None
    ) -> None:
        """Record a pipeline step, e.g. 'read_logs_complete', with its details."""
        self.main_logger.info(
            f"OPERATION - {operation}: {json.dumps(details or {}, default=str)}"
        )

    def log_debug(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        if details:
            message = f"{message}: {json.dumps(details, default=str)}"
        self.main_logger.debug(f"DEBUG - {message}")

    def log_info(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        if details:
            message = f"{message}: {json.dumps(details, default=str)}"
        self.main_logger.info(f"INFO - {message}")

    def log_error(
        self, error: Exception, context: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Record a failure in errors.log.

        The context (file, person, operation...) is appended to the message
        and the error's own traceback follows it.
        """
        message = f"ERROR - {_describe(error)}"
        if context:
            message += " (" + ", ".join(f"{k}={v}" for k, v in context.items()) + ")"
        self.error_logger.error(message, exc_info=error)

    def log_cli_error(
        self,
        error: Exception,
        context: Optional[Dict[str, Any]] = None,
        show_traceback: bool = False,
    ) -> str:
        """
        Log an error that ends a command and return its one-line message.

        Examples:
            >>> logger.log_cli_error(ConfigError("'people_dir' is required"))
            "ERROR ConfigError: 'people_dir' is required"
        """
        self.log_error(error, context or {"source": "cli"})
        return _cli_message(error, show_traceback)


def _cli_message(error: Exception, show_traceback: bool) -> str:
    message = f"ERROR {_describe(error)}"
    if show_traceback:
        trace = "".join(
            traceback.format_exception(type(error), error, error.__traceback__)
        )
        return f"{message}\n\n{trace}"
    return message


def handle_cli_error(
    ctx: "click.Context",
    error: Exception,
    operation: str,
    additional_context: Optional[Dict[str, Any]] = None,
    exit_code: int = 1,
) -> None:
    """
    Report a failed command and exit.

    Logs the error with `operation` and `additional_context` (config path,
    reference date...), echoes the one-line message to stderr, with the
    traceback when --verbose was given, and exits with `exit_code`.
    """
    obj = ctx.obj or {}
    logger: Optional[PeopleLogger] = obj.get("logger")
    verbose: bool = obj.get("verbose", False)

    context = {"operation": operation, **(additional_context or {})}
    error_msg = safe_logger(logger).log_cli_error(error, context, show_traceback=verbose)

    click.echo(error_msg, err=True)
    sys.exit(exit_code)


class NullLogger:
    """No-op stand-in for PeopleLogger when a pipeline function gets no logger."""

    def log_operation(self, operation: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_debug(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_info(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_error(self, error: Exception, context: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_cli_error(
        self,
        error: Exception,
        context: Optional[Dict[str, Any]] = None,
        show_traceback: bool = False,
    ) -> str:
        return _cli_message(error, show_traceback)


_null_logger = NullLogger()


def safe_logger(logger: Optional[PeopleLogger]) -> PeopleLogger:
    """
    Return `logger`, or a shared NullLogger if it is None.

    Usage:
        safe_logger(logger).log_operation("read_logs_start", {"files": 3})
    """
    return logger if logger is not None else _null_logger  # type: ignore[return-value]
