#!/usr/bin/env python3
"""
exceptions.py
--------------------
Custom exception classes for the people log project.

This module defines the exceptions used throughout the project to handle
specific error conditions in the parsing, configuration and writing stages.

Exception Hierarchy:
    Exception (built-in)
    ├── LogParseError - Content with no owning date header
    ├── LogReadError - One or more log files failed to read or parse
    ├── ValidationError - Data validation failures
    │   └── ReminderDurationError - Malformed reminder duration
    ├── ConfigError - Configuration file loading failures
    └── PersonLogWriteError - Per-person file write/delete failures

Usage:
    from people.core.exceptions import LogParseError, ConfigError

    try:
        log = Log.from_text(content)
    except LogParseError as e:
        logger.error(f"Malformed log: {e}")
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import List, Optional, Tuple


class LogParseError(Exception):
    """
    Exception for structural log parsing failures.

    Raised when a log file has content lines before any `# YYYY-MM-DD`
    date header, so the content has no owning day.

    Attributes:
        line_number: 0-based line number of the first orphan line
        path: Source file, when known

    Examples:
        >>> raise LogParseError("content before any date header", line_number=0)
    """

    def __init__(
        self,
        message: str,
        line_number: Optional[int] = None,
        path: Optional[Path] = None,
    ) -> None:
        self.message = message
        self.line_number = line_number
        self.path = path
        super().__init__(self._format())

    def _format(self) -> str:
        parts = []
        if self.path is not None:
            parts.append(str(self.path))
        if self.line_number is not None:
            # Reported 1-based, like editors do
            parts.append(f"line {self.line_number + 1}")
        if not parts:
            return self.message
        return f"{', '.join(parts)}: {self.message}"

    def with_path(self, path: Path) -> LogParseError:
        """Return a copy of this error annotated with its source file."""
        return LogParseError(self.message, line_number=self.line_number, path=path)


class LogReadError(Exception):
    """
    Exception for failures while building the aggregate log.

    Every log file is attempted before this is raised, so it carries
    all failures at once.

    Attributes:
        failures: List of (path, cause) pairs

    Examples:
        >>> raise LogReadError([(Path("log/2024-people.md"), OSError("denied"))])
    """

    def __init__(self, failures: List[Tuple[Path, Exception]]) -> None:
        self.failures = failures
        lines = [f"{path}: {cause}" for path, cause in failures]
        super().__init__(
            f"{len(failures)} log file(s) could not be read:\n  " + "\n  ".join(lines)
        )


class ValidationError(Exception):
    """
    Exception for data validation failures.

    Raised when input data fails validation checks:
    - Invalid date formats
    - Type mismatches
    - Constraint violations

    Examples:
        >>> raise ValidationError("Invalid date format: expected YYYY-MM-DD")
    """

    pass


class ReminderDurationError(ValidationError):
    """
    Exception for malformed reminder durations.

    Raised when a configured `remind_after` value is not of the form
    `<integer> <unit>` with a known unit.

    Attributes:
        value: The offending duration text
        person: Name of the configuration entry, when known

    Examples:
        >>> raise ReminderDurationError("three months", "amount is not an integer")
    """

    def __init__(
        self, value: str, reason: str, person: Optional[str] = None
    ) -> None:
        self.value = value
        self.reason = reason
        self.person = person
        prefix = f"{person}: " if person else ""
        super().__init__(f"{prefix}invalid reminder duration {value!r} ({reason})")


class ConfigError(Exception):
    """
    Exception for configuration loading failures.

    Raised when the configuration file cannot be used:
    - File not found
    - Not valid YAML
    - Missing `people_dir`
    - Fields with the wrong type

    Examples:
        >>> raise ConfigError("expected file at ~/.config/people/config.yaml")
    """

    pass


class PersonLogWriteError(Exception):
    """
    Exception for per-person log file write or delete failures.

    Attributes:
        person: Person whose file failed
        path: Target path
        cause: Underlying I/O error

    Examples:
        >>> raise PersonLogWriteError("JohnDoe", Path("JohnDoe.md"), OSError("denied"))
    """

    def __init__(self, person: str, path: Path, cause: Exception) -> None:
        self.person = person
        self.path = path
        self.cause = cause
        super().__init__(f"{person}: {path}: {cause}")
