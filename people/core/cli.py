#!/usr/bin/env python3
"""
cli.py
------
Shared CLI utilities and statistics for people log commands.

Functions:
    setup_logger: Initialize PeopleLogger for CLI operations

Classes:
    OperationStats: Base class for all statistics
    ReadStats: For reading and parsing the log files
    ProjectionStats: For writing per-person logs

Usage:
    from people.core.cli import setup_logger, ProjectionStats

    logger = setup_logger(log_dir, "per_person")
    stats = ProjectionStats()
    stats.written += 1
    print(stats.summary())
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict

# --- Local imports ---
from people.core.logging_manager import PeopleLogger


# ═══════════════════════════════════════════════════════════════════════════
# LOGGER SETUP
# ═══════════════════════════════════════════════════════════════════════════

def setup_logger(log_dir: Path, component_name: str) -> PeopleLogger:
    """
    Setup logging for CLI operations.

    Creates the operations log directory if it doesn't exist and initializes
    a PeopleLogger instance for the specified component.

    Args:
        log_dir: Base log directory (typically from paths.LOG_DIR)
        component_name: Component identifier for logging (e.g., 'per_person')

    Returns:
        Configured PeopleLogger instance
    """
    operations_log_dir = Path(log_dir) / "operations"
    operations_log_dir.mkdir(parents=True, exist_ok=True)
    return PeopleLogger(operations_log_dir, component_name=component_name)


# ═══════════════════════════════════════════════════════════════════════════
# STATISTICS CLASSES
# ═══════════════════════════════════════════════════════════════════════════

@dataclass
class OperationStats:
    """
    Base class for CLI operation statistics.

    Attributes:
        errors: Number of errors encountered
        start_time: Operation start timestamp
    """
    errors: int = 0
    start_time: datetime = field(default_factory=datetime.now)

    def duration(self) -> float:
        """Seconds elapsed since start_time."""
        return (datetime.now() - self.start_time).total_seconds()

    def summary(self) -> str:
        return f"{self.errors} errors, {self.duration():.2f}s"

    def to_dict(self) -> Dict[str, Any]:
        return {"errors": self.errors, "duration": self.duration()}


@dataclass
class ReadStats(OperationStats):
    """
    Statistics for reading the hand-written log files.

    Attributes:
        files_read: Number of files parsed successfully
        days: Number of distinct days in the aggregate log
        entries: Number of entries in the aggregate log
    """
    files_read: int = 0
    days: int = 0
    entries: int = 0

    def summary(self) -> str:
        return (
            f"{self.files_read} files read, "
            f"{self.days} days, "
            f"{self.entries} entries, "
            f"{self.errors} errors, "
            f"{self.duration():.2f}s"
        )

    def to_dict(self) -> Dict[str, Any]:
        d = super().to_dict()
        d.update({
            "files_read": self.files_read,
            "days": self.days,
            "entries": self.entries,
        })
        return d


@dataclass
class ProjectionStats(OperationStats):
    """
    Statistics for writing per-person logs.

    Attributes:
        written: Per-person files written
        deleted: Stale files of ignored people deleted
        nothing_to_delete: Ignored people with no file on disk
    """
    written: int = 0
    deleted: int = 0
    nothing_to_delete: int = 0

    def summary(self) -> str:
        return (
            f"{self.written} written, "
            f"{self.deleted} deleted, "
            f"{self.nothing_to_delete} nothing to delete, "
            f"{self.errors} errors, "
            f"{self.duration():.2f}s"
        )

    def to_dict(self) -> Dict[str, Any]:
        d = super().to_dict()
        d.update({
            "written": self.written,
            "deleted": self.deleted,
            "nothing_to_delete": self.nothing_to_delete,
        })
        return d
