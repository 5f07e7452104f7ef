#!/usr/bin/env python3
"""
per_person.py
-------------------
Project the aggregate log into one log per person and write them out.

    <people_dir>/
    └── per-person-logs/
        ├── JaneDoe.md
        └── JohnDoe.md

Each entry goes to the log of every person it mentions (main or related).
Ignored people get no log: a stale file of theirs is deleted, and nothing
happens if there is none.

Programmatic API:
    from people.pipeline.per_person import split_log_per_person, write_per_person_logs

    per_person = split_log_per_person(log, config.ignored)
    results, stats = write_per_person_logs(per_person, config.per_person_dir, logger)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import AbstractSet, Dict, List, Optional, Tuple

# --- Local imports ---
from people.core.cli import ProjectionStats
from people.core.exceptions import PersonLogWriteError
from people.core.logging_manager import PeopleLogger, safe_logger
from people.dataclasses.log import Day, Log
from people.pipeline.merge import merge_days
from people.utils.fs import person_log_path


# None marks a person whose file must not exist
PerPersonLogs = Dict[str, Optional[Log]]


# ----- Projection -----
def split_log_per_person(log: Log, ignored: AbstractSet[str]) -> PerPersonLogs:
    """
    Split the aggregate log into one log per mentioned person.

    Args:
        log: Aggregate log
        ignored: Names that never get a log

    Returns:
        Mapping of person to their log, or to None if ignored
    """
    mentioned: Dict[str, Optional[List[Day]]] = {}

    for day in log.days:
        for entry in day.entries:
            for person in sorted(entry.related):
                if person in ignored:
                    mentioned[person] = None
                else:
                    mentioned.setdefault(person, []).append(
                        Day(date=day.date, entries=(entry,))
                    )

    return {
        person: None if days is None else merge_days(days)
        for person, days in mentioned.items()
    }


# ----- Writing -----
class WriteOutcome(Enum):
    WRITTEN = "written"
    FAILED_TO_WRITE = "failed to write"
    DELETED = "deleted"
    NOTHING_TO_DELETE = "nothing to delete"
    FAILED_TO_DELETE = "failed to delete"

    @property
    def failed(self) -> bool:
        return self in (WriteOutcome.FAILED_TO_WRITE, WriteOutcome.FAILED_TO_DELETE)


@dataclass(frozen=True)
class PersonLogWrite:
    """
    Result of writing or deleting one person's log.

    Attributes:
        person: Person name
        outcome: What happened
        path: Target file
        error: Underlying I/O error, for failures
    """

    person: str
    outcome: WriteOutcome
    path: Path
    error: Optional[OSError] = None

    @property
    def reason(self) -> Optional[str]:
        return str(self.error) if self.error is not None else None

    def describe(self) -> str:
        if self.outcome is WriteOutcome.WRITTEN:
            return f"Report written to {self.path}"
        if self.outcome is WriteOutcome.DELETED:
            return f"Report deleted: {self.path}"
        if self.outcome is WriteOutcome.NOTHING_TO_DELETE:
            return f"Nothing to delete: {self.path}"
        return f"{self.outcome.value.capitalize()} {self.path} -- reason: {self.reason}"


def write_person_log(
    person: str,
    person_log: Optional[Log],
    per_person_dir: Path,
    dry_run: bool = False,
) -> PersonLogWrite:
    """
    Write a person's log, or delete their stale file if `person_log` is None.

    I/O errors are returned as failed results, never raised.
    """
    path = person_log_path(per_person_dir, person)

    if person_log is None:
        if not path.exists():
            return PersonLogWrite(person, WriteOutcome.NOTHING_TO_DELETE, path)
        if dry_run:
            return PersonLogWrite(person, WriteOutcome.DELETED, path)
        try:
            path.unlink()
        except OSError as e:
            return PersonLogWrite(person, WriteOutcome.FAILED_TO_DELETE, path, e)
        return PersonLogWrite(person, WriteOutcome.DELETED, path)

    if dry_run:
        return PersonLogWrite(person, WriteOutcome.WRITTEN, path)

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(person_log.to_markdown(), encoding="utf-8")
    except OSError as e:
        return PersonLogWrite(person, WriteOutcome.FAILED_TO_WRITE, path, e)
    return PersonLogWrite(person, WriteOutcome.WRITTEN, path)


def write_per_person_logs(
    per_person: PerPersonLogs,
    per_person_dir: Path,
    logger: Optional[PeopleLogger] = None,
    dry_run: bool = False,
) -> Tuple[List[PersonLogWrite], ProjectionStats]:
    """
    Write every person's log, in name order.

    A failure for one person does not stop the others.

    Args:
        per_person: Output of split_log_per_person
        per_person_dir: Directory for `<PersonName>.md` files
        logger: Optional logger for operation tracking
        dry_run: If True, report what would happen without touching files

    Returns:
        One result per person and the accumulated statistics
    """
    stats = ProjectionStats()
    results: List[PersonLogWrite] = []

    safe_logger(logger).log_operation(
        "write_per_person_start",
        {"dir": str(per_person_dir), "people": len(per_person), "dry_run": dry_run},
    )

    for person in sorted(per_person):
        result = write_person_log(person, per_person[person], per_person_dir, dry_run)
        results.append(result)

        if result.outcome.failed:
            stats.errors += 1
            safe_logger(logger).log_error(
                PersonLogWriteError(person, result.path, result.error),
                {"operation": result.outcome.name.lower(), "person": person},
            )
        elif result.outcome is WriteOutcome.WRITTEN:
            stats.written += 1
        elif result.outcome is WriteOutcome.DELETED:
            stats.deleted += 1
        else:
            stats.nothing_to_delete += 1

        safe_logger(logger).log_debug(result.describe())

    safe_logger(logger).log_operation("write_per_person_complete", {"stats": stats.summary()})

    return results, stats
