#!/usr/bin/env python3
"""
read_logs.py
-------------------
Build the aggregate log from the hand-written log files.

    <people_dir>/
    └── log/
        ├── 2023-people.md
        └── 2024-people.md

Every `*people.md` file is parsed and the results are merged in sorted
filename order into a single log with one Day per date.

Programmatic API:
    from people.pipeline.read_logs import read_logs
    log = read_logs(people_dir, logger)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import List, Optional, Tuple

# --- Local imports ---
from people.core.cli import ReadStats
from people.core.exceptions import LogParseError, LogReadError
from people.core.logging_manager import PeopleLogger, safe_logger
from people.dataclasses.log import Log
from people.pipeline.merge import merge_all
from people.utils.fs import find_log_files


def read_logs(
    people_dir: Path,
    logger: Optional[PeopleLogger] = None,
    stats: Optional[ReadStats] = None,
) -> Log:
    """
    Read, parse and merge all log files of a people directory.

    Every file is attempted; failures are collected so that all of them are
    reported together.

    Args:
        people_dir: Directory holding the `log/` subdirectory
        logger: Optional logger for operation tracking
        stats: Optional ReadStats updated in place

    Returns:
        Aggregate Log sorted by date, empty if there are no files

    Raises:
        LogReadError: If any file could not be read or parsed
    """
    stats = stats if stats is not None else ReadStats()
    files = find_log_files(people_dir)

    safe_logger(logger).log_operation(
        "read_logs_start", {"people_dir": str(people_dir), "files": len(files)}
    )

    file_logs: List[Log] = []
    failures: List[Tuple[Path, Exception]] = []

    for path in files:
        try:
            file_log = Log.from_file(path)
        except (OSError, UnicodeDecodeError, LogParseError) as e:
            stats.errors += 1
            failures.append((path, e))
            safe_logger(logger).log_error(e, {"operation": "parse_file", "file": str(path)})
            continue

        stats.files_read += 1
        safe_logger(logger).log_debug(
            f"Parsed {path.name}",
            {"days": len(file_log.days), "entries": file_log.entry_count},
        )
        file_logs.append(file_log)

    if failures:
        raise LogReadError(failures)

    aggregate = merge_all(file_logs)

    if aggregate.is_empty:
        safe_logger(logger).log_info(f"No log entries under {people_dir}")

    stats.days = len(aggregate.days)
    stats.entries = aggregate.entry_count

    safe_logger(logger).log_operation("read_logs_complete", {"stats": stats.summary()})

    return aggregate
