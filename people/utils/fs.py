#!/usr/bin/env python3
"""
fs.py
-------------------
Filesystem utilities for the people directory.

Functions:
    find_log_files: Discover hand-written log files, sorted by name
    person_log_path: Path of a person's generated log

Usage:
    from people.utils.fs import find_log_files

    files = find_log_files(Path("~/people").expanduser())
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import List

# --- Local imports ---
from people.core.paths import LOG_FILE_PATTERN, LOG_SUBDIR, PERSON_LOG_SUFFIX


def find_log_files(people_dir: Path, pattern: str = LOG_FILE_PATTERN) -> List[Path]:
    """
    Find all log files under `<people_dir>/log/`.

    Files are sorted lexicographically by path; this order decides how
    same-date entries from different files are concatenated.
    """
    log_dir = Path(people_dir) / LOG_SUBDIR
    if not log_dir.is_dir():
        return []
    return sorted(path for path in log_dir.glob(pattern) if path.is_file())


def person_log_path(per_person_dir: Path, person: str) -> Path:
    """Path of the generated log for `person`."""
    return Path(per_person_dir) / f"{person}{PERSON_LOG_SUFFIX}"
