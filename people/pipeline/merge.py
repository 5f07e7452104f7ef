#!/usr/bin/env python3
"""
merge.py
-------------------
Merge logs by date.

Merging combines the per-file logs into the aggregate log. Each call
builds one date map and returns a new Log; the inputs are not modified.

Ordering contract:
    - The result has one Day per date, sorted ascending.
    - Within a date, entries from `previous` come before entries from `new`,
      and days repeated within one log are concatenated in their order.
    - Folding left to right over files in sorted filename order therefore
      orders same-date entries by file name, then by position in the file.
      Any other fold order gives the same days but may reorder entries
      within a date.

Programmatic API:
    from people.pipeline.merge import merge_days, merge_logs, merge_all

    log = merge_logs(previous, new)
    log = merge_all([first, second, third])
    log = merge_days(days)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from datetime import date
from itertools import chain
from typing import Dict, Iterable, List

# --- Local imports ---
from people.dataclasses.log import Day, Entry, Log


def merge_days(days: Iterable[Day]) -> Log:
    """
    Collect days into a Log with one Day per date, sorted by date.

    Entries of days sharing a date are concatenated in iteration order.
    """
    entries_by_date: Dict[date, List[Entry]] = {}
    for day in days:
        entries_by_date.setdefault(day.date, []).extend(day.entries)

    return Log(days=tuple(
        Day(date=day_date, entries=entries_by_date[day_date])
        for day_date in sorted(entries_by_date)
    ))


def merge_logs(previous: Log, new: Log) -> Log:
    """
    Merge two logs by date.

    Args:
        previous: Log whose entries come first within a shared date
        new: Log whose entries are appended within a shared date

    Returns:
        New Log sorted by date with one Day per date
    """
    return merge_days(chain(previous.days, new.days))


def merge_all(logs: Iterable[Log]) -> Log:
    """
    Merge any number of logs, same as folding them left to right with
    merge_logs.
    """
    return merge_days(chain.from_iterable(log.days for log in logs))
