"""
durations.py
-------------------
Reminder duration parsing.

Durations are written in the configuration as `<integer amount> <unit>`,
e.g. `3 months`. Months count as 30 days and weeks as 7.
"""
from __future__ import annotations

# --- Standard library imports ---
import re
from datetime import timedelta
from typing import Dict, Optional

# --- Local imports ---
from people.core.exceptions import ReminderDurationError


AMOUNT_PATTERN = re.compile(r"[0-9]+")

UNIT_DAYS: Dict[str, int] = {
    "day": 1,
    "days": 1,
    "week": 7,
    "weeks": 7,
    "month": 30,
    "months": 30,
}


def parse_duration(text: str, person: Optional[str] = None) -> timedelta:
    """
    input: text, e.g. "3 months"; person, for error messages
    output: timedelta of amount * unit days
    raises: ReminderDurationError if the amount is not a non-negative
        integer or the unit is unknown

    Examples:
        >>> parse_duration("3 months")
        datetime.timedelta(days=90)
        >>> parse_duration("1 week")
        datetime.timedelta(days=7)
    """
    parts = text.split()
    if len(parts) != 2:
        raise ReminderDurationError(
            text, "expected '<amount> <unit>'", person=person
        )

    raw_amount, unit = parts
    if raw_amount.startswith("-") and AMOUNT_PATTERN.fullmatch(raw_amount[1:]):
        raise ReminderDurationError(text, "amount must not be negative", person=person)

    # ASCII digits only, no sign or separators
    if not AMOUNT_PATTERN.fullmatch(raw_amount):
        raise ReminderDurationError(
            text, f"amount {raw_amount!r} is not an integer", person=person
        )
    amount = int(raw_amount)

    if unit not in UNIT_DAYS:
        known = ", ".join(UNIT_DAYS)
        raise ReminderDurationError(
            text, f"unknown unit {unit!r}, expected one of: {known}", person=person
        )

    return timedelta(days=amount * UNIT_DAYS[unit])
