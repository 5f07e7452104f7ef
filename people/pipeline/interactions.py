#!/usr/bin/env python3
"""
interactions.py
-------------------
Last interactions and reachout reminders.

A person's last interaction is the latest day with an entry that has them
as a main mention (on the entry's first line). Mentions deeper in an entry
do not count.

When the configuration gives a person a reminder duration, their reachout
threshold is `last + duration`; once today is past it, the summary shows
how many days beyond it they are.

Programmatic API:
    from people.pipeline.interactions import get_last_interactions, assess_reminders

    interactions = get_last_interactions(log)
    interactions = assess_reminders(interactions, config.people, date.today())
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from datetime import date, timedelta
from typing import AbstractSet, Dict, Iterable, List, Optional, Sequence

# --- Local imports ---
from people.core.config import TrackedPerson
from people.dataclasses.interaction import LastInteraction
from people.dataclasses.log import Log
from people.utils.durations import parse_duration


def get_last_interactions(log: Log) -> List[LastInteraction]:
    """
    Get each main-mentioned person's last interaction.

    Returns:
        One LastInteraction per person, sorted by (last, person)
    """
    last_seen: Dict[str, date] = {}
    for day in log.days:
        for entry in day.entries:
            for person in entry.main:
                if person not in last_seen or last_seen[person] < day.date:
                    last_seen[person] = day.date

    return sorted(
        LastInteraction(last=day_date, person=person)
        for person, day_date in last_seen.items()
    )


def days_beyond_threshold(
    last: date, reminder: timedelta, today: date
) -> Optional[int]:
    """
    Days `today` is past `last + reminder`, or None if not past it.

    Examples:
        >>> days_beyond_threshold(date(2000, 1, 1), timedelta(days=90), date(2000, 4, 10))
        10
        >>> days_beyond_threshold(date(2000, 1, 1), timedelta(days=90), date(2000, 3, 31)) is None
        True
    """
    threshold = last + reminder
    if today > threshold:
        return (today - threshold).days
    return None


def assess_reminders(
    interactions: Sequence[LastInteraction],
    people: Iterable[TrackedPerson],
    today: date,
) -> List[LastInteraction]:
    """
    Set days beyond the reachout threshold for people with a reminder.

    People without a configured reminder pass through unchanged.

    Raises:
        ReminderDurationError: If a configured reminder is malformed
    """
    reminders = {
        person.name: parse_duration(person.remind_after, person=person.name)
        for person in people
        if person.remind_after is not None
    }

    return [
        interaction.with_days_beyond(
            days_beyond_threshold(interaction.last, reminders[interaction.person], today)
        )
        if interaction.person in reminders
        else interaction
        for interaction in interactions
    ]


def discard_ignored(
    interactions: Iterable[LastInteraction], ignored: AbstractSet[str]
) -> List[LastInteraction]:
    """Drop interactions of ignored people."""
    return [
        interaction for interaction in interactions
        if interaction.person not in ignored
    ]
