"""
interaction.py
-------------------
Defines the LastInteraction dataclass: when a person was last the main
subject of a journal entry, and how far past their reachout reminder that
date is.
"""
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, replace
from datetime import date
from typing import Optional


@dataclass(frozen=True, order=True)
class LastInteraction:
    """
    Attributes:
        last: Date of the latest entry with the person as a main mention
        person: Person name
        days_beyond_reachout_threshold: Days past `last + reminder`, unset
            when no reminder is configured or the threshold is not reached
    """

    # Field order gives the (last, person) presentation order
    last: date
    person: str
    days_beyond_reachout_threshold: Optional[int] = None

    def ago(self, reference: date) -> int:
        """Days between `last` and `reference`."""
        return (reference - self.last).days

    def with_days_beyond(self, days: Optional[int]) -> LastInteraction:
        return replace(self, days_beyond_reachout_threshold=days)
