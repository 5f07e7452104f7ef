#!/usr/bin/env python3
"""
summary.py
-------------------
Console table of last interactions.

    Days ago  PERSON   LAST        OVERDUE
           0  JaneDoe  2000-04-10
           3  Abu      2000-04-07

          12  JohnDoe  2000-03-29

          40  FooBar   2000-03-01  10

Rows go from most to least recent. A blank row marks the first row at or
beyond each of the 7, 14 and 28 days boundaries.

Programmatic API:
    from people.pipeline.summary import format_last_interactions
    click.echo(format_last_interactions(interactions, date.today()))
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from datetime import date
from typing import Iterable, List, Optional, Sequence

# --- Local imports ---
from people.dataclasses.interaction import LastInteraction


SPACER_BOUNDARIES = (7, 14, 28)
HEADER = ("Days ago", "PERSON", "LAST", "OVERDUE")
COLUMN_GAP = "  "


class Spacer:
    """
    Decides where blank separator rows go.

    Boundaries are consumed in order; each one yields at most one spacer,
    at the first value that reaches it.
    """

    def __init__(self, boundaries: Sequence[int]) -> None:
        self.boundaries = list(boundaries)
        self._next = 0

    def should_show_space(self, days_ago: int) -> bool:
        if self._next >= len(self.boundaries):
            return False
        if days_ago < self.boundaries[self._next]:
            return False
        self._next += 1
        return True


def _format_row(cells: Sequence[str], widths: Sequence[int]) -> str:
    first = cells[0].rjust(widths[0])
    rest = [cell.ljust(width) for cell, width in zip(cells[1:], widths[1:])]
    return COLUMN_GAP.join([first, *rest]).rstrip()


def format_last_interactions(
    interactions: Iterable[LastInteraction],
    today: date,
    boundaries: Sequence[int] = SPACER_BOUNDARIES,
) -> str:
    """
    Render last interactions as an aligned table, most recent first.

    Args:
        interactions: Interactions to show
        today: Reference date for "days ago"
        boundaries: Days-ago values that get a blank row before them

    Returns:
        Table text without a trailing newline
    """
    spacer = Spacer(boundaries)
    rows: List[Optional[List[str]]] = [list(HEADER)]

    for interaction in sorted(interactions, reverse=True):
        ago = interaction.ago(today)
        if spacer.should_show_space(ago):
            rows.append(None)

        overdue = interaction.days_beyond_reachout_threshold
        rows.append([
            str(ago),
            interaction.person,
            interaction.last.isoformat(),
            "" if overdue is None else str(overdue),
        ])

    widths = [
        max(len(row[column]) for row in rows if row is not None)
        for column in range(len(HEADER))
    ]

    return "\n".join(
        "" if row is None else _format_row(row, widths) for row in rows
    )
