#!/usr/bin/env python3
"""
log.py
-------------------

Defines the Entry, Day and Log dataclasses representing a people journal
parsed from `*people.md` files.

A log file looks like:

    # 2000-01-02

    - #JohnDoe :
      - stuff: blah
      - other: bleh #Bleh
    - #JaneDoe, #Abu :
      - meet at foo

- A Day starts at each `# YYYY-MM-DD` header.
- An Entry starts at each top-level line and takes every indented line
  below it.
- Mentions on the first line of an entry are its `main` people; mentions
  anywhere in it are its `related` people.

Parsing is a small state machine over classified lines (see
people.utils.tokens); rendering with `to_markdown()` is its exact inverse
for text in canonical form.

All three classes are frozen. Sequences are stored as tuples and sets as
frozensets; lists and sets passed to the constructors are converted.
"""
# ---- Annotations ----
from __future__ import annotations

# ---- Standard library imports ----
import logging
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from textwrap import dedent
from typing import FrozenSet, Iterable, List, Optional, Sequence, Tuple, Union

# ---- Local imports ----
from people.core.exceptions import LogParseError
from people.utils.parsers import extract_mentions
from people.utils.tokens import DateHeader, EmptyLine, Line, Record, Token, classify_text


# ----- Logging ----
logger = logging.getLogger(__name__)


# ----- Dataclasses -----
@dataclass(frozen=True)
class Entry:
    """
    One journal note, possibly with nested sub-bullets.

    Attributes:
        main: People mentioned on the entry's first line
        related: People mentioned anywhere in the entry (superset of main)
        content: Entry lines, dedented, joined with newlines
    """

    main: FrozenSet[str]
    related: FrozenSet[str]
    content: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "main", frozenset(self.main))
        object.__setattr__(self, "related", frozenset(self.related))

    @classmethod
    def from_tokens(cls, tokens: Sequence[Token]) -> Entry:
        """
        Build an entry from its tokens, opener first.

        Indentation among the lines is kept relative to the least indented
        one.
        """
        if not tokens:
            raise ValueError("An entry needs at least one line")

        main = extract_mentions(tokens[0].content)
        related = frozenset().union(*(extract_mentions(t.content) for t in tokens))
        content = dedent("\n".join(token.to_line() for token in tokens))

        return cls(main=main, related=related, content=content)

    def to_markdown(self) -> str:
        return self.content


@dataclass(frozen=True)
class Day:
    """
    All entries recorded under one date, in source order.

    Attributes:
        date: Calendar date from the `# YYYY-MM-DD` header
        entries: Entries under that header
    """

    date: date
    entries: Tuple[Entry, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", tuple(self.entries))

    @classmethod
    def from_tokens(cls, day_date: date, tokens: Sequence[Token]) -> Day:
        """
        Group record tokens into entries.

        A token at indentation 0 opens a new entry. The first token always
        opens the first entry, even when it is indented.
        """
        entries: List[Entry] = []
        buffer: List[Token] = []

        for token in tokens:
            if token.indentation == 0 and buffer:
                entries.append(Entry.from_tokens(buffer))
                buffer = []
            buffer.append(token)

        if buffer:
            entries.append(Entry.from_tokens(buffer))

        return cls(date=day_date, entries=tuple(entries))

    def to_markdown(self) -> str:
        body = "\n".join(entry.to_markdown() for entry in self.entries)
        return f"# {self.date.isoformat()}\n\n{body}"


@dataclass(frozen=True)
class Log:
    """
    An ordered collection of days.

    A log parsed from one file keeps source order and may repeat a date;
    a merged log (people.pipeline.merge) is sorted with one day per date.

    Attributes:
        days: Days in order
    """

    days: Tuple[Day, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "days", tuple(self.days))

    # ---- Public constructors ----
    @classmethod
    def from_text(cls, text: str) -> Log:
        """
        Parse the content of one log file.

        Raises:
            LogParseError: If content appears before the first date header
        """
        return cls(days=_assemble_days(classify_text(text)))

    @classmethod
    def from_file(cls, path: Path) -> Log:
        """
        Parse a single log file.

        Raises:
            OSError, UnicodeDecodeError: If the file cannot be read
            LogParseError: If content appears before the first date header
        """
        logger.debug(f"Reading file: {path}")

        text = Path(path).read_text(encoding="utf-8")

        try:
            log = cls.from_text(text)
        except LogParseError as e:
            raise e.with_path(Path(path)) from None

        logger.debug(f"Parsed {len(log.days)} days from {Path(path).name}")
        return log

    # ---- Properties ----
    @property
    def entry_count(self) -> int:
        return sum(len(day.entries) for day in self.days)

    @property
    def is_empty(self) -> bool:
        return not self.days

    # ---- Serialization ----
    def to_markdown(self) -> str:
        """
        Render the log back to text.

        Days are separated by a blank line and the text ends with a newline.
        """
        return "\n\n".join(day.to_markdown() for day in self.days) + "\n"


# ----- Assembly state machine -----
@dataclass(frozen=True)
class _NoActiveDate:
    """No date header seen yet; content here has no owner."""


@dataclass(frozen=True)
class _BufferingUnderDate:
    """Collecting record tokens under the last seen date header."""

    date: date
    tokens: Tuple[Token, ...] = ()


_AssemblyState = Union[_NoActiveDate, _BufferingUnderDate]


def _close(state: _AssemblyState) -> Optional[Day]:
    if isinstance(state, _BufferingUnderDate) and state.tokens:
        return Day.from_tokens(state.date, state.tokens)
    return None


def _transition(
    state: _AssemblyState, line: Line
) -> Tuple[_AssemblyState, Optional[Day]]:
    """
    Advance the assembler by one line.

    Returns the next state and the day closed by this line, if any.
    """
    if isinstance(line, EmptyLine):
        return state, None

    if isinstance(line, DateHeader):
        return _BufferingUnderDate(line.date), _close(state)

    if isinstance(line, Record):
        if isinstance(state, _NoActiveDate):
            raise LogParseError(
                "content before any '# YYYY-MM-DD' date header",
                line_number=line.line_number,
            )
        return _BufferingUnderDate(state.date, state.tokens + (line.token,)), None

    raise TypeError(f"Unknown line kind: {line!r}")


def _assemble_days(lines: Iterable[Line]) -> Tuple[Day, ...]:
    state: _AssemblyState = _NoActiveDate()
    days: List[Day] = []

    for line in lines:
        state, closed = _transition(state, line)
        if closed is not None:
            days.append(closed)

    last = _close(state)
    if last is not None:
        days.append(last)

    return tuple(days)
