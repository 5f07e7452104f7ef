"""
tokens.py
-------------------
Line tokenizer and classifier for the people log format.

A log file is a sequence of physical lines. Each line becomes a Token
(line number, indentation, content) and each Token is classified as one
of three kinds:

    EmptyLine   - zero indentation and no content
    DateHeader  - `# YYYY-MM-DD` at zero indentation
    Record      - anything else (journal content)

Tabs are expanded to two spaces before indentation is measured, so a tab
and two spaces indent identically.

Intended to be consumed by the Log assembler in people.dataclasses.log.
"""
from __future__ import annotations

# --- Standard library imports ---
import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import List, Optional, Union


# ----- Constants -----
TAB = "\t"
TAB_REPLACEMENT = "  "
DATE_HEADER_PREFIX = "# "
DATE_FORMAT = "%Y-%m-%d"
DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


# ----- Token -----
@dataclass(frozen=True)
class Token:
    """
    One physical line of a log file.

    Attributes:
        line_number: 0-based line number
        indentation: Leading whitespace count, after tab expansion
        content: Line with leading whitespace removed
    """

    line_number: int
    indentation: int
    content: str

    def to_line(self) -> str:
        """Rebuild the tab-expanded physical line."""
        return " " * self.indentation + self.content


# ----- Line kinds -----
@dataclass(frozen=True)
class EmptyLine:
    line_number: int


@dataclass(frozen=True)
class DateHeader:
    line_number: int
    date: date


@dataclass(frozen=True)
class Record:
    token: Token

    @property
    def line_number(self) -> int:
        return self.token.line_number


Line = Union[EmptyLine, DateHeader, Record]


# ----- Tokenizing -----
def tokenize_line(line: str, line_number: int) -> Token:
    """
    input: line, a physical line without its newline
    output: Token with measured indentation and stripped content
    process: expands tabs, then counts leading whitespace
    """
    expanded = line.replace(TAB, TAB_REPLACEMENT)
    content = expanded.lstrip()
    return Token(
        line_number=line_number,
        indentation=len(expanded) - len(content),
        content=content,
    )


def tokenize(text: str) -> List[Token]:
    """
    input: text, the full content of a log file
    output: one Token per `\\n`-separated line, numbered from 0
    """
    return [
        tokenize_line(line, line_number)
        for line_number, line in enumerate(text.split("\n"))
    ]


# ----- Classifying -----
def parse_date_header(token: Token) -> Optional[date]:
    """
    Parse a `# YYYY-MM-DD` header.

    Returns None for anything else, including `# ` lines whose remainder is
    not a valid calendar date; those stay ordinary content.

    Examples:
        >>> parse_date_header(Token(0, 0, "# 2000-01-01"))
        datetime.date(2000, 1, 1)
        >>> parse_date_header(Token(0, 0, "# Not a date")) is None
        True
        >>> parse_date_header(Token(0, 0, "# 2000-02-30")) is None
        True
    """
    if token.indentation != 0:
        return None
    if not token.content.startswith(DATE_HEADER_PREFIX):
        return None

    raw = token.content[len(DATE_HEADER_PREFIX):].rstrip()
    if not DATE_PATTERN.match(raw):
        return None

    try:
        return datetime.strptime(raw, DATE_FORMAT).date()
    except ValueError:
        return None


def classify(token: Token) -> Line:
    """Classify a token as EmptyLine, DateHeader or Record."""
    if token.indentation == 0 and not token.content:
        return EmptyLine(token.line_number)

    header_date = parse_date_header(token)
    if header_date is not None:
        return DateHeader(token.line_number, header_date)

    return Record(token)


def classify_text(text: str) -> List[Line]:
    """Tokenize and classify every line of `text`."""
    return [classify(token) for token in tokenize(text)]
