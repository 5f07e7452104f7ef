"""
Utilities package for the people log.

This package provides commonly-used utilities organized by domain:
- tokens: Line tokenizer and classifier
- parsers: Person mention extraction
- durations: Reminder duration parsing
- fs: People directory discovery

Import commonly-used utilities directly from this package:
    from people.utils import extract_mentions, parse_duration
"""

from .durations import parse_duration
from .fs import find_log_files, person_log_path
from .parsers import extract_mentions
from .tokens import classify, classify_text, tokenize, tokenize_line

__all__ = [
    # Durations
    "parse_duration",
    # Filesystem
    "find_log_files",
    "person_log_path",
    # Parsers
    "extract_mentions",
    # Tokens
    "classify",
    "classify_text",
    "tokenize",
    "tokenize_line",
]
