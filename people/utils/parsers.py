#!/usr/bin/env python3
"""
parsers.py
--------------------
Parsing utilities for person mentions in log content.

A mention is `#` immediately followed by one or more letters (ASCII or
one of ñ á é í ó ú ç). The letter run, without the `#`, is the person
name. Names are case-sensitive.

Functions:
    extract_mentions: Set of person names mentioned in a line

Usage:
    from people.utils.parsers import extract_mentions

    extract_mentions("- #JaneDoe, #Abu : lunch")
    # Returns: frozenset({"JaneDoe", "Abu"})
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import re
from typing import FrozenSet


MENTION_PATTERN = re.compile(r"#([A-Za-zñáéíóúç]+)")


def extract_mentions(content: str) -> FrozenSet[str]:
    """
    Extract person mentions from a line of content.

    Duplicates collapse; the result is a set.

    Examples:
        >>> sorted(extract_mentions("- #JohnDoe met #Lucía and #JohnDoe"))
        ['JohnDoe', 'Lucía']
        >>> extract_mentions("# 2000-01-01")
        frozenset()
    """
    return frozenset(MENTION_PATTERN.findall(content))
