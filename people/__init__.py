"""
People Log
==========

A personal relationship journal kept as plain Markdown.

Daily notes are written under `# YYYY-MM-DD` headers in `*people.md` files
and mention people as `#JohnDoe`. From those files this package derives:
    - one log per person with every entry that mentions them
    - each person's last interaction
    - how far past their reachout reminder each person is

Main Components:
    - core: Configuration, logging, exceptions, paths
    - dataclasses: Entry, Day, Log and LastInteraction
    - utils: Tokenizer, mention and duration parsers, filesystem helpers
    - pipeline: Reading, merging, per-person projection, summaries, CLI

Primary Interfaces:
    - people.pipeline.cli: Command-line interface
    - people.dataclasses.log.Log: Parsing and rendering

Example Usage:
    >>> from people.dataclasses import Log
    >>> log = Log.from_text("# 2000-01-01\\n\\n- #JohnDoe : lunch\\n")
    >>> log.days[0].entries[0].main
    frozenset({'JohnDoe'})
"""

__version__ = "1.0.0"
