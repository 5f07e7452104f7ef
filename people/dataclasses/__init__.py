"""
dataclasses package
-------------------
Dataclass definitions for the people journal.

- Entry, Day, Log: Parsed journal structure (people.dataclasses.log)
- LastInteraction: Last main mention of a person (people.dataclasses.interaction)
"""
from people.dataclasses.interaction import LastInteraction
from people.dataclasses.log import Day, Entry, Log

__all__ = ["Day", "Entry", "LastInteraction", "Log"]
