#!/usr/bin/env python3
"""
config.py
-------------------
Configuration loading for the people log.

The configuration is a YAML file (by default ~/.config/people/config.yaml):

    people_dir: ~/people
    ignore:
      - JohnDoe
    people:
      - name: FooBar
        location: Here
        themes:
          - painting
        remind_after: 3 months

Only `people_dir` is required. Reminder durations are kept as text and
validated when reminders are assessed, so a bad value is reported against
its own entry.

Usage:
    from people.core.config import load_config

    config = load_config(CONFIG_PATH)
    config.per_person_dir
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, FrozenSet, List, Optional

# --- Third party imports ---
import yaml

# --- Local imports ---
from people.core.exceptions import ConfigError
from people.core.paths import LOG_SUBDIR, PER_PERSON_SUBDIR


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TrackedPerson:
    """
    A person listed in the configuration.

    Attributes:
        name: Person name as used in `#Name` mentions
        location: Free-text location (informative)
        themes: Topics shared with this person (informative)
        remind_after: Reminder duration text, e.g. "3 months"
    """

    name: str
    location: Optional[str] = None
    themes: List[str] = field(default_factory=list)
    remind_after: Optional[str] = None


@dataclass(frozen=True)
class Config:
    """
    Loaded configuration for one run.

    Attributes:
        people_dir: Directory holding `log/` and `per-person-logs/`
        ignore: Names that never get a per-person log
        people: Tracked people with optional reminder durations
    """

    people_dir: Path
    ignore: List[str] = field(default_factory=list)
    people: List[TrackedPerson] = field(default_factory=list)

    @property
    def log_dir(self) -> Path:
        return self.people_dir / LOG_SUBDIR

    @property
    def per_person_dir(self) -> Path:
        return self.people_dir / PER_PERSON_SUBDIR

    @property
    def ignored(self) -> FrozenSet[str]:
        return frozenset(self.ignore)


def _expect_list(data: Dict[str, Any], key: str) -> List[Any]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ConfigError(f"'{key}' must be a list, got {type(value).__name__}")
    return value


def _parse_person(raw: Any, index: int) -> TrackedPerson:
    if not isinstance(raw, dict):
        raise ConfigError(f"people[{index}] must be a mapping")

    name = raw.get("name")
    if not isinstance(name, str) or not name:
        raise ConfigError(f"people[{index}] is missing 'name'")

    themes = raw.get("themes") or []
    if not isinstance(themes, list):
        raise ConfigError(f"people[{index}] ({name}): 'themes' must be a list")

    remind_after = raw.get("remind_after")
    if remind_after is not None:
        remind_after = str(remind_after)

    location = raw.get("location")
    return TrackedPerson(
        name=name,
        location=str(location) if location is not None else None,
        themes=[str(theme) for theme in themes],
        remind_after=remind_after,
    )


def parse_config(content: str) -> Config:
    """
    Parse configuration YAML text.

    Args:
        content: YAML document

    Returns:
        Config with `~` expanded in people_dir

    Raises:
        ConfigError: If the document is not valid YAML or has the wrong shape
    """
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        logger.debug(f"Failed to parse config file: {e}")
        raise ConfigError(f"failed to parse because {e}") from e

    if not isinstance(data, dict):
        raise ConfigError("config must be a YAML mapping")

    people_dir = data.get("people_dir")
    if not people_dir:
        raise ConfigError("'people_dir' is required")

    ignore = [str(name) for name in _expect_list(data, "ignore")]
    people = [
        _parse_person(raw, index)
        for index, raw in enumerate(_expect_list(data, "people"))
    ]

    return Config(
        people_dir=Path(str(people_dir)).expanduser(),
        ignore=ignore,
        people=people,
    )


def load_config(path: Path) -> Config:
    """
    Load configuration from a YAML file.

    Raises:
        ConfigError: If the file does not exist, cannot be read or is invalid
    """
    path = Path(path).expanduser()
    if not path.exists():
        raise ConfigError(f"expected file at {path}, but it does not exist")

    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"cannot read {path}: {e}") from e

    try:
        config = parse_config(content)
    except ConfigError as e:
        raise ConfigError(f"{path}: {e}") from e

    logger.debug(
        f"Loaded config from {path}: {len(config.people)} people, "
        f"{len(config.ignore)} ignored"
    )
    return config
