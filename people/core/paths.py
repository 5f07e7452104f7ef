#!/usr/bin/env python3
"""
paths.py
-------------------
Path constants for the people log project.

The people directory (configured in the YAML config file) is laid out as:
    <people_dir>/
    ├── log/               # Hand-written journals, *people.md
    └── per-person-logs/   # Generated, one <PersonName>.md per person

Application state lives outside the people directory:
    ~/.config/people/config.yaml   # Configuration
    ~/.local/state/people/logs/    # Application logs
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path


# ----- User directories -----
HOME: Path = Path.home()
CONFIG_PATH: Path = HOME / ".config" / "people" / "config.yaml"
CONFIG_ENVVAR = "PEOPLE_CONFIG"
LOG_DIR: Path = HOME / ".local" / "state" / "people" / "logs"

# ----- People directory layout -----
LOG_SUBDIR = "log"
PER_PERSON_SUBDIR = "per-person-logs"
LOG_FILE_PATTERN = "*people.md"
PERSON_LOG_SUFFIX = ".md"
