"""
Tests for config module.

Tests YAML configuration parsing and loading.
"""
import pytest
from pathlib import Path
from textwrap import dedent

from people.core.config import Config, TrackedPerson, load_config, parse_config
from people.core.exceptions import ConfigError


class TestParseConfig:
    """Tests for parse_config."""

    def test_with_ignore(self):
        config = parse_config(dedent(
            """
            people_dir: /data/people
            ignore:
              - JohnDoe
              - JaneDoe
            """
        ))
        assert config.people_dir == Path("/data/people")
        assert config.ignore == ["JohnDoe", "JaneDoe"]
        assert config.people == []

    def test_without_ignore(self):
        config = parse_config("people_dir: /data/people\n")
        assert config.ignore == []
        assert config.ignored == frozenset()

    def test_special_characters(self):
        config = parse_config("people_dir: /p\nignore:\n  - Lucía\n")
        assert config.ignored == {"Lucía"}

    def test_with_people(self):
        config = parse_config(dedent(
            """
            people_dir: /p
            ignore:
              - Lucía
            people:
              - name: FooBar
                location: Here
                themes:
                  - painting
                  - uni
                remind_after: 3 months
              - name: Abu
            """
        ))
        assert config.people == [
            TrackedPerson(
                name="FooBar",
                location="Here",
                themes=["painting", "uni"],
                remind_after="3 months",
            ),
            TrackedPerson(name="Abu"),
        ]

    def test_home_is_expanded(self):
        config = parse_config("people_dir: ~/people\n")
        assert config.people_dir == Path.home() / "people"

    def test_derived_directories(self):
        config = Config(people_dir=Path("/p"))
        assert config.log_dir == Path("/p/log")
        assert config.per_person_dir == Path("/p/per-person-logs")

    def test_malformed_reminder_kept_as_text(self):
        """Durations are validated when reminders are assessed."""
        config = parse_config("people_dir: /p\npeople:\n  - name: A\n    remind_after: soon\n")
        assert config.people[0].remind_after == "soon"

    def test_missing_people_dir(self):
        with pytest.raises(ConfigError, match="people_dir"):
            parse_config("ignore: []\n")

    def test_invalid_yaml(self):
        with pytest.raises(ConfigError, match="failed to parse"):
            parse_config("people_dir: [unclosed\n")

    def test_not_a_mapping(self):
        with pytest.raises(ConfigError):
            parse_config("- a\n- b\n")

    def test_empty_document(self):
        with pytest.raises(ConfigError):
            parse_config("")

    def test_ignore_must_be_list(self):
        with pytest.raises(ConfigError, match="'ignore' must be a list"):
            parse_config("people_dir: /p\nignore: JohnDoe\n")

    def test_person_needs_name(self):
        with pytest.raises(ConfigError, match="people\\[0\\]"):
            parse_config("people_dir: /p\npeople:\n  - location: Here\n")


class TestLoadConfig:
    """Tests for load_config."""

    def test_load_from_file(self, tmp_dir):
        path = tmp_dir / "config.yaml"
        path.write_text("people_dir: /p\nignore:\n  - Abu\n", encoding="utf-8")
        config = load_config(path)
        assert config.people_dir == Path("/p")
        assert config.ignore == ["Abu"]

    def test_missing_file(self, tmp_dir):
        with pytest.raises(ConfigError, match="does not exist"):
            load_config(tmp_dir / "missing.yaml")

    def test_error_names_file(self, tmp_dir):
        path = tmp_dir / "config.yaml"
        path.write_text("ignore: []\n", encoding="utf-8")
        with pytest.raises(ConfigError) as exc_info:
            load_config(path)
        assert str(path) in str(exc_info.value)
