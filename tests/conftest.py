"""
conftest.py
-----------
Shared pytest fixtures for people log tests.

Provides fixtures for:
- Temporary directories
- Sample log content
- People directory and configuration file builders
"""
import pytest
from pathlib import Path
from tempfile import TemporaryDirectory
from textwrap import dedent


# ----- Path Fixtures -----

@pytest.fixture
def tmp_dir():
    """Create a temporary directory for test file operations."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


# ----- Sample Log Content Fixtures -----

@pytest.fixture
def sample_log_content():
    """Two days, three entries, one peripheral mention (#Bleh)."""
    return dedent(
        """\
        # 2000-01-01

        - #JohnDoe :
          - stuff: blah

        # 2000-01-02

        - #JohnDoe :
          - stuff: blah
          - other: bleh #Bleh
        - #JaneDoe, #Abu :
          - meet at foo
            - nested stuff
        """
    )


@pytest.fixture
def second_log_content():
    """Overlaps the sample on 2000-01-02 and adds a later day."""
    return dedent(
        """\
        # 2000-01-02

        - #Abu : coffee

        # 2000-02-10

        - #Lucía :
          - called about the trip #JohnDoe
        """
    )


# ----- People Directory Fixtures -----

@pytest.fixture
def make_people_dir(tmp_dir):
    """
    Factory creating a people directory with the given log files.

    Usage:
        people_dir = make_people_dir({"2000-people.md": content})
    """
    def _make(files):
        people_dir = tmp_dir / "people"
        log_dir = people_dir / "log"
        log_dir.mkdir(parents=True, exist_ok=True)
        for name, content in files.items():
            (log_dir / name).write_text(content, encoding="utf-8")
        return people_dir

    return _make


@pytest.fixture
def make_config_file(tmp_dir):
    """
    Factory writing a config.yaml pointing at `people_dir`.

    Usage:
        config_path = make_config_file(people_dir, ignore=["Bleh"])
    """
    def _make(people_dir, ignore=None, people=None):
        lines = [f"people_dir: {people_dir}"]
        if ignore:
            lines.append("ignore:")
            lines.extend(f"  - {name}" for name in ignore)
        if people:
            lines.append("people:")
            for person in people:
                lines.append(f"  - name: {person['name']}")
                if "remind_after" in person:
                    lines.append(f"    remind_after: {person['remind_after']}")
        path = tmp_dir / "config.yaml"
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _make
