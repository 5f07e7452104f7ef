#!/usr/bin/env python3
"""
People Log CLI
--------------

Command-line interface for the people journal.

Commands:
    - per-person: Write one log file per mentioned person
    - summary: Show last interactions and overdue reachouts
    - dump: Print the merged log

Usage:
    people per-person
    people per-person --dry-run
    people summary
    people summary --today 2024-06-01 --overdue-only
    people dump
"""
from __future__ import annotations

import click
from pathlib import Path

from people.core.paths import CONFIG_ENVVAR, CONFIG_PATH, LOG_DIR
from people.core.cli import setup_logger


@click.group()
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=str(CONFIG_PATH),
    envvar=CONFIG_ENVVAR,
    show_default=True,
    help="Path to the YAML configuration file",
)
@click.option(
    "--log-dir",
    type=click.Path(file_okay=False),
    default=str(LOG_DIR),
    help="Directory for log files",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose logging")
@click.pass_context
def cli(ctx: click.Context, config_path: str, log_dir: str, verbose: bool) -> None:
    """People journal: per-person logs and last interactions"""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = Path(config_path)
    ctx.obj["log_dir"] = Path(log_dir)
    ctx.obj["verbose"] = verbose
    ctx.obj["logger"] = setup_logger(Path(log_dir), "people")


# Import and register commands from submodules
from .logs import per_person, dump
from .summary import summary

cli.add_command(per_person)
cli.add_command(dump)
cli.add_command(summary)


if __name__ == "__main__":
    cli(obj={})
