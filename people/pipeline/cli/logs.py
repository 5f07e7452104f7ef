"""
Log Commands
------------

Commands that read the hand-written logs and write derived files.

Commands:
    - per-person: Project the merged log into per-person files
    - dump: Print the merged log in canonical form
"""
from __future__ import annotations

import click

from people.core.cli import ReadStats
from people.core.config import load_config
from people.core.logging_manager import PeopleLogger, handle_cli_error
from people.pipeline.per_person import split_log_per_person, write_per_person_logs
from people.pipeline.read_logs import read_logs


@click.command("per-person")
@click.option("--dry-run", is_flag=True, help="Preview changes without modifying files")
@click.pass_context
def per_person(ctx: click.Context, dry_run: bool) -> None:
    """
    Write one log per mentioned person.

    Every entry is copied to the log of each person it mentions. Files of
    ignored people are deleted.
    """
    logger: PeopleLogger = ctx.obj["logger"]

    try:
        config = load_config(ctx.obj["config_path"])
        log = read_logs(config.people_dir, logger)
        projected = split_log_per_person(log, config.ignored)
        results, stats = write_per_person_logs(
            projected, config.per_person_dir, logger, dry_run=dry_run
        )
    except Exception as e:
        handle_cli_error(
            ctx, e, "per_person",
            additional_context={"config": str(ctx.obj["config_path"])},
        )
        return

    logger.log_operation("per_person", {"dry_run": dry_run, **stats.to_dict()})

    if dry_run:
        click.echo("(DRY RUN - no files were modified)", err=True)

    for result in results:
        click.echo(result.describe(), err=True)

    click.echo(f"\n{stats.summary()}", err=True)

    if stats.errors:
        ctx.exit(1)


@click.command()
@click.option("--stats", "show_stats", is_flag=True, help="Print counts instead of the log")
@click.pass_context
def dump(ctx: click.Context, show_stats: bool) -> None:
    """Print the merged log of all files."""
    logger: PeopleLogger = ctx.obj["logger"]
    stats = ReadStats()

    try:
        config = load_config(ctx.obj["config_path"])
        log = read_logs(config.people_dir, logger, stats)
    except Exception as e:
        handle_cli_error(ctx, e, "dump")
        return

    logger.log_operation("dump", stats.to_dict())

    if show_stats:
        click.echo(stats.summary())
    else:
        click.echo(log.to_markdown(), nl=False)


__all__ = ["per_person", "dump"]
