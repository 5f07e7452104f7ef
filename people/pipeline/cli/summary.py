"""
Summary Command
---------------

Show when each person was last the subject of an entry.

Commands:
    - summary: Last interactions table with overdue reachouts
"""
from __future__ import annotations

import click
from datetime import date, datetime
from typing import Optional

from people.core.config import load_config
from people.core.logging_manager import PeopleLogger, handle_cli_error
from people.pipeline.interactions import (
    assess_reminders,
    discard_ignored,
    get_last_interactions,
)
from people.pipeline.read_logs import read_logs
from people.pipeline.summary import format_last_interactions


@click.command()
@click.option(
    "--today",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    default=None,
    help="Reference date (default: today)",
)
@click.option(
    "--overdue-only",
    is_flag=True,
    help="Only show people past their reachout reminder",
)
@click.pass_context
def summary(ctx: click.Context, today: Optional[datetime], overdue_only: bool) -> None:
    """
    Show last interactions, most recent first.

    Only entries where a person is mentioned on the first line count as an
    interaction.
    """
    logger: PeopleLogger = ctx.obj["logger"]
    reference = today.date() if today is not None else date.today()

    try:
        config = load_config(ctx.obj["config_path"])
        log = read_logs(config.people_dir, logger)
        interactions = discard_ignored(get_last_interactions(log), config.ignored)
        interactions = assess_reminders(interactions, config.people, reference)
    except Exception as e:
        handle_cli_error(ctx, e, "summary", additional_context={"today": str(reference)})
        return

    if overdue_only:
        interactions = [
            interaction for interaction in interactions
            if interaction.days_beyond_reachout_threshold is not None
        ]

    logger.log_operation(
        "summary", {"people": len(interactions), "today": reference.isoformat()}
    )
    click.echo(format_last_interactions(interactions, reference))


__all__ = ["summary"]
