"""Training statistics commands."""

import click

from ..services.analytics import (
    aggregate_into_categories,
    calculate_training_score,
    get_volume_history,
)
from .base import async_command, ensure_initialized, format_table, get_storage


@click.group()
@click.pass_context
def stats(ctx):
    """Show training statistics."""
    ensure_initialized(ctx)


@stats.command()
@click.option("--weeks", "-w", default=4, type=click.IntRange(1, 52), help="Weeks of history")
@click.pass_context
@async_command
async def volume(ctx, weeks: int):
    """Weekly working sets per muscle category."""
    storage = get_storage()
    history = await get_volume_history(storage, weeks=weeks)

    headers = ["Week"]
    headers += [c.name for c in aggregate_into_categories(history[0].muscle_groups)]
    headers += ["Score"]

    rows = []
    for week in history:
        categories = aggregate_into_categories(week.muscle_groups)
        rows.append(
            [week.week_start.isoformat()]
            + [f"{c.total_sets}/{c.total_target}" for c in categories]
            + [f"{calculate_training_score(week.muscle_groups)}%"]
        )

    click.echo()
    click.echo(format_table(headers, rows))
