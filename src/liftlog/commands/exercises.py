"""Exercise library commands."""

import click

from ..models.exercises import Exercise, MuscleGroup
from ..utils.exercise_utils import search_exercises
from .base import async_command, echo_info, ensure_initialized, format_table, get_storage


@click.group()
@click.pass_context
def exercises(ctx):
    """Browse the exercise library."""
    ensure_initialized(ctx)


def _exercise_rows(items: list[Exercise]) -> list[list[str]]:
    rows = []
    for exercise in items:
        rows.append([
            exercise.id,
            exercise.name,
            ", ".join(mg.value for mg in exercise.primary_muscle_groups),
            exercise.equipment.value,
            "custom" if exercise.is_custom else "",
        ])
    return rows


HEADERS = ["ID", "Name", "Primary muscles", "Equipment", ""]


@exercises.command(name="list")
@click.option(
    "--muscle",
    "-m",
    type=click.Choice([mg.value for mg in MuscleGroup]),
    help="Only exercises training this muscle group",
)
@click.pass_context
@async_command
async def list_exercises(ctx, muscle: str | None):
    """List exercises in the library."""
    storage = get_storage()
    catalog = await storage.get_exercises()

    if muscle:
        catalog = search_exercises("", catalog, muscle_group=MuscleGroup(muscle))

    if not catalog:
        echo_info("No exercises found")
        return

    click.echo()
    click.echo(format_table(HEADERS, _exercise_rows(catalog)))
    click.echo()
    click.echo(f"Total: {len(catalog)} exercise(s)")


@exercises.command()
@click.argument("query")
@click.pass_context
@async_command
async def search(ctx, query: str):
    """Search exercises by name."""
    storage = get_storage()
    results = search_exercises(query, await storage.get_exercises())

    if not results:
        echo_info(f"No exercises match '{query}'")
        return

    click.echo()
    click.echo(format_table(HEADERS, _exercise_rows(results)))
