"""Import workout history commands."""

from pathlib import Path

import click
import questionary

from ..models.exercises import Exercise
from ..models.setgraph import SetgraphExerciseMapping
from ..services.setgraph_import import (
    SetgraphValidationError,
    import_setgraph_csv,
    preview_setgraph_import,
)
from ..utils.exercise_utils import rank_exercise_matches
from .base import (
    async_command,
    echo_error,
    echo_info,
    echo_success,
    echo_warning,
    ensure_initialized,
    format_table,
    get_storage,
    prompt_style,
)

# Errors printed after an import; the rest are only counted
MAX_ERRORS_SHOWN = 10

# Menu value for "no catalog match". questionary swaps a None value for the title.
CREATE_NEW = ""


@click.group(name="import")
@click.pass_context
def import_data(ctx):
    """Import workout history from other apps.

    Available sources:
    - setgraph: Setgraph CSV export
    """
    ensure_initialized(ctx)


def _mapping_table(
    mappings: list[SetgraphExerciseMapping],
    exercises_by_id: dict[str, Exercise],
) -> str:
    rows = []
    for mapping in mappings:
        if mapping.exercise_id:
            exercise = exercises_by_id.get(mapping.exercise_id)
            target = exercise.name if exercise else mapping.exercise_id
            status = "matched"
        else:
            target = "-"
            status = "new exercise"
        rows.append([mapping.setgraph_name, target, status])
    return format_table(["Setgraph name", "Exercise", "Status"], rows)


async def _resolve_mapping(
    mapping: SetgraphExerciseMapping,
    exercises: list[Exercise],
) -> SetgraphExerciseMapping:
    """Ask which exercise an unmatched Setgraph name refers to."""
    choices = [questionary.Choice("Create a new exercise", CREATE_NEW)]
    for exercise, score in rank_exercise_matches(mapping.setgraph_name, exercises, limit=8):
        choices.append(questionary.Choice(f"{exercise.name} ({score:.0%})", exercise.id))

    exercise_id = await questionary.select(
        f"'{mapping.setgraph_name}' has no match. Map it to:",
        choices=choices,
        style=prompt_style,
    ).ask_async()

    return SetgraphExerciseMapping(
        setgraph_name=mapping.setgraph_name,
        exercise_id=exercise_id or None,
        needs_mapping=False,
    )


@import_data.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--yes", "-y", is_flag=True, help="Accept proposed mappings without prompting")
@click.pass_context
@async_command
async def setgraph(ctx, path: Path, yes: bool):
    """Import a Setgraph CSV export.

    Each exercise name in the export is matched against the exercise
    library. Names without a match can be mapped interactively; anything
    left unmapped becomes a new custom exercise. Every day in the export
    becomes one workout.

    Example:
        liftlog import setgraph setgraph-export.csv
    """
    content = path.read_text(encoding="utf-8-sig")
    storage = get_storage()

    preview = await preview_setgraph_import(content, storage)
    if not preview.validation.valid:
        for error in preview.validation.errors:
            echo_error(error)
        ctx.exit(1)

    echo_info(
        f"Found {preview.validation.row_count} sets of "
        f"{len(preview.exercise_names)} exercises"
    )

    exercises = await storage.get_exercises()
    exercises_by_id = {e.id: e for e in exercises}

    click.echo()
    click.echo(_mapping_table(preview.mappings, exercises_by_id))
    click.echo()

    mappings = preview.mappings
    if not yes:
        mappings = [
            await _resolve_mapping(m, exercises) if m.needs_mapping else m
            for m in preview.mappings
        ]

        confirmed = await questionary.confirm(
            f"Import {preview.validation.row_count} sets?",
            default=True,
            style=prompt_style,
        ).ask_async()
        if not confirmed:
            echo_info("Import cancelled")
            return

    try:
        result = await import_setgraph_csv(content, mappings, storage)
    except SetgraphValidationError as e:
        for error in e.errors:
            echo_error(error)
        ctx.exit(1)

    echo_success(
        f"Imported {result.workouts_created} workouts and {result.sets_created} sets"
    )
    if result.exercises_created:
        echo_info(f"Created {result.exercises_created} new exercises")

    for error in result.errors[:MAX_ERRORS_SHOWN]:
        echo_warning(error)
    if len(result.errors) > MAX_ERRORS_SHOWN:
        echo_warning(f"... and {len(result.errors) - MAX_ERRORS_SHOWN} more")
