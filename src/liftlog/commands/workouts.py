"""Workout history commands."""

import click

from .base import (
    async_command,
    echo_error,
    echo_info,
    ensure_initialized,
    format_table,
    format_weight,
    get_storage,
)


@click.group()
@click.pass_context
def workouts(ctx):
    """Browse logged workouts."""
    ensure_initialized(ctx)


@workouts.command(name="list")
@click.option("--limit", "-n", default=20, type=int, help="Number of workouts to show")
@click.pass_context
@async_command
async def list_workouts(ctx, limit: int):
    """List recent workouts, newest first."""
    storage = get_storage()
    recent = await storage.get_workouts(limit=limit)

    if not recent:
        echo_info("No workouts logged yet")
        return

    rows = []
    for workout in recent:
        sets = await storage.get_sets_by_workout_id(workout.id)
        duration = workout.duration_minutes()
        rows.append([
            workout.id,
            workout.started_at.strftime("%Y-%m-%d %H:%M"),
            f"{duration:.0f} min" if duration is not None else "not finished",
            str(len(sets)),
            workout.template_id or "",
        ])

    click.echo()
    click.echo(format_table(["ID", "Started", "Duration", "Sets", "Template"], rows))


@workouts.command()
@click.argument("workout_id")
@click.pass_context
@async_command
async def show(ctx, workout_id: str):
    """Show the sets of one workout."""
    storage = get_storage()

    workout = await storage.get_workout_by_id(workout_id)
    if workout is None:
        echo_error(f"Workout {workout_id} not found")
        ctx.exit(1)

    exercises_by_id = {e.id: e for e in await storage.get_exercises()}
    sets = await storage.get_sets_by_workout_id(workout_id)

    click.echo()
    click.echo(f"Workout {workout.id}")
    click.echo(f"Started:   {workout.started_at:%Y-%m-%d %H:%M}")
    if workout.completed_at:
        click.echo(f"Completed: {workout.completed_at:%Y-%m-%d %H:%M}")
    click.echo()

    if not sets:
        echo_info("No sets logged")
        return

    rows = []
    for workout_set in sets:
        exercise = exercises_by_id.get(workout_set.exercise_id)
        rows.append([
            workout_set.logged_at.strftime("%H:%M"),
            exercise.name if exercise else workout_set.exercise_id,
            str(workout_set.reps),
            format_weight(workout_set.weight),
        ])
    click.echo(format_table(["Time", "Exercise", "Reps", "Weight"], rows))
