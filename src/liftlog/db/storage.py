"""Storage facade used by the import pipeline and the workout session."""

from datetime import datetime
from pathlib import Path

from ..models.exercises import Exercise
from ..models.settings import UserSettings
from ..models.setgraph import SetgraphExerciseMapping
from ..models.templates import Template
from ..models.workout import Workout, WorkoutSet
from .engine import get_db_path
from .repositories import (
    ExerciseRepository,
    SetgraphMappingRepository,
    TemplateRepository,
    UserSettingsRepository,
    WorkoutRepository,
    WorkoutSetRepository,
)


class Storage:
    """Single persistence surface over the SQLite repositories.

    Services only talk to this class, so tests can hand them any object with
    the same coroutine methods.
    """

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()
        self.exercises = ExerciseRepository(self.db_path)
        self.templates = TemplateRepository(self.db_path)
        self.workouts = WorkoutRepository(self.db_path)
        self.sets = WorkoutSetRepository(self.db_path)
        self.settings = UserSettingsRepository(self.db_path)
        self.setgraph_mappings = SetgraphMappingRepository(self.db_path)

    # Workouts

    async def add_workout(self, workout: Workout) -> None:
        await self.workouts.create(workout)

    async def update_workout(self, workout: Workout) -> None:
        await self.workouts.update(workout)

    async def get_workout_by_id(self, workout_id: str) -> Workout | None:
        return await self.workouts.get(workout_id)

    async def get_workouts(self, limit: int | None = None) -> list[Workout]:
        return await self.workouts.list_all(limit=limit)

    # Sets

    async def add_set(self, workout_set: WorkoutSet) -> None:
        await self.sets.create(workout_set)

    async def add_sets(self, workout_sets: list[WorkoutSet]) -> None:
        if workout_sets:
            await self.sets.create_many(workout_sets)

    async def update_set(self, workout_set: WorkoutSet) -> None:
        await self.sets.update(workout_set)

    async def delete_set(self, set_id: str) -> None:
        await self.sets.delete(set_id)

    async def get_sets_by_workout_id(self, workout_id: str) -> list[WorkoutSet]:
        return await self.sets.get_by_workout(workout_id)

    async def get_sets_in_date_range(self, start: datetime, end: datetime) -> list[WorkoutSet]:
        return await self.sets.get_in_range(start, end)

    async def get_last_sets_for_exercise(
        self,
        exercise_id: str,
        limit: int = 5,
        exclude_workout_id: str | None = None,
    ) -> list[WorkoutSet]:
        """Sets from the most recent workout that included the exercise.

        Args:
            exercise_id: Exercise to look up
            limit: Maximum number of sets returned
            exclude_workout_id: Workout to ignore, typically the one in progress

        Returns:
            Sets newest first
        """
        return await self.sets.get_latest_session(
            exercise_id, limit, exclude_workout_id=exclude_workout_id
        )

    # Exercises

    async def get_exercise_by_id(self, exercise_id: str) -> Exercise | None:
        return await self.exercises.get(exercise_id)

    async def add_exercise(self, exercise: Exercise) -> None:
        await self.exercises.add(exercise)

    async def get_exercises(self) -> list[Exercise]:
        return await self.exercises.list_all()

    # Templates

    async def get_template_by_id(self, template_id: str) -> Template | None:
        return await self.templates.get(template_id)

    async def get_templates(self) -> list[Template]:
        return await self.templates.list_all()

    async def add_template(self, template: Template) -> None:
        await self.templates.add(template)

    # Settings

    async def get_user_settings(self) -> UserSettings:
        return await self.settings.get()

    async def update_user_settings(self, settings: UserSettings) -> None:
        await self.settings.save(settings)

    # Setgraph mappings

    async def get_setgraph_mappings(self) -> list[SetgraphExerciseMapping]:
        return await self.setgraph_mappings.list_all()

    async def save_setgraph_mappings(self, mappings: list[SetgraphExerciseMapping]) -> None:
        """Replace the remembered mappings with ``mappings``."""
        await self.setgraph_mappings.replace_all(mappings)
