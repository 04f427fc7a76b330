"""Data access layer for liftlog."""

import json
from datetime import datetime
from pathlib import Path

import aiosqlite

from ..models.exercises import Exercise
from ..models.settings import UserSettings
from ..models.setgraph import SetgraphExerciseMapping
from ..models.templates import Template
from ..models.workout import Workout, WorkoutSet
from .engine import get_db_path


class ExerciseRepository:
    """Repository for the exercise catalog."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def get(self, exercise_id: str) -> Exercise | None:
        """Get an exercise by ID."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM exercises WHERE id = ?", (exercise_id,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_exercise(row)

    async def list_all(self) -> list[Exercise]:
        """List all exercises, built-ins first in insertion order."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute("SELECT * FROM exercises ORDER BY rowid")
            rows = await cursor.fetchall()
            return [self._row_to_exercise(row) for row in rows]

    async def add(self, exercise: Exercise) -> None:
        """Add an exercise, replacing any existing one with the same ID."""
        data = exercise.to_dict()
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(
                """
                INSERT OR REPLACE INTO exercises
                (id, name, primary_muscle_groups, secondary_muscle_groups,
                 equipment, location_ids, is_custom)
                VALUES (?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    data["id"],
                    data["name"],
                    json.dumps(data["primary_muscle_groups"]),
                    json.dumps(data["secondary_muscle_groups"]),
                    data["equipment"],
                    json.dumps(data["location_ids"]),
                    1 if data["is_custom"] else 0,
                ),
            )
            await db.commit()

    def _row_to_exercise(self, row: aiosqlite.Row) -> Exercise:
        """Convert a database row to an Exercise."""
        return Exercise.from_dict({
            "id": row["id"],
            "name": row["name"],
            "primary_muscle_groups": json.loads(row["primary_muscle_groups"] or "[]"),
            "secondary_muscle_groups": json.loads(row["secondary_muscle_groups"] or "[]"),
            "equipment": row["equipment"],
            "location_ids": json.loads(row["location_ids"] or "[]"),
            "is_custom": bool(row["is_custom"]),
        })


class TemplateRepository:
    """Repository for workout templates."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def get(self, template_id: str) -> Template | None:
        """Get a template by ID."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM templates WHERE id = ?", (template_id,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_template(row)

    async def list_all(self) -> list[Template]:
        """List all templates."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute("SELECT * FROM templates ORDER BY rowid")
            rows = await cursor.fetchall()
            return [self._row_to_template(row) for row in rows]

    async def add(self, template: Template) -> None:
        """Add or replace a template."""
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(
                """
                INSERT OR REPLACE INTO templates
                (id, name, location_id, exercise_ids, type)
                VALUES (?, ?, ?, ?, ?)
                """,
                (
                    template.id,
                    template.name,
                    template.location_id,
                    json.dumps(template.exercise_ids),
                    template.type.value,
                ),
            )
            await db.commit()

    def _row_to_template(self, row: aiosqlite.Row) -> Template:
        return Template.from_dict({
            "id": row["id"],
            "name": row["name"],
            "location_id": row["location_id"],
            "exercise_ids": json.loads(row["exercise_ids"] or "[]"),
            "type": row["type"],
        })


class WorkoutRepository:
    """Repository for workout sessions."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def create(self, workout: Workout) -> None:
        """Insert a new workout."""
        data = workout.to_dict()
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(
                """
                INSERT INTO workouts (id, started_at, completed_at, template_id)
                VALUES (?, ?, ?, ?)
                """,
                (data["id"], data["started_at"], data["completed_at"], data["template_id"]),
            )
            await db.commit()

    async def update(self, workout: Workout) -> None:
        """Update an existing workout."""
        data = workout.to_dict()
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(
                """
                UPDATE workouts SET started_at = ?, completed_at = ?, template_id = ?
                WHERE id = ?
                """,
                (data["started_at"], data["completed_at"], data["template_id"], data["id"]),
            )
            await db.commit()

    async def get(self, workout_id: str) -> Workout | None:
        """Get a workout by ID."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM workouts WHERE id = ?", (workout_id,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_workout(row)

    async def list_all(self, limit: int | None = None) -> list[Workout]:
        """List workouts, most recent first."""
        query = "SELECT * FROM workouts ORDER BY started_at DESC"
        params: tuple = ()
        if limit is not None:
            query += " LIMIT ?"
            params = (limit,)

        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(query, params)
            rows = await cursor.fetchall()
            return [self._row_to_workout(row) for row in rows]

    def _row_to_workout(self, row: aiosqlite.Row) -> Workout:
        return Workout.from_dict({
            "id": row["id"],
            "started_at": row["started_at"],
            "completed_at": row["completed_at"],
            "template_id": row["template_id"],
        })


class WorkoutSetRepository:
    """Repository for logged sets."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def create(self, workout_set: WorkoutSet) -> None:
        """Insert a new set."""
        data = workout_set.to_dict()
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(
                """
                INSERT INTO workout_sets
                (id, workout_id, exercise_id, reps, weight, logged_at)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                (
                    data["id"],
                    data["workout_id"],
                    data["exercise_id"],
                    data["reps"],
                    data["weight"],
                    data["logged_at"],
                ),
            )
            await db.commit()

    async def create_many(self, workout_sets: list[WorkoutSet]) -> None:
        """Insert a batch of sets in one transaction."""
        rows = [
            (s.id, s.workout_id, s.exercise_id, s.reps, s.weight, s.logged_at.isoformat())
            for s in workout_sets
        ]
        async with aiosqlite.connect(self.db_path) as db:
            await db.executemany(
                """
                INSERT INTO workout_sets
                (id, workout_id, exercise_id, reps, weight, logged_at)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                rows,
            )
            await db.commit()

    async def update(self, workout_set: WorkoutSet) -> None:
        """Update reps and weight of an existing set."""
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(
                "UPDATE workout_sets SET reps = ?, weight = ? WHERE id = ?",
                (workout_set.reps, workout_set.weight, workout_set.id),
            )
            await db.commit()

    async def delete(self, set_id: str) -> None:
        """Delete a set."""
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute("DELETE FROM workout_sets WHERE id = ?", (set_id,))
            await db.commit()

    async def get_by_workout(self, workout_id: str) -> list[WorkoutSet]:
        """Get all sets of a workout in the order they were logged."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                """
                SELECT * FROM workout_sets WHERE workout_id = ?
                ORDER BY logged_at, rowid
                """,
                (workout_id,),
            )
            rows = await cursor.fetchall()
            return [self._row_to_set(row) for row in rows]

    async def get_in_range(self, start: datetime, end: datetime) -> list[WorkoutSet]:
        """Get sets logged between two timestamps, inclusive."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                """
                SELECT * FROM workout_sets
                WHERE logged_at >= ? AND logged_at <= ?
                ORDER BY logged_at
                """,
                (start.isoformat(), end.isoformat()),
            )
            rows = await cursor.fetchall()
            return [self._row_to_set(row) for row in rows]

    async def get_latest_session(
        self,
        exercise_id: str,
        limit: int,
        exclude_workout_id: str | None = None,
    ) -> list[WorkoutSet]:
        """Get sets of an exercise from the most recent workout that has any.

        Sets are returned newest first, at most ``limit`` of them.
        """
        exclude = exclude_workout_id or ""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                """
                SELECT * FROM workout_sets
                WHERE exercise_id = ? AND workout_id = (
                    SELECT workout_id FROM workout_sets
                    WHERE exercise_id = ? AND workout_id != ?
                    ORDER BY logged_at DESC LIMIT 1
                )
                ORDER BY logged_at DESC
                LIMIT ?
                """,
                (exercise_id, exercise_id, exclude, limit),
            )
            rows = await cursor.fetchall()
            return [self._row_to_set(row) for row in rows]

    def _row_to_set(self, row: aiosqlite.Row) -> WorkoutSet:
        return WorkoutSet.from_dict(dict(row))


class UserSettingsRepository:
    """Repository for the single user settings record."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def get(self) -> UserSettings:
        """Get settings, falling back to defaults when none are stored."""
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute("SELECT data FROM user_settings WHERE id = 1")
            row = await cursor.fetchone()
            if row is None:
                return UserSettings()
            return UserSettings.from_dict(json.loads(row[0]))

    async def save(self, settings: UserSettings) -> None:
        """Replace the stored settings."""
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(
                """
                INSERT INTO user_settings (id, data) VALUES (1, ?)
                ON CONFLICT(id) DO UPDATE SET
                    data = excluded.data, updated_at = CURRENT_TIMESTAMP
                """,
                (json.dumps(settings.to_dict()),),
            )
            await db.commit()


class SetgraphMappingRepository:
    """Repository for remembered Setgraph exercise mappings."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def list_all(self) -> list[SetgraphExerciseMapping]:
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                "SELECT setgraph_name, exercise_id FROM setgraph_mappings ORDER BY rowid"
            )
            rows = await cursor.fetchall()
            return [
                SetgraphExerciseMapping(
                    setgraph_name=name,
                    exercise_id=exercise_id or None,
                    needs_mapping=False,
                )
                for name, exercise_id in rows
            ]

    async def replace_all(self, mappings: list[SetgraphExerciseMapping]) -> None:
        """Replace the whole mapping list."""
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute("DELETE FROM setgraph_mappings")
            await db.executemany(
                """
                INSERT OR REPLACE INTO setgraph_mappings (setgraph_name, exercise_id)
                VALUES (?, ?)
                """,
                [(m.setgraph_name, m.exercise_id or "") for m in mappings],
            )
            await db.commit()
