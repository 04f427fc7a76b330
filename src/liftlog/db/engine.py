"""Database engine setup and initialization."""

import json
import os
from pathlib import Path

import aiosqlite
from loguru import logger

# Default data directory, overridable with LIFTLOG_DATA_DIR
DATA_DIR = Path(__file__).parent.parent.parent.parent / "data"

DB_FILENAME = "liftlog.db"


def get_db_path(data_dir: Path | None = None) -> Path:
    """Get the database file path."""
    if data_dir is None:
        env_dir = os.environ.get("LIFTLOG_DATA_DIR")
        data_dir = Path(env_dir) if env_dir else DATA_DIR
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir / DB_FILENAME


async def _run_migrations(db: aiosqlite.Connection) -> None:
    """Run database migrations for schema updates."""
    cursor = await db.execute("PRAGMA table_info(exercises)")
    columns = await cursor.fetchall()
    column_names = {col[1] for col in columns}

    added_columns = {
        "primary_muscle_groups": "TEXT DEFAULT '[]'",
        "secondary_muscle_groups": "TEXT DEFAULT '[]'",
        "equipment": "TEXT DEFAULT 'other'",
        "location_ids": "TEXT DEFAULT '[]'",
        "is_custom": "INTEGER DEFAULT 0",
    }
    for column, definition in added_columns.items():
        if column not in column_names:
            await db.execute(f"ALTER TABLE exercises ADD COLUMN {column} {definition}")
            logger.debug(f"Added exercises.{column}")

    # Exercises once stored a single primary muscle group
    if "primary_muscle_group" in column_names:
        cursor = await db.execute(
            """
            SELECT id, primary_muscle_group FROM exercises
            WHERE primary_muscle_groups IS NULL OR primary_muscle_groups = '[]'
            """
        )
        for exercise_id, legacy_group in await cursor.fetchall():
            groups = [legacy_group] if legacy_group else ["miscellaneous"]
            await db.execute(
                "UPDATE exercises SET primary_muscle_groups = ? WHERE id = ?",
                (json.dumps(groups), exercise_id),
            )
            logger.debug(f"Migrated muscle groups for exercise {exercise_id}")

    cursor = await db.execute("PRAGMA table_info(templates)")
    columns = await cursor.fetchall()
    if "type" not in {col[1] for col in columns}:
        await db.execute("ALTER TABLE templates ADD COLUMN type TEXT DEFAULT 'push'")

    await db.commit()


async def init_db(db_path: Path | None = None) -> None:
    """Initialize the database schema."""
    if db_path is None:
        db_path = get_db_path()

    async with aiosqlite.connect(db_path) as db:
        # Exercise catalog (built-in and custom)
        await db.execute("""
            CREATE TABLE IF NOT EXISTS exercises (
                id TEXT PRIMARY KEY,
                name TEXT NOT NULL,
                primary_muscle_groups TEXT NOT NULL DEFAULT '[]',
                secondary_muscle_groups TEXT NOT NULL DEFAULT '[]',
                equipment TEXT NOT NULL DEFAULT 'other',
                location_ids TEXT DEFAULT '[]',
                is_custom INTEGER DEFAULT 0,
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        """)

        # Workout templates
        await db.execute("""
            CREATE TABLE IF NOT EXISTS templates (
                id TEXT PRIMARY KEY,
                name TEXT NOT NULL,
                location_id TEXT NOT NULL DEFAULT 'gym',
                exercise_ids TEXT NOT NULL DEFAULT '[]',
                type TEXT DEFAULT 'push'
            )
        """)

        # Workout sessions
        await db.execute("""
            CREATE TABLE IF NOT EXISTS workouts (
                id TEXT PRIMARY KEY,
                started_at TIMESTAMP NOT NULL,
                completed_at TIMESTAMP,
                template_id TEXT
            )
        """)

        # Logged sets
        await db.execute("""
            CREATE TABLE IF NOT EXISTS workout_sets (
                id TEXT PRIMARY KEY,
                workout_id TEXT NOT NULL,
                exercise_id TEXT NOT NULL,
                reps INTEGER NOT NULL,
                weight REAL NOT NULL DEFAULT 0,
                logged_at TIMESTAMP NOT NULL,
                FOREIGN KEY (workout_id) REFERENCES workouts(id) ON DELETE CASCADE
            )
        """)

        # Single-row user settings
        await db.execute("""
            CREATE TABLE IF NOT EXISTS user_settings (
                id INTEGER PRIMARY KEY CHECK (id = 1),
                data TEXT NOT NULL,
                updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        """)

        # Remembered Setgraph name -> exercise mappings
        await db.execute("""
            CREATE TABLE IF NOT EXISTS setgraph_mappings (
                setgraph_name TEXT PRIMARY KEY,
                exercise_id TEXT NOT NULL DEFAULT ''
            )
        """)

        # Create indexes for common queries
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_workout_sets_workout
            ON workout_sets(workout_id)
        """)
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_workout_sets_exercise
            ON workout_sets(exercise_id, logged_at)
        """)
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_workouts_started
            ON workouts(started_at)
        """)

        await db.commit()

        # Run migrations for existing databases
        await _run_migrations(db)

    logger.debug(f"Database ready at {db_path}")


async def seed_database(db_path: Path | None = None) -> int:
    """Seed the database with the built-in exercises, templates and settings.

    Existing rows are left untouched, so this is safe to run repeatedly.

    Returns:
        Number of exercises newly inserted
    """
    from ..models.exercises import SEED_EXERCISES
    from ..models.settings import UserSettings
    from ..models.templates import SEED_TEMPLATES

    if db_path is None:
        db_path = get_db_path()

    inserted = 0
    async with aiosqlite.connect(db_path) as db:
        for exercise in SEED_EXERCISES:
            cursor = await db.execute(
                """
                INSERT OR IGNORE INTO exercises
                (id, name, primary_muscle_groups, secondary_muscle_groups,
                 equipment, location_ids, is_custom)
                VALUES (?, ?, ?, ?, ?, ?, 0)
                """,
                (
                    exercise.id,
                    exercise.name,
                    json.dumps([mg.value for mg in exercise.primary_muscle_groups]),
                    json.dumps([mg.value for mg in exercise.secondary_muscle_groups]),
                    exercise.equipment.value,
                    json.dumps(exercise.location_ids),
                ),
            )
            inserted += cursor.rowcount

        for template in SEED_TEMPLATES:
            await db.execute(
                """
                INSERT OR IGNORE INTO templates
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

        await db.execute(
            "INSERT OR IGNORE INTO user_settings (id, data) VALUES (1, ?)",
            (json.dumps(UserSettings().to_dict()),),
        )

        await db.commit()

    logger.info(f"Seeded {inserted} exercises")
    return inserted
