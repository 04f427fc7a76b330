"""Database layer for liftlog."""

from .engine import get_db_path, init_db, seed_database
from .repositories import (
    ExerciseRepository,
    SetgraphMappingRepository,
    TemplateRepository,
    UserSettingsRepository,
    WorkoutRepository,
    WorkoutSetRepository,
)
from .storage import Storage

__all__ = [
    "ExerciseRepository",
    "get_db_path",
    "init_db",
    "seed_database",
    "SetgraphMappingRepository",
    "Storage",
    "TemplateRepository",
    "UserSettingsRepository",
    "WorkoutRepository",
    "WorkoutSetRepository",
]
