"""Data models for liftlog."""

from .exercises import Equipment, Exercise, MuscleGroup, SEED_EXERCISES
from .settings import UserSettings, WeekStartDay
from .setgraph import ImportResult, SetgraphExerciseMapping, SetgraphRow, ValidationResult
from .templates import SEED_TEMPLATES, Template, TemplateType
from .workout import ActiveWorkoutState, LastSessionData, Workout, WorkoutSet

__all__ = [
    "ActiveWorkoutState",
    "Equipment",
    "Exercise",
    "ImportResult",
    "LastSessionData",
    "MuscleGroup",
    "SEED_EXERCISES",
    "SEED_TEMPLATES",
    "SetgraphExerciseMapping",
    "SetgraphRow",
    "Template",
    "TemplateType",
    "UserSettings",
    "ValidationResult",
    "WeekStartDay",
    "Workout",
    "WorkoutSet",
]
