"""CLI commands for liftlog."""

from .exercises import exercises
from .import_data import import_data
from .init import init
from .serve import serve
from .stats import stats
from .workouts import workouts

__all__ = [
    "exercises",
    "import_data",
    "init",
    "serve",
    "stats",
    "workouts",
]
