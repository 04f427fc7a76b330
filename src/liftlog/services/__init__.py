"""Business logic services for liftlog."""

from .rest_timer import RestTimer, RestTimerState
from .scheduler import AsyncioScheduler, ScheduledTask
from .setgraph_import import (
    SetgraphPreview,
    SetgraphValidationError,
    import_setgraph_csv,
    import_setgraph_data,
    preview_setgraph_import,
)
from .workout_session import WorkoutSessionManager

__all__ = [
    "AsyncioScheduler",
    "import_setgraph_csv",
    "import_setgraph_data",
    "preview_setgraph_import",
    "RestTimer",
    "RestTimerState",
    "ScheduledTask",
    "SetgraphPreview",
    "SetgraphValidationError",
    "WorkoutSessionManager",
]
