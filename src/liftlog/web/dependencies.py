"""Request dependencies shared by the routers."""

from fastapi import Request

from ..db import Storage
from ..services.workout_session import WorkoutSessionManager


def get_storage(request: Request) -> Storage:
    """Get the storage facade from app state."""
    return request.app.state.storage


def get_session(request: Request) -> WorkoutSessionManager:
    """Get the workout session manager from app state."""
    return request.app.state.session
