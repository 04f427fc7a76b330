"""Exercise library routes."""

from fastapi import APIRouter, Depends, HTTPException, status

from ...db import Storage
from ...models.exercises import MuscleGroup
from ...utils.exercise_utils import search_exercises
from ..dependencies import get_storage

router = APIRouter(prefix="/exercises", tags=["exercises"])


@router.get("")
async def list_exercises(
    q: str = "",
    muscle: MuscleGroup | None = None,
    storage: Storage = Depends(get_storage),
) -> list[dict]:
    """List exercises, optionally filtered by name and muscle group."""
    catalog = await storage.get_exercises()
    return [e.to_dict() for e in search_exercises(q, catalog, muscle_group=muscle)]


@router.get("/{exercise_id}")
async def get_exercise(exercise_id: str, storage: Storage = Depends(get_storage)) -> dict:
    exercise = await storage.get_exercise_by_id(exercise_id)
    if exercise is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Exercise not found: {exercise_id}",
        )
    return exercise.to_dict()
