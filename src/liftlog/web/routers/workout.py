"""Active workout routes.

Every route returns the session snapshot (active workout, last-session sets
and rest timer). Calls made while no workout is active change nothing.
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from ...services.workout_session import WorkoutSessionManager
from ..dependencies import get_session

router = APIRouter(prefix="/workout", tags=["workout"])


class StartRequest(BaseModel):
    template_id: str | None = None


class LogSetRequest(BaseModel):
    reps: int
    weight: float
    exercise_id: str | None = None


class EditSetRequest(BaseModel):
    reps: int
    weight: float


class ExerciseRequest(BaseModel):
    exercise_id: str


class ReorderRequest(BaseModel):
    exercise_ids: list[str]


class SwapRequest(BaseModel):
    old_id: str
    new_id: str


class TemplateRequest(BaseModel):
    template_id: str


class TimerRequest(BaseModel):
    seconds: int | None = None


@router.get("")
async def get_state(session: WorkoutSessionManager = Depends(get_session)) -> dict:
    return session.to_dict()


@router.post("/start")
async def start_workout(
    payload: StartRequest,
    session: WorkoutSessionManager = Depends(get_session),
) -> dict:
    """Start a workout, optionally from a template."""
    workout_id = await session.start_workout(payload.template_id)
    return {"workout_id": workout_id, **session.to_dict()}


@router.post("/finish")
async def finish_workout(session: WorkoutSessionManager = Depends(get_session)) -> dict:
    completed = await session.finish_workout()
    return {"workout": completed.to_dict() if completed else None, **session.to_dict()}


@router.post("/cancel")
async def cancel_workout(session: WorkoutSessionManager = Depends(get_session)) -> dict:
    await session.cancel_workout()
    return session.to_dict()


@router.post("/sets")
async def log_set(
    payload: LogSetRequest,
    session: WorkoutSessionManager = Depends(get_session),
) -> dict:
    """Log a set; defaults to the current exercise."""
    logged = await session.log_set(payload.reps, payload.weight, payload.exercise_id)
    return {"set": logged.to_dict() if logged else None, **session.to_dict()}


@router.put("/sets/{set_id}")
async def edit_set(
    set_id: str,
    payload: EditSetRequest,
    session: WorkoutSessionManager = Depends(get_session),
) -> dict:
    await session.edit_set(set_id, payload.reps, payload.weight)
    return session.to_dict()


@router.delete("/sets/{set_id}")
async def remove_set(set_id: str, session: WorkoutSessionManager = Depends(get_session)) -> dict:
    await session.remove_set(set_id)
    return session.to_dict()


@router.put("/current")
async def set_current_exercise(
    payload: ExerciseRequest,
    session: WorkoutSessionManager = Depends(get_session),
) -> dict:
    """Select the current exercise and load its last-session sets."""
    session.set_current_exercise(payload.exercise_id)
    await session.wait_for_history()
    return session.to_dict()


@router.post("/exercises")
async def add_exercise(
    payload: ExerciseRequest,
    session: WorkoutSessionManager = Depends(get_session),
) -> dict:
    session.add_exercise_to_workout(payload.exercise_id)
    return session.to_dict()


@router.delete("/exercises/{exercise_id}")
async def remove_exercise(
    exercise_id: str,
    session: WorkoutSessionManager = Depends(get_session),
) -> dict:
    session.remove_exercise_from_workout(exercise_id)
    return session.to_dict()


@router.put("/exercises/order")
async def reorder_exercises(
    payload: ReorderRequest,
    session: WorkoutSessionManager = Depends(get_session),
) -> dict:
    session.reorder_exercises(payload.exercise_ids)
    return session.to_dict()


@router.post("/exercises/swap")
async def swap_exercise(
    payload: SwapRequest,
    session: WorkoutSessionManager = Depends(get_session),
) -> dict:
    session.swap_exercise(payload.old_id, payload.new_id)
    await session.wait_for_history()
    return session.to_dict()


@router.post("/template")
async def switch_template(
    payload: TemplateRequest,
    session: WorkoutSessionManager = Depends(get_session),
) -> dict:
    await session.switch_template(payload.template_id)
    await session.wait_for_history()
    return session.to_dict()


@router.post("/timer/start")
async def start_timer(
    payload: TimerRequest,
    session: WorkoutSessionManager = Depends(get_session),
) -> dict:
    session.start_rest_timer(payload.seconds)
    return session.to_dict()


@router.post("/timer/stop")
async def stop_timer(session: WorkoutSessionManager = Depends(get_session)) -> dict:
    session.stop_rest_timer()
    return session.to_dict()


@router.post("/timer/reset")
async def reset_timer(session: WorkoutSessionManager = Depends(get_session)) -> dict:
    session.reset_rest_timer()
    return session.to_dict()


@router.post("/timer/resume")
async def resume_timer(session: WorkoutSessionManager = Depends(get_session)) -> dict:
    """Recompute the rest timer from its deadline."""
    session.resume()
    return session.to_dict()
