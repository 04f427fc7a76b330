"""Active workout session management.

``WorkoutSessionManager`` owns the single workout being performed: which
exercises are planned and in what order, which one is current, the sets
logged so far and the rest timer between them. Every operation except
``start_workout`` does nothing while no workout is active.
"""

import asyncio
from collections.abc import Callable
from dataclasses import replace
from datetime import datetime

from loguru import logger

from ..clients.health import HealthDataClient
from ..db.storage import Storage
from ..models.settings import DEFAULT_REST_TIMER_SECONDS, UserSettings
from ..models.workout import (
    ActiveWorkoutState,
    LastSessionData,
    Workout,
    WorkoutSet,
    new_id,
)
from .rest_timer import RestTimer, RestTimerState

# Rough energy estimate forwarded to health platforms
CALORIES_PER_SET = 5

LAST_SESSION_SET_LIMIT = 5


class WorkoutSessionManager:
    """State machine over one live workout."""

    def __init__(
        self,
        storage: Storage,
        health_client: HealthDataClient | None = None,
        rest_timer: RestTimer | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        self.storage = storage
        self.health_client = health_client
        self.rest_timer = rest_timer or RestTimer(on_complete=self._on_rest_complete)
        self.clock = clock or datetime.now

        self.active_workout: ActiveWorkoutState | None = None
        self.last_session_data: LastSessionData | None = None
        self.settings = UserSettings()

        self._history_task: asyncio.Task | None = None

    @property
    def is_active(self) -> bool:
        return self.active_workout is not None

    @property
    def rest_timer_state(self) -> RestTimerState:
        return self.rest_timer.state

    async def load_settings(self) -> UserSettings:
        """Reload user settings (rest timer duration) from storage."""
        self.settings = await self.storage.get_user_settings()
        return self.settings

    # Lifecycle

    async def start_workout(self, template_id: str | None = None) -> str:
        """Start a new workout, optionally from a template.

        A workout that is already active is replaced without being finished.

        Returns:
            ID of the new workout
        """
        workout = Workout(id=new_id(), started_at=self.clock(), template_id=template_id)
        await self.storage.add_workout(workout)

        exercise_ids: list[str] = []
        if template_id:
            template = await self.storage.get_template_by_id(template_id)
            if template is not None:
                exercise_ids = list(template.exercise_ids)
            else:
                logger.warning(f"Template not found: {template_id}")

        await self.load_settings()

        last_session = None
        if exercise_ids:
            last_sets = await self.storage.get_last_sets_for_exercise(
                exercise_ids[0], LAST_SESSION_SET_LIMIT, exclude_workout_id=workout.id
            )
            last_session = LastSessionData(exercise_id=exercise_ids[0], sets=last_sets)

        self._cancel_history_refresh()
        self.active_workout = ActiveWorkoutState(
            workout=workout,
            sets=[],
            current_exercise_id=exercise_ids[0] if exercise_ids else None,
            current_exercise_index=0,
            exercise_ids=exercise_ids,
        )
        self.last_session_data = last_session

        logger.info(f"Started workout {workout.id} with {len(exercise_ids)} exercises")
        return workout.id

    async def finish_workout(self) -> Workout | None:
        """Complete the active workout and forward it to the health platform.

        Returns:
            The completed workout, or None when no workout was active
        """
        state = self.active_workout
        if state is None:
            return None

        completed = replace(state.workout)
        completed.complete(self.clock())
        await self.storage.update_workout(completed)

        if self.health_client is not None:
            try:
                await self.health_client.save_workout(
                    completed.started_at,
                    completed.completed_at,
                    calories=len(state.sets) * CALORIES_PER_SET,
                )
            except Exception as e:
                logger.warning(f"Failed to save workout to health platform: {e}")

        self._clear()
        logger.info(f"Finished workout {completed.id} with {len(state.sets)} sets")
        return completed

    async def cancel_workout(self) -> None:
        """Leave the active workout without completing it.

        The stored workout and its sets are kept.
        """
        if self.active_workout is None:
            return
        logger.info(f"Cancelled workout {self.active_workout.workout.id}")
        self._clear()

    def _clear(self) -> None:
        self._cancel_history_refresh()
        self.active_workout = None
        self.last_session_data = None
        self.rest_timer.stop()

    # Sets

    async def log_set(
        self,
        reps: int,
        weight: float,
        exercise_id: str | None = None,
    ) -> WorkoutSet | None:
        """Log a set for an exercise (the current one by default).

        Starts the rest timer with the configured duration.
        """
        state = self.active_workout
        if state is None:
            return None

        target_id = exercise_id or state.current_exercise_id
        if not target_id:
            logger.debug("No exercise selected, set not logged")
            return None

        workout_set = WorkoutSet(
            id=new_id(),
            workout_id=state.workout.id,
            exercise_id=target_id,
            reps=reps,
            weight=weight,
            logged_at=self.clock(),
        )
        await self.storage.add_set(workout_set)

        state.sets = [*state.sets, workout_set]
        self.start_rest_timer()
        return workout_set

    async def remove_set(self, set_id: str) -> None:
        state = self.active_workout
        if state is None or not any(s.id == set_id for s in state.sets):
            return

        await self.storage.delete_set(set_id)
        state.sets = [s for s in state.sets if s.id != set_id]

    async def edit_set(self, set_id: str, reps: int, weight: float) -> WorkoutSet | None:
        """Change reps and weight of a logged set."""
        state = self.active_workout
        if state is None:
            return None

        existing = next((s for s in state.sets if s.id == set_id), None)
        if existing is None:
            logger.debug(f"Set not in active workout: {set_id}")
            return None

        updated = replace(existing, reps=reps, weight=weight)
        await self.storage.update_set(updated)

        state.sets = [updated if s.id == set_id else s for s in state.sets]
        return updated

    def get_sets_for_exercise(self, exercise_id: str) -> list[WorkoutSet]:
        if self.active_workout is None:
            return []
        return [s for s in self.active_workout.sets if s.exercise_id == exercise_id]

    # Exercise ordering

    def set_current_exercise(self, exercise_id: str) -> None:
        """Point the session at another planned exercise and load its history."""
        state = self.active_workout
        if state is None or exercise_id not in state.exercise_ids:
            return

        state.current_exercise_id = exercise_id
        state.current_exercise_index = state.exercise_ids.index(exercise_id)
        self._schedule_history_refresh(exercise_id)

    def add_exercise_to_workout(self, exercise_id: str) -> None:
        state = self.active_workout
        if state is None or exercise_id in state.exercise_ids:
            return

        state.exercise_ids = [*state.exercise_ids, exercise_id]
        if state.current_exercise_id is None:
            state.current_exercise_id = exercise_id
            state.current_exercise_index = len(state.exercise_ids) - 1

    def remove_exercise_from_workout(self, exercise_id: str) -> None:
        """Drop an exercise from the plan.

        When the current exercise is removed the pointer moves to the
        exercise now at its position (or the new last one).
        """
        state = self.active_workout
        if state is None or exercise_id not in state.exercise_ids:
            return

        remaining = [i for i in state.exercise_ids if i != exercise_id]
        if state.current_exercise_id in remaining:
            index = remaining.index(state.current_exercise_id)
        else:
            index = max(0, min(state.current_exercise_index, len(remaining) - 1))

        state.exercise_ids = remaining
        state.current_exercise_index = index
        state.current_exercise_id = remaining[index] if remaining else None

    def reorder_exercises(self, exercise_ids: list[str]) -> None:
        """Replace the exercise order, keeping the current exercise if present."""
        state = self.active_workout
        if state is None:
            return

        new_order = list(exercise_ids)
        if state.current_exercise_id in new_order:
            index = new_order.index(state.current_exercise_id)
        else:
            index = 0

        state.exercise_ids = new_order
        state.current_exercise_index = index
        state.current_exercise_id = new_order[index] if new_order else None

    async def switch_template(self, template_id: str) -> None:
        """Move the session onto another template.

        Exercises that already have sets stay, in their current order; the
        template's other exercises follow in template order.
        """
        state = self.active_workout
        if state is None:
            return

        template = await self.storage.get_template_by_id(template_id)
        if template is None:
            logger.warning(f"Template not found: {template_id}")
            return

        with_sets = state.exercises_with_sets()
        exercise_ids = [i for i in state.exercise_ids if i in with_sets]
        for exercise_id in template.exercise_ids:
            if exercise_id not in with_sets and exercise_id not in exercise_ids:
                exercise_ids.append(exercise_id)

        workout = replace(state.workout, template_id=template_id)
        await self.storage.update_workout(workout)

        previous_id = state.current_exercise_id
        if previous_id in exercise_ids:
            current_id = previous_id
        else:
            current_id = exercise_ids[0] if exercise_ids else None

        state.workout = workout
        state.exercise_ids = exercise_ids
        state.current_exercise_id = current_id
        state.current_exercise_index = exercise_ids.index(current_id) if current_id else 0

        if current_id is not None and current_id != previous_id:
            self._schedule_history_refresh(current_id)

    def swap_exercise(self, old_id: str, new_id: str) -> None:
        """Substitute one planned exercise for another in the same position.

        Sets already logged for ``old_id`` are left as they are.
        """
        state = self.active_workout
        if state is None or old_id not in state.exercise_ids or new_id in state.exercise_ids:
            return

        position = state.exercise_ids.index(old_id)
        exercise_ids = list(state.exercise_ids)
        exercise_ids[position] = new_id

        state.exercise_ids = exercise_ids
        if state.current_exercise_id == old_id:
            state.current_exercise_id = new_id
        self._schedule_history_refresh(new_id)

    # Last-session history

    async def refresh_last_session_data(self) -> None:
        """Reload the previous session's sets for the current exercise."""
        state = self.active_workout
        if state is None or state.current_exercise_id is None:
            return
        await self._load_history(state.current_exercise_id)

    async def wait_for_history(self) -> None:
        """Wait until the scheduled history refresh, if any, has finished."""
        while self._history_task is not None:
            task = self._history_task
            await asyncio.wait([task])
            if task is self._history_task:
                self._history_task = None
                if not task.cancelled():
                    task.result()

    def _schedule_history_refresh(self, exercise_id: str) -> None:
        self._cancel_history_refresh()
        self._history_task = asyncio.get_running_loop().create_task(
            self._load_history(exercise_id)
        )

    def _cancel_history_refresh(self) -> None:
        if self._history_task is not None and not self._history_task.done():
            self._history_task.cancel()
        self._history_task = None

    async def _load_history(self, exercise_id: str) -> None:
        state = self.active_workout
        if state is None:
            return

        last_sets = await self.storage.get_last_sets_for_exercise(
            exercise_id, LAST_SESSION_SET_LIMIT, exclude_workout_id=state.workout.id
        )
        # The session may have ended while loading
        if self.active_workout is state:
            self.last_session_data = LastSessionData(exercise_id=exercise_id, sets=last_sets)

    # Rest timer

    def start_rest_timer(self, seconds: int | None = None) -> RestTimerState:
        duration = seconds or self.settings.rest_timer_seconds or DEFAULT_REST_TIMER_SECONDS
        return self.rest_timer.start(duration)

    def stop_rest_timer(self) -> RestTimerState:
        return self.rest_timer.stop()

    def reset_rest_timer(self) -> RestTimerState:
        return self.rest_timer.reset()

    def resume(self) -> RestTimerState:
        """Bring the rest timer back in line with the wall clock.

        Called when the host regains the foreground.
        """
        return self.rest_timer.sync_with_clock()

    def _on_rest_complete(self) -> None:
        logger.info("Rest complete")

    def to_dict(self) -> dict:
        """Snapshot of the session for display."""
        last = self.last_session_data
        return {
            "active": self.active_workout.to_dict() if self.active_workout else None,
            "last_session": {
                "exercise_id": last.exercise_id,
                "sets": [s.to_dict() for s in last.sets],
            } if last else None,
            "rest_timer": self.rest_timer.state.to_dict(),
        }
