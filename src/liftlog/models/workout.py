"""Workout session and logged set models."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import uuid4


def new_id(prefix: str | None = None) -> str:
    """Generate a new entity id, optionally prefixed (e.g. ``imported``)."""
    value = str(uuid4())
    return f"{prefix}-{value}" if prefix else value


@dataclass
class Workout:
    """One training session, bounded by start and completion timestamps.

    A workout that was cancelled keeps ``completed_at`` as None and is never
    deleted.
    """

    id: str
    started_at: datetime
    completed_at: datetime | None = None
    template_id: str | None = None

    @property
    def is_completed(self) -> bool:
        return self.completed_at is not None

    def complete(self, completed_at: datetime) -> None:
        """Mark the workout as finished."""
        if completed_at < self.started_at:
            raise ValueError("Workout cannot complete before it started")
        self.completed_at = completed_at

    def duration_minutes(self) -> float | None:
        """Length of the session in minutes, None while still open."""
        if self.completed_at is None:
            return None
        return (self.completed_at - self.started_at).total_seconds() / 60

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "id": self.id,
            "started_at": self.started_at.isoformat(),
            "completed_at": self.completed_at.isoformat() if self.completed_at else None,
            "template_id": self.template_id,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Workout":
        """Create from dictionary."""
        completed_at = None
        if data.get("completed_at"):
            completed_at = datetime.fromisoformat(data["completed_at"])

        return cls(
            id=data["id"],
            started_at=datetime.fromisoformat(data["started_at"]),
            completed_at=completed_at,
            template_id=data.get("template_id"),
        )


@dataclass
class WorkoutSet:
    """A single logged set: exercise, reps and weight (lb) at a point in time."""

    id: str
    workout_id: str
    exercise_id: str
    reps: int
    weight: float
    logged_at: datetime

    @property
    def volume(self) -> float:
        return self.reps * self.weight

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "id": self.id,
            "workout_id": self.workout_id,
            "exercise_id": self.exercise_id,
            "reps": self.reps,
            "weight": self.weight,
            "logged_at": self.logged_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "WorkoutSet":
        """Create from dictionary."""
        return cls(
            id=data["id"],
            workout_id=data["workout_id"],
            exercise_id=data["exercise_id"],
            reps=int(data["reps"]),
            weight=float(data["weight"]),
            logged_at=datetime.fromisoformat(data["logged_at"]),
        )


@dataclass
class LastSessionData:
    """Sets from the most recent previous session of one exercise."""

    exercise_id: str
    sets: list[WorkoutSet] = field(default_factory=list)


@dataclass
class ActiveWorkoutState:
    """In-memory state of the workout currently being performed.

    ``current_exercise_index`` always points inside ``exercise_ids`` (or is 0
    when the list is empty) and ``current_exercise_id`` is either None or an
    element of ``exercise_ids``.
    """

    workout: Workout
    sets: list[WorkoutSet] = field(default_factory=list)
    current_exercise_id: str | None = None
    current_exercise_index: int = 0
    exercise_ids: list[str] = field(default_factory=list)

    def exercises_with_sets(self) -> set[str]:
        """Exercise ids that already have at least one logged set."""
        return {s.exercise_id for s in self.sets}

    def to_dict(self) -> dict:
        """Convert to a JSON-friendly dictionary."""
        return {
            "workout": self.workout.to_dict(),
            "sets": [s.to_dict() for s in self.sets],
            "current_exercise_id": self.current_exercise_id,
            "current_exercise_index": self.current_exercise_index,
            "exercise_ids": list(self.exercise_ids),
        }
