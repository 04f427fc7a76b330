"""Models for importing Setgraph CSV exports."""

from dataclasses import dataclass, field
from datetime import datetime

# Fallback layouts seen in exports that are not ISO 8601
_TIMESTAMP_FORMATS = (
    "%Y-%m-%d %H:%M:%S %z",
    "%m/%d/%Y %H:%M:%S",
    "%m/%d/%Y %H:%M",
    "%m/%d/%Y",
)


def parse_timestamp(value: str) -> datetime | None:
    """Parse a Setgraph timestamp string.

    The wall-clock value is kept exactly as written: no time zone conversion
    is applied, so the calendar date of the result is the date in the string.
    """
    value = value.strip()
    if not value:
        return None

    try:
        return datetime.fromisoformat(value)
    except ValueError:
        pass

    for fmt in _TIMESTAMP_FORMATS:
        try:
            return datetime.strptime(value, fmt)
        except ValueError:
            continue
    return None


@dataclass
class SetgraphRow:
    """One logged set as it appears in a Setgraph export."""

    exercise_name: str
    date: str
    repetitions: float = 0.0
    weight_lb: float = 0.0
    weight_kg: float = 0.0
    note: str = ""
    label_name: str = ""

    @property
    def timestamp(self) -> datetime | None:
        return parse_timestamp(self.date)


@dataclass
class SetgraphExerciseMapping:
    """Bridges a free-text Setgraph exercise name to a catalog exercise.

    ``exercise_id`` of None means a new custom exercise will be created at
    import time.
    """

    setgraph_name: str
    exercise_id: str | None = None
    needs_mapping: bool = False

    def to_dict(self) -> dict:
        return {
            "setgraph_name": self.setgraph_name,
            "exercise_id": self.exercise_id,
            "needs_mapping": self.needs_mapping,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "SetgraphExerciseMapping":
        exercise_id = data.get("exercise_id") or None
        return cls(
            setgraph_name=data["setgraph_name"],
            exercise_id=exercise_id,
            needs_mapping=data.get("needs_mapping", exercise_id is None),
        )


@dataclass
class ValidationResult:
    """Outcome of checking a CSV before anything is written."""

    valid: bool
    row_count: int
    errors: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"valid": self.valid, "row_count": self.row_count, "errors": self.errors}


@dataclass
class ImportResult:
    """Aggregate counts from an import run."""

    workouts_created: int = 0
    sets_created: int = 0
    exercises_created: int = 0
    errors: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "workouts_created": self.workouts_created,
            "sets_created": self.sets_created,
            "exercises_created": self.exercises_created,
            "errors": self.errors,
        }
