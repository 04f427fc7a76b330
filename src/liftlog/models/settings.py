"""User settings model."""

from dataclasses import dataclass, field
from enum import Enum

DEFAULT_REST_TIMER_SECONDS = 90

# Target working sets per week for each muscle group
DEFAULT_MUSCLE_GROUP_TARGETS: dict[str, int] = {
    "chest": 10,
    "lats": 10,
    "upper_back": 6,
    "front_delts": 6,
    "side_delts": 10,
    "rear_delts": 6,
    "triceps": 6,
    "biceps": 6,
    "quads": 10,
    "hamstrings": 6,
    "glutes": 6,
    "calves": 6,
    "abs": 6,
    "forearms": 0,
    "traps": 6,
    "lower_back": 0,
    "miscellaneous": 0,
}


class WeekStartDay(str, Enum):
    SUNDAY = "sunday"
    MONDAY = "monday"


@dataclass
class UserSettings:
    """Per-user preferences."""

    week_start_day: WeekStartDay = WeekStartDay.MONDAY
    protein_goal: int = 150  # grams
    sleep_goal: float = 8  # hours
    rest_timer_seconds: int = DEFAULT_REST_TIMER_SECONDS
    muscle_group_targets: dict[str, int] = field(
        default_factory=lambda: dict(DEFAULT_MUSCLE_GROUP_TARGETS)
    )

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "week_start_day": self.week_start_day.value,
            "protein_goal": self.protein_goal,
            "sleep_goal": self.sleep_goal,
            "rest_timer_seconds": self.rest_timer_seconds,
            "muscle_group_targets": dict(self.muscle_group_targets),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "UserSettings":
        """Create from dictionary, filling gaps with defaults."""
        targets = dict(DEFAULT_MUSCLE_GROUP_TARGETS)
        targets.update(data.get("muscle_group_targets", {}))

        return cls(
            week_start_day=WeekStartDay(data.get("week_start_day", WeekStartDay.MONDAY.value)),
            protein_goal=data.get("protein_goal", 150),
            sleep_goal=data.get("sleep_goal", 8),
            rest_timer_seconds=data.get("rest_timer_seconds") or DEFAULT_REST_TIMER_SECONDS,
            muscle_group_targets=targets,
        )
