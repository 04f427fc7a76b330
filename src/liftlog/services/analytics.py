"""Training volume analytics.

Volume is counted in working sets: every logged set credits each primary
muscle group of its exercise once.
"""

import math
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta

from ..db.storage import Storage
from ..models.exercises import Exercise, MuscleGroup
from ..models.settings import WeekStartDay
from ..models.workout import WorkoutSet

# Display order for per-muscle volume
TRACKABLE_MUSCLE_GROUPS = [
    MuscleGroup.CHEST,
    MuscleGroup.LATS,
    MuscleGroup.UPPER_BACK,
    MuscleGroup.FRONT_DELTS,
    MuscleGroup.SIDE_DELTS,
    MuscleGroup.REAR_DELTS,
    MuscleGroup.TRICEPS,
    MuscleGroup.BICEPS,
    MuscleGroup.QUADS,
    MuscleGroup.HAMSTRINGS,
    MuscleGroup.GLUTES,
    MuscleGroup.CALVES,
    MuscleGroup.ABS,
    MuscleGroup.FOREARMS,
    MuscleGroup.TRAPS,
    MuscleGroup.LOWER_BACK,
    MuscleGroup.MISCELLANEOUS,
]

ANALYTICS_CATEGORIES: list[tuple[str, str, list[MuscleGroup]]] = [
    ("back", "Back", [MuscleGroup.LATS, MuscleGroup.UPPER_BACK, MuscleGroup.TRAPS]),
    ("shoulders", "Shoulders", [
        MuscleGroup.FRONT_DELTS, MuscleGroup.SIDE_DELTS, MuscleGroup.REAR_DELTS,
    ]),
    ("chest", "Chest", [MuscleGroup.CHEST]),
    ("arms", "Arms", [MuscleGroup.TRICEPS, MuscleGroup.BICEPS, MuscleGroup.FOREARMS]),
    ("legs", "Legs", [MuscleGroup.QUADS, MuscleGroup.HAMSTRINGS, MuscleGroup.CALVES]),
    ("core", "Core", [MuscleGroup.ABS, MuscleGroup.GLUTES, MuscleGroup.LOWER_BACK]),
]

# Week-over-week change (percent) beyond which a trend is not "stable"
TREND_THRESHOLD = 10


@dataclass
class ExerciseVolume:
    exercise_id: str
    exercise_name: str
    sets: int = 0


@dataclass
class MuscleGroupVolume:
    """Sets credited to one muscle group, with the exercises behind them."""

    muscle_group: MuscleGroup
    sets: int = 0
    target: int = 0
    exercises: list[ExerciseVolume] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "muscle_group": self.muscle_group.value,
            "sets": self.sets,
            "target": self.target,
            "exercises": [
                {"exercise_id": e.exercise_id, "exercise_name": e.exercise_name, "sets": e.sets}
                for e in self.exercises
            ],
        }


@dataclass
class WeeklyVolume:
    week_start: date
    week_end: date
    muscle_groups: list[MuscleGroupVolume]
    total_sets: int
    target_sets: int

    def to_dict(self) -> dict:
        return {
            "week_start": self.week_start.isoformat(),
            "week_end": self.week_end.isoformat(),
            "muscle_groups": [mg.to_dict() for mg in self.muscle_groups],
            "total_sets": self.total_sets,
            "target_sets": self.target_sets,
        }


@dataclass
class CategoryVolume:
    category: str
    name: str
    total_sets: int
    total_target: int
    muscle_groups: list[MuscleGroupVolume]


@dataclass
class PersonalRecord:
    exercise_id: str
    max_weight: float
    max_reps: int
    max_volume: float
    date: datetime | None


@dataclass
class VolumeTrend:
    muscle_group: MuscleGroup
    current_week: int
    previous_week: int
    change: int  # percent
    trend: str  # "up", "down" or "stable"


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def calculate_volume(
    sets: Iterable[WorkoutSet],
    exercises: Iterable[Exercise],
    targets: dict[str, int],
) -> list[MuscleGroupVolume]:
    """Count sets per primary muscle group.

    Sets for exercises missing from ``exercises`` are ignored.
    """
    exercise_map = {e.id: e for e in exercises}
    volumes = {
        mg: MuscleGroupVolume(muscle_group=mg, target=targets.get(mg.value, 0))
        for mg in TRACKABLE_MUSCLE_GROUPS
    }
    breakdown: dict[MuscleGroup, dict[str, ExerciseVolume]] = {
        mg: {} for mg in TRACKABLE_MUSCLE_GROUPS
    }

    for workout_set in sets:
        exercise = exercise_map.get(workout_set.exercise_id)
        if exercise is None:
            continue

        for muscle_group in exercise.primary_muscle_groups:
            volumes[muscle_group].sets += 1
            entry = breakdown[muscle_group].setdefault(
                exercise.id, ExerciseVolume(exercise.id, exercise.name)
            )
            entry.sets += 1

    for muscle_group, volume in volumes.items():
        volume.exercises = list(breakdown[muscle_group].values())

    return [volumes[mg] for mg in TRACKABLE_MUSCLE_GROUPS]


def get_week_bounds(day: date, week_start_day: WeekStartDay) -> tuple[datetime, datetime]:
    """First and last instant of the week containing ``day``."""
    first_weekday = 6 if week_start_day == WeekStartDay.SUNDAY else 0
    offset = (day.weekday() - first_weekday) % 7
    start = datetime.combine(day - timedelta(days=offset), time.min)
    end = datetime.combine(start.date() + timedelta(days=6), time.max)
    return start, end


async def get_weekly_volume(storage: Storage, day: date) -> WeeklyVolume:
    """Volume for the week containing ``day``, using the user's week start."""
    settings = await storage.get_user_settings()
    start, end = get_week_bounds(day, settings.week_start_day)

    sets = await storage.get_sets_in_date_range(start, end)
    exercises = await storage.get_exercises()
    muscle_groups = calculate_volume(sets, exercises, settings.muscle_group_targets)

    targeted = [mg for mg in muscle_groups if mg.target > 0]
    return WeeklyVolume(
        week_start=start.date(),
        week_end=end.date(),
        muscle_groups=muscle_groups,
        total_sets=sum(mg.sets for mg in targeted),
        target_sets=sum(mg.target for mg in targeted),
    )


async def get_volume_history(
    storage: Storage,
    weeks: int = 8,
    today: date | None = None,
) -> list[WeeklyVolume]:
    """Weekly volume for the last ``weeks`` weeks, oldest first."""
    today = today or date.today()
    history = []
    for i in range(weeks):
        history.append(await get_weekly_volume(storage, today - timedelta(weeks=i)))
    history.reverse()
    return history


def aggregate_into_categories(volumes: list[MuscleGroupVolume]) -> list[CategoryVolume]:
    """Roll muscle groups up into the six analytics categories."""
    result = []
    for category, name, groups in ANALYTICS_CATEGORIES:
        members = [v for v in volumes if v.muscle_group in groups]
        result.append(
            CategoryVolume(
                category=category,
                name=name,
                total_sets=sum(v.sets for v in members),
                total_target=sum(v.target for v in members),
                muscle_groups=members,
            )
        )
    return result


def calculate_training_score(volumes: list[MuscleGroupVolume]) -> int:
    """Percentage of targeted sets completed, capped at 100."""
    targeted = [v for v in volumes if v.target > 0]
    total_targets = sum(v.target for v in targeted)
    if total_targets == 0:
        return 0

    total_sets = sum(v.sets for v in targeted)
    return min(100, _round_half_up(total_sets / total_targets * 100))


def get_personal_record(exercise_id: str, sets: Iterable[WorkoutSet]) -> PersonalRecord | None:
    """Best weight, reps and single-set volume for an exercise.

    ``date`` is when the best-volume set was logged.
    """
    exercise_sets = [s for s in sets if s.exercise_id == exercise_id]
    if not exercise_sets:
        return None

    max_weight = 0.0
    max_reps = 0
    max_volume = 0.0
    record_date = None

    for workout_set in exercise_sets:
        max_weight = max(max_weight, workout_set.weight)
        max_reps = max(max_reps, workout_set.reps)
        if workout_set.volume > max_volume:
            max_volume = workout_set.volume
            record_date = workout_set.logged_at

    return PersonalRecord(
        exercise_id=exercise_id,
        max_weight=max_weight,
        max_reps=max_reps,
        max_volume=max_volume,
        date=record_date,
    )


def get_volume_trends(
    current: list[MuscleGroupVolume],
    previous: list[MuscleGroupVolume],
) -> list[VolumeTrend]:
    """Compare two weeks of volume, muscle group by muscle group."""
    previous_sets = {v.muscle_group: v.sets for v in previous}

    trends = []
    for volume in current:
        prev = previous_sets.get(volume.muscle_group, 0)
        if prev == 0:
            change = 100 if volume.sets > 0 else 0
        else:
            change = _round_half_up((volume.sets - prev) / prev * 100)

        if change > TREND_THRESHOLD:
            trend = "up"
        elif change < -TREND_THRESHOLD:
            trend = "down"
        else:
            trend = "stable"

        trends.append(
            VolumeTrend(
                muscle_group=volume.muscle_group,
                current_week=volume.sets,
                previous_week=prev,
                change=change,
                trend=trend,
            )
        )
    return trends
