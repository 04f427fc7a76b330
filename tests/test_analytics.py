"""Tests for volume analytics."""

from datetime import date, datetime

from liftlog.models.exercises import SEED_EXERCISES, MuscleGroup
from liftlog.models.settings import DEFAULT_MUSCLE_GROUP_TARGETS, UserSettings, WeekStartDay
from liftlog.models.workout import Workout, WorkoutSet
from liftlog.services.analytics import (
    TRACKABLE_MUSCLE_GROUPS,
    MuscleGroupVolume,
    aggregate_into_categories,
    calculate_training_score,
    calculate_volume,
    get_personal_record,
    get_volume_history,
    get_volume_trends,
    get_week_bounds,
    get_weekly_volume,
)


def make_set(exercise_id, logged_at=datetime(2024, 1, 3, 18, 0), reps=10, weight=100.0, set_id=None):
    return WorkoutSet(
        id=set_id or f"{exercise_id}-{logged_at.isoformat()}-{reps}-{weight}",
        workout_id="w1",
        exercise_id=exercise_id,
        reps=reps,
        weight=weight,
        logged_at=logged_at,
    )


def volume_of(volumes, muscle_group):
    return next(v for v in volumes if v.muscle_group == muscle_group)


class TestCalculateVolume:
    """Tests for counting sets per muscle group."""

    def test_counts_primary_groups(self):
        sets = [
            make_set("leg-press", reps=10),
            make_set("leg-press", reps=8),
            make_set("barbell-bench-press"),
            make_set("not-in-catalog"),
        ]
        volumes = calculate_volume(sets, SEED_EXERCISES, DEFAULT_MUSCLE_GROUP_TARGETS)

        assert [v.muscle_group for v in volumes] == TRACKABLE_MUSCLE_GROUPS
        quads = volume_of(volumes, MuscleGroup.QUADS)
        assert quads.sets == 2
        assert quads.target == 10
        assert [(e.exercise_id, e.sets) for e in quads.exercises] == [("leg-press", 2)]
        assert volume_of(volumes, MuscleGroup.CHEST).sets == 1
        # Secondary groups are not credited
        assert volume_of(volumes, MuscleGroup.TRICEPS).sets == 0

    def test_empty(self):
        volumes = calculate_volume([], SEED_EXERCISES, {})
        assert all(v.sets == 0 and v.target == 0 for v in volumes)


class TestWeekBounds:
    def test_monday_start(self):
        start, end = get_week_bounds(date(2024, 1, 3), WeekStartDay.MONDAY)
        assert start == datetime(2024, 1, 1)
        assert end.date() == date(2024, 1, 7)

    def test_sunday_start(self):
        start, end = get_week_bounds(date(2024, 1, 3), WeekStartDay.SUNDAY)
        assert start == datetime(2023, 12, 31)
        assert end.date() == date(2024, 1, 6)

    def test_day_is_week_start(self):
        start, _ = get_week_bounds(date(2024, 1, 7), WeekStartDay.SUNDAY)
        assert start.date() == date(2024, 1, 7)


class TestWeeklyVolume:
    """Tests for volume read back from storage."""

    async def seed_sets(self, storage):
        await storage.add_workout(Workout(id="w1", started_at=datetime(2024, 1, 3, 18)))
        await storage.add_sets([
            make_set("leg-press", datetime(2024, 1, 3, 18, 0)),
            make_set("leg-press", datetime(2024, 1, 3, 18, 5)),
            make_set("barbell-bench-press", datetime(2024, 1, 10, 18, 0)),
        ])

    async def test_weekly_volume(self, storage):
        await self.seed_sets(storage)

        week = await get_weekly_volume(storage, date(2024, 1, 4))

        assert week.week_start == date(2024, 1, 1)
        assert week.week_end == date(2024, 1, 7)
        assert volume_of(week.muscle_groups, MuscleGroup.QUADS).sets == 2
        assert volume_of(week.muscle_groups, MuscleGroup.CHEST).sets == 0
        assert week.total_sets == 2
        assert week.target_sets == sum(v for v in DEFAULT_MUSCLE_GROUP_TARGETS.values() if v > 0)
        assert week.to_dict()["week_start"] == "2024-01-01"

    async def test_week_start_setting(self, storage):
        await self.seed_sets(storage)
        await storage.update_user_settings(UserSettings(week_start_day=WeekStartDay.SUNDAY))

        week = await get_weekly_volume(storage, date(2024, 1, 4))

        assert week.week_start == date(2023, 12, 31)

    async def test_history_oldest_first(self, storage):
        await self.seed_sets(storage)

        history = await get_volume_history(storage, weeks=3, today=date(2024, 1, 17))

        assert [w.week_start for w in history] == [
            date(2024, 1, 1),
            date(2024, 1, 8),
            date(2024, 1, 15),
        ]
        assert [w.total_sets for w in history] == [2, 1, 0]


class TestCategoriesAndScore:
    def test_categories(self):
        volumes = [
            MuscleGroupVolume(MuscleGroup.LATS, sets=4, target=10),
            MuscleGroupVolume(MuscleGroup.UPPER_BACK, sets=3, target=6),
            MuscleGroupVolume(MuscleGroup.CHEST, sets=5, target=10),
        ]
        categories = {c.category: c for c in aggregate_into_categories(volumes)}

        assert list(categories) == ["back", "shoulders", "chest", "arms", "legs", "core"]
        assert categories["back"].total_sets == 7
        assert categories["back"].total_target == 16
        assert categories["shoulders"].total_sets == 0

    def test_score(self):
        volumes = [
            MuscleGroupVolume(MuscleGroup.CHEST, sets=5, target=10),
            MuscleGroupVolume(MuscleGroup.LATS, sets=0, target=10),
            MuscleGroupVolume(MuscleGroup.FOREARMS, sets=8, target=0),
        ]
        assert calculate_training_score(volumes) == 25

    def test_score_capped(self):
        volumes = [MuscleGroupVolume(MuscleGroup.CHEST, sets=30, target=10)]
        assert calculate_training_score(volumes) == 100

    def test_score_without_targets(self):
        assert calculate_training_score([MuscleGroupVolume(MuscleGroup.CHEST, sets=3)]) == 0


class TestPersonalRecord:
    def test_bests(self):
        first = make_set("leg-press", datetime(2024, 1, 1), reps=10, weight=100)
        sets = [
            first,
            make_set("leg-press", datetime(2024, 1, 2), reps=5, weight=150),
            make_set("leg-press", datetime(2024, 1, 3), reps=12, weight=80),
            make_set("hack-squat", datetime(2024, 1, 3), reps=20, weight=300),
        ]

        record = get_personal_record("leg-press", sets)

        assert record.max_weight == 150
        assert record.max_reps == 12
        assert record.max_volume == 1000
        assert record.date == first.logged_at

    def test_no_sets(self):
        assert get_personal_record("leg-press", []) is None


class TestVolumeTrends:
    def test_trends(self):
        groups = [MuscleGroup.CHEST, MuscleGroup.LATS, MuscleGroup.QUADS, MuscleGroup.CALVES, MuscleGroup.ABS]
        current = [MuscleGroupVolume(mg, sets=s) for mg, s in zip(groups, [11, 12, 0, 3, 0])]
        previous = [MuscleGroupVolume(mg, sets=s) for mg, s in zip(groups, [10, 10, 10, 0, 0])]

        trends = {t.muscle_group: t for t in get_volume_trends(current, previous)}

        assert (trends[MuscleGroup.CHEST].change, trends[MuscleGroup.CHEST].trend) == (10, "stable")
        assert (trends[MuscleGroup.LATS].change, trends[MuscleGroup.LATS].trend) == (20, "up")
        assert (trends[MuscleGroup.QUADS].change, trends[MuscleGroup.QUADS].trend) == (-100, "down")
        assert (trends[MuscleGroup.CALVES].change, trends[MuscleGroup.CALVES].trend) == (100, "up")
        assert (trends[MuscleGroup.ABS].change, trends[MuscleGroup.ABS].trend) == (0, "stable")
