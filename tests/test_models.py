"""Tests for data models."""

from datetime import datetime

import pytest

from liftlog.models.exercises import (
    SEED_EXERCISES,
    Equipment,
    Exercise,
    MuscleGroup,
    get_seed_exercise,
)
from liftlog.models.settings import (
    DEFAULT_MUSCLE_GROUP_TARGETS,
    DEFAULT_REST_TIMER_SECONDS,
    UserSettings,
    WeekStartDay,
)
from liftlog.models.setgraph import SetgraphExerciseMapping, parse_timestamp
from liftlog.models.templates import SEED_TEMPLATES, Template, TemplateType
from liftlog.models.workout import ActiveWorkoutState, Workout, WorkoutSet, new_id


class TestExercise:
    """Tests for Exercise model."""

    def test_to_dict_and_back(self):
        exercise = get_seed_exercise("db-hammer-curl")
        assert exercise is not None
        assert Exercise.from_dict(exercise.to_dict()) == exercise

    def test_legacy_single_muscle_group(self):
        exercise = Exercise.from_dict({
            "id": "old",
            "name": "Old Curl",
            "primaryMuscleGroup": "biceps",
            "equipment": "dumbbell",
            "location": "both",
        })
        assert exercise.primary_muscle_groups == [MuscleGroup.BICEPS]
        assert exercise.location_ids == ["gym", "home"]

    def test_missing_location_uses_equipment(self):
        machine = Exercise.from_dict({
            "id": "m",
            "name": "Machine Thing",
            "primary_muscle_groups": ["chest"],
            "equipment": "machine",
        })
        assert machine.location_ids == ["gym"]
        assert not machine.is_available_at("home")

    def test_missing_muscle_group(self):
        exercise = Exercise.from_dict({"id": "x", "name": "Mystery"})
        assert exercise.primary_muscle_groups == [MuscleGroup.MISCELLANEOUS]
        assert exercise.equipment == Equipment.OTHER

    def test_seed_ids_unique(self):
        ids = [e.id for e in SEED_EXERCISES]
        assert len(ids) == len(set(ids))


class TestTemplate:
    """Tests for Template model."""

    def test_seed_templates_reference_seed_exercises(self):
        known = {e.id for e in SEED_EXERCISES}
        for template in SEED_TEMPLATES:
            assert set(template.exercise_ids) <= known, template.id

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("PULL A (Gym)", TemplateType.PULL),
            ("Legs Day", TemplateType.LOWER),
            ("Upper Push", TemplateType.PUSH),
        ],
    )
    def test_type_inferred_from_name(self, name, expected):
        template = Template.from_dict({"id": "t", "name": name, "exercise_ids": []})
        assert template.type == expected
        assert template.location_id == "gym"


class TestWorkout:
    """Tests for Workout and WorkoutSet models."""

    def test_complete(self):
        workout = Workout(id="w", started_at=datetime(2024, 1, 1, 18, 0))
        assert not workout.is_completed
        assert workout.duration_minutes() is None

        workout.complete(datetime(2024, 1, 1, 18, 45))
        assert workout.is_completed
        assert workout.duration_minutes() == 45

    def test_complete_before_start_rejected(self):
        workout = Workout(id="w", started_at=datetime(2024, 1, 1, 18, 0))
        with pytest.raises(ValueError):
            workout.complete(datetime(2024, 1, 1, 17, 0))
        assert workout.completed_at is None

    def test_workout_from_dict(self):
        data = {"id": "w", "started_at": "2024-01-01T18:00:00", "completed_at": None}
        workout = Workout.from_dict(data)
        assert workout.completed_at is None
        assert workout.template_id is None

    def test_set_volume(self):
        workout_set = WorkoutSet(
            id="s",
            workout_id="w",
            exercise_id="leg-press",
            reps=10,
            weight=135.0,
            logged_at=datetime(2024, 1, 1, 18, 0),
        )
        assert workout_set.volume == 1350.0

    def test_exercises_with_sets(self):
        state = ActiveWorkoutState(
            workout=Workout(id="w", started_at=datetime(2024, 1, 1)),
            sets=[
                WorkoutSet("s1", "w", "a", 5, 100, datetime(2024, 1, 1)),
                WorkoutSet("s2", "w", "a", 5, 100, datetime(2024, 1, 1)),
                WorkoutSet("s3", "w", "b", 5, 100, datetime(2024, 1, 1)),
            ],
            exercise_ids=["a", "b", "c"],
        )
        assert state.exercises_with_sets() == {"a", "b"}

    def test_new_id_prefix(self):
        assert new_id("imported").startswith("imported-")
        assert new_id() != new_id()


class TestUserSettings:
    def test_defaults(self):
        settings = UserSettings()
        assert settings.rest_timer_seconds == DEFAULT_REST_TIMER_SECONDS == 90
        assert settings.week_start_day == WeekStartDay.MONDAY
        assert settings.muscle_group_targets == DEFAULT_MUSCLE_GROUP_TARGETS

    def test_partial_dict_fills_defaults(self):
        settings = UserSettings.from_dict({
            "week_start_day": "sunday",
            "rest_timer_seconds": 0,
            "muscle_group_targets": {"chest": 14},
        })
        assert settings.week_start_day == WeekStartDay.SUNDAY
        assert settings.rest_timer_seconds == DEFAULT_REST_TIMER_SECONDS
        assert settings.muscle_group_targets["chest"] == 14
        assert settings.muscle_group_targets["lats"] == 10


class TestSetgraphModels:
    """Tests for Setgraph timestamp parsing and mappings."""

    def test_iso_timestamp(self):
        assert parse_timestamp("2024-01-01 18:05:00") == datetime(2024, 1, 1, 18, 5)

    def test_offset_keeps_wall_clock(self):
        parsed = parse_timestamp("2024-01-01T23:30:00-08:00")
        assert parsed is not None
        assert parsed.date().isoformat() == "2024-01-01"
        assert parsed.hour == 23

    def test_us_date_format(self):
        assert parse_timestamp("01/03/2024 07:30") == datetime(2024, 1, 3, 7, 30)

    @pytest.mark.parametrize("value", ["", "   ", "yesterday", "2024-13-45"])
    def test_unreadable(self, value):
        assert parse_timestamp(value) is None

    def test_mapping_from_dict_without_id(self):
        mapping = SetgraphExerciseMapping.from_dict({"setgraph_name": "Zottman", "exercise_id": ""})
        assert mapping.exercise_id is None
        assert mapping.needs_mapping
