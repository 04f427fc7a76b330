"""Tests for utility functions."""

from liftlog.models.exercises import SEED_EXERCISES, Exercise, MuscleGroup
from liftlog.utils.exercise_utils import (
    find_exact_match,
    find_fuzzy_match,
    normalize_exercise_name,
    rank_exercise_matches,
    score_exercise_match,
    search_exercises,
)


def make_exercise(exercise_id: str, name: str) -> Exercise:
    return Exercise(id=exercise_id, name=name, primary_muscle_groups=[MuscleGroup.CHEST])


DUMBBELL_BENCH = make_exercise("db-bench", "Dumbbell Bench Press")
BARBELL_BENCH = make_exercise("bb-bench", "Barbell Bench Press")


class TestNormalizeExerciseName:
    """Tests for normalize_exercise_name function."""

    def test_lowercase_and_strip(self):
        assert normalize_exercise_name("  Bench Press  ") == "bench press"

    def test_punctuation_removed(self):
        assert normalize_exercise_name("DB Curl!!") == normalize_exercise_name("db curl")
        assert normalize_exercise_name("Neutral/Close-Grip Pulldown") == "neutralclosegrip pulldown"

    def test_separator_collapses(self):
        """A dash between spaces leaves a single space behind."""
        assert normalize_exercise_name("Biceps - Hammer Curls") == "biceps hammer curls"

    def test_extra_whitespace(self):
        assert normalize_exercise_name("Bench \t  Press") == "bench press"

    def test_idempotent(self):
        for name in ["Leg Press, Sled", "EZ-Bar Curl", "  Ab Roller / Knee Raise "]:
            once = normalize_exercise_name(name)
            assert normalize_exercise_name(once) == once


class TestScoreExerciseMatch:
    """Tests for the token overlap score."""

    def test_full_overlap(self):
        assert score_exercise_match(["hammer", "curls"], "Hammer Curl") == 1.0

    def test_divides_by_longer_side(self):
        score = score_exercise_match(["leg", "press", "sled"], "Leg Press")
        assert abs(score - 2 / 3) < 1e-9

    def test_short_tokens_ignored(self):
        """Two-letter tokens never count as a match."""
        assert score_exercise_match(["db", "row"], "DB Row") == 0.5

    def test_name_without_letters_scores_zero(self):
        assert score_exercise_match(["zottman", "curls"], "???") == 0.0
        assert score_exercise_match([], "") == 0.0


class TestFindFuzzyMatch:
    """Tests for find_fuzzy_match function."""

    def test_higher_overlap_wins(self):
        for candidates in ([BARBELL_BENCH, DUMBBELL_BENCH], [DUMBBELL_BENCH, BARBELL_BENCH]):
            result = find_fuzzy_match("dumbbell bench press", candidates)
            assert result is DUMBBELL_BENCH

    def test_tie_goes_to_first_candidate(self):
        assert find_fuzzy_match("bench press", [DUMBBELL_BENCH, BARBELL_BENCH]) is DUMBBELL_BENCH
        assert find_fuzzy_match("bench press", [BARBELL_BENCH, DUMBBELL_BENCH]) is BARBELL_BENCH

    def test_half_overlap_is_not_enough(self):
        preacher = make_exercise("preacher-curl", "Preacher Curl")
        assert find_fuzzy_match("cable curl", [preacher]) is None

    def test_no_candidates(self):
        assert find_fuzzy_match("bench press", []) is None

    def test_punctuation_only_name_never_matches(self):
        unnamed = make_exercise("custom-1", "???")
        assert find_fuzzy_match("zottman curls", [unnamed]) is None

    def test_against_seed_catalog(self):
        result = find_fuzzy_match("leg press sled", SEED_EXERCISES)
        assert result is not None
        assert result.id == "leg-press"


class TestFindExactMatch:
    def test_matches_normalized_name(self):
        result = find_exact_match("db hammer curl", SEED_EXERCISES)
        assert result is not None
        assert result.id == "db-hammer-curl"

    def test_no_match(self):
        assert find_exact_match("zottman curls", SEED_EXERCISES) is None


class TestRankExerciseMatches:
    def test_best_first_in_catalog_order(self):
        ranked = rank_exercise_matches("Zottman Curls", SEED_EXERCISES, limit=3)
        assert [e.id for e, _ in ranked] == ["preacher-curl", "ez-bar-curl", "cable-curl"]
        assert all(score == 0.5 for _, score in ranked)

    def test_zero_scores_dropped(self):
        assert rank_exercise_matches("Kettlebell Swing", SEED_EXERCISES) == []


class TestSearchExercises:
    """Tests for catalog search."""

    def test_all_words_must_match(self):
        results = search_exercises("db curl", SEED_EXERCISES)
        assert [e.id for e in results] == ["db-hammer-curl", "incline-bench-db-curl"]

    def test_muscle_filter(self):
        results = search_exercises("", SEED_EXERCISES, muscle_group=MuscleGroup.CALVES)
        assert {e.id for e in results} == {
            "calf-raise-machine",
            "seated-calf-raise",
            "db-standing-calf-raise",
        }

    def test_keeps_catalog_order(self):
        results = search_exercises("pulldown", SEED_EXERCISES)
        ids = [e.id for e in results]
        assert ids == sorted(ids, key=[e.id for e in SEED_EXERCISES].index)
