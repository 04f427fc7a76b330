"""Utility helpers for liftlog."""

from .exercise_utils import (
    find_exact_match,
    find_fuzzy_match,
    normalize_exercise_name,
    rank_exercise_matches,
    score_exercise_match,
    search_exercises,
)

__all__ = [
    "find_exact_match",
    "find_fuzzy_match",
    "normalize_exercise_name",
    "rank_exercise_matches",
    "score_exercise_match",
    "search_exercises",
]
