"""Utilities for exercise name normalization and matching."""

import re
from collections.abc import Iterable

from ..models.exercises import Exercise, MuscleGroup

# Query tokens this short ("of", "db") never count toward a match
MIN_TOKEN_LENGTH = 3

# A candidate must agree on more than half of the tokens to be accepted
MATCH_THRESHOLD = 0.5


def normalize_exercise_name(name: str) -> str:
    """Normalize an exercise name for comparison.

    Lowercases, drops everything that is not a letter, digit or whitespace,
    collapses whitespace runs and trims. Applying it twice changes nothing.
    """
    normalized = name.lower()
    normalized = re.sub(r"[^a-z0-9\s]", "", normalized)
    normalized = re.sub(r"\s+", " ", normalized)
    return normalized.strip()


def score_exercise_match(query_tokens: list[str], candidate_name: str) -> float:
    """Score how well query tokens overlap a candidate exercise name.

    A query token matches when it is long enough and either it contains a
    candidate token or a candidate token contains it. The match count is
    divided by the longer of the two token lists so that a short query does
    not trivially match a long name.
    """
    candidate_tokens = normalize_exercise_name(candidate_name).split()
    if not candidate_tokens:
        return 0.0

    match_count = 0
    for token in query_tokens:
        if len(token) < MIN_TOKEN_LENGTH:
            continue
        if any(ct in token or token in ct for ct in candidate_tokens):
            match_count += 1

    return match_count / max(len(query_tokens), len(candidate_tokens))


def find_fuzzy_match(
    normalized_name: str,
    exercises: Iterable[Exercise],
) -> Exercise | None:
    """Find the catalog exercise sharing the most tokens with a name.

    Args:
        normalized_name: Name already passed through normalize_exercise_name
        exercises: Candidates, scanned in order

    Returns:
        The strictly best scoring exercise above MATCH_THRESHOLD, or None.
        On a tie the earlier candidate wins.
    """
    query_tokens = normalized_name.split()

    best_match: Exercise | None = None
    best_score = 0.0

    for exercise in exercises:
        score = score_exercise_match(query_tokens, exercise.name)
        if score > best_score and score > MATCH_THRESHOLD:
            best_score = score
            best_match = exercise

    return best_match


def rank_exercise_matches(
    name: str,
    exercises: Iterable[Exercise],
    limit: int = 5,
) -> list[tuple[Exercise, float]]:
    """Best scoring candidates for a raw name, highest score first.

    Candidates scoring zero are left out. Used to offer choices when a name
    could not be matched automatically.
    """
    query_tokens = normalize_exercise_name(name).split()
    scored = [(e, score_exercise_match(query_tokens, e.name)) for e in exercises]
    scored = [item for item in scored if item[1] > 0]
    scored.sort(key=lambda item: item[1], reverse=True)
    return scored[:limit]


def find_exact_match(
    normalized_name: str,
    exercises: Iterable[Exercise],
) -> Exercise | None:
    """Return the first exercise whose normalized name equals the query."""
    for exercise in exercises:
        if normalize_exercise_name(exercise.name) == normalized_name:
            return exercise
    return None


def search_exercises(
    query: str,
    exercises: Iterable[Exercise],
    muscle_group: MuscleGroup | None = None,
) -> list[Exercise]:
    """Search the catalog by name, keeping catalog order.

    Every word of the query must appear somewhere in the exercise name.
    """
    words = normalize_exercise_name(query).split()

    results = []
    for exercise in exercises:
        if muscle_group is not None and muscle_group not in exercise.primary_muscle_groups:
            continue
        name = normalize_exercise_name(exercise.name)
        if all(word in name for word in words):
            results.append(exercise)
    return results
