"""Setgraph CSV import.

Setgraph exports one line per logged set with the fixed column layout
``exerciseName, date, repetitions, weightLb, weightKg, note, labelName``.
Importing happens in four stages: parse, validate, propose exercise mappings
for review, then rebuild workouts by grouping sets per calendar date.
"""

import math
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date

from loguru import logger

from ..db.storage import Storage
from ..models.exercises import Equipment, Exercise, MuscleGroup
from ..models.setgraph import (
    ImportResult,
    SetgraphExerciseMapping,
    SetgraphRow,
    ValidationResult,
)
from ..models.workout import Workout, WorkoutSet, new_id
from ..utils.exercise_utils import (
    find_exact_match,
    find_fuzzy_match,
    normalize_exercise_name,
)

KG_TO_LB = 2.20462

IMPORTED_PREFIX = "imported"

# Normalized Setgraph names that fuzzy matching gets wrong.
# An empty id means "always create a new exercise".
KNOWN_SETGRAPH_ALIASES: dict[str, str] = {
    "dumbbell chest press": "db-flat-low-incline-bench-press",
    "dumbbell incline press": "db-incline-bench-press",
    "dumbell fly": "db-flat-low-incline-bench-press",
    "overhead press": "seated-db-overhead-press",
    "arnold shoulder press": "seated-db-overhead-press",
    "front shoulder raise": "seated-db-lateral-raise",
    "side lateral raises": "seated-db-lateral-raise",
    "tricep extensions ovhd": "db-overhead-triceps-extension",
    "skull crushers": "db-overhead-triceps-extension",
    "bentover row": "one-arm-db-row",
    "dumbbell curls": "incline-bench-db-curl",
    "biceps hammer curls": "db-hammer-curl",
    "dumbbell pullover": "db-pullover",
    "standing calf raise": "db-standing-calf-raise",
    "dumbell shrugs": "",
}


class SetgraphValidationError(ValueError):
    """Raised when a CSV fails validation and nothing may be imported."""

    def __init__(self, errors: list[str]):
        self.errors = list(errors)
        super().__init__("; ".join(self.errors) or "Invalid Setgraph CSV")


@dataclass
class SetgraphPreview:
    """Everything a reviewer needs before confirming an import."""

    validation: ValidationResult
    rows: list[SetgraphRow] = field(default_factory=list)
    exercise_names: list[str] = field(default_factory=list)
    mappings: list[SetgraphExerciseMapping] = field(default_factory=list)

    @property
    def unresolved(self) -> list[SetgraphExerciseMapping]:
        return [m for m in self.mappings if m.needs_mapping]

    def to_dict(self) -> dict:
        return {
            "validation": self.validation.to_dict(),
            "row_count": len(self.rows),
            "exercise_names": self.exercise_names,
            "mappings": [m.to_dict() for m in self.mappings],
        }


def parse_csv_line(line: str) -> list[str]:
    """Split one CSV line on commas outside double quotes.

    Quote characters toggle quoting and are dropped; fields are trimmed.
    """
    fields: list[str] = []
    current: list[str] = []
    in_quotes = False

    for char in line:
        if char == '"':
            in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            fields.append("".join(current).strip())
            current = []
        else:
            current.append(char)

    fields.append("".join(current).strip())
    return fields


def _parse_number(value: str) -> float:
    try:
        number = float(value)
    except ValueError:
        return 0.0
    return number if math.isfinite(number) else 0.0


def _data_lines(content: str) -> list[str]:
    """Non-blank lines after the header."""
    lines = content.strip().splitlines()
    return [line for line in lines[1:] if line.strip()]


def _line_to_row(line: str) -> SetgraphRow:
    parts = parse_csv_line(line)
    parts += [""] * (7 - len(parts))

    return SetgraphRow(
        exercise_name=parts[0],
        date=parts[1],
        repetitions=_parse_number(parts[2]),
        weight_lb=_parse_number(parts[3]),
        weight_kg=_parse_number(parts[4]),
        note=parts[5],
        label_name=parts[6],
    )


def parse_setgraph_csv(content: str) -> list[SetgraphRow]:
    """Parse a Setgraph export into rows.

    Rows without an exercise name or a date are dropped.
    """
    rows = [_line_to_row(line) for line in _data_lines(content)]
    return [row for row in rows if row.exercise_name and row.date]


def validate_setgraph_csv(content: str) -> ValidationResult:
    """Check a Setgraph export before anything is written."""
    rows = [_line_to_row(line) for line in _data_lines(content)]
    valid_rows = [row for row in rows if row.exercise_name and row.date]

    if not valid_rows:
        return ValidationResult(
            valid=False,
            row_count=0,
            errors=["No valid data rows found in CSV"],
        )

    errors = []
    missing = len(rows) - len(valid_rows)
    if missing:
        errors.append(f"{missing} rows have missing exercise name or date")

    unreadable = sum(1 for row in valid_rows if row.timestamp is None)
    if unreadable:
        errors.append(f"{unreadable} rows have an unreadable date")

    non_positive = sum(1 for row in valid_rows if row.repetitions <= 0)
    if non_positive:
        logger.warning(f"{non_positive} rows have no repetitions")

    return ValidationResult(
        valid=not errors,
        row_count=len(valid_rows),
        errors=errors,
    )


def get_unique_setgraph_exercises(rows: Iterable[SetgraphRow]) -> list[str]:
    """Distinct exercise names, sorted."""
    return sorted({row.exercise_name for row in rows})


def create_default_mappings(
    setgraph_names: Iterable[str],
    exercises: Iterable[Exercise],
    saved_mappings: Iterable[SetgraphExerciseMapping] | None = None,
) -> list[SetgraphExerciseMapping]:
    """Propose a catalog exercise for each Setgraph exercise name.

    Candidates are tried in order: a mapping saved by an earlier import, the
    alias table, an exact normalized-name match, then fuzzy matching. Names
    with no candidate are flagged for review and will become new exercises.
    """
    catalog = list(exercises)
    catalog_ids = {e.id for e in catalog}
    saved = {
        m.setgraph_name: m.exercise_id
        for m in saved_mappings or []
        if m.exercise_id
    }

    mappings = []
    for name in setgraph_names:
        normalized = normalize_exercise_name(name)

        saved_id = saved.get(name)
        if saved_id in catalog_ids:
            mappings.append(SetgraphExerciseMapping(name, saved_id, needs_mapping=False))
            continue

        alias_id = KNOWN_SETGRAPH_ALIASES.get(normalized)
        if alias_id is not None and (alias_id == "" or alias_id in catalog_ids):
            mappings.append(
                SetgraphExerciseMapping(name, alias_id or None, needs_mapping=not alias_id)
            )
            continue

        match = find_exact_match(normalized, catalog) or find_fuzzy_match(normalized, catalog)
        if match is not None:
            mappings.append(SetgraphExerciseMapping(name, match.id, needs_mapping=False))
        else:
            mappings.append(SetgraphExerciseMapping(name, None, needs_mapping=True))

    unresolved = sum(1 for m in mappings if m.needs_mapping)
    logger.debug(f"Proposed mappings for {len(mappings)} exercises, {unresolved} unresolved")
    return mappings


def create_exercise_from_setgraph(
    name: str,
    primary_muscle_group: MuscleGroup = MuscleGroup.MISCELLANEOUS,
) -> Exercise:
    """Build a custom exercise for a Setgraph name with no catalog match."""
    return Exercise(
        id=new_id(IMPORTED_PREFIX),
        name=name,
        primary_muscle_groups=[primary_muscle_group],
        secondary_muscle_groups=[],
        equipment=Equipment.OTHER,
        location_ids=["gym", "home"],
        is_custom=True,
    )


def _round_half_up(value: float, digits: int = 0) -> float:
    scale = 10 ** digits
    return math.floor(value * scale + 0.5) / scale


def _weight_in_pounds(row: SetgraphRow) -> float:
    if row.weight_lb == 0 and row.weight_kg > 0:
        return row.weight_kg * KG_TO_LB
    return row.weight_lb


async def import_setgraph_data(
    rows: list[SetgraphRow],
    mappings: list[SetgraphExerciseMapping],
    storage: Storage,
) -> ImportResult:
    """Create workouts, sets and missing exercises from confirmed mappings.

    Every distinct calendar date becomes one workout spanning its first and
    last set. Rows that cannot be imported are reported in ``errors`` and the
    rest of the import carries on; that includes rows whose mapping names an
    exercise id missing from the catalog.
    """
    result = ImportResult()
    known_ids = {e.id for e in await storage.get_exercises()}

    exercise_ids: dict[str, str] = {}
    unknown: set[str] = set()
    for mapping in mappings:
        if mapping.setgraph_name in exercise_ids or mapping.setgraph_name in unknown:
            continue
        if mapping.exercise_id:
            if mapping.exercise_id in known_ids:
                exercise_ids[mapping.setgraph_name] = mapping.exercise_id
            else:
                # Rows for this name are skipped below and reported as unmapped
                unknown.add(mapping.setgraph_name)
                logger.warning(
                    f"Mapping for '{mapping.setgraph_name}' names unknown exercise "
                    f"{mapping.exercise_id}"
                )
            continue

        exercise = create_exercise_from_setgraph(mapping.setgraph_name)
        await storage.add_exercise(exercise)
        exercise_ids[mapping.setgraph_name] = exercise.id
        result.exercises_created += 1
        logger.info(f"Created exercise '{exercise.name}' ({exercise.id})")

    # Group by the date as written, keeping first-appearance order. Offsets are
    # dropped so stored times are the wall-clock times in the export.
    sessions: dict[date, list] = {}
    for row in rows:
        timestamp = row.timestamp
        if timestamp is None:
            result.errors.append(f"Unreadable date for {row.exercise_name}: {row.date}")
            continue
        timestamp = timestamp.replace(tzinfo=None)
        sessions.setdefault(timestamp.date(), []).append((timestamp, row))

    for day, entries in sessions.items():
        entries.sort(key=lambda entry: entry[0])

        workout = Workout(
            id=new_id(IMPORTED_PREFIX),
            started_at=entries[0][0],
            completed_at=entries[-1][0],
            template_id=None,
        )

        sets = []
        for timestamp, row in entries:
            exercise_id = exercise_ids.get(row.exercise_name)
            if not exercise_id:
                result.errors.append(f"No mapping found for exercise: {row.exercise_name}")
                continue

            sets.append(
                WorkoutSet(
                    id=new_id(IMPORTED_PREFIX),
                    workout_id=workout.id,
                    exercise_id=exercise_id,
                    reps=int(_round_half_up(row.repetitions)),
                    weight=_round_half_up(_weight_in_pounds(row), 1),
                    logged_at=timestamp,
                )
            )

        await storage.add_workout(workout)
        await storage.add_sets(sets)
        result.workouts_created += 1
        result.sets_created += len(sets)
        logger.debug(f"Imported workout for {day.isoformat()} with {len(sets)} sets")

    # Remember the resolved ids so the next import does not ask again
    remembered = {m.setgraph_name: m for m in await storage.get_setgraph_mappings()}
    for mapping in mappings:
        remembered[mapping.setgraph_name] = SetgraphExerciseMapping(
            setgraph_name=mapping.setgraph_name,
            exercise_id=exercise_ids.get(mapping.setgraph_name),
        )
    await storage.save_setgraph_mappings(list(remembered.values()))

    logger.info(
        f"Setgraph import: {result.workouts_created} workouts, "
        f"{result.sets_created} sets, {result.exercises_created} new exercises, "
        f"{len(result.errors)} errors"
    )
    return result


async def preview_setgraph_import(content: str, storage: Storage) -> SetgraphPreview:
    """Validate a CSV and propose mappings without writing anything."""
    validation = validate_setgraph_csv(content)
    rows = parse_setgraph_csv(content)
    names = get_unique_setgraph_exercises(rows)

    exercises = await storage.get_exercises()
    saved = await storage.get_setgraph_mappings()

    return SetgraphPreview(
        validation=validation,
        rows=rows,
        exercise_names=names,
        mappings=create_default_mappings(names, exercises, saved),
    )


async def import_setgraph_csv(
    content: str,
    mappings: list[SetgraphExerciseMapping],
    storage: Storage,
) -> ImportResult:
    """Validate then import a CSV.

    Raises:
        SetgraphValidationError: If the CSV fails validation. Nothing is
            written in that case.
    """
    validation = validate_setgraph_csv(content)
    if not validation.valid:
        raise SetgraphValidationError(validation.errors)

    rows = parse_setgraph_csv(content)
    return await import_setgraph_data(rows, mappings, storage)
