"""Exercise definitions and metadata."""

from dataclasses import dataclass, field
from enum import Enum


class MuscleGroup(str, Enum):
    """Individual muscle groups tracked for volume."""

    LATS = "lats"
    UPPER_BACK = "upper_back"
    TRAPS = "traps"
    FRONT_DELTS = "front_delts"
    SIDE_DELTS = "side_delts"
    REAR_DELTS = "rear_delts"
    CHEST = "chest"
    TRICEPS = "triceps"
    BICEPS = "biceps"
    FOREARMS = "forearms"
    QUADS = "quads"
    HAMSTRINGS = "hamstrings"
    CALVES = "calves"
    ABS = "abs"
    GLUTES = "glutes"
    LOWER_BACK = "lower_back"
    MISCELLANEOUS = "miscellaneous"


class Equipment(str, Enum):
    """Equipment types for exercises."""

    BARBELL = "barbell"
    DUMBBELL = "dumbbell"
    CABLE = "cable"
    MACHINE = "machine"
    BODYWEIGHT = "bodyweight"
    OTHER = "other"


# Legacy single-location values
LEGACY_LOCATIONS = {
    "gym": ["gym"],
    "home": ["home"],
    "both": ["gym", "home"],
}


def default_location_ids(equipment: Equipment) -> list[str]:
    """Locations an exercise is available at when none were recorded.

    Machines, cables and barbells are gym-only; dumbbell and bodyweight
    work happens anywhere.
    """
    if equipment in (Equipment.DUMBBELL, Equipment.BODYWEIGHT):
        return ["gym", "home"]
    return ["gym"]


@dataclass
class Exercise:
    """Represents an exercise in the catalog."""

    id: str
    name: str
    primary_muscle_groups: list[MuscleGroup]
    secondary_muscle_groups: list[MuscleGroup] = field(default_factory=list)
    equipment: Equipment = Equipment.OTHER
    location_ids: list[str] = field(default_factory=list)
    is_custom: bool = False

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "id": self.id,
            "name": self.name,
            "primary_muscle_groups": [mg.value for mg in self.primary_muscle_groups],
            "secondary_muscle_groups": [mg.value for mg in self.secondary_muscle_groups],
            "equipment": self.equipment.value,
            "location_ids": self.location_ids,
            "is_custom": self.is_custom,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Exercise":
        """Create from dictionary.

        Older records carry a single ``primary_muscle_group`` (or the
        camel-cased ``primaryMuscleGroup``) and a single ``location``; both are
        folded into the list fields here so nothing downstream has to care.
        """
        primary = data.get("primary_muscle_groups") or data.get("primaryMuscleGroups")
        if not primary:
            legacy = data.get("primary_muscle_group") or data.get("primaryMuscleGroup")
            primary = [legacy] if legacy else [MuscleGroup.MISCELLANEOUS.value]

        secondary = (
            data.get("secondary_muscle_groups")
            or data.get("secondaryMuscleGroups")
            or []
        )
        equipment = Equipment(data.get("equipment", Equipment.OTHER.value))

        location_ids = data.get("location_ids") or data.get("locationIds")
        if not location_ids:
            legacy_location = data.get("location")
            if legacy_location in LEGACY_LOCATIONS:
                location_ids = list(LEGACY_LOCATIONS[legacy_location])
            else:
                location_ids = default_location_ids(equipment)

        return cls(
            id=data["id"],
            name=data["name"],
            primary_muscle_groups=[MuscleGroup(mg) for mg in primary],
            secondary_muscle_groups=[MuscleGroup(mg) for mg in secondary],
            equipment=equipment,
            location_ids=list(location_ids),
            is_custom=bool(data.get("is_custom", data.get("isCustom", False))),
        )

    def is_available_at(self, location_id: str) -> bool:
        """Check whether the exercise can be done at a location."""
        return location_id in self.location_ids


# Built-in exercise library, in catalog order
SEED_EXERCISES: list[Exercise] = [
    # Push (gym)
    Exercise(
        id="barbell-bench-press",
        name="Barbell Bench Press",
        primary_muscle_groups=[MuscleGroup.CHEST],
        secondary_muscle_groups=[MuscleGroup.FRONT_DELTS, MuscleGroup.TRICEPS],
        equipment=Equipment.BARBELL,
        location_ids=["gym"],
    ),
    Exercise(
        id="plate-loaded-incline-press",
        name="Plate-Loaded Incline Press",
        primary_muscle_groups=[MuscleGroup.CHEST],
        secondary_muscle_groups=[MuscleGroup.FRONT_DELTS, MuscleGroup.TRICEPS],
        equipment=Equipment.MACHINE,
        location_ids=["gym"],
    ),
    Exercise(
        id="machine-chest-press",
        name="Machine Chest Press",
        primary_muscle_groups=[MuscleGroup.CHEST],
        secondary_muscle_groups=[MuscleGroup.FRONT_DELTS, MuscleGroup.TRICEPS],
        equipment=Equipment.MACHINE,
        location_ids=["gym"],
    ),
    Exercise(
        id="seated-lateral-raise",
        name="Seated Lateral Raise",
        primary_muscle_groups=[MuscleGroup.SIDE_DELTS],
        equipment=Equipment.DUMBBELL,
        location_ids=["gym"],
    ),
    Exercise(
        id="overhead-triceps-extension-rope",
        name="Overhead Triceps Extension (rope)",
        primary_muscle_groups=[MuscleGroup.TRICEPS],
        equipment=Equipment.CABLE,
        location_ids=["gym"],
    ),
    Exercise(
        id="triceps-pushdown",
        name="Triceps Pushdown",
        primary_muscle_groups=[MuscleGroup.TRICEPS],
        equipment=Equipment.CABLE,
        location_ids=["gym"],
    ),
    # Pull (gym)
    Exercise(
        id="wide-grip-lat-pulldown",
        name="Wide-Grip Lat Pulldown",
        primary_muscle_groups=[MuscleGroup.LATS],
        secondary_muscle_groups=[MuscleGroup.BICEPS],
        equipment=Equipment.CABLE,
        location_ids=["gym"],
    ),
    Exercise(
        id="chest-supported-machine-row",
        name="Chest-Supported Machine Row",
        primary_muscle_groups=[MuscleGroup.UPPER_BACK],
        secondary_muscle_groups=[MuscleGroup.LATS, MuscleGroup.BICEPS],
        equipment=Equipment.MACHINE,
        location_ids=["gym"],
    ),
    Exercise(
        id="neutral-close-grip-pulldown",
        name="Neutral/Close-Grip Pulldown",
        primary_muscle_groups=[MuscleGroup.LATS],
        secondary_muscle_groups=[MuscleGroup.BICEPS],
        equipment=Equipment.CABLE,
        location_ids=["gym"],
    ),
    Exercise(
        id="face-pull",
        name="Face Pull",
        primary_muscle_groups=[MuscleGroup.REAR_DELTS],
        secondary_muscle_groups=[MuscleGroup.UPPER_BACK],
        equipment=Equipment.CABLE,
        location_ids=["gym"],
    ),
    Exercise(
        id="preacher-curl",
        name="Preacher Curl",
        primary_muscle_groups=[MuscleGroup.BICEPS],
        secondary_muscle_groups=[MuscleGroup.FOREARMS],
        equipment=Equipment.MACHINE,
        location_ids=["gym"],
    ),
    Exercise(
        id="cable-hammer-curl",
        name="Cable Hammer Curl",
        primary_muscle_groups=[MuscleGroup.BICEPS],
        secondary_muscle_groups=[MuscleGroup.FOREARMS],
        equipment=Equipment.CABLE,
        location_ids=["gym"],
    ),
    # Legs (gym)
    Exercise(
        id="hack-squat",
        name="Hack Squat",
        primary_muscle_groups=[MuscleGroup.QUADS],
        secondary_muscle_groups=[MuscleGroup.GLUTES],
        equipment=Equipment.MACHINE,
        location_ids=["gym"],
    ),
    Exercise(
        id="leg-press",
        name="Leg Press",
        primary_muscle_groups=[MuscleGroup.QUADS],
        secondary_muscle_groups=[MuscleGroup.GLUTES],
        equipment=Equipment.MACHINE,
        location_ids=["gym"],
    ),
    Exercise(
        id="seated-leg-extension",
        name="Seated Leg Extension",
        primary_muscle_groups=[MuscleGroup.QUADS],
        equipment=Equipment.MACHINE,
        location_ids=["gym"],
    ),
    Exercise(
        id="seated-leg-curl",
        name="Seated Leg Curl",
        primary_muscle_groups=[MuscleGroup.HAMSTRINGS],
        equipment=Equipment.MACHINE,
        location_ids=["gym"],
    ),
    Exercise(
        id="hip-abduction-machine",
        name="Hip Abduction Machine",
        primary_muscle_groups=[MuscleGroup.GLUTES],
        equipment=Equipment.MACHINE,
        location_ids=["gym"],
    ),
    Exercise(
        id="calf-raise-machine",
        name="Calf Raise",
        primary_muscle_groups=[MuscleGroup.CALVES],
        equipment=Equipment.MACHINE,
        location_ids=["gym"],
    ),
    Exercise(
        id="cable-machine-crunch",
        name="Cable/Machine Crunch",
        primary_muscle_groups=[MuscleGroup.ABS],
        equipment=Equipment.CABLE,
        location_ids=["gym"],
    ),
    Exercise(
        id="back-extension",
        name="Back Extension",
        primary_muscle_groups=[MuscleGroup.LOWER_BACK],
        secondary_muscle_groups=[MuscleGroup.GLUTES],
        equipment=Equipment.MACHINE,
        location_ids=["gym"],
    ),
    # Gym B variations
    Exercise(
        id="incline-bench-press",
        name="Incline Bench Press",
        primary_muscle_groups=[MuscleGroup.CHEST],
        secondary_muscle_groups=[MuscleGroup.FRONT_DELTS, MuscleGroup.TRICEPS],
        equipment=Equipment.BARBELL,
        location_ids=["gym"],
    ),
    Exercise(
        id="pec-fly-machine",
        name="Pec Fly Machine",
        primary_muscle_groups=[MuscleGroup.CHEST],
        equipment=Equipment.MACHINE,
        location_ids=["gym"],
    ),
    Exercise(
        id="db-overhead-press-neutral",
        name="DB Overhead Press (Neutral)",
        primary_muscle_groups=[MuscleGroup.FRONT_DELTS],
        secondary_muscle_groups=[MuscleGroup.TRICEPS, MuscleGroup.SIDE_DELTS],
        equipment=Equipment.DUMBBELL,
        location_ids=["gym"],
    ),
    Exercise(
        id="cable-lateral-raise",
        name="Cable Lateral Raise",
        primary_muscle_groups=[MuscleGroup.SIDE_DELTS],
        equipment=Equipment.CABLE,
        location_ids=["gym"],
    ),
    Exercise(
        id="straight-bar-pushdown",
        name="Straight-Bar Pushdown",
        primary_muscle_groups=[MuscleGroup.TRICEPS],
        equipment=Equipment.CABLE,
        location_ids=["gym"],
    ),
    Exercise(
        id="close-grip-pulldown",
        name="Close-Grip Pulldown",
        primary_muscle_groups=[MuscleGroup.LATS],
        secondary_muscle_groups=[MuscleGroup.BICEPS],
        equipment=Equipment.CABLE,
        location_ids=["gym"],
    ),
    Exercise(
        id="straight-arm-pulldown",
        name="Straight-Arm Pulldown",
        primary_muscle_groups=[MuscleGroup.LATS],
        equipment=Equipment.CABLE,
        location_ids=["gym"],
    ),
    Exercise(
        id="rear-delt-fly-machine",
        name="Rear-Delt Fly Machine",
        primary_muscle_groups=[MuscleGroup.REAR_DELTS],
        secondary_muscle_groups=[MuscleGroup.UPPER_BACK],
        equipment=Equipment.MACHINE,
        location_ids=["gym"],
    ),
    Exercise(
        id="ez-bar-curl",
        name="EZ-Bar Curl",
        primary_muscle_groups=[MuscleGroup.BICEPS],
        secondary_muscle_groups=[MuscleGroup.FOREARMS],
        equipment=Equipment.BARBELL,
        location_ids=["gym"],
    ),
    Exercise(
        id="cable-curl",
        name="Cable Curl",
        primary_muscle_groups=[MuscleGroup.BICEPS],
        secondary_muscle_groups=[MuscleGroup.FOREARMS],
        equipment=Equipment.CABLE,
        location_ids=["gym"],
    ),
    Exercise(
        id="seated-calf-raise",
        name="Seated Calf Raise",
        primary_muscle_groups=[MuscleGroup.CALVES],
        equipment=Equipment.MACHINE,
        location_ids=["gym"],
    ),
    # Home
    Exercise(
        id="db-flat-low-incline-bench-press",
        name="DB Flat/Low-Incline Bench Press",
        primary_muscle_groups=[MuscleGroup.CHEST],
        secondary_muscle_groups=[MuscleGroup.FRONT_DELTS, MuscleGroup.TRICEPS],
        equipment=Equipment.DUMBBELL,
        location_ids=["home"],
    ),
    Exercise(
        id="db-incline-bench-press",
        name="DB Incline Bench Press",
        primary_muscle_groups=[MuscleGroup.CHEST],
        secondary_muscle_groups=[MuscleGroup.FRONT_DELTS, MuscleGroup.TRICEPS],
        equipment=Equipment.DUMBBELL,
        location_ids=["home"],
    ),
    Exercise(
        id="seated-db-overhead-press",
        name="Seated DB Overhead Press",
        primary_muscle_groups=[MuscleGroup.FRONT_DELTS],
        secondary_muscle_groups=[MuscleGroup.TRICEPS],
        equipment=Equipment.DUMBBELL,
        location_ids=["home"],
    ),
    Exercise(
        id="seated-db-lateral-raise",
        name="Seated DB Lateral Raise",
        primary_muscle_groups=[MuscleGroup.SIDE_DELTS],
        equipment=Equipment.DUMBBELL,
        location_ids=["home"],
    ),
    Exercise(
        id="bench-dips",
        name="Bench Dips",
        primary_muscle_groups=[MuscleGroup.TRICEPS],
        secondary_muscle_groups=[MuscleGroup.CHEST, MuscleGroup.FRONT_DELTS],
        equipment=Equipment.BODYWEIGHT,
        location_ids=["home"],
    ),
    Exercise(
        id="db-overhead-triceps-extension",
        name="DB Overhead Triceps Extension",
        primary_muscle_groups=[MuscleGroup.TRICEPS],
        equipment=Equipment.DUMBBELL,
        location_ids=["home"],
    ),
    Exercise(
        id="chest-supported-db-row",
        name="Chest-Supported DB Row",
        primary_muscle_groups=[MuscleGroup.UPPER_BACK],
        secondary_muscle_groups=[MuscleGroup.LATS, MuscleGroup.BICEPS],
        equipment=Equipment.DUMBBELL,
        location_ids=["home"],
    ),
    Exercise(
        id="one-arm-db-row",
        name="One-Arm DB Row",
        primary_muscle_groups=[MuscleGroup.UPPER_BACK],
        secondary_muscle_groups=[MuscleGroup.LATS, MuscleGroup.BICEPS],
        equipment=Equipment.DUMBBELL,
        location_ids=["home"],
    ),
    Exercise(
        id="db-pullover",
        name="DB Pullover",
        primary_muscle_groups=[MuscleGroup.LATS],
        secondary_muscle_groups=[MuscleGroup.CHEST],
        equipment=Equipment.DUMBBELL,
        location_ids=["home"],
    ),
    Exercise(
        id="incline-bench-rear-delt-db-fly",
        name="Incline Bench Rear-Delt DB Fly",
        primary_muscle_groups=[MuscleGroup.REAR_DELTS],
        secondary_muscle_groups=[MuscleGroup.UPPER_BACK],
        equipment=Equipment.DUMBBELL,
        location_ids=["home"],
    ),
    Exercise(
        id="db-hammer-curl",
        name="DB Hammer Curl",
        primary_muscle_groups=[MuscleGroup.BICEPS],
        secondary_muscle_groups=[MuscleGroup.FOREARMS],
        equipment=Equipment.DUMBBELL,
        location_ids=["home"],
    ),
    Exercise(
        id="incline-bench-db-curl",
        name="Incline Bench DB Curl",
        primary_muscle_groups=[MuscleGroup.BICEPS],
        secondary_muscle_groups=[MuscleGroup.FOREARMS],
        equipment=Equipment.DUMBBELL,
        location_ids=["home"],
    ),
    Exercise(
        id="goblet-squat",
        name="Goblet Squat",
        primary_muscle_groups=[MuscleGroup.QUADS],
        secondary_muscle_groups=[MuscleGroup.GLUTES],
        equipment=Equipment.DUMBBELL,
        location_ids=["home"],
    ),
    Exercise(
        id="db-bulgarian-split-squat",
        name="DB Bulgarian Split Squat",
        primary_muscle_groups=[MuscleGroup.QUADS],
        secondary_muscle_groups=[MuscleGroup.GLUTES, MuscleGroup.HAMSTRINGS],
        equipment=Equipment.DUMBBELL,
        location_ids=["home"],
    ),
    Exercise(
        id="db-hip-thrust",
        name="DB Hip Thrust",
        primary_muscle_groups=[MuscleGroup.GLUTES],
        secondary_muscle_groups=[MuscleGroup.HAMSTRINGS],
        equipment=Equipment.DUMBBELL,
        location_ids=["home"],
    ),
    Exercise(
        id="db-standing-calf-raise",
        name="DB Standing Calf Raise",
        primary_muscle_groups=[MuscleGroup.CALVES],
        equipment=Equipment.DUMBBELL,
        location_ids=["home"],
    ),
    Exercise(
        id="slant-board-tibialis-raise",
        name="Slant Board Tibialis Raise",
        primary_muscle_groups=[MuscleGroup.MISCELLANEOUS],
        equipment=Equipment.BODYWEIGHT,
        location_ids=["home"],
    ),
    Exercise(
        id="ab-roller-knee-raise",
        name="Ab Roller / Knee Raise",
        primary_muscle_groups=[MuscleGroup.ABS],
        equipment=Equipment.BODYWEIGHT,
        location_ids=["home"],
    ),
]


def get_seed_exercise(exercise_id: str) -> Exercise | None:
    """Look up a built-in exercise by id."""
    for exercise in SEED_EXERCISES:
        if exercise.id == exercise_id:
            return exercise
    return None
