"""Workout templates and the built-in template library."""

from dataclasses import dataclass, field
from enum import Enum


class TemplateType(str, Enum):
    """Training split a template belongs to."""

    PUSH = "push"
    PULL = "pull"
    LOWER = "lower"


@dataclass
class Template:
    """A named, ordered default exercise list for quick-starting a workout."""

    id: str
    name: str
    location_id: str
    exercise_ids: list[str] = field(default_factory=list)
    type: TemplateType = TemplateType.PUSH

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "id": self.id,
            "name": self.name,
            "location_id": self.location_id,
            "exercise_ids": list(self.exercise_ids),
            "type": self.type.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Template":
        """Create from dictionary.

        Templates saved before split types existed get one inferred from
        their name.
        """
        template_type = data.get("type")
        if template_type is None:
            name = data["name"].lower()
            if "pull" in name:
                template_type = TemplateType.PULL.value
            elif "leg" in name or "lower" in name:
                template_type = TemplateType.LOWER.value
            else:
                template_type = TemplateType.PUSH.value

        return cls(
            id=data["id"],
            name=data["name"],
            location_id=data.get("location_id") or data.get("location") or "gym",
            exercise_ids=list(data.get("exercise_ids", [])),
            type=TemplateType(template_type),
        )


SEED_TEMPLATES: list[Template] = [
    Template(
        id="push-gym",
        name="PUSH A (Gym)",
        type=TemplateType.PUSH,
        location_id="gym",
        exercise_ids=[
            "barbell-bench-press",
            "plate-loaded-incline-press",
            "machine-chest-press",
            "seated-lateral-raise",
            "overhead-triceps-extension-rope",
            "triceps-pushdown",
        ],
    ),
    Template(
        id="pull-gym",
        name="PULL A (Gym)",
        type=TemplateType.PULL,
        location_id="gym",
        exercise_ids=[
            "wide-grip-lat-pulldown",
            "chest-supported-machine-row",
            "neutral-close-grip-pulldown",
            "face-pull",
            "preacher-curl",
            "cable-hammer-curl",
        ],
    ),
    Template(
        id="legs-gym",
        name="LEGS A (Gym)",
        type=TemplateType.LOWER,
        location_id="gym",
        exercise_ids=[
            "hack-squat",
            "leg-press",
            "seated-leg-extension",
            "seated-leg-curl",
            "hip-abduction-machine",
            "calf-raise-machine",
            "cable-machine-crunch",
            "back-extension",
        ],
    ),
    Template(
        id="push-gym-b",
        name="PUSH B (Gym)",
        type=TemplateType.PUSH,
        location_id="gym",
        exercise_ids=[
            "incline-bench-press",
            "pec-fly-machine",
            "db-overhead-press-neutral",
            "cable-lateral-raise",
            "straight-bar-pushdown",
        ],
    ),
    Template(
        id="pull-gym-b",
        name="PULL B (Gym)",
        type=TemplateType.PULL,
        location_id="gym",
        exercise_ids=[
            "close-grip-pulldown",
            "straight-arm-pulldown",
            "rear-delt-fly-machine",
            "ez-bar-curl",
            "cable-curl",
        ],
    ),
    Template(
        id="push-home",
        name="PUSH (Home)",
        type=TemplateType.PUSH,
        location_id="home",
        exercise_ids=[
            "db-flat-low-incline-bench-press",
            "db-incline-bench-press",
            "seated-db-overhead-press",
            "seated-db-lateral-raise",
            "bench-dips",
            "db-overhead-triceps-extension",
        ],
    ),
    Template(
        id="pull-home",
        name="PULL (Home)",
        type=TemplateType.PULL,
        location_id="home",
        exercise_ids=[
            "chest-supported-db-row",
            "one-arm-db-row",
            "db-pullover",
            "incline-bench-rear-delt-db-fly",
            "db-hammer-curl",
            "incline-bench-db-curl",
        ],
    ),
    Template(
        id="legs-home",
        name="LEGS (Home)",
        type=TemplateType.LOWER,
        location_id="home",
        exercise_ids=[
            "goblet-squat",
            "db-bulgarian-split-squat",
            "db-hip-thrust",
            "db-standing-calf-raise",
            "slant-board-tibialis-raise",
            "ab-roller-knee-raise",
        ],
    ),
]
