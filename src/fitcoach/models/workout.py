"""Workout models.

Exercises, warmup and cooldown are lists of set prescriptions such as
``{"exercise_id": "squat", "sets": 5, "reps": 5, "weight": 100}``.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

from .patch import UNSET, Patch, Unset


class WorkoutType(str, Enum):
    """Primary focus of a workout."""

    STRENGTH = "strength"
    CARDIO = "cardio"
    MIXED = "mixed"
    FLEXIBILITY = "flexibility"
    RECOVERY = "recovery"


class Difficulty(str, Enum):
    """Workout difficulty."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


@dataclass
class Workout:
    """A workout designed by a trainer, optionally for one client."""

    trainer_id: str
    name: str
    type: WorkoutType
    difficulty: Difficulty
    client_id: str | None = None
    description: str | None = None
    estimated_duration: int | None = None  # minutes
    exercises: list[dict[str, Any]] = field(default_factory=list)
    warmup: list[dict[str, Any]] = field(default_factory=list)
    cooldown: list[dict[str, Any]] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)
    is_template: bool = False
    id: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "trainer_id": self.trainer_id,
            "client_id": self.client_id,
            "name": self.name,
            "description": self.description,
            "type": self.type.value,
            "difficulty": self.difficulty.value,
            "estimated_duration": self.estimated_duration,
            "exercises": list(self.exercises),
            "warmup": list(self.warmup),
            "cooldown": list(self.cooldown),
            "tags": list(self.tags),
            "is_template": self.is_template,
        }

    @classmethod
    def from_dict(
        cls,
        data: dict,
        id: str | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ) -> "Workout":
        """Create from dictionary."""
        return cls(
            id=id,
            trainer_id=data["trainer_id"],
            client_id=data.get("client_id"),
            name=data["name"],
            description=data.get("description"),
            type=WorkoutType(data["type"]),
            difficulty=Difficulty(data["difficulty"]),
            estimated_duration=data.get("estimated_duration"),
            exercises=data.get("exercises", []),
            warmup=data.get("warmup", []),
            cooldown=data.get("cooldown", []),
            tags=data.get("tags", []),
            is_template=bool(data.get("is_template", False)),
            created_at=created_at,
            updated_at=updated_at,
        )


@dataclass
class WorkoutPatch(Patch):
    """Partial update for a workout."""

    client_id: str | None | Unset = UNSET
    name: str | Unset = UNSET
    description: str | None | Unset = UNSET
    type: WorkoutType | Unset = UNSET
    difficulty: Difficulty | Unset = UNSET
    estimated_duration: int | None | Unset = UNSET
    exercises: list[dict[str, Any]] | None | Unset = UNSET
    warmup: list[dict[str, Any]] | None | Unset = UNSET
    cooldown: list[dict[str, Any]] | None | Unset = UNSET
    tags: list[str] | None | Unset = UNSET
    is_template: bool | Unset = UNSET
