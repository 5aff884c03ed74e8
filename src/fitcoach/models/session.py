"""Scheduled workout session models."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

from .patch import UNSET, Patch, Unset


class SessionStatus(str, Enum):
    """Where a scheduled session stands."""

    SCHEDULED = "scheduled"
    COMPLETED = "completed"
    SKIPPED = "skipped"
    IN_PROGRESS = "in_progress"


@dataclass
class WorkoutSession:
    """One occurrence of a workout for a client."""

    workout_id: str
    client_id: str
    scheduled_date: str
    status: SessionStatus = SessionStatus.SCHEDULED
    completed_date: str | None = None
    completed_sets: list[dict[str, Any]] = field(default_factory=list)
    duration: int | None = None  # minutes
    notes: str | None = None
    rating: int | None = None  # 1-5
    id: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "workout_id": self.workout_id,
            "client_id": self.client_id,
            "scheduled_date": self.scheduled_date,
            "completed_date": self.completed_date,
            "completed_sets": list(self.completed_sets),
            "duration": self.duration,
            "notes": self.notes,
            "rating": self.rating,
            "status": self.status.value,
        }

    @classmethod
    def from_dict(
        cls,
        data: dict,
        id: str | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ) -> "WorkoutSession":
        """Create from dictionary."""
        return cls(
            id=id,
            workout_id=data["workout_id"],
            client_id=data["client_id"],
            scheduled_date=data["scheduled_date"],
            completed_date=data.get("completed_date"),
            completed_sets=data.get("completed_sets", []),
            duration=data.get("duration"),
            notes=data.get("notes"),
            rating=data.get("rating"),
            status=SessionStatus(data.get("status", "scheduled")),
            created_at=created_at,
            updated_at=updated_at,
        )


@dataclass
class WorkoutSessionPatch(Patch):
    """Partial update for a workout session."""

    scheduled_date: str | Unset = UNSET
    completed_date: str | None | Unset = UNSET
    completed_sets: list[dict[str, Any]] | None | Unset = UNSET
    duration: int | None | Unset = UNSET
    notes: str | None | Unset = UNSET
    rating: int | None | Unset = UNSET
    status: SessionStatus | Unset = UNSET
