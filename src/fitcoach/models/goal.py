"""Client goal models."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from .patch import UNSET, Patch, Unset


class GoalType(str, Enum):
    """Kind of goal."""

    WEIGHT_LOSS = "weight_loss"
    MUSCLE_GAIN = "muscle_gain"
    STRENGTH = "strength"
    ENDURANCE = "endurance"
    FLEXIBILITY = "flexibility"
    OTHER = "other"


class GoalPriority(str, Enum):
    """How important a goal is."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class GoalStatus(str, Enum):
    """Goal lifecycle status."""

    ACTIVE = "active"
    COMPLETED = "completed"
    PAUSED = "paused"


@dataclass
class Goal:
    """A measurable goal for a client."""

    client_id: str
    type: GoalType
    description: str
    priority: GoalPriority = GoalPriority.MEDIUM
    status: GoalStatus = GoalStatus.ACTIVE
    target_value: float | None = None
    current_value: float | None = None
    unit: str | None = None
    target_date: str | None = None
    id: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def progress(self) -> float | None:
        """Fraction of the target reached, if both values are known."""
        if self.target_value is None or self.current_value is None:
            return None
        if self.target_value == 0:
            return None
        return self.current_value / self.target_value

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "client_id": self.client_id,
            "type": self.type.value,
            "description": self.description,
            "target_value": self.target_value,
            "current_value": self.current_value,
            "unit": self.unit,
            "target_date": self.target_date,
            "priority": self.priority.value,
            "status": self.status.value,
        }

    @classmethod
    def from_dict(
        cls,
        data: dict,
        id: str | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ) -> "Goal":
        """Create from dictionary."""
        return cls(
            id=id,
            client_id=data["client_id"],
            type=GoalType(data["type"]),
            description=data["description"],
            target_value=data.get("target_value"),
            current_value=data.get("current_value"),
            unit=data.get("unit"),
            target_date=data.get("target_date"),
            priority=GoalPriority(data.get("priority", "medium")),
            status=GoalStatus(data.get("status", "active")),
            created_at=created_at,
            updated_at=updated_at,
        )


@dataclass
class GoalPatch(Patch):
    """Partial update for a goal."""

    type: GoalType | Unset = UNSET
    description: str | Unset = UNSET
    target_value: float | None | Unset = UNSET
    current_value: float | None | Unset = UNSET
    unit: str | None | Unset = UNSET
    target_date: str | None | Unset = UNSET
    priority: GoalPriority | Unset = UNSET
    status: GoalStatus | Unset = UNSET
