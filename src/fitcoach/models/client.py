"""Client models.

Preferences, measurements and contact info are free-form JSON objects, e.g.::

    preferences = {"workout_days": ["monday", "friday"], "location": "gym"}
    measurements = {"height": 180, "weight": 82.5, "last_updated": "2024-05-01"}
    contact_info = {"phone": "555-0100", "emergency_contact": {...}}
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from .patch import UNSET, Patch, Unset


@dataclass
class Client:
    """A client coached by a trainer."""

    trainer_id: str
    name: str
    email: str | None = None
    phone: str | None = None
    goals: list[Any] = field(default_factory=list)
    restrictions: list[str] = field(default_factory=list)
    preferences: dict[str, Any] = field(default_factory=dict)
    measurements: dict[str, Any] = field(default_factory=dict)
    contact_info: dict[str, Any] = field(default_factory=dict)
    id: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "trainer_id": self.trainer_id,
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "goals": list(self.goals),
            "restrictions": list(self.restrictions),
            "preferences": dict(self.preferences),
            "measurements": dict(self.measurements),
            "contact_info": dict(self.contact_info),
        }

    @classmethod
    def from_dict(
        cls,
        data: dict,
        id: str | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ) -> "Client":
        """Create from dictionary."""
        return cls(
            id=id,
            trainer_id=data["trainer_id"],
            name=data["name"],
            email=data.get("email"),
            phone=data.get("phone"),
            goals=data.get("goals", []),
            restrictions=data.get("restrictions", []),
            preferences=data.get("preferences", {}),
            measurements=data.get("measurements", {}),
            contact_info=data.get("contact_info", {}),
            created_at=created_at,
            updated_at=updated_at,
        )


@dataclass
class ClientPatch(Patch):
    """Partial update for a client."""

    name: str | Unset = UNSET
    email: str | None | Unset = UNSET
    phone: str | None | Unset = UNSET
    goals: list[Any] | None | Unset = UNSET
    restrictions: list[str] | None | Unset = UNSET
    preferences: dict[str, Any] | None | Unset = UNSET
    measurements: dict[str, Any] | None | Unset = UNSET
    contact_info: dict[str, Any] | None | Unset = UNSET
