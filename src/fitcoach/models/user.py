"""User (trainer/client account) models."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from .patch import UNSET, Patch, Unset


class UserType(str, Enum):
    """Account type. Fixed once the user is created."""

    TRAINER = "trainer"
    CLIENT = "client"


@dataclass
class User:
    """A trainer or client account."""

    name: str
    type: UserType
    email: str | None = None
    profile_image: str | None = None
    certification: str | None = None
    specialties: list[str] = field(default_factory=list)
    experience: int | None = None  # years
    philosophy: str | None = None
    bio: str | None = None
    id: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def is_trainer(self) -> bool:
        return self.type == UserType.TRAINER

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "name": self.name,
            "type": self.type.value,
            "email": self.email,
            "profile_image": self.profile_image,
            "certification": self.certification,
            "specialties": list(self.specialties),
            "experience": self.experience,
            "philosophy": self.philosophy,
            "bio": self.bio,
        }

    @classmethod
    def from_dict(
        cls,
        data: dict,
        id: str | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ) -> "User":
        """Create from dictionary."""
        return cls(
            id=id,
            name=data["name"],
            type=UserType(data["type"]),
            email=data.get("email"),
            profile_image=data.get("profile_image"),
            certification=data.get("certification"),
            specialties=data.get("specialties", []),
            experience=data.get("experience"),
            philosophy=data.get("philosophy"),
            bio=data.get("bio"),
            created_at=created_at,
            updated_at=updated_at,
        )


@dataclass
class UserPatch(Patch):
    """Fields of a user that may change after creation (``type`` may not)."""

    name: str | Unset = UNSET
    email: str | None | Unset = UNSET
    profile_image: str | None | Unset = UNSET
    certification: str | None | Unset = UNSET
    specialties: list[str] | None | Unset = UNSET
    experience: int | None | Unset = UNSET
    philosophy: str | None | Unset = UNSET
    bio: str | None | Unset = UNSET
