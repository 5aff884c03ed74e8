"""Trainer note models."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from .patch import UNSET, Patch, Unset


class NoteCategory(str, Enum):
    """What a note is about."""

    EXERCISE = "exercise"
    NUTRITION = "nutrition"
    PHILOSOPHY = "philosophy"
    TECHNIQUE = "technique"
    OTHER = "other"


@dataclass
class TrainerNote:
    """A note written by a trainer."""

    trainer_id: str
    title: str
    content: str
    category: NoteCategory
    tags: list[str] = field(default_factory=list)
    is_public: bool = False
    id: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "trainer_id": self.trainer_id,
            "title": self.title,
            "content": self.content,
            "category": self.category.value,
            "tags": list(self.tags),
            "is_public": self.is_public,
        }

    @classmethod
    def from_dict(
        cls,
        data: dict,
        id: str | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ) -> "TrainerNote":
        """Create from dictionary."""
        return cls(
            id=id,
            trainer_id=data["trainer_id"],
            title=data["title"],
            content=data["content"],
            category=NoteCategory(data["category"]),
            tags=data.get("tags", []),
            is_public=bool(data.get("is_public", False)),
            created_at=created_at,
            updated_at=updated_at,
        )


@dataclass
class NotePatch(Patch):
    """Partial update for a trainer note."""

    title: str | Unset = UNSET
    content: str | Unset = UNSET
    category: NoteCategory | Unset = UNSET
    tags: list[str] | None | Unset = UNSET
    is_public: bool | Unset = UNSET
