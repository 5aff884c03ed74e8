"""Database layer for fitcoach."""

from .bootstrap import DEFAULT_TRAINER_ID, ensure_default_trainer, startup
from .engine import Store, get_db_path
from .repositories import (
    ClientRepository,
    GoalRepository,
    NoteRepository,
    UserRepository,
    WorkoutRepository,
    WorkoutSessionRepository,
)

__all__ = [
    "ClientRepository",
    "DEFAULT_TRAINER_ID",
    "ensure_default_trainer",
    "get_db_path",
    "GoalRepository",
    "NoteRepository",
    "startup",
    "Store",
    "UserRepository",
    "WorkoutRepository",
    "WorkoutSessionRepository",
]
