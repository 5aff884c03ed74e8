"""Data models for fitcoach."""

from .client import Client, ClientPatch
from .goal import Goal, GoalPatch, GoalPriority, GoalStatus, GoalType
from .note import NoteCategory, NotePatch, TrainerNote
from .patch import UNSET, Patch, Unset
from .session import SessionStatus, WorkoutSession, WorkoutSessionPatch
from .user import User, UserPatch, UserType
from .workout import Difficulty, Workout, WorkoutPatch, WorkoutType

__all__ = [
    "Client",
    "ClientPatch",
    "Difficulty",
    "Goal",
    "GoalPatch",
    "GoalPriority",
    "GoalStatus",
    "GoalType",
    "NoteCategory",
    "NotePatch",
    "Patch",
    "SessionStatus",
    "TrainerNote",
    "UNSET",
    "Unset",
    "User",
    "UserPatch",
    "UserType",
    "Workout",
    "WorkoutPatch",
    "WorkoutSession",
    "WorkoutSessionPatch",
    "WorkoutType",
]
