"""CLI commands for fitcoach."""

from .clients import clients
from .init import init
from .notes import notes
from .reset import reset
from .workouts import workouts

__all__ = [
    "clients",
    "init",
    "notes",
    "reset",
    "workouts",
]
