"""Partial-update payloads.

A patch is a dataclass whose fields all default to ``UNSET``. Only fields
that were explicitly given are written; ``None`` is a real value that
stores NULL.
"""

from dataclasses import dataclass, fields
from typing import Any


class Unset:
    """Marker type for a patch field that was not supplied."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET = Unset()


@dataclass
class Patch:
    """Base class for entity patches."""

    def changes(self) -> dict[str, Any]:
        """Return only the fields that were explicitly set."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not UNSET
        }

    def is_empty(self) -> bool:
        """Check whether no field was supplied."""
        return not self.changes()
