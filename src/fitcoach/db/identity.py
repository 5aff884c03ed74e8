"""Row identifiers and timestamps."""

import time
from datetime import datetime, timezone
from uuid import uuid4


def new_id() -> str:
    """Generate a unique row identifier.

    Millisecond epoch prefix followed by 9 random hex characters.
    """
    return f"{int(time.time() * 1000)}{uuid4().hex[:9]}"


def now() -> str:
    """Current UTC time as ISO-8601 text, sortable lexically."""
    return datetime.now(timezone.utc).isoformat(timespec="microseconds")
