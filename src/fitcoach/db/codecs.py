"""JSON codecs for nested row attributes.

Array and object attributes (tags, goals, exercises, preferences, ...) are
stored as JSON text. Each codec knows the attribute's empty default, so a
NULL or unreadable column always decodes to ``[]`` or ``{}``.
"""

import json
import logging
from typing import Any, Callable

from ..exceptions import SerializationError

logger = logging.getLogger(__name__)


class JsonCodec:
    """Encode/decode pair for one kind of nested attribute."""

    def __init__(self, kind: type, empty: Callable[[], Any]):
        self.kind = kind
        self.empty = empty

    def encode(self, value: Any, field: str = "value") -> str:
        """Serialize a value to JSON text. ``None`` encodes the empty default."""
        if value is None:
            value = self.empty()
        if not isinstance(value, self.kind):
            raise SerializationError(
                field, f"expected {self.kind.__name__}, got {type(value).__name__}"
            )
        try:
            return json.dumps(value)
        except (TypeError, ValueError) as e:
            raise SerializationError(field, str(e)) from e

    def decode(self, raw: str | None, field: str = "value") -> Any:
        """Parse stored JSON text, falling back to the empty default."""
        if raw is None or raw == "":
            return self.empty()
        try:
            value = json.loads(raw)
        except (TypeError, ValueError):
            logger.warning(f"Malformed JSON in '{field}', using empty default")
            return self.empty()
        if not isinstance(value, self.kind):
            logger.warning(
                f"Expected {self.kind.__name__} in '{field}', "
                f"got {type(value).__name__}; using empty default"
            )
            return self.empty()
        return value


JSON_LIST = JsonCodec(list, list)
JSON_OBJECT = JsonCodec(dict, dict)
