"""Exceptions raised by the fitcoach data store.

Every error carries a human-readable message, an error code and an
optional dictionary of details useful for debugging.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Error codes for store failures."""

    INTERNAL_ERROR = "INTERNAL_ERROR"
    NOT_INITIALIZED = "NOT_INITIALIZED"
    CONSTRAINT_VIOLATION = "CONSTRAINT_VIOLATION"
    SERIALIZATION_ERROR = "SERIALIZATION_ERROR"


class FitcoachError(Exception):
    """Base exception for all fitcoach errors.

    Attributes:
        message: Human-readable error message
        code: Error code from ErrorCode enum
        details: Optional dictionary with additional error details
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for display."""
        result: dict[str, Any] = {
            "error": {
                "code": self.code.value,
                "message": self.message,
            }
        }
        if self.details:
            result["error"]["details"] = self.details
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code.value}, message={self.message!r})"


class NotInitializedError(FitcoachError):
    """Raised when the store is used before initialize() has succeeded."""

    def __init__(self, message: str = "Database not initialized. Call initialize() first.") -> None:
        super().__init__(message=message, code=ErrorCode.NOT_INITIALIZED)


class ConstraintViolationError(FitcoachError):
    """Raised when a write violates a uniqueness, check or foreign-key constraint."""

    def __init__(
        self,
        table: str,
        reason: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        error_details = details or {}
        error_details["table"] = table
        error_details["reason"] = reason
        super().__init__(
            message=f"Constraint violation on {table}: {reason}",
            code=ErrorCode.CONSTRAINT_VIOLATION,
            details=error_details,
        )
        self.table = table
        self.reason = reason


class SerializationError(FitcoachError):
    """Raised when a nested attribute cannot be encoded for storage."""

    def __init__(self, field: str, reason: str) -> None:
        super().__init__(
            message=f"Cannot serialize '{field}': {reason}",
            code=ErrorCode.SERIALIZATION_ERROR,
            details={"field": field},
        )
        self.field = field
