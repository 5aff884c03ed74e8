"""Consumer-side contract for the remote chat service.

The store never depends on this service. Screens that talk to the coach
use a ``ChatService`` implementation and these helpers, which keep the
documented fallbacks in one place.
"""

import logging
from abc import ABC, abstractmethod
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)

DEFAULT_SUGGESTIONS = [
    "How can I be more productive today?",
    "What are some good time management tips?",
    "Help me organize my daily routine",
]


class ChatError(Exception):
    """Base error for chat service failures."""


class ChatNetworkError(ChatError):
    """The service could not be reached."""


class ChatServerError(ChatError):
    """The service answered with an error."""

    def __init__(self, message: str, status: int | None = None):
        super().__init__(message)
        self.status = status


class ChatTimeoutError(ChatError):
    """The service did not answer in time."""


@runtime_checkable
class ChatService(Protocol):
    """Protocol for the remote chat collaborator."""

    async def health_check(self) -> bool:
        """Return True when the service reports itself healthy."""
        ...

    async def send_message(self, text: str, session_id: str) -> str:
        """Send a message and return the reply text.

        Raises:
            ChatNetworkError, ChatServerError or ChatTimeoutError
        """
        ...

    async def get_suggestions(self) -> list[str]:
        """Return suggested prompts."""
        ...


class BaseChatService(ABC):
    """Base class for chat services with the shared fallback behaviour."""

    @abstractmethod
    async def health_check(self) -> bool:
        pass

    @abstractmethod
    async def send_message(self, text: str, session_id: str) -> str:
        pass

    async def get_suggestions(self) -> list[str]:
        return list(DEFAULT_SUGGESTIONS)


async def suggestions_or_default(service: ChatService) -> list[str]:
    """Fetch suggestions, falling back to the built-in list on any failure."""
    try:
        suggestions = await service.get_suggestions()
    except Exception as e:
        logger.warning(f"Failed to get suggestions, using defaults: {e}")
        return list(DEFAULT_SUGGESTIONS)
    if not suggestions:
        logger.warning("Service returned no suggestions, using defaults")
        return list(DEFAULT_SUGGESTIONS)
    return list(suggestions)


async def send_message_checked(service: ChatService, text: str, session_id: str) -> str:
    """Send a non-empty message. Service errors propagate unchanged."""
    if not text or not text.strip():
        raise ValueError("Message cannot be empty")
    return await service.send_message(text.strip(), session_id)
