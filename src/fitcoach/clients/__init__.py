"""Clients for external collaborators."""

from .chat import (
    DEFAULT_SUGGESTIONS,
    BaseChatService,
    ChatError,
    ChatNetworkError,
    ChatServerError,
    ChatService,
    ChatTimeoutError,
    send_message_checked,
    suggestions_or_default,
)

__all__ = [
    "BaseChatService",
    "ChatError",
    "ChatNetworkError",
    "ChatServerError",
    "ChatService",
    "ChatTimeoutError",
    "DEFAULT_SUGGESTIONS",
    "send_message_checked",
    "suggestions_or_default",
]
