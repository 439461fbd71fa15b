"""
Constants and configuration for the chat module.

This module centralizes configuration values for:
- Message operations (content limits, pagination)
- Realtime channel naming and WebSocket close codes

Import example:
    from chat.constants import MESSAGE_CONFIG, CHANNEL_CONFIG
"""

from typing import Final


# =============================================================================
# Message Configuration
# =============================================================================


class MESSAGE_CONFIG:
    """Configuration for message operations."""

    # Content limits
    MAX_CONTENT_LENGTH: Final[int] = 10000  # Characters

    # Pagination (simple/forward-only, newest first)
    DEFAULT_PAGE_SIZE: Final[int] = 15
    MAX_PAGE_SIZE: Final[int] = 100


# =============================================================================
# Realtime Channel Configuration
# =============================================================================


class CHANNEL_CONFIG:
    """Configuration for realtime delivery over Django Channels."""

    # Logical channel (channel layer group) per chat: "chat.<id>"
    GROUP_PREFIX: Final[str] = "chat"

    # Channel layer event type, dispatched to ChatConsumer.chat_message
    MESSAGE_EVENT_TYPE: Final[str] = "chat.message"

    # Header an HTTP client uses to name its own WebSocket connection
    SOCKET_ID_HEADER: Final[str] = "HTTP_X_SOCKET_ID"

    # WebSocket close codes
    CLOSE_UNAUTHENTICATED: Final[int] = 4001
    CLOSE_FORBIDDEN: Final[int] = 4003


def chat_group_name(chat_id) -> str:
    """Return the channel layer group for a chat, e.g. "chat.42"."""
    return f"{CHANNEL_CONFIG.GROUP_PREFIX}.{chat_id}"
