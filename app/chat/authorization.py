"""
Service-level authorization for chat operations.

This module decides who may see a chat and who may receive its realtime
events. It is distinct from DRF permission classes: the same predicate is
used by the HTTP services and by the WebSocket consumer at subscribe time.

Key Components:
    ChatAuthorizationService: Stateless service class with authorization methods

Usage:
    if ChatAuthorizationService.can_subscribe(user, chat_id):
        await self.channel_layer.group_add(...)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chat.constants import chat_group_name

if TYPE_CHECKING:
    from authentication.models import User


class ChatAuthorizationService:
    """
    Stateless service providing authorization checks for chat operations.

    Results are never cached: every call runs a fresh EXISTS query so the
    answer always reflects the current participant rows.
    """

    @classmethod
    def is_chat_participant(
        cls,
        user: "User | None",
        chat_id: int,
    ) -> bool:
        """
        Check if user has a participant row in the chat.

        Args:
            user: User to check (anonymous or None is never a participant)
            chat_id: ID of the chat

        Returns:
            True if a (chat_id, user_id) participant row exists
        """
        from chat.models import ChatParticipant

        if user is None or not getattr(user, "is_authenticated", False):
            return False

        return ChatParticipant.objects.filter(
            chat_id=chat_id,
            user_id=user.pk,
        ).exists()

    @classmethod
    def can_subscribe(
        cls,
        user: "User | None",
        chat_id: int,
    ) -> bool:
        """
        Decide whether user may join the realtime channel of a chat.

        Evaluated synchronously when a WebSocket connects.

        Args:
            user: Connecting user
            chat_id: ID of the chat whose channel is requested

        Returns:
            True iff the user is a participant of the chat
        """
        return cls.is_chat_participant(user, chat_id)

    @staticmethod
    def channel_for(chat_id: int) -> str:
        """Return the logical realtime channel of a chat, e.g. "chat.42"."""
        return chat_group_name(chat_id)
