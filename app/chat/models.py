"""
Chat system models.

This module defines the data models for the chat system:
- Private (1:1) chats between exactly two users, unique per user pair
- Public/group chats with N participants (no membership management)

Models:
    Chat: Container for messages between participants
    DirectChatPair: Enforces uniqueness of private chats per user pair
    ChatParticipant: Membership of a user in a chat
    ChatMessage: Individual message within a chat

Design Decisions:
    - Nothing is hard-deleted and messages are immutable once created
    - Chat.updated_at advances on every new message and drives list ordering
    - Chat.last_message is a denormalized pointer maintained by MessageService
      in the same transaction as the message insert
"""

from __future__ import annotations

from django.conf import settings
from django.db import models
from django.db.models import F, Q

from core.models import BaseModel


class Chat(BaseModel):
    """
    A conversation between two or more users.

    Chat kinds:
        is_private=True: Exactly 2 participants, unique per user pair
                         (enforced via DirectChatPair).
        is_private=False: Group/public chat with any number of participants.

    Fields:
        name: Optional label supplied at creation
        is_private: One-to-one (True) or group/public (False)
        created_by: User who created the chat
        last_message: Most recent message (null until the first one is sent)

    Relationships:
        participants: ChatParticipant rows for this chat
        messages: ChatMessage rows for this chat
        direct_pair: DirectChatPair if the chat is private
    """

    name = models.CharField(
        max_length=100,
        blank=True,
        default="",
        help_text="Optional chat name",
    )

    is_private = models.BooleanField(
        default=True,
        db_index=True,
        help_text="True for one-to-one chats, False for group/public chats",
    )

    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="created_chats",
        help_text="User who created this chat",
    )

    last_message = models.ForeignKey(
        "ChatMessage",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="+",
        help_text="Most recent message in this chat",
    )

    class Meta:
        db_table = "chats"
        ordering = ["-updated_at", "-id"]
        indexes = [
            models.Index(
                fields=["is_private", "-updated_at"],
                name="chats_private_updated_idx",
            ),
        ]

    def __str__(self) -> str:
        """Return human-readable representation."""
        kind = "Private" if self.is_private else "Group"
        if self.name:
            return f"{kind}: {self.name}"
        return f"{kind}({self.pk})"


class DirectChatPair(models.Model):
    """
    Enforces uniqueness of private chats between two users.

    Stores the pair in canonical order (lower user id first) so that
    whichever user starts the chat, the same row is hit. Two concurrent
    create-or-get requests for one pair cannot both commit: the loser gets
    an IntegrityError and falls back to reading the winner's chat.

    Constraints:
        - UniqueConstraint(user_lower, user_higher): One private chat per pair
        - CheckConstraint(user_lower_id < user_higher_id): Canonical order
    """

    chat = models.OneToOneField(
        Chat,
        on_delete=models.CASCADE,
        primary_key=True,
        related_name="direct_pair",
    )

    user_lower = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="+",
        help_text="User with lower ID in this pair",
    )

    user_higher = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="+",
        help_text="User with higher ID in this pair",
    )

    class Meta:
        db_table = "chat_direct_pairs"
        constraints = [
            models.UniqueConstraint(
                fields=["user_lower", "user_higher"],
                name="unique_direct_chat_pair",
            ),
            models.CheckConstraint(
                condition=Q(user_lower_id__lt=F("user_higher_id")),
                name="direct_pair_lower_less_than_higher",
            ),
        ]

    def __str__(self) -> str:
        """Return human-readable representation."""
        return f"DirectPair({self.user_lower_id}, {self.user_higher_id})"


class ChatParticipant(BaseModel):
    """
    Membership of a user in a chat.

    One row per (chat, user). Rows are created together with the chat and
    never removed.
    """

    chat = models.ForeignKey(
        Chat,
        on_delete=models.CASCADE,
        related_name="participants",
    )

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="chat_participations",
    )

    class Meta:
        db_table = "chat_participants"
        ordering = ["id"]
        constraints = [
            models.UniqueConstraint(
                fields=["chat", "user"],
                name="unique_chat_participant",
            ),
        ]
        indexes = [
            # User's chats
            models.Index(fields=["user", "chat"], name="chat_part_user_chat_idx"),
        ]

    def __str__(self) -> str:
        """Return human-readable representation."""
        return f"Participant: {self.user_id} in {self.chat_id}"


class ChatMessage(BaseModel):
    """
    A message within a chat.

    Messages are totally ordered within a chat by (created_at, id); the id
    is monotonically assigned and breaks timestamp ties.
    """

    chat = models.ForeignKey(
        Chat,
        on_delete=models.CASCADE,
        related_name="messages",
    )

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="chat_messages",
        help_text="Author of the message",
    )

    content = models.TextField()

    class Meta:
        db_table = "chat_messages"
        ordering = ["-created_at", "-id"]
        indexes = [
            # Newest-first page of a chat
            models.Index(
                fields=["chat", "-created_at", "-id"],
                name="chat_msg_chat_recent_idx",
            ),
        ]

    def __str__(self) -> str:
        """Return human-readable representation."""
        preview = self.content[:50] + "..." if len(self.content) > 50 else self.content
        return f"User {self.user_id}: {preview}"
