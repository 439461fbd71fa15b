"""
Serializers for chat API.

This module provides serializers for the chat system:
- Chat serializers (read, create input, list filter)
- Participant serializer (read)
- Message serializers (read, create input, list query, page)

Design Decisions:
    - Read and write serializers are separate for clarity
    - Input serializers only parse and validate shape; business rules
      (self-chat, membership, chat existence) live in chat.services
"""

from __future__ import annotations

from rest_framework import serializers

from authentication.serializers import UserSerializer
from chat.constants import MESSAGE_CONFIG
from chat.models import Chat, ChatMessage, ChatParticipant


# =============================================================================
# Message Serializers
# =============================================================================


class MessageSerializer(serializers.ModelSerializer):
    """
    Message with author details.

    Used in message lists, as a chat's last message, in the send
    response and as the realtime event payload.
    """

    user = UserSerializer(read_only=True)

    class Meta:
        model = ChatMessage
        fields = [
            "id",
            "chat_id",
            "user_id",
            "user",
            "content",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class MessageCreateSerializer(serializers.Serializer):
    """Input for sending a message."""

    chat_id = serializers.IntegerField(help_text="Chat to send the message to")
    content = serializers.CharField(
        max_length=MESSAGE_CONFIG.MAX_CONTENT_LENGTH,
        help_text="Message content (max 10,000 characters)",
    )


class MessageListQuerySerializer(serializers.Serializer):
    """Query parameters for listing a chat's messages."""

    chat_id = serializers.IntegerField(help_text="Chat to read")
    page = serializers.IntegerField(min_value=1, help_text="1-based page number")
    page_size = serializers.IntegerField(
        min_value=1,
        max_value=MESSAGE_CONFIG.MAX_PAGE_SIZE,
        default=MESSAGE_CONFIG.DEFAULT_PAGE_SIZE,
        help_text="Messages per page (default 15, max 100)",
    )


class MessagePageSerializer(serializers.Serializer):
    """Forward-only page of messages (no total count)."""

    data = MessageSerializer(source="items", many=True)
    page = serializers.IntegerField()
    page_size = serializers.IntegerField()
    has_more = serializers.BooleanField()


# =============================================================================
# Participant Serializers
# =============================================================================


class ParticipantSerializer(serializers.ModelSerializer):
    """Chat participant with user details."""

    user = UserSerializer(read_only=True)

    class Meta:
        model = ChatParticipant
        fields = [
            "id",
            "chat_id",
            "user_id",
            "user",
            "created_at",
        ]
        read_only_fields = fields


# =============================================================================
# Chat Serializers
# =============================================================================


class ChatSerializer(serializers.ModelSerializer):
    """
    Chat with its last message and participants.

    Expects the queryset to be loaded through ChatService.with_relations.
    last_message is null until the first message is sent.
    """

    last_message = MessageSerializer(read_only=True, allow_null=True)
    participants = ParticipantSerializer(many=True, read_only=True)

    class Meta:
        model = Chat
        fields = [
            "id",
            "name",
            "is_private",
            "created_by",
            "last_message",
            "participants",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class ChatCreateSerializer(serializers.Serializer):
    """
    Input for creating (or resuming) a private chat.

    Optional fields carry their defaults so the view can build
    ChatCreateOptions without checking for missing keys.
    """

    user_id = serializers.IntegerField(help_text="The other participant")
    name = serializers.CharField(
        max_length=100,
        required=False,
        allow_blank=True,
        default="",
        help_text="Optional chat name",
    )


class ChatListQuerySerializer(serializers.Serializer):
    """Query parameters for listing chats."""

    is_private = serializers.BooleanField(
        default=True,
        help_text="List private (1:1) chats when true, group chats when false",
    )
