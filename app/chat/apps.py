"""
Chat application configuration.

This app provides the chat system with:
- Private (1:1) chats unique per user pair
- Append-only messages ordered by recency
- Participant-gated realtime channels
"""

from django.apps import AppConfig


class ChatConfig(AppConfig):
    """Configuration for the chat application."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "chat"
    verbose_name = "Chat"
