"""
Django admin configuration for chat models.

Provides admin interfaces for:
- Chat management
- Participant viewing
- Message moderation
"""

from django.contrib import admin

from chat.models import Chat, ChatMessage, ChatParticipant, DirectChatPair


class ParticipantInline(admin.TabularInline):
    """Inline display of participants in chat admin."""

    model = ChatParticipant
    extra = 0
    readonly_fields = ["created_at"]
    raw_id_fields = ["user"]


@admin.register(Chat)
class ChatAdmin(admin.ModelAdmin):
    """Admin interface for Chat model."""

    list_display = [
        "id",
        "name",
        "is_private",
        "created_by",
        "created_at",
        "updated_at",
    ]
    list_filter = ["is_private", "created_at"]
    search_fields = ["name", "id"]
    readonly_fields = ["created_at", "updated_at", "last_message"]
    raw_id_fields = ["created_by"]
    inlines = [ParticipantInline]
    ordering = ["-updated_at"]


@admin.register(DirectChatPair)
class DirectChatPairAdmin(admin.ModelAdmin):
    """Admin interface for DirectChatPair model."""

    list_display = ["chat", "user_lower", "user_higher"]
    raw_id_fields = ["chat", "user_lower", "user_higher"]


@admin.register(ChatMessage)
class ChatMessageAdmin(admin.ModelAdmin):
    """Admin interface for ChatMessage model (read-only moderation view)."""

    list_display = ["id", "chat", "user", "content_preview", "created_at"]
    list_filter = ["created_at"]
    search_fields = ["content", "user__email"]
    readonly_fields = ["chat", "user", "content", "created_at", "updated_at"]
    ordering = ["-created_at"]

    @admin.display(description="Content")
    def content_preview(self, obj):
        """Show truncated content in list view."""
        if len(obj.content) > 50:
            return obj.content[:50] + "..."
        return obj.content

    def has_add_permission(self, request):
        """Messages are only created through the API."""
        return False
