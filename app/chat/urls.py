"""
URL configuration for chat API.

URL Structure:
    Chats:
        /                GET (?is_private), POST
        /{id}/           GET

    Messages:
        /messages/       GET (?chat_id&page&page_size), POST

All URLs are prefixed with /api/v1/chat/ in the main URL configuration.
"""

from django.urls import path

from chat.views import ChatViewSet, MessageViewSet

app_name = "chat"

urlpatterns = [
    path(
        "",
        ChatViewSet.as_view({"get": "list", "post": "create"}),
        name="chat-list",
    ),
    path(
        "<int:pk>/",
        ChatViewSet.as_view({"get": "retrieve"}),
        name="chat-detail",
    ),
    path(
        "messages/",
        MessageViewSet.as_view({"get": "list", "post": "create"}),
        name="message-list",
    ),
]
