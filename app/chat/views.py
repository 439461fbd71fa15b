"""
ViewSets for chat API.

This module provides REST API endpoints for the chat system:
- ChatViewSet: List, create-or-get and retrieve chats
- MessageViewSet: List and send messages

URL Structure:
    /api/v1/chat/                GET, POST
    /api/v1/chat/{id}/           GET
    /api/v1/chat/messages/       GET (?chat_id&page&page_size), POST

Design Decisions:
    - Views parse input with serializers, then hand plain values to the
      service layer together with request.user
    - Service failure codes map to HTTP statuses via status_for_error_code
    - The sender's WebSocket connection (X-Socket-ID header) is excluded
      from the realtime broadcast of a sent message
"""

from __future__ import annotations

from django.contrib.auth import get_user_model
from django.shortcuts import get_object_or_404
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import (
    OpenApiParameter,
    OpenApiResponse,
    extend_schema,
    extend_schema_view,
)
from rest_framework import status, viewsets
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from core.exceptions import (
    InvalidOperationError,
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
    status_for_error_code,
)

from chat.constants import CHANNEL_CONFIG
from chat.serializers import (
    ChatCreateSerializer,
    ChatListQuerySerializer,
    ChatSerializer,
    MessageCreateSerializer,
    MessageListQuerySerializer,
    MessagePageSerializer,
    MessageSerializer,
)
from chat.services import ChatCreateOptions, ChatService, MessageService

User = get_user_model()

# Domain failure codes and the error class whose HTTP status they share
CHAT_ERROR_CODES = {
    "SAME_USER": InvalidOperationError,
    "CHAT_NOT_FOUND": NotFoundError,
    "NOT_PARTICIPANT": PermissionDeniedError,
    "EMPTY_CONTENT": ValidationError,
    "CONTENT_TOO_LONG": ValidationError,
}


def failure_response(result) -> Response:
    """Build the error response for a failed ServiceResult."""
    return Response(
        result.to_response(),
        status=status_for_error_code(result.error_code, CHAT_ERROR_CODES),
    )


@extend_schema_view(
    list=extend_schema(
        operation_id="list_chats",
        summary="List chats",
        parameters=[
            OpenApiParameter(
                "is_private",
                OpenApiTypes.BOOL,
                description="Private (default) or group chats",
            ),
        ],
        responses={200: ChatSerializer(many=True)},
        tags=["Chat"],
    ),
    create=extend_schema(
        operation_id="create_chat",
        summary="Create or get a private chat",
        request=ChatCreateSerializer,
        responses={
            201: ChatSerializer,
            400: OpenApiResponse(description="Cannot create a chat with yourself"),
            404: OpenApiResponse(description="User not found"),
        },
        tags=["Chat"],
    ),
    retrieve=extend_schema(
        operation_id="get_chat",
        summary="Get chat",
        responses={
            200: ChatSerializer,
            403: OpenApiResponse(description="Not a participant"),
            404: OpenApiResponse(description="Chat not found"),
        },
        tags=["Chat"],
    ),
)
class ChatViewSet(viewsets.ViewSet):
    """
    ViewSet for chat operations.

    list:
        Chats of the current user that have at least one message,
        most recently active first, with last message and participants.

    create:
        Create a private chat with another user, or return the existing one.

    retrieve:
        Get one chat with last message and participants.
    """

    permission_classes = [IsAuthenticated]

    def list(self, request):
        """List the current user's chats."""
        query = ChatListQuerySerializer(data=request.query_params.dict())
        query.is_valid(raise_exception=True)

        chats = ChatService.list_for_user(
            request.user,
            is_private=query.validated_data["is_private"],
        )
        return Response(ChatSerializer(chats, many=True).data)

    def create(self, request):
        """Create or get a private chat with another user."""
        serializer = ChatCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        data = serializer.validated_data
        other_user = get_object_or_404(User, pk=data["user_id"], is_active=True)

        result = ChatService.create_or_get(
            creator=request.user,
            other=other_user,
            options=ChatCreateOptions(name=data["name"]),
        )
        if not result.success:
            return failure_response(result)

        return Response(ChatSerializer(result.data).data, status=status.HTTP_201_CREATED)

    def retrieve(self, request, pk=None):
        """Get a chat the current user participates in."""
        result = ChatService.get_chat(int(pk), request.user)
        if not result.success:
            return failure_response(result)

        return Response(ChatSerializer(result.data).data)


@extend_schema_view(
    list=extend_schema(
        operation_id="list_messages",
        summary="List messages",
        parameters=[MessageListQuerySerializer],
        responses={
            200: MessagePageSerializer,
            400: OpenApiResponse(description="Missing or invalid parameters"),
            403: OpenApiResponse(description="Not a participant"),
            404: OpenApiResponse(description="Chat not found"),
        },
        tags=["Chat - Messages"],
    ),
    create=extend_schema(
        operation_id="send_message",
        summary="Send message",
        request=MessageCreateSerializer,
        parameters=[
            OpenApiParameter(
                "X-Socket-ID",
                OpenApiTypes.STR,
                location=OpenApiParameter.HEADER,
                description="Sender's WebSocket socket_id, excluded from the broadcast",
            ),
        ],
        responses={
            201: MessageSerializer,
            400: OpenApiResponse(description="Invalid content or chat"),
            403: OpenApiResponse(description="Not a participant"),
        },
        tags=["Chat - Messages"],
    ),
)
class MessageViewSet(viewsets.ViewSet):
    """
    ViewSet for message operations.

    list:
        One page of a chat's messages, newest first. The response
        reports whether more pages exist instead of a total count.

    create:
        Send a message. Participants connected to the chat's channel
        receive it in realtime, except the sender's own connection.
    """

    permission_classes = [IsAuthenticated]

    def list(self, request):
        """List a page of messages for a chat."""
        query = MessageListQuerySerializer(data=request.query_params.dict())
        query.is_valid(raise_exception=True)

        data = query.validated_data
        result = MessageService.list_messages(
            chat_id=data["chat_id"],
            user=request.user,
            page=data["page"],
            page_size=data["page_size"],
        )
        if not result.success:
            return failure_response(result)

        return Response(MessagePageSerializer(result.data).data)

    def create(self, request):
        """Send a message to a chat."""
        serializer = MessageCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = MessageService.send_message(
            chat_id=serializer.validated_data["chat_id"],
            author=request.user,
            content=serializer.validated_data["content"],
            exclude_channel=request.META.get(CHANNEL_CONFIG.SOCKET_ID_HEADER) or None,
        )
        if not result.success:
            return failure_response(result)

        return Response(
            MessageSerializer(result.data).data,
            status=status.HTTP_201_CREATED,
        )
