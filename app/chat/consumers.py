"""
WebSocket consumers for the chat application.

This module implements the WebSocket consumer for realtime chat delivery,
handling connection authorization, channel group membership, and
integration with the chat service layer.

Consumers:
    ChatConsumer: Handles WebSocket connections for a single chat

Authentication:
    Users are authenticated via JWT token passed as query parameter.
    The JWTAuthMiddleware attaches the user to self.scope["user"].

Channel Groups:
    Each chat has a channel group named "chat.{chat_id}".
    Only participants may join it (ChatAuthorizationService.can_subscribe).

Message Types (from client):
    - message: Send a new message to the chat

Message Types (to client):
    - connection: Sent once on accept, carries this connection's socket_id
    - message: New message in the chat
    - message_sent: Acknowledgement of a message sent over this socket
    - error: Error response
"""

from __future__ import annotations

import logging

from channels.db import database_sync_to_async
from channels.generic.websocket import AsyncJsonWebsocketConsumer

from chat.authorization import ChatAuthorizationService
from chat.constants import CHANNEL_CONFIG
from chat.serializers import MessageSerializer
from chat.services import MessageService

logger = logging.getLogger(__name__)


class ChatConsumer(AsyncJsonWebsocketConsumer):
    """
    WebSocket consumer for realtime chat delivery.

    Handles:
        - Connection authentication and subscribe authorization
        - Joining/leaving the chat channel group
        - Sending messages through MessageService
        - Skipping delivery of events excluded for this connection

    Attributes:
        chat_id: ID of the connected chat
        room_group_name: Channel layer group name for the chat
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.chat_id: int | None = None
        self.room_group_name: str | None = None

    async def connect(self):
        """
        Handle WebSocket connection.

        Validates:
            1. User is authenticated
            2. User is a participant in the chat

        On success, joins the channel group, accepts the connection and
        tells the client its socket_id.
        """
        chat_id = self.scope["url_route"]["kwargs"]["chat_id"]
        user = self.scope.get("user")

        if not user or not user.is_authenticated:
            logger.warning(f"Rejected unauthenticated connection to chat {chat_id}")
            await self.close(code=CHANNEL_CONFIG.CLOSE_UNAUTHENTICATED)
            return

        can_subscribe = await database_sync_to_async(
            ChatAuthorizationService.can_subscribe
        )(user, chat_id)
        if not can_subscribe:
            logger.warning(f"User {user.pk} is not a participant in chat {chat_id}")
            await self.close(code=CHANNEL_CONFIG.CLOSE_FORBIDDEN)
            return

        self.chat_id = chat_id
        self.room_group_name = ChatAuthorizationService.channel_for(chat_id)

        await self.channel_layer.group_add(
            self.room_group_name,
            self.channel_name,
        )

        subprotocol = "jwt" if "jwt" in self.scope.get("subprotocols", []) else None
        await self.accept(subprotocol=subprotocol)
        await self.send_json({"type": "connection", "socket_id": self.channel_name})

        logger.info(f"User {user.pk} connected to chat {chat_id}")

    async def disconnect(self, close_code):
        """
        Handle WebSocket disconnection.

        Leaves the channel group if one was joined.
        """
        if self.room_group_name:
            await self.channel_layer.group_discard(
                self.room_group_name,
                self.channel_name,
            )
            user = self.scope.get("user")
            logger.info(
                f"User {getattr(user, 'pk', None)} disconnected from chat {self.chat_id}"
            )

    async def receive_json(self, content):
        """
        Handle incoming WebSocket messages.

        Expected message format:
            {"type": "message", "content": "Hello!"}

        Args:
            content: Parsed JSON message from client
        """
        message_type = content.get("type")

        if message_type == "message":
            await self._handle_message(content)
        else:
            await self.send_json(
                {
                    "type": "error",
                    "message": f"Unknown message type: {message_type}",
                }
            )

    async def _handle_message(self, content):
        """
        Persist a message sent over the socket.

        The broadcast excludes this connection; the sender gets a
        message_sent acknowledgement instead.
        """
        result = await self._send_message(content.get("content"))

        if not result["success"]:
            await self.send_json(
                {
                    "type": "error",
                    "message": result["error"],
                    "error_code": result["error_code"],
                }
            )
            return

        await self.send_json({"type": "message_sent", "message": result["data"]})

    async def chat_message(self, event):
        """
        Handle chat.message events from channel layer.

        Sends the message to the WebSocket client unless this connection
        is the excluded sender.
        """
        if event.get("exclude_channel") == self.channel_name:
            return

        await self.send_json(
            {
                "type": "message",
                "message": event["message"],
            }
        )

    @database_sync_to_async
    def _send_message(self, content) -> dict:
        """
        Send a message using MessageService.

        Returns dict with success status and either data or error.
        """
        result = MessageService.send_message(
            chat_id=self.chat_id,
            author=self.scope["user"],
            content=content,
            exclude_channel=self.channel_name,
        )

        if result.success:
            return {
                "success": True,
                "data": dict(MessageSerializer(result.data).data),
            }
        return {
            "success": False,
            "error": result.error,
            "error_code": result.error_code,
        }
