"""
Realtime publishing of chat events.

After a message is persisted, its serialized form is sent to the chat's
channel layer group ("chat.<id>"). Delivery is best-effort: if no channel
layer is configured or the transport fails, the error is logged and the
triggering request still succeeds. Nothing is queued or retried.

Exclude-sender semantics:
    The publisher passes the sender's connection (a channel name) as
    ``exclude_channel``; ChatConsumer drops the event for that connection.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from asgiref.sync import async_to_sync
from channels.layers import get_channel_layer
from django.db import transaction

from chat.constants import CHANNEL_CONFIG, chat_group_name

if TYPE_CHECKING:
    from chat.models import ChatMessage

logger = logging.getLogger(__name__)


class ChatBroadcaster:
    """Publishes chat events to channel layer groups."""

    @classmethod
    def publish_message(
        cls,
        message: ChatMessage,
        exclude_channel: str | None = None,
    ) -> None:
        """
        Publish a new message to its chat's channel once the transaction commits.

        Outside a transaction the event is sent immediately.

        Args:
            message: Persisted message with author loaded
            exclude_channel: Channel name of the sender's connection, if any
        """
        from chat.serializers import MessageSerializer

        group = chat_group_name(message.chat_id)
        event = {
            "type": CHANNEL_CONFIG.MESSAGE_EVENT_TYPE,
            "message": dict(MessageSerializer(message).data),
            "exclude_channel": exclude_channel,
        }

        transaction.on_commit(lambda: cls.send(group, event))

    @staticmethod
    def send(group: str, event: dict) -> bool:
        """
        Send an event to a channel layer group.

        Returns:
            True if the event was handed to the channel layer
        """
        channel_layer = get_channel_layer()
        if channel_layer is None:
            logger.warning(f"No channel layer configured, dropping event for {group}")
            return False

        try:
            async_to_sync(channel_layer.group_send)(group, event)
        except Exception:
            logger.exception(f"Failed to publish event to {group}")
            return False

        logger.debug(f"Published {event['type']} to {group}")
        return True
