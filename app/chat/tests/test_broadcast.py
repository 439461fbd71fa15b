"""
Tests for ChatBroadcaster.

Covers the realtime publishing contract:
- Events go to the chat's channel layer group after commit
- The sender's connection is carried as exclude_channel
- Missing or failing channel layers never raise
"""

from asgiref.sync import async_to_sync
from channels.layers import get_channel_layer

from chat.broadcast import ChatBroadcaster
from chat.tests.factories import ChatMessageFactory


class TestPublishMessage:
    """Tests for ChatBroadcaster.publish_message()."""

    def test_event_reaches_group_members(
        self, private_chat, bob, django_capture_on_commit_callbacks
    ):
        """
        A subscribed channel receives the chat.message event.

        Why it matters: This is the realtime delivery path end to end
        through the in-memory channel layer.
        """
        layer = get_channel_layer()
        channel = async_to_sync(layer.new_channel)()
        async_to_sync(layer.group_add)(f"chat.{private_chat.id}", channel)
        message = ChatMessageFactory(chat=private_chat, user=bob, content="hi")

        with django_capture_on_commit_callbacks(execute=True):
            ChatBroadcaster.publish_message(message, exclude_channel="bob-socket")

        event = async_to_sync(layer.receive)(channel)
        assert event["type"] == "chat.message"
        assert event["exclude_channel"] == "bob-socket"
        assert event["message"]["content"] == "hi"
        assert event["message"]["chat_id"] == private_chat.id
        assert event["message"]["user"]["name"] == "Bob"

    def test_nothing_is_sent_before_commit(
        self, private_chat, bob, mocker, django_capture_on_commit_callbacks
    ):
        """publish_message only registers an on-commit callback."""
        send = mocker.patch.object(ChatBroadcaster, "send")
        message = ChatMessageFactory(chat=private_chat, user=bob)

        with django_capture_on_commit_callbacks(execute=False) as callbacks:
            ChatBroadcaster.publish_message(message)

        send.assert_not_called()
        assert len(callbacks) == 1


class TestSend:
    """Tests for ChatBroadcaster.send()."""

    def test_missing_channel_layer_is_logged(self, mocker):
        """Without a channel layer the event is dropped with a warning."""
        mocker.patch("chat.broadcast.get_channel_layer", return_value=None)
        logger = mocker.patch("chat.broadcast.logger")

        sent = ChatBroadcaster.send("chat.1", {"type": "chat.message"})

        assert sent is False
        logger.warning.assert_called_once()

    def test_transport_error_is_logged_not_raised(self, mocker):
        """
        Transport failures are swallowed after logging.

        Why it matters: A Redis outage must not turn message sends into 500s.
        """
        layer = mocker.Mock()
        layer.group_send = mocker.AsyncMock(side_effect=ConnectionError("down"))
        mocker.patch("chat.broadcast.get_channel_layer", return_value=layer)
        logger = mocker.patch("chat.broadcast.logger")

        sent = ChatBroadcaster.send("chat.1", {"type": "chat.message"})

        assert sent is False
        logger.exception.assert_called_once()

    def test_successful_send_returns_true(self, mocker):
        """Events handed to the layer report success."""
        layer = mocker.Mock()
        layer.group_send = mocker.AsyncMock()
        mocker.patch("chat.broadcast.get_channel_layer", return_value=layer)

        sent = ChatBroadcaster.send("chat.7", {"type": "chat.message"})

        assert sent is True
        layer.group_send.assert_awaited_once_with("chat.7", {"type": "chat.message"})
