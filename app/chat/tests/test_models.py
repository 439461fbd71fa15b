"""
Tests for chat models.

This module tests model-level behavior and database constraints:
- Chat: defaults, ordering, string representation
- DirectChatPair: uniqueness and canonical order constraints
- ChatParticipant: one row per (chat, user)
- ChatMessage: ordering and string representation
"""

from datetime import timedelta

import pytest
from django.db import IntegrityError, transaction
from django.utils import timezone

from authentication.tests.factories import UserFactory
from chat.models import Chat, ChatMessage, ChatParticipant, DirectChatPair
from chat.tests.factories import ChatMessageFactory, PrivateChatFactory


# =============================================================================
# TestChat
# =============================================================================


class TestChat:
    """Tests for Chat model."""

    def test_defaults_to_private_without_last_message(self, db):
        """
        A bare chat is private and has no last message.

        Why it matters: Chats are created before any message exists.
        """
        chat = Chat.objects.create()

        assert chat.is_private is True
        assert chat.name == ""
        assert chat.last_message is None

    def test_touch_advances_updated_at(self, db):
        """touch() writes a fresh updated_at."""
        chat = Chat.objects.create()
        before = timezone.now() - timedelta(hours=1)
        Chat.objects.filter(pk=chat.pk).update(updated_at=before)

        chat.touch()
        chat.refresh_from_db()

        assert chat.updated_at > before

    def test_last_message_is_cleared_when_message_is_deleted(self, private_chat, alice):
        """The last_message pointer does not cascade-delete the chat."""
        message = ChatMessageFactory(chat=private_chat, user=alice)

        ChatMessage.objects.filter(pk=message.pk).delete()
        private_chat.refresh_from_db()

        assert private_chat.last_message is None

    def test_str_representation(self, db):
        """__str__ shows kind and name (or id)."""
        named = Chat.objects.create(name="Lunch", is_private=False)
        unnamed = Chat.objects.create()

        assert str(named) == "Group: Lunch"
        assert str(unnamed) == f"Private({unnamed.pk})"


# =============================================================================
# TestDirectChatPair
# =============================================================================


class TestDirectChatPair:
    """
    Tests for DirectChatPair model.

    Verifies:
    - Uniqueness constraint (one private chat per user pair)
    - Canonical ordering (lower ID first)
    """

    def test_unique_constraint_prevents_duplicate_pairs(self, private_chat):
        """
        Cannot create two DirectChatPairs for the same user pair.

        Why it matters: This is the data-layer guarantee that closes the
        concurrent create-or-get race.
        """
        pair = DirectChatPair.objects.get(chat=private_chat)
        new_chat = Chat.objects.create()

        with pytest.raises(IntegrityError):
            with transaction.atomic():
                DirectChatPair.objects.create(
                    chat=new_chat,
                    user_lower=pair.user_lower,
                    user_higher=pair.user_higher,
                )

    def test_check_constraint_enforces_canonical_order(self, db):
        """
        Cannot store the higher user id in user_lower.

        Why it matters: Without canonical order (A, B) and (B, A) would
        both pass the unique constraint.
        """
        user1 = UserFactory()
        user2 = UserFactory()
        if user1.id > user2.id:
            user1, user2 = user2, user1

        chat = Chat.objects.create()

        with pytest.raises(IntegrityError):
            with transaction.atomic():
                DirectChatPair.objects.create(
                    chat=chat,
                    user_lower=user2,
                    user_higher=user1,
                )

    def test_str_representation(self, private_chat):
        """__str__ shows both user IDs for debugging."""
        pair = DirectChatPair.objects.get(chat=private_chat)

        result = str(pair)

        assert str(pair.user_lower_id) in result
        assert str(pair.user_higher_id) in result


# =============================================================================
# TestChatParticipant
# =============================================================================


class TestChatParticipant:
    """Tests for ChatParticipant model."""

    def test_private_chat_factory_creates_two_participants(self, private_chat, alice, bob):
        """A private chat has exactly its two users as participants."""
        user_ids = set(private_chat.participants.values_list("user_id", flat=True))

        assert user_ids == {alice.id, bob.id}

    def test_unique_constraint_prevents_duplicate_membership(self, private_chat, alice):
        """
        A user cannot be a participant of the same chat twice.

        Why it matters: Duplicate rows would duplicate chats in listings.
        """
        with pytest.raises(IntegrityError):
            with transaction.atomic():
                ChatParticipant.objects.create(chat=private_chat, user=alice)


# =============================================================================
# TestChatMessage
# =============================================================================


class TestChatMessage:
    """Tests for ChatMessage model."""

    def test_default_ordering_is_newest_first(self, db):
        """Messages order by created_at descending."""
        chat = PrivateChatFactory()
        now = timezone.now()
        old = ChatMessageFactory(chat=chat, created_at=now - timedelta(minutes=2))
        new = ChatMessageFactory(chat=chat, created_at=now)

        assert list(ChatMessage.objects.filter(chat=chat)) == [new, old]

    def test_equal_timestamps_order_by_id_descending(self, db):
        """
        Ties on created_at break by id, higher first.

        Why it matters: Pagination must be deterministic.
        """
        chat = PrivateChatFactory()
        now = timezone.now()
        first = ChatMessageFactory(chat=chat, created_at=now)
        second = ChatMessageFactory(chat=chat, created_at=now)

        assert list(ChatMessage.objects.filter(chat=chat)) == [second, first]

    def test_str_truncates_long_content(self, db):
        """__str__ previews at most 50 characters."""
        message = ChatMessageFactory(content="x" * 80)

        assert str(message).endswith("x" * 50 + "...")
