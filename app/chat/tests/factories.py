"""
Factory Boy factories for chat models.

Provides test data generation for:
- Chat: Group chats (no pair row)
- PrivateChat: One-to-one chats with DirectChatPair and two participants
- ChatParticipant: User membership in chats
- ChatMessage: Messages that advance their chat like MessageService does

Usage:
    from chat.tests.factories import (
        ChatFactory,
        PrivateChatFactory,
        ChatParticipantFactory,
        ChatMessageFactory,
    )

    # Create a private chat between two users
    chat = PrivateChatFactory(user1=alice, user2=bob)

    # Create a message in a chat
    message = ChatMessageFactory(chat=chat, user=alice)
"""

import factory

from authentication.tests.factories import UserFactory
from chat.models import Chat, ChatMessage, ChatParticipant, DirectChatPair


class ChatFactory(factory.django.DjangoModelFactory):
    """
    Factory for group (non-private) chats.

    Examples:
        chat = ChatFactory()
        chat = ChatFactory(name="Team", members=[alice, bob])
    """

    class Meta:
        model = Chat
        skip_postgeneration_save = True

    name = factory.Sequence(lambda n: f"Group Chat {n}")
    is_private = False
    created_by = factory.SubFactory(UserFactory)

    @factory.post_generation
    def members(self, create, extracted, **kwargs):
        """Add the given users as participants."""
        if not create or not extracted:
            return

        for user in extracted:
            ChatParticipantFactory(chat=self, user=user)


class PrivateChatFactory(factory.django.DjangoModelFactory):
    """
    Factory for private (1:1) chats.

    Creates the chat, its DirectChatPair and both participants, the
    same rows ChatService.create_or_get writes.

    Examples:
        # Private chat between two random users
        chat = PrivateChatFactory()

        # Private chat between specific users (user1 becomes the creator)
        chat = PrivateChatFactory(user1=alice, user2=bob)
    """

    class Meta:
        model = Chat

    name = ""
    is_private = True

    @classmethod
    def _create(cls, model_class, *args, **kwargs):
        """Create private chat with participants and pair."""
        user1 = kwargs.pop("user1", None) or UserFactory()
        user2 = kwargs.pop("user2", None) or UserFactory()
        kwargs.setdefault("created_by", user1)

        # Ensure canonical order (lower ID first)
        user_lower, user_higher = (
            (user1, user2) if user1.id < user2.id else (user2, user1)
        )

        chat = super()._create(model_class, *args, **kwargs)

        DirectChatPair.objects.create(
            chat=chat,
            user_lower=user_lower,
            user_higher=user_higher,
        )
        ChatParticipantFactory(chat=chat, user=user1)
        ChatParticipantFactory(chat=chat, user=user2)

        return chat


class ChatParticipantFactory(factory.django.DjangoModelFactory):
    """
    Factory for ChatParticipant model.

    Examples:
        participant = ChatParticipantFactory(chat=chat, user=user)
    """

    class Meta:
        model = ChatParticipant

    chat = factory.SubFactory(ChatFactory)
    user = factory.SubFactory(UserFactory)


class ChatMessageFactory(factory.django.DjangoModelFactory):
    """
    Factory for ChatMessage model.

    Like MessageService.send_message, the parent chat's last_message and
    updated_at are advanced. Pass created_at to pin the timestamp (the
    chat's updated_at follows it).

    Examples:
        message = ChatMessageFactory(chat=chat, user=alice, content="hi")
        message = ChatMessageFactory(chat=chat, created_at=some_datetime)
    """

    class Meta:
        model = ChatMessage

    chat = factory.SubFactory(ChatFactory)
    user = factory.SubFactory(UserFactory)
    content = factory.Faker("sentence")

    @classmethod
    def _create(cls, model_class, *args, **kwargs):
        """Create message and advance the chat."""
        created_at = kwargs.pop("created_at", None)

        message = super()._create(model_class, *args, **kwargs)

        chat = message.chat
        chat.last_message = message
        chat.touch("last_message")

        # auto_now/auto_now_add ignore explicit values, so pin with update()
        if created_at is not None:
            model_class.objects.filter(pk=message.pk).update(created_at=created_at)
            Chat.objects.filter(pk=chat.pk).update(updated_at=created_at)
            message.created_at = created_at
            chat.updated_at = created_at

        return message
