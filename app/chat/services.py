"""
Chat system service layer.

This module provides the business logic for the chat system, encapsulating
all operations on chats, participants, and messages.

Services:
    ChatService: Chat directory (list, create-or-get private chat, show)
    MessageService: Message store (paginated listing, send)

Design Principles:
    - Services are stateless (use class methods)
    - The acting user is always an explicit parameter
    - Expected failures return ServiceResult.failure()
    - Unexpected failures raise exceptions
    - Multi-row writes run in a single transaction

Usage:
    from chat.services import ChatService, MessageService

    # Create (or resume) a private chat
    result = ChatService.create_or_get(alice, bob)
    if result.success:
        chat = result.data

    # Send a message
    result = MessageService.send_message(
        chat_id=chat.id,
        author=bob,
        content="hi",
    )
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from django.db import IntegrityError
from django.db.models import Exists, OuterRef, Prefetch

from core.services import BaseService, ServiceResult

from chat.authorization import ChatAuthorizationService
from chat.broadcast import ChatBroadcaster
from chat.constants import MESSAGE_CONFIG
from chat.models import Chat, ChatMessage, ChatParticipant, DirectChatPair

if TYPE_CHECKING:
    from django.db.models import QuerySet

    from authentication.models import User


@dataclass(frozen=True)
class ChatCreateOptions:
    """
    Optional attributes applied to a newly created chat.

    Resolved once by the caller; every field has a default so the service
    never probes for missing keys.
    """

    name: str = ""


@dataclass
class MessagePage:
    """One page of messages, newest first, without a total count."""

    items: list[ChatMessage] = field(default_factory=list)
    page: int = 1
    page_size: int = MESSAGE_CONFIG.DEFAULT_PAGE_SIZE
    has_more: bool = False


class ChatService(BaseService):
    """
    Service for the chat directory.

    Methods:
        list_for_user: Chats a user participates in, most recent first
        find_private_chat: Existing private chat between two users
        create_or_get: Create or resume a private chat
        get_chat: Single chat visible to a participant
    """

    @staticmethod
    def with_relations(queryset: QuerySet[Chat]) -> QuerySet[Chat]:
        """Load last message (+author) and participants (+user) with a queryset."""
        return queryset.select_related("last_message__user").prefetch_related(
            Prefetch(
                "participants",
                queryset=ChatParticipant.objects.select_related("user"),
            )
        )

    @classmethod
    def list_for_user(
        cls,
        user: User,
        is_private: bool = True,
    ) -> QuerySet[Chat]:
        """
        List chats the user participates in.

        Only chats with at least one message are returned, so chat shells
        created without any conversation stay hidden. Membership and message
        presence are EXISTS subqueries, so no chat appears twice.

        Args:
            user: User whose chats to list
            is_private: Kind of chat to list (default private)

        Returns:
            QuerySet ordered by updated_at descending, then id descending
        """
        is_member = ChatParticipant.objects.filter(chat=OuterRef("pk"), user=user)
        has_messages = ChatMessage.objects.filter(chat=OuterRef("pk"))

        queryset = Chat.objects.filter(
            Exists(is_member),
            Exists(has_messages),
            is_private=is_private,
        ).order_by("-updated_at", "-id")

        return cls.with_relations(queryset)

    @classmethod
    def find_private_chat(cls, user: User, other: User) -> Chat | None:
        """
        Find the private chat shared by two users.

        The two participant filters are chained so each gets its own join:
        both users must be participants of the same chat row.

        Args:
            user: One participant
            other: The other participant

        Returns:
            Chat with relations loaded, or None
        """
        queryset = (
            Chat.objects.filter(is_private=True)
            .filter(participants__user=user)
            .filter(participants__user=other)
            .order_by("id")
        )
        return cls.with_relations(queryset).first()

    @classmethod
    def create_or_get(
        cls,
        creator: User,
        other: User,
        options: ChatCreateOptions | None = None,
    ) -> ServiceResult[Chat]:
        """
        Create or retrieve a private chat between two users.

        Private chats are unique per user pair. If a chat already exists
        between the two users, it is returned without any writes.

        Implementation:
            1. Validate users are different
            2. Look up an existing chat with both users as participants
            3. If not found, create chat + DirectChatPair + two participants
               in one transaction
            4. If a concurrent request created the pair first, the unique
               constraint rejects ours and the lookup is repeated

        Args:
            creator: User creating the chat (becomes created_by)
            other: The other participant
            options: Optional chat attributes (name)

        Returns:
            ServiceResult with Chat (existing or new)

        Error codes:
            SAME_USER: Cannot create a chat with yourself
        """
        if creator.pk == other.pk:
            return ServiceResult.failure(
                "You cannot create a chat with yourself",
                error_code="SAME_USER",
            )

        existing = cls.find_private_chat(creator, other)
        if existing is not None:
            cls.get_logger().debug(
                f"Found existing private chat {existing.pk} "
                f"between users {creator.pk} and {other.pk}"
            )
            return ServiceResult.success(existing)

        options = options or ChatCreateOptions()

        # Canonicalize order for the uniqueness constraint
        user_lower, user_higher = (
            (creator, other) if creator.pk < other.pk else (other, creator)
        )

        try:
            with cls.atomic():
                chat = Chat.objects.create(
                    name=options.name,
                    is_private=True,
                    created_by=creator,
                )
                DirectChatPair.objects.create(
                    chat=chat,
                    user_lower=user_lower,
                    user_higher=user_higher,
                )
                ChatParticipant.objects.bulk_create(
                    [
                        ChatParticipant(chat=chat, user=creator),
                        ChatParticipant(chat=chat, user=other),
                    ]
                )
        except IntegrityError:
            existing = cls.find_private_chat(creator, other)
            if existing is None:
                raise
            cls.get_logger().warning(
                f"Concurrent create for users {creator.pk} and {other.pk}, "
                f"returning chat {existing.pk}"
            )
            return ServiceResult.success(existing)

        cls.get_logger().info(
            f"Created private chat {chat.pk} "
            f"between users {creator.pk} and {other.pk}"
        )

        return ServiceResult.success(
            cls.with_relations(Chat.objects.filter(pk=chat.pk)).get()
        )

    @classmethod
    def get_chat(cls, chat_id: int, user: User) -> ServiceResult[Chat]:
        """
        Get a single chat with last message and participants loaded.

        Error codes:
            CHAT_NOT_FOUND: No chat with this id
            NOT_PARTICIPANT: User is not a participant of the chat
        """
        chat = cls.with_relations(Chat.objects.filter(pk=chat_id)).first()
        if chat is None:
            return ServiceResult.failure("Chat not found", error_code="CHAT_NOT_FOUND")

        if not ChatAuthorizationService.is_chat_participant(user, chat.pk):
            return ServiceResult.failure(
                "You are not a participant in this chat",
                error_code="NOT_PARTICIPANT",
            )

        return ServiceResult.success(chat)


class MessageService(BaseService):
    """
    Service for message operations.

    Methods:
        list_messages: Newest-first page of a chat's messages
        send_message: Append a message and publish it to the chat channel
    """

    @classmethod
    def list_messages(
        cls,
        chat_id: int | None,
        user: User,
        page: int | None,
        page_size: int = MESSAGE_CONFIG.DEFAULT_PAGE_SIZE,
    ) -> ServiceResult[MessagePage]:
        """
        List one page of a chat's messages, newest first.

        Uses forward-only pagination: one extra row is fetched to tell
        whether another page exists, no count query is issued.

        Args:
            chat_id: Chat to read
            user: Requesting user (must be a participant)
            page: 1-based page number
            page_size: Messages per page (1..MESSAGE_CONFIG.MAX_PAGE_SIZE)

        Returns:
            ServiceResult with MessagePage

        Error codes:
            VALIDATION_ERROR: Missing chat_id/page or out-of-range values
            CHAT_NOT_FOUND: No chat with this id
            NOT_PARTICIPANT: User is not a participant of the chat
        """
        validation = cls.validate_required(chat_id=chat_id, page=page)
        if validation is not None:
            return validation

        errors: dict[str, list[str]] = {}
        if page < 1:
            errors["page"] = ["Ensure this value is greater than or equal to 1."]
        if not 1 <= page_size <= MESSAGE_CONFIG.MAX_PAGE_SIZE:
            errors["page_size"] = [
                f"Ensure this value is between 1 and {MESSAGE_CONFIG.MAX_PAGE_SIZE}."
            ]
        if errors:
            return ServiceResult.failure(
                "Invalid pagination parameters",
                error_code="VALIDATION_ERROR",
                errors=errors,
            )

        if not Chat.objects.filter(pk=chat_id).exists():
            return ServiceResult.failure("Chat not found", error_code="CHAT_NOT_FOUND")

        if not ChatAuthorizationService.is_chat_participant(user, chat_id):
            return ServiceResult.failure(
                "You are not a participant in this chat",
                error_code="NOT_PARTICIPANT",
            )

        offset = (page - 1) * page_size
        rows = list(
            ChatMessage.objects.filter(chat_id=chat_id)
            .select_related("user")
            .order_by("-created_at", "-id")[offset : offset + page_size + 1]
        )

        return ServiceResult.success(
            MessagePage(
                items=rows[:page_size],
                page=page,
                page_size=page_size,
                has_more=len(rows) > page_size,
            )
        )

    @classmethod
    def send_message(
        cls,
        chat_id: int | None,
        author: User,
        content: str | None,
        exclude_channel: str | None = None,
    ) -> ServiceResult[ChatMessage]:
        """
        Send a text message to a chat.

        The message insert and the chat's last_message/updated_at update
        commit together. The realtime event is published once the
        transaction commits; publishing never fails the send.

        Args:
            chat_id: Target chat
            author: User sending the message
            content: Message text
            exclude_channel: Realtime connection of the sender, skipped
                when the event is delivered

        Returns:
            ServiceResult with the new ChatMessage (author loaded)

        Error codes:
            EMPTY_CONTENT: Message content cannot be empty
            CONTENT_TOO_LONG: Content exceeds MESSAGE_CONFIG.MAX_CONTENT_LENGTH
            VALIDATION_ERROR: chat_id missing or not an existing chat
            NOT_PARTICIPANT: Author is not a participant of the chat
        """
        content = content.strip() if content else ""
        if not content:
            return ServiceResult.failure(
                "Message content cannot be empty",
                error_code="EMPTY_CONTENT",
                errors={"content": ["This field may not be blank."]},
            )

        if len(content) > MESSAGE_CONFIG.MAX_CONTENT_LENGTH:
            return ServiceResult.failure(
                "Message content is too long",
                error_code="CONTENT_TOO_LONG",
                errors={
                    "content": [
                        "Ensure this field has no more than "
                        f"{MESSAGE_CONFIG.MAX_CONTENT_LENGTH} characters."
                    ]
                },
            )

        chat = Chat.objects.filter(pk=chat_id).first() if chat_id else None
        if chat is None:
            return ServiceResult.failure(
                "Chat does not exist",
                error_code="VALIDATION_ERROR",
                errors={"chat_id": ["The selected chat id is invalid."]},
            )

        if not ChatAuthorizationService.is_chat_participant(author, chat.pk):
            return ServiceResult.failure(
                "You are not a participant in this chat",
                error_code="NOT_PARTICIPANT",
            )

        with cls.atomic():
            message = ChatMessage.objects.create(
                chat=chat,
                user=author,
                content=content,
            )

            # Advance the chat explicitly so listings reorder
            chat.last_message = message
            chat.touch("last_message")

            ChatBroadcaster.publish_message(message, exclude_channel=exclude_channel)

        cls.get_logger().debug(
            f"User {author.pk} sent message {message.pk} to chat {chat.pk}"
        )

        return ServiceResult.success(message)
