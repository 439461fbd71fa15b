"""
Chat app for one-to-one and group messaging.

This app handles:
- Private chats (deduplicated per user pair) and group chats
- Message history with forward-only pagination
- Realtime delivery over WebSockets to chat participants

Related apps:
    - authentication: User model for participants and message authors

WebSocket Support:
    Uses Django Channels for realtime communication.
    See consumers.py for WebSocket handlers.
    See routing.py for WebSocket URL patterns.

Usage:
    from chat.services import ChatService, MessageService

    # Create or resume a private chat
    result = ChatService.create_or_get(creator=user, other=other_user)

    # Send message
    result = MessageService.send_message(
        chat_id=result.data.id,
        author=user,
        content="Hello!",
    )
"""
