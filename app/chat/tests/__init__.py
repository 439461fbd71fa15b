"""
Tests for chat app.

This package contains test modules for:
- test_models.py: Chat, ChatParticipant, ChatMessage, DirectChatPair tests
- test_services.py: ChatService and MessageService tests
- test_authorization.py: Subscribe authorization tests
- test_broadcast.py: Realtime publishing tests
- test_consumers.py: WebSocket consumer tests
- test_views.py: REST API endpoint tests

Usage:
    pytest chat/tests/
    pytest chat/tests/test_consumers.py
"""
