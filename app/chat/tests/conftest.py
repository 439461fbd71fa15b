"""
Test configuration and fixtures for chat tests.

This module provides:
- User fixtures (alice, bob, carol as an outsider)
- Chat fixtures (private chat between alice and bob, group chat)
- API client helpers for authenticated requests

Usage:
    def test_example(private_chat, alice_client):
        response = alice_client.get(f'/api/v1/chat/{private_chat.id}/')
        assert response.status_code == 200
"""

import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken

from authentication.tests.factories import UserFactory
from chat.tests.factories import ChatFactory, PrivateChatFactory


# =============================================================================
# User Fixtures
# =============================================================================


@pytest.fixture
def alice(db):
    """First participant of the private chat fixture."""
    return UserFactory(name="Alice", email="alice@example.com")


@pytest.fixture
def bob(db):
    """Second participant of the private chat fixture."""
    return UserFactory(name="Bob", email="bob@example.com")


@pytest.fixture
def carol(db):
    """User who is not a participant in any fixture chat."""
    return UserFactory(name="Carol", email="carol@example.com")


# =============================================================================
# Chat Fixtures
# =============================================================================


@pytest.fixture
def private_chat(db, alice, bob):
    """Private chat created by alice with bob, no messages yet."""
    return PrivateChatFactory(user1=alice, user2=bob)


@pytest.fixture
def group_chat(db, alice, bob, carol):
    """Group chat with all three users."""
    return ChatFactory(created_by=alice, members=[alice, bob, carol])


# =============================================================================
# API Client Fixtures
# =============================================================================


@pytest.fixture
def api_client():
    """Unauthenticated API client."""
    return APIClient()


@pytest.fixture
def authenticated_client_factory(db):
    """
    Factory to create authenticated clients for any user.

    Usage:
        def test_example(authenticated_client_factory, some_user):
            client = authenticated_client_factory(some_user)
            response = client.get('/api/v1/chat/')
    """

    def _make_client(user):
        client = APIClient()
        refresh = RefreshToken.for_user(user)
        client.credentials(HTTP_AUTHORIZATION=f"Bearer {refresh.access_token}")
        return client

    return _make_client


@pytest.fixture
def alice_client(authenticated_client_factory, alice):
    """API client authenticated as alice."""
    return authenticated_client_factory(alice)


@pytest.fixture
def bob_client(authenticated_client_factory, bob):
    """API client authenticated as bob."""
    return authenticated_client_factory(bob)


@pytest.fixture
def carol_client(authenticated_client_factory, carol):
    """API client authenticated as carol."""
    return authenticated_client_factory(carol)
