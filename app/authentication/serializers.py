"""
Serializers for authentication models.

This module provides DRF serializers for:
- User model (read operations, embedded in chat payloads)
- Registration and login input
- Auth responses (user + JWT pair)

Security:
    - Password fields are write-only
    - Passwords run through Django's AUTH_PASSWORD_VALIDATORS on registration
"""

from django.contrib.auth.password_validation import validate_password
from rest_framework import serializers

from authentication.models import User


class UserSerializer(serializers.ModelSerializer):
    """
    Serializer for User model (read operations).

    Used for the current-user endpoint, the user list, and as the nested
    author/participant representation in chat responses.
    """

    class Meta:
        model = User
        fields = [
            "id",
            "name",
            "email",
            "date_joined",
        ]
        read_only_fields = fields


class RegisterSerializer(serializers.Serializer):
    """Input for account registration."""

    email = serializers.EmailField(max_length=254)
    password = serializers.CharField(write_only=True, min_length=8, max_length=128)
    name = serializers.CharField(max_length=150, required=False, allow_blank=True)

    def validate_password(self, value):
        """Apply the configured password validators."""
        validate_password(value)
        return value


class LoginSerializer(serializers.Serializer):
    """Input for email/password login."""

    email = serializers.EmailField()
    password = serializers.CharField(write_only=True)


class LogoutSerializer(serializers.Serializer):
    """Input for logout (refresh token to revoke)."""

    refresh = serializers.CharField()


class TokenPairSerializer(serializers.Serializer):
    """JWT pair returned by register and login."""

    refresh = serializers.CharField()
    access = serializers.CharField()


class AuthResponseSerializer(serializers.Serializer):
    """Response body for register and login."""

    user = UserSerializer()
    tokens = TokenPairSerializer()
