"""
Authentication services.

This module provides the AuthService class: registration, credential checks
and JWT issuance/revocation. Token cryptography is delegated entirely to
djangorestframework-simplejwt; password hashing to Django's hashers.

Related files:
    - models.py: User
    - views.py: HTTP endpoints that call these methods
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from django.contrib.auth import authenticate
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.tokens import RefreshToken

from core.services import BaseService, ServiceResult

if TYPE_CHECKING:
    from django.db.models import QuerySet

    from authentication.models import User


class AuthService(BaseService):
    """
    Centralized authentication business logic.

    Usage:
        from authentication.services import AuthService

        result = AuthService.register("alice@example.com", "s3cret-pass")
        if result.success:
            user, tokens = result.data["user"], result.data["tokens"]

    Error codes:
        EMAIL_EXISTS: Registration with an email that is already taken
        INVALID_CREDENTIALS: Unknown email, wrong password or inactive user
        INVALID_TOKEN: Logout with a malformed, expired or revoked refresh token
    """

    @staticmethod
    def issue_tokens(user: User) -> dict[str, str]:
        """Create a refresh/access token pair for the user."""
        refresh = RefreshToken.for_user(user)
        return {
            "refresh": str(refresh),
            "access": str(refresh.access_token),
        }

    @classmethod
    def register(
        cls,
        email: str,
        password: str,
        name: str = "",
    ) -> ServiceResult[dict]:
        """
        Create an account and log it in.

        Args:
            email: Login email (must be unique, case-insensitive)
            password: Raw password, hashed by the user manager
            name: Optional display name (defaults to the email local part)

        Returns:
            ServiceResult with {"user": User, "tokens": {...}}
        """
        from authentication.models import User

        if User.objects.filter(email__iexact=email).exists():
            return ServiceResult.failure(
                "A user with this email already exists",
                error_code="EMAIL_EXISTS",
                errors={"email": ["A user with this email already exists."]},
            )

        user = User.objects.create_user(email=email, password=password, name=name)

        cls.get_logger().info(f"Registered user {user.id}")
        return ServiceResult.success({"user": user, "tokens": cls.issue_tokens(user)})

    @classmethod
    def login(cls, email: str, password: str) -> ServiceResult[dict]:
        """
        Check credentials and issue a token pair.

        The same failure is returned for an unknown email and a wrong
        password so the endpoint cannot be used to probe for accounts.
        """
        user = authenticate(username=email, password=password)
        if user is None:
            cls.get_logger().info("Rejected login attempt")
            return ServiceResult.failure(
                "Invalid credentials",
                error_code="INVALID_CREDENTIALS",
            )

        return ServiceResult.success({"user": user, "tokens": cls.issue_tokens(user)})

    @classmethod
    def logout(cls, refresh_token: str) -> ServiceResult[None]:
        """
        Revoke a refresh token via the simplejwt blacklist.

        Access tokens already issued stay valid until they expire.
        """
        try:
            RefreshToken(refresh_token).blacklist()
        except TokenError as e:
            return ServiceResult.failure(str(e), error_code="INVALID_TOKEN")

        return ServiceResult.success(None)

    @staticmethod
    def list_other_users(user: User) -> QuerySet[User]:
        """Return every active user except the given one."""
        from authentication.models import User

        return User.objects.filter(is_active=True).exclude(pk=user.pk)
