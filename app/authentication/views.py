"""
Authentication views.

This module provides API views for:
- Registration and login (returning a JWT pair)
- Token introspection (current user)
- Logout (refresh token blacklisting)
- Listing the other users a chat can be started with

Related files:
    - serializers.py: Request/response serialization
    - services.py: Business logic (AuthService)
    - urls.py: URL routing
"""

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from authentication.serializers import (
    AuthResponseSerializer,
    LoginSerializer,
    LogoutSerializer,
    RegisterSerializer,
    UserSerializer,
)
from authentication.services import AuthService


def _auth_response(payload, status_code=status.HTTP_200_OK):
    """Serialize {"user", "tokens"} into the register/login response body."""
    return Response(
        {
            "user": UserSerializer(payload["user"]).data,
            "tokens": payload["tokens"],
        },
        status=status_code,
    )


class RegisterView(APIView):
    """Create an account and return it with a fresh JWT pair."""

    permission_classes = [AllowAny]

    @extend_schema(
        summary="Register a new user",
        request=RegisterSerializer,
        responses={
            201: AuthResponseSerializer,
            400: OpenApiResponse(description="Invalid data or email already used"),
        },
        tags=["Auth"],
    )
    def post(self, request):
        serializer = RegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = AuthService.register(**serializer.validated_data)
        if not result.success:
            return Response(result.to_response(), status=status.HTTP_400_BAD_REQUEST)

        return _auth_response(result.data, status.HTTP_201_CREATED)


class LoginView(APIView):
    """Authenticate with email and password."""

    permission_classes = [AllowAny]

    @extend_schema(
        summary="Log in",
        request=LoginSerializer,
        responses={
            200: AuthResponseSerializer,
            400: OpenApiResponse(description="Invalid credentials"),
        },
        tags=["Auth"],
    )
    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = AuthService.login(
            email=serializer.validated_data["email"],
            password=serializer.validated_data["password"],
        )
        if not result.success:
            return Response(result.to_response(), status=status.HTTP_400_BAD_REQUEST)

        return _auth_response(result.data)


class LoginWithTokenView(APIView):
    """Return the user the bearer token belongs to."""

    permission_classes = [IsAuthenticated]

    @extend_schema(
        summary="Current user for a bearer token",
        request=None,
        responses={200: UserSerializer},
        tags=["Auth"],
    )
    def post(self, request):
        return Response(UserSerializer(request.user).data)


class LogoutView(APIView):
    """Revoke the supplied refresh token."""

    permission_classes = [IsAuthenticated]

    @extend_schema(
        summary="Log out",
        request=LogoutSerializer,
        responses={
            205: OpenApiResponse(description="Refresh token revoked"),
            400: OpenApiResponse(description="Invalid or already revoked token"),
        },
        tags=["Auth"],
    )
    def post(self, request):
        serializer = LogoutSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = AuthService.logout(serializer.validated_data["refresh"])
        if not result.success:
            return Response(result.to_response(), status=status.HTTP_400_BAD_REQUEST)

        return Response(status=status.HTTP_205_RESET_CONTENT)


class UserListView(APIView):
    """List every user except the caller."""

    permission_classes = [IsAuthenticated]

    @extend_schema(
        summary="List users",
        responses={200: UserSerializer(many=True)},
        tags=["Users"],
    )
    def get(self, request):
        users = AuthService.list_other_users(request.user)
        return Response(UserSerializer(users, many=True).data)
