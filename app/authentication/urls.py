"""
URL configuration for authentication app.

URL structure (prefixed with /api/v1/auth/ in config/urls.py):
    register/             - Create account, returns user + JWT pair
    login/                - Email/password login, returns user + JWT pair
    login-with-token/     - Current user for the bearer token
    logout/               - Blacklist a refresh token
    token/refresh/        - Exchange a refresh token for a new access token
"""

from django.urls import path
from rest_framework_simplejwt.views import TokenRefreshView

from authentication.views import (
    LoginView,
    LoginWithTokenView,
    LogoutView,
    RegisterView,
)

app_name = "authentication"

urlpatterns = [
    path("register/", RegisterView.as_view(), name="register"),
    path("login/", LoginView.as_view(), name="login"),
    path("login-with-token/", LoginWithTokenView.as_view(), name="login-with-token"),
    path("logout/", LogoutView.as_view(), name="logout"),
    path("token/refresh/", TokenRefreshView.as_view(), name="token-refresh"),
]
