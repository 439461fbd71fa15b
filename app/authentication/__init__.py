"""
Authentication application.

This app supplies the identity every chat operation runs as: the email-based
User model, registration and login that issue JWT pairs, and the user list.

Key components:
    - User model: Custom email-based user with a display name
    - AuthService: Registration, credential checks, token issuance/revocation

Usage:
    from authentication.models import User
    from authentication.services import AuthService
"""
