"""
Application error classes and their HTTP statuses.

Services report expected failures as ServiceResult codes rather than
raising. Each class here names a kind of failure and carries the HTTP
status the API layer answers with, so views can translate a failure code
into a response (see ``status_for_error_code``).

Hierarchy:
    BaseApplicationError (base, 400)
    ├── ValidationError - Input validation failures (400)
    ├── InvalidOperationError - Semantically disallowed requests (400)
    ├── NotFoundError - Resource not found (404)
    └── PermissionDeniedError - Authorization failures (403)

Usage:
    from core.exceptions import NotFoundError, status_for_error_code

    status_for_error_code("CHAT_NOT_FOUND", {"CHAT_NOT_FOUND": NotFoundError})  # 404

Note:
    DRF handles API-layer errors (serialization, authentication, etc.).
"""


class BaseApplicationError(Exception):
    """
    Base class for application-specific errors.

    Attributes:
        default_error_code: Code reported when none is given
        status_code: HTTP status for failures of this kind
    """

    default_error_code: str = "APPLICATION_ERROR"
    status_code: int = 400


class ValidationError(BaseApplicationError):
    """Malformed or missing input."""

    default_error_code: str = "VALIDATION_ERROR"
    status_code: int = 400


class InvalidOperationError(BaseApplicationError):
    """
    A well-formed request that is semantically disallowed.

    Example:
        Creating a private chat with yourself.
    """

    default_error_code: str = "INVALID_OPERATION"
    status_code: int = 400


class NotFoundError(BaseApplicationError):
    """A requested resource does not exist."""

    default_error_code: str = "NOT_FOUND"
    status_code: int = 404


class PermissionDeniedError(BaseApplicationError):
    """
    The user may not perform the operation.

    Note:
        For authentication failures (missing/invalid token), DRF's
        NotAuthenticated/AuthenticationFailed apply. Use this for
        authorization failures.
    """

    default_error_code: str = "PERMISSION_DENIED"
    status_code: int = 403


def status_for_error_code(
    error_code: str | None,
    overrides: dict[str, type[BaseApplicationError]] | None = None,
) -> int:
    """
    Resolve the HTTP status for a ServiceResult error code.

    Args:
        error_code: Machine-readable failure code
        overrides: Mapping of domain codes to the exception class whose
            status they share (e.g. {"CHAT_NOT_FOUND": NotFoundError})

    Returns:
        HTTP status code (400 when the code is unknown)
    """
    mapping: dict[str, type[BaseApplicationError]] = {
        cls.default_error_code: cls
        for cls in (
            ValidationError,
            InvalidOperationError,
            NotFoundError,
            PermissionDeniedError,
        )
    }
    if overrides:
        mapping.update(overrides)
    error_class = mapping.get(error_code or "", BaseApplicationError)
    return error_class.status_code
