"""
Core Application - Infrastructure & Base Classes

Generic, reusable building blocks shared by the domain apps. Business logic
does not live here.

Models (import from core.models):
    - BaseModel: Abstract model with timestamps (created_at, updated_at)

Services (import from core.services):
    - BaseService: Base class for service layer (logging, transactions)
    - ServiceResult: Standard result wrapper for success/failure handling

Exceptions (import from core.exceptions):
    - BaseApplicationError: Base error class carrying an HTTP status
    - ValidationError: Input validation failures
    - InvalidOperationError: Semantically disallowed requests
    - NotFoundError: Resource not found
    - PermissionDeniedError: Authorization failures
    - status_for_error_code: Map a failure code to an HTTP status

Views (import from core.views):
    - health_check: Liveness/readiness endpoint

Note:
    Django models are NOT imported here to avoid AppRegistryNotReady
    errors. Import them directly from their modules.
"""

# Services (no Django model dependencies)
from .services import BaseService, ServiceResult

# Exceptions (no Django dependencies)
from .exceptions import (
    BaseApplicationError,
    InvalidOperationError,
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
    status_for_error_code,
)

__all__ = [
    # Services
    "BaseService",
    "ServiceResult",
    # Exceptions
    "BaseApplicationError",
    "ValidationError",
    "InvalidOperationError",
    "NotFoundError",
    "PermissionDeniedError",
    "status_for_error_code",
]
