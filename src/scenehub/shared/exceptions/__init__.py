"""
Exception types and handlers for consistent error handling.

Provides:
- Business exception types (PermissionDeniedError, EntityNotFoundError, etc.)
- FastAPI exception handlers
- Error DTO for API responses
"""

from .exceptions import (
    SceneHubException,
    UnauthenticatedError,
    PermissionDeniedError,
    EntityNotFoundError,
    ValidationError,
    ConflictError,
    InternalServiceError,
)
from .exception_handlers import register_exception_handlers
from .error_dto import ErrorResponse

__all__ = [
    "SceneHubException",
    "UnauthenticatedError",
    "PermissionDeniedError",
    "EntityNotFoundError",
    "ValidationError",
    "ConflictError",
    "InternalServiceError",
    "register_exception_handlers",
    "ErrorResponse",
]
