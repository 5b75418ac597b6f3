"""
Business exception types.

Write operations raise these; the FastAPI handlers in exception_handlers.py
translate them into HTTP responses. Read operations never raise them and
degrade to empty results instead.
"""

from typing import Dict, List, Optional


class SceneHubException(Exception):
    """Base class for all domain errors raised by SceneHub services."""

    default_message = "An error occurred"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class UnauthenticatedError(SceneHubException):
    """No resolvable user identity for an operation that requires one."""

    default_message = "Authentication required"


class PermissionDeniedError(SceneHubException):
    """Membership missing or role insufficient for the requested write."""

    default_message = "Insufficient permissions"

    def __init__(
        self,
        message: Optional[str] = None,
        workspace_id: Optional[str] = None,
        required: Optional[str] = None,
    ):
        super().__init__(message)
        self.workspace_id = workspace_id
        self.required = required


class EntityNotFoundError(SceneHubException):
    """A referenced workspace, project, model or other record does not exist."""

    def __init__(self, entity_type: str, entity_id: str, message: Optional[str] = None):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(message or f"{entity_type.capitalize()} not found")


class ValidationError(SceneHubException):
    """Input is well-formed but violates a business rule."""

    default_message = "Validation failed"

    def __init__(
        self,
        message: Optional[str] = None,
        validation_details: Optional[Dict[str, List[str]]] = None,
        entity_type: Optional[str] = None,
    ):
        super().__init__(message)
        self.validation_details = validation_details or {}
        self.entity_type = entity_type


class ConflictError(SceneHubException):
    """The write would create a duplicate or otherwise conflicting record."""

    default_message = "Resource conflict"


class InternalServiceError(SceneHubException):
    """Unexpected failure; details are logged but never returned to the client."""

    default_message = "An unexpected error occurred"
