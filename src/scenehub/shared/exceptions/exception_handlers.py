"""
FastAPI exception handlers mapping domain exceptions to HTTP responses.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .error_dto import ErrorResponse
from .exceptions import (
    ConflictError,
    EntityNotFoundError,
    InternalServiceError,
    PermissionDeniedError,
    UnauthenticatedError,
    ValidationError,
)

log = logging.getLogger(__name__)


def _error_response(status_code: int, body: ErrorResponse) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(by_alias=True, exclude_none=True),
    )


def _request_context(request: Request) -> dict:
    return {"path": request.url.path, "method": request.method}


async def unauthenticated_error_handler(
    request: Request, exc: UnauthenticatedError
) -> JSONResponse:
    log.info("Unauthenticated request: %s", exc.message, extra=_request_context(request))
    return _error_response(status.HTTP_401_UNAUTHORIZED, ErrorResponse.create(exc.message))


async def permission_denied_error_handler(
    request: Request, exc: PermissionDeniedError
) -> JSONResponse:
    log.warning("Permission denied: %s", exc.message, extra=_request_context(request))
    return _error_response(status.HTTP_403_FORBIDDEN, ErrorResponse.create(exc.message))


async def entity_not_found_handler(
    request: Request, exc: EntityNotFoundError
) -> JSONResponse:
    log.info(
        "%s %s not found", exc.entity_type, exc.entity_id, extra=_request_context(request)
    )
    return _error_response(status.HTTP_404_NOT_FOUND, ErrorResponse.create(exc.message))


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return _error_response(
        status.HTTP_400_BAD_REQUEST,
        ErrorResponse.create(exc.message, exc.validation_details),
    )


async def conflict_error_handler(request: Request, exc: ConflictError) -> JSONResponse:
    return _error_response(status.HTTP_409_CONFLICT, ErrorResponse.create(exc.message))


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    details: dict = {}
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        details.setdefault(location or "request", []).append(error.get("msg", "Invalid value"))
    body = ErrorResponse.create("Invalid request", jsonable_encoder(details))
    return _error_response(status.HTTP_422_UNPROCESSABLE_ENTITY, body)


async def internal_service_error_handler(
    request: Request, exc: InternalServiceError
) -> JSONResponse:
    log.error(
        "InternalServiceError: %s",
        exc.message,
        extra=_request_context(request),
        exc_info=True,
    )
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        ErrorResponse.create("An unexpected error occurred."),
    )


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Any exception without a dedicated handler is reported as an internal error."""
    return await internal_service_error_handler(
        request, InternalServiceError(f"{type(exc).__name__}: {exc}")
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach all SceneHub exception handlers to a FastAPI application."""
    app.add_exception_handler(UnauthenticatedError, unauthenticated_error_handler)
    app.add_exception_handler(PermissionDeniedError, permission_denied_error_handler)
    app.add_exception_handler(EntityNotFoundError, entity_not_found_handler)
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(ConflictError, conflict_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(InternalServiceError, internal_service_error_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
