"""
Exception handlers.

Translates application exceptions into HTTP responses. Services only raise;
this is the single place that knows about status codes.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from shared.config import get_settings
from shared.exceptions import (
    AppError,
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    ExternalServiceError,
    NotFoundError,
    ValidationError,
)

from .models.errors import ErrorResponse

logger = logging.getLogger(__name__)

# Checked in order; first match wins
STATUS_BY_ERROR: list[tuple[type[AppError], int]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (ConflictError, status.HTTP_400_BAD_REQUEST),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (AuthorizationError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ExternalServiceError, status.HTTP_500_INTERNAL_SERVER_ERROR),
]


def status_for(exc: AppError) -> int:
    for error_type, status_code in STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_response(
    status_code: int,
    message: str,
    diagnostic: Optional[str] = None,
    headers: Optional[dict[str, str]] = None,
) -> JSONResponse:
    """Build an error body, dropping diagnostics in production."""
    body = ErrorResponse(message=message)
    if diagnostic and get_settings().expose_error_details:
        body.error = diagnostic
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(exclude_none=True),
        headers=headers,
    )


async def handle_app_error(request: Request, exc: AppError) -> JSONResponse:
    status_code = status_for(exc)

    if status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        message = "Internal server error"
        diagnostic = exc.details.get("original_error") or exc.message
    else:
        message = exc.message
        diagnostic = exc.code

    headers = {"WWW-Authenticate": "Bearer"} if status_code == 401 else None
    return error_response(status_code, message, diagnostic, headers)


async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Missing or malformed request fields are a 400, not FastAPI's 422."""
    fields = [".".join(str(p) for p in err["loc"] if p != "body") for err in exc.errors()]
    message = "Invalid request"
    if fields:
        message = f"Invalid or missing fields: {', '.join(f for f in fields if f)}"
    return error_response(status.HTTP_400_BAD_REQUEST, message, str(exc.errors()))


async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Internal server error",
        f"{type(exc).__name__}: {exc}",
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, handle_app_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(Exception, handle_unexpected)
