"""
Error taxonomy and the JSON envelope for failures.

Every failure a request can run into is an ``ApiError`` subclass that
knows its HTTP status and the human readable message sent to clients.
Services and dependencies raise them; the handlers registered by
``register_exception_handlers`` turn them (and the framework's own
``HTTPException``/validation errors) into ``{"success": false,
"error": ...}`` responses, so no route ever answers with HTML or with
FastAPI's default ``{"detail": ...}`` body.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Base class for request‑local errors reported to the client."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    message: str = "Bad request"

    def __init__(self, message: Optional[str] = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class MissingFields(ApiError):
    message = "Missing required fields"


class InvalidEmail(ApiError):
    message = "Valid email format is required"


class InvalidAmount(ApiError):
    message = "Valid amount is required"


class MissingRecipient(ApiError):
    message = "Recipient ID is required for transfers"


class InvalidIdentifier(ApiError):
    message = "Identifiers must be integers"


class InvalidCredentials(ApiError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Invalid credentials"


class MissingToken(ApiError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Access token required"


class InvalidOrExpiredToken(ApiError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Invalid or expired token"


class TokenExpired(ApiError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Token expired"


class InsufficientPermissions(ApiError):
    status_code = status.HTTP_403_FORBIDDEN
    message = "Insufficient permissions"


class AccessDenied(ApiError):
    status_code = status.HTTP_403_FORBIDDEN
    message = "Access denied: Can only view your own transactions"


class NotFound(ApiError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Not found"


def error_response(message: str, status_code: int) -> JSONResponse:
    """Build a ``{success: false, error}`` response."""
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    logger.info("%s %s -> %d %s", request.method, request.url.path, exc.status_code, exc.message)
    return error_response(exc.message, exc.status_code)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(str(exc.detail), exc.status_code)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Body fields are checked by the validation layer; this only fires
    # for bodies that are not a JSON object at all.
    logger.info("%s %s -> rejected body: %s", request.method, request.url.path, exc.errors())
    return error_response("Invalid request body", status.HTTP_400_BAD_REQUEST)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the envelope‑producing handlers to ``app``."""
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
