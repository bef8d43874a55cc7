"""
Centralized error handlers for FastAPI.

Maps service errors and request failures to HTTP responses.
No stack traces or internal details are exposed to clients.
Every error response has the body ``{"status": <int>, "error": <str>}``.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from inventory_service.application.inventory.errors import (
    ServiceError,
    ServiceErrorKind,
)
from inventory_service.shared.errors.exceptions import (
    MissingCredentialsError,
    WrongCredentialsError,
)
from inventory_service.shared.security.tokens import InvalidTokenError

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_401 = 401
HTTP_404 = 404
HTTP_409 = 409
HTTP_429 = 429
HTTP_500 = 500

SERVICE_ERROR_STATUS: dict[ServiceErrorKind, int] = {
    ServiceErrorKind.NOT_FOUND: HTTP_404,
    ServiceErrorKind.INVALID_IDENTIFIER: HTTP_400,
    ServiceErrorKind.UNIQUE_CONSTRAINT_VIOLATION: HTTP_409,
    ServiceErrorKind.INPUT_VALIDATION_FAILED: HTTP_400,
    ServiceErrorKind.UNEXPECTED_FAILURE: HTTP_500,
}

INTERNAL_ERROR = "Internal server error"


def error_response(status_code: int, error: str) -> JSONResponse:
    """Build a consistent JSON error response."""
    return JSONResponse(
        status_code=status_code, content={"status": status_code, "error": error}
    )


def _describe_validation(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        parts.append(f"{location}: {error.get('msg', 'invalid')}")
    return "; ".join(parts) or "Invalid request"


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(ServiceError)
    async def handle_service_error(_request: Request, exc: ServiceError) -> JSONResponse:
        """Translate a service failure through the fixed status table."""
        status_code = SERVICE_ERROR_STATUS[exc.kind]
        if status_code >= HTTP_500:
            logger.error("Service failure (%s): %s", exc.kind.name, exc.message)
            return error_response(status_code, INTERNAL_ERROR)
        logger.warning("Service error (%s): %s", exc.kind.name, exc.message)
        return error_response(status_code, exc.message)

    @app.exception_handler(InvalidTokenError)
    async def handle_invalid_token(
        _request: Request, exc: InvalidTokenError
    ) -> JSONResponse:
        """Handle missing, malformed, forged or expired bearer tokens."""
        logger.warning("Invalid token: %s", exc.reason)
        return error_response(HTTP_400, "Invalid token")

    @app.exception_handler(WrongCredentialsError)
    async def handle_wrong_credentials(
        _request: Request, exc: WrongCredentialsError
    ) -> JSONResponse:
        logger.warning("Wrong credentials for client %s", exc.client_id)
        return error_response(HTTP_401, "Wrong credentials")

    @app.exception_handler(MissingCredentialsError)
    async def handle_missing_credentials(
        _request: Request, exc: MissingCredentialsError
    ) -> JSONResponse:
        logger.warning("Missing credentials")
        return error_response(HTTP_400, "Missing credentials")

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Malformed bodies and query parameters count as input validation."""
        message = _describe_validation(exc)
        logger.warning("Request validation failed: %s", message)
        return error_response(HTTP_400, message)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(
        _request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        logger.warning("HTTP %d: %s", exc.status_code, exc.detail)
        return error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(RateLimitExceeded)
    async def handle_rate_limit(
        _request: Request, exc: RateLimitExceeded
    ) -> JSONResponse:
        logger.warning("Rate limit exceeded: %s", exc.detail)
        return error_response(HTTP_429, "Rate limit exceeded")

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return error_response(HTTP_500, INTERNAL_ERROR)
