"""
Module 06 - API Error Handling

Maps API and core failures onto the {data, status, error} envelope:
- NotFoundError -> 404 "user not in whitelist"
- request-side problems (missing/invalid parameter, bad hex, wrong
  hash width, identifier rejected by normalization) -> 400
- everything else -> 500
"""

import logging
from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from api.models.responses import ErrorResponse
from core.schemas.errors import (
    InvalidIdentifierError,
    MalformedProofError,
    NotFoundError,
    WhitelistException,
)


logger = logging.getLogger(__name__)

NOT_WHITELISTED_MESSAGE = "user not in whitelist"


class APIError(Exception):
    """Base API error with structured response."""

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int = 400,
        details: dict[str, Any] | None = None,
    ):
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)

    def to_response(self) -> ErrorResponse:
        return ErrorResponse(
            status=self.status_code,
            error=self.message,
            code=self.code,
            details=self.details,
        )


class InvalidRequestError(APIError):
    """Invalid request parameters."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(
            code="INVALID_REQUEST",
            message=message,
            status_code=400,
            details=details,
        )


class NotWhitelistedError(APIError):
    """Identifier is not a member of the whitelist."""

    def __init__(self, message: str = NOT_WHITELISTED_MESSAGE):
        super().__init__(
            code="NOT_FOUND",
            message=message,
            status_code=404,
        )


class ConfigurationError(APIError):
    """Server configuration is invalid."""

    def __init__(self, message: str):
        super().__init__(
            code="CONFIG_ERROR",
            message=message,
            status_code=500,
        )


def from_whitelist_exception(exc: WhitelistException) -> APIError:
    """Translate a core exception into the matching APIError."""
    if isinstance(exc, NotFoundError):
        return NotWhitelistedError()
    if isinstance(exc, (InvalidIdentifierError, MalformedProofError)):
        return APIError(
            code=exc.code,
            message=exc.message,
            status_code=400,
            details=exc.details,
        )
    return APIError(
        code=exc.code,
        message="Internal server error",
        status_code=500,
    )


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    """Handle APIError exceptions."""
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_response().model_dump(),
    )


async def whitelist_error_handler(request: Request, exc: WhitelistException) -> JSONResponse:
    """Handle core exceptions that escaped a route."""
    api_error = from_whitelist_exception(exc)
    if api_error.status_code >= 500:
        logger.error(f"{request.url.path} failed: {exc!r}")
    return await api_error_handler(request, api_error)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed query parameters or body -> 400."""
    errors = [
        {"loc": ".".join(str(p) for p in err.get("loc", ())), "msg": err.get("msg", "")}
        for err in exc.errors()
    ]
    return await api_error_handler(
        request,
        InvalidRequestError("Invalid request", details={"errors": errors}),
    )


async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.exception(f"Unhandled error on {request.url.path}")
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(
            status=500,
            error="An unexpected error occurred",
            code="INTERNAL_ERROR",
            details={"type": type(exc).__name__},
        ).model_dump(),
    )
