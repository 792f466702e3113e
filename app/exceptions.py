# =============================================================================
# app/exceptions.py - Error Taxonomy and Exception Handlers
# =============================================================================
# Every terminal failure of the parse pipeline is a GatewayException.
# Each subclass knows how to render itself as exactly one HTTP response.
# =============================================================================

import logging
from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response

logger = logging.getLogger(__name__)


class GatewayException(Exception):
    """
    Base exception for the feed gateway.

    All custom exceptions inherit from this class. The default rendering
    is a JSON string holding the error description.
    """

    def __init__(
        self,
        message: str,
        code: str = "GATEWAY_ERROR",
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}

    def to_response(self) -> Response:
        """Convert exception to an HTTP response."""
        return JSONResponse(status_code=self.status_code, content=self.message)


# =============================================================================
# Client Errors
# =============================================================================

class AuthError(GatewayException):
    """Raised when the X-Auth-Key credential is missing or wrong."""

    def __init__(self):
        super().__init__(
            message="Invalid request",
            code="AUTH_FAILED",
            status_code=401,
        )

    def to_response(self) -> Response:
        return PlainTextResponse(self.message, status_code=self.status_code)


class ParamsValidationError(GatewayException):
    """Raised when query-string parameters fail validation."""

    def __init__(self, errors: list[dict[str, Any]]):
        super().__init__(
            message="Invalid request parameters",
            code="VALIDATION_ERROR",
            status_code=400,
            details={"errors": errors},
        )
        self.errors = errors

    @property
    def fields(self) -> list[str]:
        """Names of every failing field."""
        return [error["field"] for error in self.errors]

    def to_response(self) -> Response:
        return JSONResponse(
            status_code=self.status_code,
            content={
                "detail": self.message,
                "code": self.code,
                "errors": self.errors,
            },
        )


class UpstreamError(GatewayException):
    """Raised when the feed server answers with a non-success status."""

    def __init__(self, url: str, status: int, status_text: str):
        super().__init__(
            message=status_text,
            code="UPSTREAM_ERROR",
            status_code=400,
            details={"url": url, "upstream_status": status},
        )
        self.upstream_status = status

    def to_response(self) -> Response:
        return PlainTextResponse(self.message, status_code=self.status_code)


# =============================================================================
# Server Errors
# =============================================================================

class TransportError(GatewayException):
    """Raised when the feed server cannot be reached (DNS, connect, TLS)."""

    def __init__(self, url: str, error: str):
        super().__init__(
            message=f"Failed to fetch {url}: {error}",
            code="TRANSPORT_ERROR",
            status_code=500,
            details={"url": url, "error": error},
        )


class FeedParseError(GatewayException):
    """Raised when the response body is not a recognizable feed."""

    def __init__(self, error: str):
        super().__init__(
            message=f"Failed to parse feed: {error}",
            code="FEED_PARSE_ERROR",
            status_code=500,
            details={"error": error},
        )


class InternalError(GatewayException):
    """Wraps any unexpected failure inside the pipeline."""

    def __init__(self, error: Exception):
        super().__init__(
            message=str(error) or type(error).__name__,
            code="INTERNAL_ERROR",
            status_code=500,
            details={"type": type(error).__name__},
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def gateway_exception_handler(
    request: Request,
    exc: GatewayException
) -> Response:
    """
    Convert GatewayException to its HTTP response.

    Client errors are logged as warnings, server errors as errors.
    """
    if exc.status_code >= 500:
        logger.error(f"{exc.code} [{request.method} {request.url.path}]: {exc.message}")
    else:
        logger.warning(f"{exc.code} [{request.method} {request.url.path}]: {exc.message}")
    return exc.to_response()


async def unhandled_exception_handler(
    request: Request,
    exc: Exception
) -> Response:
    """Last-resort handler for exceptions that escaped the pipeline."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(status_code=500, content=str(exc))
