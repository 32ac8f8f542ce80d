"""Exception handlers that render every failure as ``{message, error_code}``."""

import logging
from http import HTTPStatus
from typing import Any

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from blog_api.schemas.common import ErrorResponse
from blog_api.utils.exceptions import BlogAPIError

logger = logging.getLogger(__name__)

# Routing errors raised by Starlette itself, e.g. unknown path or method
ROUTING_ERROR_CODES = {
    status.HTTP_400_BAD_REQUEST: "INVALID_INPUT",
    status.HTTP_401_UNAUTHORIZED: "UNAUTHORIZED",
    status.HTTP_403_FORBIDDEN: "FORBIDDEN",
    status.HTTP_404_NOT_FOUND: "NOT_FOUND",
    status.HTTP_405_METHOD_NOT_ALLOWED: "METHOD_NOT_ALLOWED",
}


def error_response(status_code: int, message: str, error_code: str, headers=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(message=message, error_code=error_code).model_dump(),
        headers=headers,
    )


class ExceptionHandlers:
    """Centralized exception handlers for the application."""

    @staticmethod
    async def blog_api_exception_handler(request: Request, exc: BlogAPIError) -> JSONResponse:
        """Render any error from the taxonomy."""
        log = logger.error if exc.status_code >= 500 else logger.warning
        log(
            f"{type(exc).__name__} on {request.method} {request.url.path}: {exc.message}",
            extra={"error_code": exc.error_code, "details": exc.details},
        )
        return error_response(exc.status_code, exc.message, exc.error_code)

    @staticmethod
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """A body that does not parse into the request schema is bad input."""
        logger.warning(
            f"Malformed body on {request.method} {request.url.path}",
            extra={"validation_errors": exc.errors()},
        )
        return error_response(status.HTTP_400_BAD_REQUEST, "Invalid request body", "INVALID_INPUT")

    @staticmethod
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        error_code = ROUTING_ERROR_CODES.get(exc.status_code, HTTPStatus(exc.status_code).name)
        return error_response(
            exc.status_code, str(exc.detail), error_code, headers=getattr(exc, "headers", None)
        )

    @staticmethod
    async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Last resort. The caller never sees the exception text."""
        logger.error(
            f"Unhandled {type(exc).__name__} on {request.method} {request.url.path}",
            exc_info=exc,
        )
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error", "INTERNAL_ERROR"
        )


def register_exception_handlers(app: Any) -> None:
    """Register all exception handlers with the FastAPI app."""
    handlers = ExceptionHandlers()

    app.add_exception_handler(BlogAPIError, handlers.blog_api_exception_handler)
    app.add_exception_handler(RequestValidationError, handlers.validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, handlers.http_exception_handler)
    app.add_exception_handler(Exception, handlers.general_exception_handler)
