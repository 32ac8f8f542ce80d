"""Access log middleware."""

import logging
import time
import uuid
from collections.abc import Callable
from typing import Any

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

REDACTED = "[REDACTED]"
CREDENTIAL_HEADERS = frozenset({"authorization", "cookie", "proxy-authorization"})
QUIET_PATHS = frozenset({"/health", "/favicon.ico"})


def client_address(request: Request) -> str:
    """First hop of X-Forwarded-For, else the socket peer."""
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.client.host if request.client else "unknown"


def level_for(status_code: int) -> int:
    if status_code >= 500:
        return logging.ERROR
    if status_code >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Write one access record per request and tag the response with its id.

    Request bodies are never read here: user registration, login and
    updates carry plaintext passwords.
    """

    def __init__(self, app: Any, log_headers: bool = False, quiet_paths: frozenset[str] = QUIET_PATHS):
        super().__init__(app)
        self.log_headers = log_headers
        self.quiet_paths = quiet_paths

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if request.url.path in self.quiet_paths:
            return await call_next(request)

        request_id = request.headers.get("x-request-id") or uuid.uuid4().hex
        request.state.request_id = request_id
        started = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception:
            logger.error(
                f"{request.method} {request.url.path} raised",
                extra=self._record(request, request_id, started),
                exc_info=True,
            )
            raise

        record = self._record(request, request_id, started, status_code=response.status_code)
        logger.log(
            level_for(response.status_code),
            f"{request.method} {request.url.path} -> {response.status_code}",
            extra=record,
        )

        response.headers["X-Request-ID"] = request_id
        return response

    def _record(
        self, request: Request, request_id: str, started: float, status_code: int | None = None
    ) -> dict[str, Any]:
        record = {
            "request_id": request_id,
            "method": request.method,
            "path": request.url.path,
            "status_code": status_code,
            "duration_ms": round((time.perf_counter() - started) * 1000, 2),
            "client_ip": client_address(request),
            # Set by the bearer token dependency
            "user_id": getattr(request.state, "user_id", None),
        }
        if self.log_headers:
            record["headers"] = {
                key: REDACTED if key.lower() in CREDENTIAL_HEADERS else value
                for key, value in request.headers.items()
            }
        return record
