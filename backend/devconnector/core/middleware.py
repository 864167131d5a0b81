"""
DevConnector - HTTP Middleware

Request correlation and timing, plus a fixed set of security headers.
"""

import time
from typing import Callable, FrozenSet

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from devconnector.core.logging_config import (
    logger,
    set_request_id,
    set_user_id,
    generate_request_id,
)

REQUEST_ID_HEADER = "X-Request-ID"

# Probes and API docs are not logged per request
QUIET_PATHS: FrozenSet[str] = frozenset({
    "/",
    "/health",
    "/docs",
    "/redoc",
    "/openapi.json",
})

SLOW_REQUEST_MS = 1000

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
}


def should_skip_logging(path: str) -> bool:
    return path in QUIET_PATHS


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Tag each request with an id (the caller's ``X-Request-ID`` when sent),
    log its outcome and timing, and echo the id and duration back in the
    response headers.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or generate_request_id()
        set_request_id(request_id)

        method, path = request.method, request.url.path
        quiet = should_skip_logging(path)
        started = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception as exc:
            logger.error(
                f"{method} {path} raised {type(exc).__name__}",
                exc_info=True,
                extra={"event_type": "http_request_error", "http_method": method, "http_path": path},
            )
            raise
        else:
            elapsed_ms = (time.perf_counter() - started) * 1000
            response.headers[REQUEST_ID_HEADER] = request_id
            response.headers["X-Response-Time"] = f"{elapsed_ms:.2f}ms"

            if not quiet:
                client_ip = request.client.host if request.client else "unknown"
                logger.log_request(method, path, response.status_code, elapsed_ms, client_ip=client_ip)
                if elapsed_ms > SLOW_REQUEST_MS:
                    logger.warning(
                        f"Slow request: {method} {path} took {elapsed_ms:.0f}ms",
                        extra={"event_type": "slow_request", "duration_ms": elapsed_ms},
                    )
            return response
        finally:
            set_request_id("")
            set_user_id("")


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        response = await call_next(request)
        response.headers.update(SECURITY_HEADERS)
        return response


__all__ = [
    "RequestLoggingMiddleware",
    "SecurityHeadersMiddleware",
    "should_skip_logging",
    "QUIET_PATHS",
]
