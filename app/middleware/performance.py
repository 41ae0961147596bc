"""Request timing middleware.

Logs every request with its duration and status; requests at or above the
slow threshold are logged as warnings, failures as errors with the exception.
Health checks and docs are not logged.
Uses raw ASGI (no BaseHTTPMiddleware) for production-safe streaming and background tasks.
"""

import logging
import time
from typing import Callable

from app.core.constants import HEALTH_PATHS

logger = logging.getLogger(__name__)

EXCLUDED_PATH_PREFIXES = (
    *HEALTH_PATHS,
    "/docs",
    "/redoc",
    "/openapi.json",
    "/favicon.ico",
)


def is_excluded_path(path: str) -> bool:
    path = path.lower()
    return any(path == p or path.startswith(p + "/") for p in EXCLUDED_PATH_PREFIXES)


def PerformanceMiddleware(
    app: Callable,
    slow_request_threshold_ms: int = 1000,
    log_normal_requests: bool = True,
) -> Callable:
    """Time each HTTP request and log it by outcome. Raw ASGI.

    Runs inside CorrelationIDMiddleware so scope state already carries the
    correlation id.
    """

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http" or is_excluded_path(scope.get("path", "")):
            await app(scope, receive, send)
            return

        method = scope.get("method", "")
        path = scope.get("path", "")
        query = scope.get("query_string", b"").decode("latin-1")
        target = f"{path}?{query}" if query else path
        correlation_id = scope.get("state", {}).get("correlation_id", "-")
        status_code = 500
        response_size = 0

        async def send_wrapper(message: dict) -> None:
            nonlocal status_code, response_size
            if message["type"] == "http.response.start":
                status_code = message["status"]
            elif message["type"] == "http.response.body":
                response_size += len(message.get("body", b""))
            await send(message)

        start = time.perf_counter()
        try:
            await app(scope, receive, send_wrapper)
        except Exception as e:
            elapsed_ms = int((time.perf_counter() - start) * 1000)
            logger.error(
                "REQUEST FAILED [%s]: %s %s failed after %dms with %s - %s",
                correlation_id,
                method,
                target,
                elapsed_ms,
                type(e).__name__,
                e,
            )
            raise

        elapsed_ms = int((time.perf_counter() - start) * 1000)
        if elapsed_ms >= slow_request_threshold_ms:
            logger.warning(
                "SLOW REQUEST [%s]: %s %s completed in %dms with status %d, "
                "size: %d bytes (threshold: %dms)",
                correlation_id,
                method,
                target,
                elapsed_ms,
                status_code,
                response_size,
                slow_request_threshold_ms,
            )
        elif log_normal_requests:
            logger.info(
                "Request [%s]: %s %s completed in %dms with status %d",
                correlation_id,
                method,
                path,
                elapsed_ms,
                status_code,
            )

    return asgi_app
