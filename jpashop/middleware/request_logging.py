"""Request logging middleware: one log line per request with status and timing."""


import logging
import time
from collections.abc import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger("jpashop.request")

# Methods that mutate state
_WRITE_METHODS = {"POST", "PUT", "PATCH", "DELETE"}

class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs every request; writes at INFO, reads at DEBUG."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start = time.monotonic()
        response = await call_next(request)
        duration_ms = round((time.monotonic() - start) * 1000)

        level = logging.INFO if request.method in _WRITE_METHODS else logging.DEBUG
        logger.log(
            level,
            "%s %s -> %s (%dms)",
            request.method, request.url.path, response.status_code, duration_ms,
        )
        return response
