"""
Access logging with a per-request correlation id.

The id comes from the caller's `X-Correlation-ID` header or is generated, is
echoed on the response and is attached to every log record emitted while the
request is handled (see CorrelationIdFilter).
"""

import logging
import time
import uuid
from collections.abc import Awaitable, Callable

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from pharmalink.core.shared.logger import correlation_id_var

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"
QUIET_PATHS = frozenset({"/health"})


def client_ip(request: Request) -> str:
    """Client address, preferring the first hop of X-Forwarded-For."""
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.client.host if request.client else "unknown"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
        correlation_id = request.headers.get(CORRELATION_HEADER) or uuid.uuid4().hex[:12]
        request.state.correlation_id = correlation_id
        token = correlation_id_var.set(correlation_id)
        try:
            if request.url.path in QUIET_PATHS:
                response = await call_next(request)
            else:
                response = await self._timed(request, call_next)
        finally:
            correlation_id_var.reset(token)

        response.headers[CORRELATION_HEADER] = correlation_id
        return response

    async def _timed(self, request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
        route = f"{request.method} {request.url.path}"
        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.exception(f"{route} failed after {elapsed_ms:.1f}ms (client {client_ip(request)})")
            raise

        elapsed_ms = (time.perf_counter() - started) * 1000
        level = logging.WARNING if response.status_code >= 400 else logging.INFO
        logger.log(level, f"{route} -> {response.status_code} in {elapsed_ms:.1f}ms (client {client_ip(request)})")
        response.headers["X-Response-Time-Ms"] = f"{elapsed_ms:.1f}"
        return response
