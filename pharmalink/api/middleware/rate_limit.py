"""
Per-client rate limiting middleware.
"""

import logging
from collections.abc import Callable
from typing import Any

from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response
from starlette.types import ASGIApp

from pharmalink.api.middleware.logging_middleware import client_ip
from pharmalink.core.infrastructure.rate_limiter import KeyedRateLimiter, RateLimitExceeded

logger = logging.getLogger(__name__)


class RateLimitMiddleware(BaseHTTPMiddleware):
    """
    Sliding window limit per client IP.

    Over-limit requests get 429 `{error}` with a `Retry-After` header and
    never reach a route.
    """

    EXEMPT_PATHS: tuple[str, ...] = ("/health",)

    def __init__(self, app: ASGIApp, limiter: KeyedRateLimiter) -> None:
        super().__init__(app)
        self._limiter = limiter

    async def dispatch(self, request: Request, call_next: Callable[[Request], Any]) -> Response:
        if request.url.path.startswith(self.EXEMPT_PATHS):
            return await call_next(request)

        try:
            self._limiter.check(client_ip(request))
        except RateLimitExceeded as e:
            headers = {"Retry-After": str(int(e.retry_after or 0) + 1)}
            return JSONResponse(
                status_code=status.HTTP_429_TOO_MANY_REQUESTS,
                content={"error": str(e)},
                headers=headers,
            )
        return await call_next(request)
