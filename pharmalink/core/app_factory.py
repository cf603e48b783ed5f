"""
FastAPI application assembly.

`create_app` is used by pharmalink.main and by the API tests, which pass their
own Settings and then override use-case dependencies.
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pharmalink.api.exception_handlers import register_exception_handlers
from pharmalink.api.middleware import RateLimitMiddleware, RequestLoggingMiddleware
from pharmalink.api.router import api_router
from pharmalink.api.routes import realtime
from pharmalink.config.settings import Settings, get_settings
from pharmalink.core.infrastructure.rate_limiter import KeyedRateLimiter
from pharmalink.core.lifecycle import lifespan
from pharmalink.realtime import get_realtime_hub

logger = logging.getLogger(__name__)


class AppFactory:
    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings or get_settings()

    def create_app(self) -> FastAPI:
        s = self._settings
        docs_prefix = s.API_PREFIX if s.DEBUG else None
        app = FastAPI(
            title=s.PROJECT_NAME,
            description=s.PROJECT_DESCRIPTION,
            version=s.VERSION,
            docs_url=f"{docs_prefix}/docs" if docs_prefix is not None else None,
            redoc_url=f"{docs_prefix}/redoc" if docs_prefix is not None else None,
            lifespan=lifespan,
        )

        self._add_middleware(app)
        register_exception_handlers(app)
        self._add_routes(app)

        logger.info(f"{s.PROJECT_NAME} {s.VERSION} assembled for {s.ENVIRONMENT}")
        return app

    def _add_middleware(self, app: FastAPI) -> None:
        """
        Starlette wraps in reverse order of registration, so a request meets
        CORS, then access logging, then the rate limiter. Rejected (429)
        requests are still logged with their correlation id.
        """
        limiter = KeyedRateLimiter(max_requests=self._settings.RATE_LIMIT_PER_MINUTE, window_seconds=60.0)
        app.add_middleware(RateLimitMiddleware, limiter=limiter)
        app.add_middleware(RequestLoggingMiddleware)
        app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"] if self._settings.DEBUG else self._settings.ALLOWED_ORIGINS,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    def _add_routes(self, app: FastAPI) -> None:
        # Socket endpoint sits at /ws, outside the REST prefix
        app.include_router(realtime.router)
        app.include_router(api_router, prefix=self._settings.API_PREFIX)

        environment = self._settings.ENVIRONMENT

        @app.get("/health", tags=["health"])
        async def health_check() -> dict:
            """Liveness plus live socket counts."""
            return {"status": "ok", "environment": environment, "realtime": get_realtime_hub().stats()}


def create_app(settings: Settings | None = None) -> FastAPI:
    return AppFactory(settings).create_app()
