"""
Startup and shutdown hooks run through the FastAPI lifespan.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from pharmalink.config.settings import Settings, get_settings
from pharmalink.core.container import get_container
from pharmalink.database.async_db import dispose_engine

logger = logging.getLogger(__name__)


def configuration_warnings(settings: Settings) -> list[str]:
    """Misconfigurations that do not stop the service but should be visible in its logs."""
    warnings = []
    if not settings.push_enabled:
        warnings.append("FCM_PROJECT_ID / FCM_ACCESS_TOKEN not set; push notifications disabled")
    if not settings.is_development and settings.IDENTITY_JWT_SECRET.startswith("dev-only"):
        warnings.append("IDENTITY_JWT_SECRET is the development default outside development")
    return warnings


class LifecycleManager:
    """
    Builds the long-lived singletons (push gateway, realtime hub) before the
    first request and releases the push HTTP client and the database pool on
    shutdown. Open sockets are closed by the ASGI server.
    """

    def __init__(self) -> None:
        self.started = False

    async def startup(self) -> None:
        if self.started:
            return
        for warning in configuration_warnings(get_settings()):
            logger.warning(warning)

        container = get_container()
        container.get_push_gateway()
        container.get_realtime_hub()
        self.started = True
        logger.info("PharmaLink started")

    async def shutdown(self) -> None:
        if not self.started:
            return
        try:
            await get_container().shutdown()
        except Exception as e:
            logger.error(f"Error releasing container resources: {e}")
        await dispose_engine()
        self.started = False
        logger.info("PharmaLink stopped")


_lifecycle_manager = LifecycleManager()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    await _lifecycle_manager.startup()
    try:
        yield
    finally:
        await _lifecycle_manager.shutdown()
