"""
Base Container - Shared Singletons.

Single Responsibility: hold the process-wide resources every domain shares:
settings, the realtime hub (broadcast publisher) and the push gateway.
"""

import logging

from pharmalink.config.settings import Settings, get_settings
from pharmalink.domains.notifications.application.ports import IPushGateway
from pharmalink.domains.notifications.infrastructure.push import FCMPushGateway, NoopPushGateway
from pharmalink.domains.requests.application.ports import IBroadcastPublisher
from pharmalink.realtime import RealtimeHub, get_realtime_hub

logger = logging.getLogger(__name__)


class BaseContainer:
    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()

        self._push_gateway: IPushGateway | None = None

        logger.info("BaseContainer initialized")

    def get_realtime_hub(self) -> RealtimeHub:
        return get_realtime_hub()

    def get_publisher(self) -> IBroadcastPublisher:
        """Broadcast publisher backed by the realtime dispatcher (singleton)."""
        return self.get_realtime_hub().dispatcher

    def get_push_gateway(self) -> IPushGateway:
        """
        Get push gateway (singleton).

        FCM when a project id and access token are configured, otherwise a
        gateway that drops every push.
        """
        if self._push_gateway is None:
            if self.settings.push_enabled:
                logger.info(f"Creating FCMPushGateway for project {self.settings.FCM_PROJECT_ID}")
                self._push_gateway = FCMPushGateway(
                    project_id=self.settings.FCM_PROJECT_ID or "",
                    access_token=self.settings.FCM_ACCESS_TOKEN or "",
                    base_url=self.settings.FCM_BASE_URL,
                    timeout=self.settings.PUSH_TIMEOUT_SECONDS,
                )
            else:
                logger.warning("FCM credentials not configured - push notifications disabled")
                self._push_gateway = NoopPushGateway()
        return self._push_gateway

    async def shutdown(self) -> None:
        if self._push_gateway is not None:
            await self._push_gateway.close()
            self._push_gateway = None
