"""
Notification Fanout

Records a notification and pushes it to every device of the recipient.
"""

import logging

from pharmalink.domains.notifications.application.ports import (
    IDeviceTokenRepository,
    INotificationRepository,
    INotifier,
    IPushGateway,
    PushResult,
)
from pharmalink.domains.notifications.domain.entities import Notification, NotificationType

logger = logging.getLogger(__name__)


class NotificationFanout(INotifier):
    """
    Durable write, then best-effort push.

    The notification record is the source of truth; push failures are logged
    and never raised. Tokens the provider reports as permanently invalid are
    deleted.
    """

    def __init__(
        self,
        notification_repository: INotificationRepository,
        token_repository: IDeviceTokenRepository,
        push_gateway: IPushGateway,
    ):
        self.notification_repo = notification_repository
        self.token_repo = token_repository
        self.push_gateway = push_gateway

    async def notify(
        self,
        user_id: str,
        title: str,
        message: str,
        type: NotificationType | str,
        related_id: str | None = None,
        data: dict[str, str] | None = None,
    ) -> Notification:
        notification = await self.notification_repo.create(
            Notification.create(user_id, title, message, type, related_id)
        )
        await self._push(notification, data)
        return notification

    async def _push(self, notification: Notification, data: dict[str, str] | None) -> PushResult | None:
        try:
            tokens = await self.token_repo.find_tokens(notification.user_id)
            if not tokens:
                return None

            payload = {"type": notification.type.value, "notificationId": notification.id or ""}
            if notification.related_id:
                payload["relatedId"] = notification.related_id
            payload.update(data or {})

            result = await self.push_gateway.send(tokens, notification.title, notification.message, payload)
            logger.debug(
                f"Push to {notification.user_id}: {result.success_count} sent, {result.failure_count} failed"
            )

            if result.invalid_tokens:
                removed = await self.token_repo.delete_tokens(notification.user_id, result.invalid_tokens)
                logger.info(f"Removed {removed} invalid device tokens for {notification.user_id}")
            return result
        except Exception as e:
            logger.error(f"Push delivery for notification {notification.id} failed (non-fatal): {e}")
            return None
