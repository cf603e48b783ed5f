"""
Notification Inbox Use Cases
"""

import logging

from pharmalink.core.domain import AuthorizationException, EntityNotFoundException, ValidationException
from pharmalink.domains.notifications.application.ports import IDeviceTokenRepository, INotificationRepository
from pharmalink.domains.notifications.domain.entities import Notification
from pharmalink.domains.users.domain.entities import Identity

logger = logging.getLogger(__name__)


class ListNotificationsUseCase:
    def __init__(self, notification_repository: INotificationRepository, limit: int = 50):
        self.notification_repo = notification_repository
        self.limit = limit

    async def execute(self, identity: Identity) -> list[Notification]:
        return await self.notification_repo.find_by_user(identity.user_id, limit=self.limit)


class MarkNotificationReadUseCase:
    """Mark one of the caller's own notifications as read."""

    def __init__(self, notification_repository: INotificationRepository):
        self.notification_repo = notification_repository

    async def execute(self, identity: Identity, notification_id: str) -> None:
        notification = await self.notification_repo.find_by_id(notification_id)
        if not notification:
            raise EntityNotFoundException("Notification", notification_id)
        if notification.user_id != identity.user_id:
            raise AuthorizationException(
                "mark_read", resource=f"notification:{notification_id}", user_id=identity.user_id
            )
        if not notification.is_read:
            await self.notification_repo.mark_read(notification_id)


class MarkAllNotificationsReadUseCase:
    def __init__(self, notification_repository: INotificationRepository):
        self.notification_repo = notification_repository

    async def execute(self, identity: Identity) -> int:
        updated = await self.notification_repo.mark_all_read(identity.user_id)
        logger.debug(f"Marked {updated} notifications read for {identity.user_id}")
        return updated


class RegisterDeviceTokenUseCase:
    def __init__(self, token_repository: IDeviceTokenRepository):
        self.token_repo = token_repository

    async def execute(self, identity: Identity, token: str) -> bool:
        """
        Returns:
            True if the token was not yet registered for this user
        """
        token = (token or "").strip()
        if not token:
            raise ValidationException("Device token required", field="token")

        added = await self.token_repo.register(identity.user_id, token)
        if added:
            logger.info(f"Registered device token for {identity.user_id}")
        return added
