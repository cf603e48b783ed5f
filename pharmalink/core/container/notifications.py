"""
Notifications Domain Container.
"""

from typing import TYPE_CHECKING

from pharmalink.domains.notifications.application.fanout import NotificationFanout
from pharmalink.domains.notifications.application.use_cases import (
    ListNotificationsUseCase,
    MarkAllNotificationsReadUseCase,
    MarkNotificationReadUseCase,
    RegisterDeviceTokenUseCase,
)
from pharmalink.domains.notifications.infrastructure.repositories import (
    SQLAlchemyDeviceTokenRepository,
    SQLAlchemyNotificationRepository,
)

if TYPE_CHECKING:
    from pharmalink.core.container.base import BaseContainer


class NotificationsContainer:
    def __init__(self, base: "BaseContainer"):
        self._base = base

    # ==================== REPOSITORIES ====================

    def create_notification_repository(self, db) -> SQLAlchemyNotificationRepository:
        return SQLAlchemyNotificationRepository(session=db)

    def create_device_token_repository(self, db) -> SQLAlchemyDeviceTokenRepository:
        return SQLAlchemyDeviceTokenRepository(session=db)

    # ==================== SERVICES ====================

    def create_notifier(self, db) -> NotificationFanout:
        """Notifier bound to the request session and the shared push gateway."""
        return NotificationFanout(
            notification_repository=self.create_notification_repository(db),
            token_repository=self.create_device_token_repository(db),
            push_gateway=self._base.get_push_gateway(),
        )

    # ==================== USE CASES ====================

    def create_list_notifications_use_case(self, db) -> ListNotificationsUseCase:
        return ListNotificationsUseCase(notification_repository=self.create_notification_repository(db))

    def create_mark_notification_read_use_case(self, db) -> MarkNotificationReadUseCase:
        return MarkNotificationReadUseCase(notification_repository=self.create_notification_repository(db))

    def create_mark_all_notifications_read_use_case(self, db) -> MarkAllNotificationsReadUseCase:
        return MarkAllNotificationsReadUseCase(notification_repository=self.create_notification_repository(db))

    def create_register_device_token_use_case(self, db) -> RegisterDeviceTokenUseCase:
        return RegisterDeviceTokenUseCase(token_repository=self.create_device_token_repository(db))
