"""
Notifications API Dependencies
"""

from pharmalink.api.dependencies import Container, DbSession
from pharmalink.domains.notifications.application.use_cases import (
    ListNotificationsUseCase,
    MarkAllNotificationsReadUseCase,
    MarkNotificationReadUseCase,
    RegisterDeviceTokenUseCase,
)


def get_list_notifications_use_case(db: DbSession, container: Container) -> ListNotificationsUseCase:
    return container.create_list_notifications_use_case(db)


def get_mark_notification_read_use_case(db: DbSession, container: Container) -> MarkNotificationReadUseCase:
    return container.create_mark_notification_read_use_case(db)


def get_mark_all_read_use_case(db: DbSession, container: Container) -> MarkAllNotificationsReadUseCase:
    return container.create_mark_all_notifications_read_use_case(db)


def get_register_device_token_use_case(db: DbSession, container: Container) -> RegisterDeviceTokenUseCase:
    return container.create_register_device_token_use_case(db)
