"""
Notifications Application Use Cases
"""

from pharmalink.domains.notifications.application.use_cases.manage_notifications import (
    ListNotificationsUseCase,
    MarkAllNotificationsReadUseCase,
    MarkNotificationReadUseCase,
    RegisterDeviceTokenUseCase,
)

__all__ = [
    "ListNotificationsUseCase",
    "MarkAllNotificationsReadUseCase",
    "MarkNotificationReadUseCase",
    "RegisterDeviceTokenUseCase",
]
