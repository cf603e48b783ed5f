"""
Notifications Infrastructure Repositories
"""

from pharmalink.domains.notifications.infrastructure.repositories.notification_repository import (
    SQLAlchemyDeviceTokenRepository,
    SQLAlchemyNotificationRepository,
)

__all__ = ["SQLAlchemyDeviceTokenRepository", "SQLAlchemyNotificationRepository"]
