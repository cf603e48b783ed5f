"""
Notifications Domain Entities
"""

from pharmalink.domains.notifications.domain.entities.notification import Notification, NotificationType

__all__ = ["Notification", "NotificationType"]
