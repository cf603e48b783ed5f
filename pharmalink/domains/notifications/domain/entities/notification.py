"""
Notification Entity
"""

from dataclasses import dataclass
from typing import Any

from pharmalink.core.domain import Entity, StatusEnum, generate_id, isoformat, utc_now


class NotificationType(StatusEnum):
    REQUEST = "request"
    CHAT = "chat"
    STATUS = "status"
    SYSTEM = "system"


@dataclass(eq=False)
class Notification(Entity):
    """Durable inbox entry for one user."""

    user_id: str = ""
    title: str = ""
    message: str = ""
    type: NotificationType = NotificationType.SYSTEM
    related_id: str | None = None
    is_read: bool = False

    @classmethod
    def create(
        cls,
        user_id: str,
        title: str,
        message: str,
        type: NotificationType | str,
        related_id: str | None = None,
    ) -> "Notification":
        now = utc_now()
        return cls(
            id=generate_id(),
            user_id=user_id,
            title=title,
            message=message,
            type=type if isinstance(type, NotificationType) else NotificationType.from_string(type),
            related_id=related_id,
            created_at=now,
            updated_at=now,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "userId": self.user_id,
            "title": self.title,
            "message": self.message,
            "type": self.type.value,
            "relatedId": self.related_id,
            "isRead": self.is_read,
            "createdAt": isoformat(self.created_at),
        }
