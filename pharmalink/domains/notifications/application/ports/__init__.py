"""
Notifications Application Ports
"""

from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

from pharmalink.domains.notifications.domain.entities import Notification


@runtime_checkable
class INotificationRepository(Protocol):
    """Persistence contract for notifications."""

    async def create(self, notification: Notification) -> Notification: ...

    async def find_by_id(self, notification_id: str) -> Notification | None: ...

    async def find_by_user(self, user_id: str, limit: int = 50) -> list[Notification]:
        """Newest first."""
        ...

    async def mark_read(self, notification_id: str) -> None: ...

    async def mark_all_read(self, user_id: str) -> int:
        """
        Returns:
            Number of notifications that were unread
        """
        ...


@runtime_checkable
class IDeviceTokenRepository(Protocol):
    """Push registration tokens per user."""

    async def register(self, user_id: str, token: str) -> bool:
        """
        Returns:
            True if the token was new for this user
        """
        ...

    async def find_tokens(self, user_id: str) -> list[str]: ...

    async def delete_tokens(self, user_id: str, tokens: list[str]) -> int: ...


@dataclass
class PushResult:
    """Outcome of one multicast push."""

    success_count: int = 0
    failure_count: int = 0
    invalid_tokens: list[str] = field(default_factory=list)


@runtime_checkable
class IPushGateway(Protocol):
    """Push provider."""

    async def send(
        self,
        tokens: list[str],
        title: str,
        body: str,
        data: dict[str, str] | None = None,
    ) -> PushResult:
        """
        Deliver one notification to every token.

        Returns:
            Per-token outcome; `invalid_tokens` are permanently unusable
        """
        ...

    async def close(self) -> None: ...


@runtime_checkable
class INotifier(Protocol):
    """Durable notification plus best-effort push."""

    async def notify(
        self,
        user_id: str,
        title: str,
        message: str,
        type: str,
        related_id: str | None = None,
        data: dict[str, str] | None = None,
    ) -> Any: ...
