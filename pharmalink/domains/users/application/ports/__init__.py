"""
Users Application Ports
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pharmalink.domains.users.domain.entities import Identity, User


@runtime_checkable
class IUserRepository(Protocol):
    """Persistence contract for users."""

    async def find_by_id(self, user_id: str) -> User | None: ...

    async def get_or_create(self, identity: Identity) -> User:
        """Return the stored user for this identity, creating it on first sight."""
        ...

    async def save(self, user: User) -> User:
        """Insert or update the user record."""
        ...

    async def update_fields(self, user_id: str, fields: dict[str, Any]) -> User | None:
        """Apply a partial update; None if the user does not exist."""
        ...
