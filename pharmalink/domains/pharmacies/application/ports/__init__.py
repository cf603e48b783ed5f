"""
Pharmacy Repository Port
"""

from datetime import datetime
from typing import Any, Protocol, runtime_checkable

from pharmalink.domains.pharmacies.domain.entities import Pharmacy
from pharmalink.domains.pharmacies.domain.value_objects import PharmacyStatus


@runtime_checkable
class IPharmacyRepository(Protocol):
    """
    Pharmacy repository interface.

    Defines the contract for pharmacy data access operations.
    """

    async def create(self, pharmacy: Pharmacy) -> Pharmacy: ...

    async def find_by_id(self, pharmacy_id: str) -> Pharmacy | None:
        """
        Find pharmacy by ID.

        Returns:
            Pharmacy if found, None otherwise
        """
        ...

    async def find_by_status(self, status: PharmacyStatus) -> list[Pharmacy]:
        """All pharmacies in a status (unpaginated; nearby search scans this)."""
        ...

    async def find_all(self, status: PharmacyStatus | None = None, limit: int = 20) -> list[Pharmacy]:
        """Newest first, optionally filtered by status."""
        ...

    async def save(self, pharmacy: Pharmacy) -> Pharmacy:
        """Persist status and verification changes of an existing pharmacy."""
        ...

    async def update_fields(self, pharmacy_id: str, fields: dict[str, Any]) -> Pharmacy | None:
        """
        Apply a partial update of editable columns.

        Returns:
            Updated pharmacy, None if it does not exist
        """
        ...

    async def count_by_status(self, since: datetime | None = None) -> dict[PharmacyStatus, int]:
        """
        Count pharmacies per status.

        Args:
            since: Only pharmacies created at or after this time
        """
        ...

    async def find_recent(self, limit: int = 5) -> list[Pharmacy]:
        """Most recently updated first."""
        ...
