"""
Medication Request Repository Port

Interface for medication request data access.
"""

from datetime import datetime
from typing import Protocol, runtime_checkable

from pharmalink.domains.requests.domain.entities import MedicationRequest


@runtime_checkable
class IMedicationRequestRepository(Protocol):
    """
    Medication request repository interface.

    Rows are never deleted; every mutation after creation goes through
    `claim` or `mark_cancelled`.
    """

    async def create(self, request: MedicationRequest) -> MedicationRequest:
        """Persist a newly opened request."""
        ...

    async def find_by_id(self, request_id: str) -> MedicationRequest | None:
        """
        Find request by ID.

        Returns:
            MedicationRequest if found, None otherwise
        """
        ...

    async def find_open(self, limit: int = 50) -> list[MedicationRequest]:
        """
        Requests whose stored status is pending or broadcasting, newest first.

        Expired rows are included; callers filter by window.
        """
        ...

    async def find_by_customer(self, customer_id: str) -> list[MedicationRequest]:
        """Customer's requests, newest first."""
        ...

    async def find_by_pharmacy(self, pharmacy_id: str) -> list[MedicationRequest]:
        """Requests a pharmacy responded to, newest first."""
        ...

    async def count_open(self, now: datetime) -> int:
        """Open requests still inside their broadcast window."""
        ...

    async def count_by_pharmacy(
        self,
        pharmacy_id: str,
        since: datetime | None = None,
        until: datetime | None = None,
    ) -> int:
        """
        Count requests a pharmacy responded to.

        Args:
            pharmacy_id: Pharmacy ID
            since: Only responses updated at or after this time
            until: Only responses updated before this time
        """
        ...

    async def claim(self, request: MedicationRequest, now: datetime, count_for_pharmacy: bool = False) -> bool:
        """
        Conditionally persist an accept or reject.

        The write only applies while the stored row is still open and
        unexpired at `now`. When `count_for_pharmacy` is set, the responding
        pharmacy's request counters are incremented in the same transaction.

        Returns:
            True if this write won, False if the request was already claimed
        """
        ...

    async def mark_cancelled(self, request: MedicationRequest) -> bool:
        """
        Persist a cancellation unless a pharmacy responded first.

        Returns:
            True if the row was updated
        """
        ...
