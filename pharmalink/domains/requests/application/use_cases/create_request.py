"""
Create Request Use Case

Opens a medication request and broadcasts it to connected pharmacies.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any

from pharmalink.core.domain import utc_now
from pharmalink.domains.requests.application.ports import IBroadcastPublisher, IMedicationRequestRepository
from pharmalink.domains.requests.application.use_cases.side_effects import publish_quietly
from pharmalink.domains.requests.domain.entities import BROADCAST_WINDOW, MedicationRequest
from pharmalink.domains.users.application.ports import IUserRepository
from pharmalink.domains.users.domain.entities import Identity
from pharmalink.realtime.events import PARTNERS_ROOM, REQUEST_NEW

logger = logging.getLogger(__name__)


@dataclass
class CreateRequestCommand:
    """Validated input for opening a request."""

    patient_name: str
    patient_phone: str
    patient_address: str
    medicines: list[Any] = field(default_factory=list)
    patient_latitude: float | None = None
    patient_longitude: float | None = None
    prescription_url: str | None = None
    has_prescription: bool = False
    is_emergency: bool = False
    notes: str | None = None
    radius_km: float | None = None


class CreateRequestUseCase:
    """
    Use case for opening a medication request.

    Persists first, then publishes `request:new` to the partners room.
    A failed publish leaves the request queryable by polling.
    """

    def __init__(
        self,
        request_repository: IMedicationRequestRepository,
        user_repository: IUserRepository,
        publisher: IBroadcastPublisher,
        window: timedelta = BROADCAST_WINDOW,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.request_repo = request_repository
        self.user_repo = user_repository
        self.publisher = publisher
        self.window = window
        self.clock = clock

    async def execute(self, identity: Identity, command: CreateRequestCommand) -> MedicationRequest:
        """
        Open and broadcast a request.

        Args:
            identity: Acting customer
            command: Request details

        Returns:
            The persisted request

        Raises:
            ValidationException: If the medicine list is empty or the radius is not positive
        """
        customer = await self.user_repo.find_by_id(identity.user_id)

        request = MedicationRequest.open(
            customer_id=identity.user_id,
            customer_phone=identity.phone,
            customer_name=customer.name if customer else "",
            medicines=command.medicines,
            patient_name=command.patient_name,
            patient_phone=command.patient_phone,
            patient_address=command.patient_address,
            patient_latitude=command.patient_latitude,
            patient_longitude=command.patient_longitude,
            has_prescription=command.has_prescription,
            prescription_url=command.prescription_url,
            is_emergency=command.is_emergency,
            notes=command.notes,
            radius_km=command.radius_km,
            window=self.window,
            now=self.clock(),
        )

        saved = await self.request_repo.create(request)
        logger.info(f"Request {saved.id} created by {saved.customer_id} ({len(saved.medicines)} medicines)")

        delivered = await publish_quietly(self.publisher, PARTNERS_ROOM, REQUEST_NEW, saved.broadcast_view())
        logger.info(f"Request {saved.id} broadcast to {delivered} partner connections")

        return saved
