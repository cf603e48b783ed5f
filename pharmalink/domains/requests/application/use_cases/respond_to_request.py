"""
Respond To Request Use Cases

A partner accepts or rejects an open request on behalf of their pharmacy.
The first response to be written wins; later ones are refused.
"""

import logging
from collections.abc import Callable
from datetime import datetime

from pharmalink.core.domain import ConcurrencyException, EntityNotFoundException, utc_now
from pharmalink.domains.pharmacies.application.ports import IPharmacyRepository
from pharmalink.domains.requests.application.ports import (
    IBroadcastPublisher,
    IMedicationRequestRepository,
    INotifier,
)
from pharmalink.domains.requests.application.use_cases.partner_context import require_pharmacy
from pharmalink.domains.requests.application.use_cases.side_effects import notify_quietly, publish_quietly
from pharmalink.domains.requests.domain.entities import MedicationRequest
from pharmalink.domains.users.application.ports import IUserRepository
from pharmalink.domains.users.domain.entities import Identity
from pharmalink.realtime.events import REQUEST_PHARMACY_RESPONDED, request_room

logger = logging.getLogger(__name__)


class _RespondUseCase:
    def __init__(
        self,
        request_repository: IMedicationRequestRepository,
        pharmacy_repository: IPharmacyRepository,
        user_repository: IUserRepository,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.request_repo = request_repository
        self.pharmacy_repo = pharmacy_repository
        self.user_repo = user_repository
        self.clock = clock

    async def _load(self, request_id: str) -> MedicationRequest:
        request = await self.request_repo.find_by_id(request_id)
        if not request:
            raise EntityNotFoundException("Request", request_id)
        return request

    async def _claim(self, request: MedicationRequest, now: datetime, count_for_pharmacy: bool) -> None:
        won = await self.request_repo.claim(request, now=now, count_for_pharmacy=count_for_pharmacy)
        if not won:
            logger.info(f"Request {request.id} was claimed before pharmacy {request.pharmacy_id} responded")
            raise ConcurrencyException(
                "Request",
                request.id,
                message="Request has already been responded to or expired",
            )


class AcceptRequestUseCase(_RespondUseCase):
    """
    Accept a request with a quote.

    On success the request row and the pharmacy counters are committed
    together, the customer's request room receives
    `request:pharmacy-responded`, and the customer gets a status notification.
    """

    def __init__(
        self,
        request_repository: IMedicationRequestRepository,
        pharmacy_repository: IPharmacyRepository,
        user_repository: IUserRepository,
        publisher: IBroadcastPublisher,
        notifier: INotifier | None = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        super().__init__(request_repository, pharmacy_repository, user_repository, clock)
        self.publisher = publisher
        self.notifier = notifier

    async def execute(
        self,
        identity: Identity,
        request_id: str,
        total_price: float,
        estimated_time: int,
        notes: str | None = None,
    ) -> MedicationRequest:
        """
        Raises:
            NoPharmacyAssociated: If the partner has no pharmacy
            EntityNotFoundException: If the request does not exist
            InvalidOperationException: If the request is no longer open
            ConcurrencyException: If another response was written first
        """
        pharmacy_id, pharmacy = await require_pharmacy(self.user_repo, self.pharmacy_repo, identity)
        request = await self._load(request_id)

        now = self.clock()
        request.accept(
            pharmacy_id=pharmacy_id,
            pharmacy_name=pharmacy.name if pharmacy else None,
            total_price=total_price,
            estimated_time=estimated_time,
            notes=notes,
            now=now,
        )
        await self._claim(request, now, count_for_pharmacy=True)
        logger.info(f"Pharmacy {pharmacy_id} accepted request {request.id}")

        await publish_quietly(
            self.publisher,
            request_room(request.id),
            REQUEST_PHARMACY_RESPONDED,
            {
                "requestId": request.id,
                "pharmacyId": pharmacy_id,
                "pharmacyName": pharmacy.name if pharmacy else None,
                "pharmacyAddress": pharmacy.address if pharmacy else None,
                "pharmacyPhone": pharmacy.phone if pharmacy else None,
                "totalPrice": total_price,
                "estimatedTime": estimated_time,
                "notes": notes,
                "respondedAt": now.isoformat(),
            },
        )
        await notify_quietly(
            self.notifier,
            request.customer_id,
            title="Pharmacy responded",
            message=f"{request.pharmacy_name or 'A pharmacy'} accepted your request "
            f"(₹{total_price:.2f}, ready in {estimated_time} min)",
            type="status",
            related_id=request.id,
            data={"requestId": request.id, "pharmacyId": pharmacy_id},
        )
        return request


class RejectRequestUseCase(_RespondUseCase):
    """
    Reject a request.

    Rejection is silent: no realtime event and no customer notification.
    """

    async def execute(self, identity: Identity, request_id: str, reason: str | None = None) -> MedicationRequest:
        pharmacy_id, pharmacy = await require_pharmacy(self.user_repo, self.pharmacy_repo, identity)
        request = await self._load(request_id)

        now = self.clock()
        request.reject(
            pharmacy_id=pharmacy_id,
            pharmacy_name=pharmacy.name if pharmacy else None,
            reason=reason,
            now=now,
        )
        await self._claim(request, now, count_for_pharmacy=False)
        logger.info(f"Pharmacy {pharmacy_id} rejected request {request.id}")
        return request
