"""
Cancel Request Use Case
"""

import logging

from pharmalink.core.domain import ConcurrencyException, EntityNotFoundException
from pharmalink.domains.requests.application.ports import IBroadcastPublisher, IMedicationRequestRepository
from pharmalink.domains.requests.application.use_cases.side_effects import publish_quietly
from pharmalink.domains.requests.domain.entities import MedicationRequest
from pharmalink.domains.users.domain.entities import Identity
from pharmalink.realtime.events import PARTNERS_ROOM, REQUEST_CANCELLED

logger = logging.getLogger(__name__)


class CancelRequestUseCase:
    """
    Owner-only cancellation.

    Cancelling an already cancelled request returns it unchanged and
    publishes nothing.
    """

    def __init__(self, request_repository: IMedicationRequestRepository, publisher: IBroadcastPublisher):
        self.request_repo = request_repository
        self.publisher = publisher

    async def execute(self, identity: Identity, request_id: str) -> MedicationRequest:
        """
        Raises:
            EntityNotFoundException: If the request does not exist
            AuthorizationException: If the caller does not own the request
            InvalidOperationException: If a pharmacy already responded
            ConcurrencyException: If a pharmacy responded while cancelling
        """
        request = await self.request_repo.find_by_id(request_id)
        if not request:
            raise EntityNotFoundException("Request", request_id)

        if not request.cancel(identity.user_id):
            logger.debug(f"Request {request_id} already cancelled")
            return request

        if not await self.request_repo.mark_cancelled(request):
            raise ConcurrencyException(
                "Request", request_id, message="Request was responded to before it could be cancelled"
            )

        logger.info(f"Request {request_id} cancelled by {identity.user_id}")
        await publish_quietly(self.publisher, PARTNERS_ROOM, REQUEST_CANCELLED, {"requestId": request_id})
        return request
