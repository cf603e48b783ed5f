"""
Request Query Use Cases

Read paths over medication requests. Every listing of open requests drops
entries whose broadcast window has passed, whatever their stored status.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timedelta

from pharmalink.core.domain import AuthorizationException, EntityNotFoundException, utc_now
from pharmalink.domains.requests.application.ports import IMedicationRequestRepository
from pharmalink.domains.requests.application.use_cases.partner_context import (
    NoPharmacyAssociated,
    resolve_pharmacy_id,
)
from pharmalink.domains.requests.domain.entities import MedicationRequest
from pharmalink.domains.users.application.ports import IUserRepository
from pharmalink.domains.users.domain.entities import Identity

logger = logging.getLogger(__name__)

TREND_WINDOW = timedelta(days=7)


def unexpired(requests: list[MedicationRequest], now: datetime) -> list[MedicationRequest]:
    return [r for r in requests if r.is_respondable(now)]


class GetPendingRequestsUseCase:
    """Open requests a partner can still respond to, newest first."""

    def __init__(
        self,
        request_repository: IMedicationRequestRepository,
        user_repository: IUserRepository,
        limit: int = 50,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.request_repo = request_repository
        self.user_repo = user_repository
        self.limit = limit
        self.clock = clock

    async def execute(self, identity: Identity) -> list[MedicationRequest]:
        if not await resolve_pharmacy_id(self.user_repo, identity):
            raise NoPharmacyAssociated()

        candidates = await self.request_repo.find_open(limit=self.limit)
        open_requests = unexpired(candidates, self.clock())
        if len(open_requests) != len(candidates):
            logger.debug(f"Filtered {len(candidates) - len(open_requests)} expired requests")
        return open_requests


class GetPharmacyHistoryUseCase:
    """Requests the partner's pharmacy responded to."""

    def __init__(self, request_repository: IMedicationRequestRepository, user_repository: IUserRepository):
        self.request_repo = request_repository
        self.user_repo = user_repository

    async def execute(self, identity: Identity) -> list[MedicationRequest]:
        pharmacy_id = await resolve_pharmacy_id(self.user_repo, identity)
        if not pharmacy_id:
            raise NoPharmacyAssociated()
        return await self.request_repo.find_by_pharmacy(pharmacy_id)


class GetCustomerRequestsUseCase:
    def __init__(self, request_repository: IMedicationRequestRepository):
        self.request_repo = request_repository

    async def execute(self, identity: Identity) -> list[MedicationRequest]:
        return await self.request_repo.find_by_customer(identity.user_id)


class GetRequestUseCase:
    """A single request, visible to its owner only."""

    def __init__(self, request_repository: IMedicationRequestRepository):
        self.request_repo = request_repository

    async def execute(self, identity: Identity, request_id: str) -> MedicationRequest:
        request = await self.request_repo.find_by_id(request_id)
        if not request:
            raise EntityNotFoundException("Request", request_id)
        if request.customer_id != identity.user_id:
            raise AuthorizationException("view", resource=f"request:{request_id}", user_id=identity.user_id)
        return request


@dataclass
class PartnerStats:
    total_pending: int = 0
    total_responded: int = 0
    activity_trend: int = 0

    def to_dict(self) -> dict[str, int]:
        return {
            "totalPending": self.total_pending,
            "totalResponded": self.total_responded,
            "activityTrend": self.activity_trend,
        }


class GetPartnerStatsUseCase:
    """
    Dashboard counters for a partner.

    `activity_trend` is the percentage change in responses over the last
    seven days against the seven days before (100 when there were none before).
    A partner without a pharmacy gets all zeros.
    """

    def __init__(
        self,
        request_repository: IMedicationRequestRepository,
        user_repository: IUserRepository,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.request_repo = request_repository
        self.user_repo = user_repository
        self.clock = clock

    async def execute(self, identity: Identity) -> PartnerStats:
        pharmacy_id = await resolve_pharmacy_id(self.user_repo, identity)
        if not pharmacy_id:
            return PartnerStats()

        now = self.clock()
        this_week_start = now - TREND_WINDOW
        last_week_start = this_week_start - TREND_WINDOW

        this_week = await self.request_repo.count_by_pharmacy(pharmacy_id, since=this_week_start)
        last_week = await self.request_repo.count_by_pharmacy(
            pharmacy_id, since=last_week_start, until=this_week_start
        )

        return PartnerStats(
            total_pending=await self.request_repo.count_open(now),
            total_responded=await self.request_repo.count_by_pharmacy(pharmacy_id),
            activity_trend=_percent_change(last_week, this_week),
        )


def _percent_change(before: int, after: int) -> int:
    if before == 0:
        return 100 if after else 0
    return round((after - before) * 100 / before)
