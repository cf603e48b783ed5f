"""
Unit tests for partner responses: accept, reject and the first-responder race.
"""

import asyncio
from datetime import timedelta

import pytest

from pharmalink.core.domain import (
    ConcurrencyException,
    EntityNotFoundException,
    InvalidOperationException,
    ValidationException,
)
from pharmalink.domains.requests.application.use_cases import AcceptRequestUseCase, RejectRequestUseCase
from pharmalink.domains.requests.domain.entities import MedicationRequest
from pharmalink.domains.requests.domain.value_objects import RequestStatus
from pharmalink.realtime.events import REQUEST_PHARMACY_RESPONDED, request_room
from tests.utils import (
    MedicationRequestBuilder,
    PharmacyBuilder,
    RecordingNotifier,
    RecordingPublisher,
    partner_identity,
    partner_user,
)


@pytest.fixture
def open_request(request_repository):
    request = MedicationRequestBuilder().build()
    request_repository.rows[request.id] = request
    return request


@pytest.fixture
def accept_use_case(request_repository, pharmacy_repository, user_repository, publisher, notifier):
    return AcceptRequestUseCase(request_repository, pharmacy_repository, user_repository, publisher, notifier)


# ============================================================================
# ACCEPT
# ============================================================================


@pytest.mark.unit
@pytest.mark.use_case
class TestAcceptRequestUseCase:
    @pytest.mark.asyncio
    async def test_accept_claims_request_and_bumps_pharmacy_counters(
        self, accept_use_case, request_repository, pharmacy_repository, partner_with_pharmacy, open_request
    ):
        # Act
        result = await accept_use_case.execute(
            partner_with_pharmacy, open_request.id, total_price=120.0, estimated_time=15, notes="Ready soon"
        )

        # Assert
        stored = request_repository.rows[open_request.id]
        assert result.status == RequestStatus.ACCEPTED
        assert stored.status == RequestStatus.ACCEPTED
        assert stored.pharmacy_id == "ph-1"
        assert stored.pharmacy_name == "City Pharmacy"
        assert stored.response.total_price == 120.0
        assert pharmacy_repository.rows["ph-1"].total_accepted == 1
        assert pharmacy_repository.rows["ph-1"].total_requests == 1

    @pytest.mark.asyncio
    async def test_accept_notifies_request_room_and_customer(
        self, accept_use_case, publisher, notifier, partner_with_pharmacy, open_request
    ):
        await accept_use_case.execute(partner_with_pharmacy, open_request.id, total_price=99.5, estimated_time=20)

        room, event, payload = publisher.published[0]
        assert room == request_room(open_request.id)
        assert event == REQUEST_PHARMACY_RESPONDED
        assert payload["pharmacyId"] == "ph-1"
        assert payload["pharmacyAddress"] == "1 Brigade Road, Bangalore"
        assert payload["totalPrice"] == 99.5
        assert payload["estimatedTime"] == 20

        assert len(notifier.sent) == 1
        assert notifier.sent[0]["user_id"] == open_request.customer_id
        assert notifier.sent[0]["type"] == "status"
        assert notifier.sent[0]["related_id"] == open_request.id

    @pytest.mark.asyncio
    async def test_side_effect_failures_do_not_undo_accept(
        self, request_repository, pharmacy_repository, user_repository, partner_with_pharmacy, open_request
    ):
        use_case = AcceptRequestUseCase(
            request_repository,
            pharmacy_repository,
            user_repository,
            RecordingPublisher(fail=True),
            RecordingNotifier(fail=True),
        )

        result = await use_case.execute(partner_with_pharmacy, open_request.id, total_price=10.0, estimated_time=5)

        assert result.status == RequestStatus.ACCEPTED
        assert request_repository.rows[open_request.id].status == RequestStatus.ACCEPTED

    @pytest.mark.asyncio
    async def test_partner_without_pharmacy(self, accept_use_case, open_request):
        with pytest.raises(ValidationException):
            await accept_use_case.execute(partner_identity(phone="+919800000555"), open_request.id, 10.0, 5)

    @pytest.mark.asyncio
    async def test_missing_request(self, accept_use_case, partner_with_pharmacy):
        with pytest.raises(EntityNotFoundException):
            await accept_use_case.execute(partner_with_pharmacy, "missing", 10.0, 5)

    @pytest.mark.asyncio
    async def test_expired_request_is_refused(self, accept_use_case, request_repository, partner_with_pharmacy):
        expired = MedicationRequestBuilder().created_ago(timedelta(minutes=6)).build()
        request_repository.rows[expired.id] = expired

        with pytest.raises(InvalidOperationException):
            await accept_use_case.execute(partner_with_pharmacy, expired.id, 10.0, 5)

        assert request_repository.rows[expired.id].status == RequestStatus.BROADCASTING

    @pytest.mark.asyncio
    async def test_second_accept_is_refused(
        self, accept_use_case, request_repository, pharmacy_repository, partner_with_pharmacy, open_request
    ):
        await accept_use_case.execute(partner_with_pharmacy, open_request.id, 10.0, 5)

        with pytest.raises(InvalidOperationException):
            await accept_use_case.execute(partner_with_pharmacy, open_request.id, 8.0, 5)

        assert request_repository.rows[open_request.id].response.total_price == 10.0
        assert pharmacy_repository.rows["ph-1"].total_accepted == 1


@pytest.mark.unit
@pytest.mark.use_case
class TestConcurrentAccept:
    @pytest.mark.asyncio
    async def test_exactly_one_of_two_concurrent_accepts_wins(
        self,
        accept_use_case,
        request_repository,
        pharmacy_repository,
        user_repository,
        publisher,
        partner_with_pharmacy,
        open_request,
    ):
        # Arrange: a second partner with their own pharmacy
        rival = partner_identity(phone="+919800000200")
        pharmacy_repository.rows["ph-2"] = (
            PharmacyBuilder().with_id("ph-2").with_name("Rival Pharmacy").owned_by(rival.user_id).build()
        )
        user_repository.rows[rival.user_id] = partner_user(rival, "ph-2")

        # Act
        results = await asyncio.gather(
            accept_use_case.execute(partner_with_pharmacy, open_request.id, 100.0, 10),
            accept_use_case.execute(rival, open_request.id, 90.0, 10),
            return_exceptions=True,
        )

        # Assert
        winners = [r for r in results if isinstance(r, MedicationRequest)]
        losers = [r for r in results if isinstance(r, ConcurrencyException)]
        assert len(winners) == 1
        assert len(losers) == 1

        stored = request_repository.rows[open_request.id]
        assert stored.pharmacy_id == winners[0].pharmacy_id
        total_accepted = sum(p.total_accepted for p in pharmacy_repository.rows.values())
        assert total_accepted == 1
        assert len(publisher.published) == 1


# ============================================================================
# REJECT
# ============================================================================


@pytest.mark.unit
@pytest.mark.use_case
class TestRejectRequestUseCase:
    @pytest.mark.asyncio
    async def test_reject_is_silent(
        self,
        request_repository,
        pharmacy_repository,
        user_repository,
        publisher,
        notifier,
        partner_with_pharmacy,
        open_request,
    ):
        use_case = RejectRequestUseCase(request_repository, pharmacy_repository, user_repository)

        result = await use_case.execute(partner_with_pharmacy, open_request.id, reason="Out of stock")

        stored = request_repository.rows[open_request.id]
        assert result.status == RequestStatus.REJECTED
        assert stored.status == RequestStatus.REJECTED
        assert stored.pharmacy_id == "ph-1"
        assert stored.response.notes == "Out of stock"
        assert pharmacy_repository.rows["ph-1"].total_accepted == 0
        assert publisher.published == []
        assert notifier.sent == []

    @pytest.mark.asyncio
    async def test_reject_after_accept_is_refused(
        self,
        accept_use_case,
        request_repository,
        pharmacy_repository,
        user_repository,
        partner_with_pharmacy,
        open_request,
    ):
        await accept_use_case.execute(partner_with_pharmacy, open_request.id, 10.0, 5)
        use_case = RejectRequestUseCase(request_repository, pharmacy_repository, user_repository)

        with pytest.raises(InvalidOperationException):
            await use_case.execute(partner_with_pharmacy, open_request.id)

        assert request_repository.rows[open_request.id].status == RequestStatus.ACCEPTED
