"""
Requests API Routes

Customer side: open, list, read and cancel medication requests.
Partner side: open requests feed, history, accept/reject and stats.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from pharmalink.api.dependencies import CustomerIdentity, PartnerIdentity
from pharmalink.api.responses import ok
from pharmalink.domains.requests.api.dependencies import (
    get_accept_request_use_case,
    get_cancel_request_use_case,
    get_create_request_use_case,
    get_customer_requests_use_case,
    get_partner_stats_use_case,
    get_pending_requests_use_case,
    get_pharmacy_history_use_case,
    get_reject_request_use_case,
    get_request_use_case,
)
from pharmalink.domains.requests.api.schemas import AcceptRequestBody, CreateRequestBody, RejectRequestBody
from pharmalink.domains.requests.application.use_cases import (
    AcceptRequestUseCase,
    CancelRequestUseCase,
    CreateRequestUseCase,
    GetCustomerRequestsUseCase,
    GetPartnerStatsUseCase,
    GetPendingRequestsUseCase,
    GetPharmacyHistoryUseCase,
    GetRequestUseCase,
    RejectRequestUseCase,
)

customer_router = APIRouter(prefix="/customer/requests", tags=["Customer Requests"])
partner_router = APIRouter(prefix="/partner", tags=["Partner Requests"])

# Type aliases for use case dependencies
CreateRequestUseCaseDep = Annotated[CreateRequestUseCase, Depends(get_create_request_use_case)]
CustomerRequestsUseCaseDep = Annotated[GetCustomerRequestsUseCase, Depends(get_customer_requests_use_case)]
GetRequestUseCaseDep = Annotated[GetRequestUseCase, Depends(get_request_use_case)]
CancelRequestUseCaseDep = Annotated[CancelRequestUseCase, Depends(get_cancel_request_use_case)]
PendingRequestsUseCaseDep = Annotated[GetPendingRequestsUseCase, Depends(get_pending_requests_use_case)]
PharmacyHistoryUseCaseDep = Annotated[GetPharmacyHistoryUseCase, Depends(get_pharmacy_history_use_case)]
AcceptRequestUseCaseDep = Annotated[AcceptRequestUseCase, Depends(get_accept_request_use_case)]
RejectRequestUseCaseDep = Annotated[RejectRequestUseCase, Depends(get_reject_request_use_case)]
PartnerStatsUseCaseDep = Annotated[GetPartnerStatsUseCase, Depends(get_partner_stats_use_case)]


# ==================== CUSTOMER ====================


@customer_router.post("", status_code=status.HTTP_201_CREATED)
async def create_request(body: CreateRequestBody, identity: CustomerIdentity, use_case: CreateRequestUseCaseDep):
    """Open a request and broadcast it to connected pharmacies."""
    request = await use_case.execute(identity, body.to_command())
    return ok(request.to_dict(), message="Request broadcast to nearby pharmacies")


@customer_router.get("")
async def list_my_requests(identity: CustomerIdentity, use_case: CustomerRequestsUseCaseDep):
    requests = await use_case.execute(identity)
    return ok([r.to_dict() for r in requests])


@customer_router.get("/{request_id}")
async def get_request(request_id: str, identity: CustomerIdentity, use_case: GetRequestUseCaseDep):
    request = await use_case.execute(identity, request_id)
    return ok(request.to_dict())


@customer_router.put("/{request_id}/cancel")
async def cancel_request(request_id: str, identity: CustomerIdentity, use_case: CancelRequestUseCaseDep):
    request = await use_case.execute(identity, request_id)
    return ok(request.to_dict(), message="Request cancelled")


# ==================== PARTNER ====================


@partner_router.get("/requests/pending")
async def get_pending_requests(identity: PartnerIdentity, use_case: PendingRequestsUseCaseDep):
    """Open, unexpired requests, newest first."""
    requests = await use_case.execute(identity)
    return ok([r.to_dict() for r in requests])


@partner_router.get("/requests/history")
async def get_request_history(identity: PartnerIdentity, use_case: PharmacyHistoryUseCaseDep):
    requests = await use_case.execute(identity)
    return ok([r.to_dict() for r in requests])


@partner_router.post("/requests/{request_id}/accept")
async def accept_request(
    request_id: str,
    body: AcceptRequestBody,
    identity: PartnerIdentity,
    use_case: AcceptRequestUseCaseDep,
):
    request = await use_case.execute(
        identity,
        request_id,
        total_price=body.totalPrice,
        estimated_time=body.estimatedTime,
        notes=body.notes,
    )
    return ok(request.to_dict(), message="Request accepted")


@partner_router.post("/requests/{request_id}/reject")
async def reject_request(
    request_id: str,
    identity: PartnerIdentity,
    use_case: RejectRequestUseCaseDep,
    body: RejectRequestBody | None = None,
):
    request = await use_case.execute(identity, request_id, reason=body.reason if body else None)
    return ok(request.to_dict(), message="Request rejected")


@partner_router.get("/stats")
async def get_partner_stats(identity: PartnerIdentity, use_case: PartnerStatsUseCaseDep):
    stats = await use_case.execute(identity)
    return ok(stats.to_dict())
