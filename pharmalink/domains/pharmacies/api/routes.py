"""
Pharmacies API Routes

Customer side: nearby search and pharmacy details.
Agent side: onboarding, verification and the dashboard.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from pharmalink.api.dependencies import AgentIdentity, CustomerIdentity
from pharmalink.api.responses import ok
from pharmalink.core.domain import ValidationException
from pharmalink.domains.pharmacies.api.dependencies import (
    get_agent_dashboard_use_case,
    get_list_pharmacies_use_case,
    get_nearby_pharmacies_use_case,
    get_onboard_pharmacy_use_case,
    get_pharmacy_use_case,
    get_review_pharmacy_use_case,
    get_update_pharmacy_use_case,
)
from pharmalink.domains.pharmacies.api.schemas import OnboardPharmacyBody, RejectPharmacyBody, UpdatePharmacyBody
from pharmalink.domains.pharmacies.application.use_cases import (
    AgentDashboardUseCase,
    FindNearbyPharmaciesUseCase,
    GetPharmacyUseCase,
    ListPharmaciesUseCase,
    OnboardPharmacyUseCase,
    ReviewPharmacyUseCase,
    UpdatePharmacyUseCase,
)
from pharmalink.domains.pharmacies.domain.value_objects import PharmacyStatus

customer_router = APIRouter(prefix="/customer/pharmacies", tags=["Customer Pharmacies"])
agent_router = APIRouter(prefix="/agent", tags=["Agent"])

NearbyUseCaseDep = Annotated[FindNearbyPharmaciesUseCase, Depends(get_nearby_pharmacies_use_case)]
GetPharmacyUseCaseDep = Annotated[GetPharmacyUseCase, Depends(get_pharmacy_use_case)]
ListPharmaciesUseCaseDep = Annotated[ListPharmaciesUseCase, Depends(get_list_pharmacies_use_case)]
OnboardUseCaseDep = Annotated[OnboardPharmacyUseCase, Depends(get_onboard_pharmacy_use_case)]
UpdatePharmacyUseCaseDep = Annotated[UpdatePharmacyUseCase, Depends(get_update_pharmacy_use_case)]
ReviewUseCaseDep = Annotated[ReviewPharmacyUseCase, Depends(get_review_pharmacy_use_case)]
DashboardUseCaseDep = Annotated[AgentDashboardUseCase, Depends(get_agent_dashboard_use_case)]


# ==================== CUSTOMER ====================


@customer_router.get("/nearby")
async def get_nearby_pharmacies(
    identity: CustomerIdentity,
    use_case: NearbyUseCaseDep,
    latitude: float | None = None,
    longitude: float | None = None,
    radius: float | None = None,
):
    hits = await use_case.execute(latitude, longitude, radius)
    return ok([hit.to_dict() for hit in hits])


@customer_router.get("/{pharmacy_id}")
async def get_pharmacy(pharmacy_id: str, identity: CustomerIdentity, use_case: GetPharmacyUseCaseDep):
    pharmacy = await use_case.execute(pharmacy_id)
    return ok(pharmacy.to_dict())


# ==================== AGENT ====================


@agent_router.post("/pharmacies", status_code=status.HTTP_201_CREATED)
async def onboard_pharmacy(body: OnboardPharmacyBody, identity: AgentIdentity, use_case: OnboardUseCaseDep):
    pharmacy = await use_case.execute(identity, body.to_command())
    return ok(pharmacy.to_dict(), message="Pharmacy onboarded successfully")


@agent_router.get("/pharmacies")
async def list_pharmacies(
    identity: AgentIdentity,
    use_case: ListPharmaciesUseCaseDep,
    status: str | None = None,
    search: str | None = None,
    limit: Annotated[int, Query(ge=1, le=100)] = 20,
):
    parsed_status = None
    if status and status != "all":
        try:
            parsed_status = PharmacyStatus.from_string(status)
        except ValueError as e:
            raise ValidationException(str(e), field="status") from e

    pharmacies = await use_case.execute(status=parsed_status, search=search, limit=limit)
    return ok([p.to_dict() for p in pharmacies])


@agent_router.get("/pharmacies/{pharmacy_id}")
async def get_agent_pharmacy(pharmacy_id: str, identity: AgentIdentity, use_case: GetPharmacyUseCaseDep):
    pharmacy = await use_case.execute(pharmacy_id)
    return ok(pharmacy.to_dict())


@agent_router.put("/pharmacies/{pharmacy_id}")
async def update_pharmacy(
    pharmacy_id: str,
    body: UpdatePharmacyBody,
    identity: AgentIdentity,
    use_case: UpdatePharmacyUseCaseDep,
):
    pharmacy = await use_case.execute(pharmacy_id, body.to_fields())
    return ok(pharmacy.to_dict(), message="Pharmacy updated")


@agent_router.put("/pharmacies/{pharmacy_id}/approve")
async def approve_pharmacy(pharmacy_id: str, identity: AgentIdentity, use_case: ReviewUseCaseDep):
    pharmacy = await use_case.approve(identity, pharmacy_id)
    return ok(pharmacy.to_dict(), message="Pharmacy approved")


@agent_router.put("/pharmacies/{pharmacy_id}/reject")
async def reject_pharmacy(
    pharmacy_id: str,
    body: RejectPharmacyBody,
    identity: AgentIdentity,
    use_case: ReviewUseCaseDep,
):
    pharmacy = await use_case.reject(identity, pharmacy_id, body.reason)
    return ok(pharmacy.to_dict(), message="Pharmacy rejected")


@agent_router.get("/stats")
async def get_agent_stats(identity: AgentIdentity, use_case: DashboardUseCaseDep):
    return ok(await use_case.stats())


@agent_router.get("/performance")
async def get_agent_performance(identity: AgentIdentity, use_case: DashboardUseCaseDep, period: str = "month"):
    return ok(await use_case.performance(period))


@agent_router.get("/recent-activity")
async def get_recent_activity(
    identity: AgentIdentity,
    use_case: DashboardUseCaseDep,
    limit: Annotated[int, Query(ge=1, le=50)] = 5,
):
    pharmacies = await use_case.recent_activity(limit)
    return ok([p.to_dict() for p in pharmacies])
