"""
Users API Routes

`/auth/me` for every role, and the partner's own profile.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from pharmalink.api.dependencies import CurrentIdentity, PartnerIdentity
from pharmalink.api.responses import ok
from pharmalink.domains.users.api.dependencies import (
    get_current_user_use_case,
    get_partner_profile_use_case,
    get_update_partner_profile_use_case,
)
from pharmalink.domains.users.api.schemas import UpdateProfileBody
from pharmalink.domains.users.application.use_cases import (
    GetCurrentUserUseCase,
    GetPartnerProfileUseCase,
    UpdatePartnerProfileUseCase,
)

auth_router = APIRouter(prefix="/auth", tags=["Auth"])
partner_router = APIRouter(prefix="/partner", tags=["Partner Profile"])

CurrentUserUseCaseDep = Annotated[GetCurrentUserUseCase, Depends(get_current_user_use_case)]
PartnerProfileUseCaseDep = Annotated[GetPartnerProfileUseCase, Depends(get_partner_profile_use_case)]
UpdateProfileUseCaseDep = Annotated[UpdatePartnerProfileUseCase, Depends(get_update_partner_profile_use_case)]


@auth_router.get("/me")
async def get_me(identity: CurrentIdentity, use_case: CurrentUserUseCaseDep):
    """The caller's user record; created on first authenticated call."""
    user = await use_case.execute(identity)
    return ok(user.to_dict())


@partner_router.get("/profile")
async def get_profile(identity: PartnerIdentity, use_case: PartnerProfileUseCaseDep):
    return ok(await use_case.execute(identity))


@partner_router.put("/profile")
async def update_profile(body: UpdateProfileBody, identity: PartnerIdentity, use_case: UpdateProfileUseCaseDep):
    user = await use_case.execute(identity, body.to_fields())
    return ok(user.to_dict(), message="Profile updated")
