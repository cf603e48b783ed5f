"""
Users API Dependencies
"""

from pharmalink.api.dependencies import Container, DbSession
from pharmalink.domains.users.application.use_cases import (
    GetCurrentUserUseCase,
    GetPartnerProfileUseCase,
    UpdatePartnerProfileUseCase,
)


def get_current_user_use_case(db: DbSession, container: Container) -> GetCurrentUserUseCase:
    return container.create_get_current_user_use_case(db)


def get_partner_profile_use_case(db: DbSession, container: Container) -> GetPartnerProfileUseCase:
    return container.create_get_partner_profile_use_case(db)


def get_update_partner_profile_use_case(db: DbSession, container: Container) -> UpdatePartnerProfileUseCase:
    return container.create_update_partner_profile_use_case(db)
