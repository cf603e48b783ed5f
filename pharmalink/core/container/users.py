"""
Users Domain Container.
"""

from typing import TYPE_CHECKING

from pharmalink.domains.pharmacies.infrastructure.repositories import SQLAlchemyPharmacyRepository
from pharmalink.domains.users.application.use_cases import (
    GetCurrentUserUseCase,
    GetPartnerProfileUseCase,
    UpdatePartnerProfileUseCase,
)
from pharmalink.domains.users.infrastructure.repositories import SQLAlchemyUserRepository

if TYPE_CHECKING:
    from pharmalink.core.container.base import BaseContainer


class UsersContainer:
    def __init__(self, base: "BaseContainer"):
        self._base = base

    # ==================== REPOSITORIES ====================

    def create_user_repository(self, db) -> SQLAlchemyUserRepository:
        return SQLAlchemyUserRepository(session=db)

    # ==================== USE CASES ====================

    def create_get_current_user_use_case(self, db) -> GetCurrentUserUseCase:
        return GetCurrentUserUseCase(user_repository=self.create_user_repository(db))

    def create_get_partner_profile_use_case(self, db) -> GetPartnerProfileUseCase:
        return GetPartnerProfileUseCase(
            user_repository=self.create_user_repository(db),
            pharmacy_repository=SQLAlchemyPharmacyRepository(session=db),
        )

    def create_update_partner_profile_use_case(self, db) -> UpdatePartnerProfileUseCase:
        return UpdatePartnerProfileUseCase(user_repository=self.create_user_repository(db))
