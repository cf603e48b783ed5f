"""
Pharmacies Domain Container.
"""

from typing import TYPE_CHECKING

from pharmalink.domains.pharmacies.application.use_cases import (
    AgentDashboardUseCase,
    FindNearbyPharmaciesUseCase,
    GetPharmacyUseCase,
    ListPharmaciesUseCase,
    OnboardPharmacyUseCase,
    ReviewPharmacyUseCase,
    UpdatePharmacyUseCase,
)
from pharmalink.domains.pharmacies.infrastructure.repositories import SQLAlchemyPharmacyRepository
from pharmalink.domains.users.infrastructure.repositories import SQLAlchemyUserRepository

if TYPE_CHECKING:
    from pharmalink.core.container.base import BaseContainer
    from pharmalink.core.container.notifications import NotificationsContainer


class PharmaciesContainer:
    def __init__(self, base: "BaseContainer", notifications: "NotificationsContainer"):
        self._base = base
        self._notifications = notifications

    # ==================== REPOSITORIES ====================

    def create_pharmacy_repository(self, db) -> SQLAlchemyPharmacyRepository:
        return SQLAlchemyPharmacyRepository(session=db)

    # ==================== USE CASES ====================

    def create_find_nearby_pharmacies_use_case(self, db) -> FindNearbyPharmaciesUseCase:
        return FindNearbyPharmaciesUseCase(
            pharmacy_repository=self.create_pharmacy_repository(db),
            default_radius_km=self._base.settings.DEFAULT_SEARCH_RADIUS_KM,
        )

    def create_get_pharmacy_use_case(self, db) -> GetPharmacyUseCase:
        return GetPharmacyUseCase(pharmacy_repository=self.create_pharmacy_repository(db))

    def create_list_pharmacies_use_case(self, db) -> ListPharmaciesUseCase:
        return ListPharmaciesUseCase(pharmacy_repository=self.create_pharmacy_repository(db))

    def create_onboard_pharmacy_use_case(self, db) -> OnboardPharmacyUseCase:
        return OnboardPharmacyUseCase(
            pharmacy_repository=self.create_pharmacy_repository(db),
            user_repository=SQLAlchemyUserRepository(session=db),
        )

    def create_update_pharmacy_use_case(self, db) -> UpdatePharmacyUseCase:
        return UpdatePharmacyUseCase(pharmacy_repository=self.create_pharmacy_repository(db))

    def create_review_pharmacy_use_case(self, db) -> ReviewPharmacyUseCase:
        return ReviewPharmacyUseCase(
            pharmacy_repository=self.create_pharmacy_repository(db),
            notifier=self._notifications.create_notifier(db),
        )

    def create_agent_dashboard_use_case(self, db) -> AgentDashboardUseCase:
        return AgentDashboardUseCase(pharmacy_repository=self.create_pharmacy_repository(db))
