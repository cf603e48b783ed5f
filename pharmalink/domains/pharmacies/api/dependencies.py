"""
Pharmacies API Dependencies
"""

from pharmalink.api.dependencies import Container, DbSession
from pharmalink.domains.pharmacies.application.use_cases import (
    AgentDashboardUseCase,
    FindNearbyPharmaciesUseCase,
    GetPharmacyUseCase,
    ListPharmaciesUseCase,
    OnboardPharmacyUseCase,
    ReviewPharmacyUseCase,
    UpdatePharmacyUseCase,
)


def get_nearby_pharmacies_use_case(db: DbSession, container: Container) -> FindNearbyPharmaciesUseCase:
    return container.create_find_nearby_pharmacies_use_case(db)


def get_pharmacy_use_case(db: DbSession, container: Container) -> GetPharmacyUseCase:
    return container.create_get_pharmacy_use_case(db)


def get_list_pharmacies_use_case(db: DbSession, container: Container) -> ListPharmaciesUseCase:
    return container.create_list_pharmacies_use_case(db)


def get_onboard_pharmacy_use_case(db: DbSession, container: Container) -> OnboardPharmacyUseCase:
    return container.create_onboard_pharmacy_use_case(db)


def get_update_pharmacy_use_case(db: DbSession, container: Container) -> UpdatePharmacyUseCase:
    return container.create_update_pharmacy_use_case(db)


def get_review_pharmacy_use_case(db: DbSession, container: Container) -> ReviewPharmacyUseCase:
    return container.create_review_pharmacy_use_case(db)


def get_agent_dashboard_use_case(db: DbSession, container: Container) -> AgentDashboardUseCase:
    return container.create_agent_dashboard_use_case(db)
