"""
Pharmacies Application Use Cases
"""

from pharmalink.domains.pharmacies.application.use_cases.agent_dashboard import AgentDashboardUseCase
from pharmalink.domains.pharmacies.application.use_cases.manage_pharmacies import (
    GetPharmacyUseCase,
    ListPharmaciesUseCase,
    OnboardPharmacyCommand,
    OnboardPharmacyUseCase,
    ReviewPharmacyUseCase,
    UpdatePharmacyUseCase,
)
from pharmalink.domains.pharmacies.application.use_cases.nearby_pharmacies import FindNearbyPharmaciesUseCase

__all__ = [
    "AgentDashboardUseCase",
    "FindNearbyPharmaciesUseCase",
    "GetPharmacyUseCase",
    "ListPharmaciesUseCase",
    "OnboardPharmacyCommand",
    "OnboardPharmacyUseCase",
    "ReviewPharmacyUseCase",
    "UpdatePharmacyUseCase",
]
