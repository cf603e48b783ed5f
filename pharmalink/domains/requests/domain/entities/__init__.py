"""
Requests Domain Entities
"""

from pharmalink.domains.requests.domain.entities.medication_request import (
    BROADCAST_WINDOW,
    DEFAULT_RADIUS_KM,
    MedicationRequest,
    Medicine,
    PharmacyResponse,
)

__all__ = [
    "BROADCAST_WINDOW",
    "DEFAULT_RADIUS_KM",
    "MedicationRequest",
    "Medicine",
    "PharmacyResponse",
]
