"""
Pharmacies Domain Entities
"""

from pharmalink.domains.pharmacies.domain.entities.pharmacy import (
    DEFAULT_SEARCH_RADIUS_KM,
    EDITABLE_FIELDS,
    NearbyPharmacy,
    Pharmacy,
)

__all__ = ["DEFAULT_SEARCH_RADIUS_KM", "EDITABLE_FIELDS", "NearbyPharmacy", "Pharmacy"]
