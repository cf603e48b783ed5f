"""
Pharmacies Domain Value Objects
"""

from pharmalink.domains.pharmacies.domain.value_objects.pharmacy_status import Availability, PharmacyStatus

__all__ = ["Availability", "PharmacyStatus"]
