"""
Pharmacies Infrastructure Repositories
"""

from pharmalink.domains.pharmacies.infrastructure.repositories.pharmacy_repository import (
    SQLAlchemyPharmacyRepository,
)

__all__ = ["SQLAlchemyPharmacyRepository"]
