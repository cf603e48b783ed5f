"""
Requests Infrastructure Repositories
"""

from pharmalink.domains.requests.infrastructure.repositories.request_repository import (
    SQLAlchemyMedicationRequestRepository,
)

__all__ = ["SQLAlchemyMedicationRequestRepository"]
