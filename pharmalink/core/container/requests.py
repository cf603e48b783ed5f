"""
Requests Domain Container.

Single Responsibility: wire the medication request lifecycle (create,
respond, cancel, queries) to its repositories, the broadcast publisher and
the notifier.
"""

from datetime import timedelta
from typing import TYPE_CHECKING

from pharmalink.domains.pharmacies.infrastructure.repositories import SQLAlchemyPharmacyRepository
from pharmalink.domains.requests.application.use_cases import (
    AcceptRequestUseCase,
    CancelRequestUseCase,
    CreateRequestUseCase,
    GetCustomerRequestsUseCase,
    GetPartnerStatsUseCase,
    GetPendingRequestsUseCase,
    GetPharmacyHistoryUseCase,
    GetRequestUseCase,
    RejectRequestUseCase,
)
from pharmalink.domains.requests.infrastructure.repositories import SQLAlchemyMedicationRequestRepository
from pharmalink.domains.users.infrastructure.repositories import SQLAlchemyUserRepository

if TYPE_CHECKING:
    from pharmalink.core.container.base import BaseContainer
    from pharmalink.core.container.notifications import NotificationsContainer


class RequestsContainer:
    def __init__(self, base: "BaseContainer", notifications: "NotificationsContainer"):
        self._base = base
        self._notifications = notifications

    # ==================== REPOSITORIES ====================

    def create_request_repository(self, db) -> SQLAlchemyMedicationRequestRepository:
        return SQLAlchemyMedicationRequestRepository(session=db)

    # ==================== USE CASES ====================

    def create_create_request_use_case(self, db) -> CreateRequestUseCase:
        return CreateRequestUseCase(
            request_repository=self.create_request_repository(db),
            user_repository=SQLAlchemyUserRepository(session=db),
            publisher=self._base.get_publisher(),
            window=timedelta(minutes=self._base.settings.REQUEST_EXPIRY_MINUTES),
        )

    def create_accept_request_use_case(self, db) -> AcceptRequestUseCase:
        return AcceptRequestUseCase(
            request_repository=self.create_request_repository(db),
            pharmacy_repository=SQLAlchemyPharmacyRepository(session=db),
            user_repository=SQLAlchemyUserRepository(session=db),
            publisher=self._base.get_publisher(),
            notifier=self._notifications.create_notifier(db),
        )

    def create_reject_request_use_case(self, db) -> RejectRequestUseCase:
        return RejectRequestUseCase(
            request_repository=self.create_request_repository(db),
            pharmacy_repository=SQLAlchemyPharmacyRepository(session=db),
            user_repository=SQLAlchemyUserRepository(session=db),
        )

    def create_cancel_request_use_case(self, db) -> CancelRequestUseCase:
        return CancelRequestUseCase(
            request_repository=self.create_request_repository(db),
            publisher=self._base.get_publisher(),
        )

    def create_get_pending_requests_use_case(self, db) -> GetPendingRequestsUseCase:
        return GetPendingRequestsUseCase(
            request_repository=self.create_request_repository(db),
            user_repository=SQLAlchemyUserRepository(session=db),
            limit=self._base.settings.PENDING_REQUESTS_LIMIT,
        )

    def create_get_pharmacy_history_use_case(self, db) -> GetPharmacyHistoryUseCase:
        return GetPharmacyHistoryUseCase(
            request_repository=self.create_request_repository(db),
            user_repository=SQLAlchemyUserRepository(session=db),
        )

    def create_get_customer_requests_use_case(self, db) -> GetCustomerRequestsUseCase:
        return GetCustomerRequestsUseCase(request_repository=self.create_request_repository(db))

    def create_get_request_use_case(self, db) -> GetRequestUseCase:
        return GetRequestUseCase(request_repository=self.create_request_repository(db))

    def create_get_partner_stats_use_case(self, db) -> GetPartnerStatsUseCase:
        return GetPartnerStatsUseCase(
            request_repository=self.create_request_repository(db),
            user_repository=SQLAlchemyUserRepository(session=db),
        )
