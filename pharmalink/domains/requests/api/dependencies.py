"""
Requests API Dependencies
"""

from pharmalink.api.dependencies import Container, DbSession
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


def get_create_request_use_case(db: DbSession, container: Container) -> CreateRequestUseCase:
    return container.create_create_request_use_case(db)


def get_customer_requests_use_case(db: DbSession, container: Container) -> GetCustomerRequestsUseCase:
    return container.create_get_customer_requests_use_case(db)


def get_request_use_case(db: DbSession, container: Container) -> GetRequestUseCase:
    return container.create_get_request_use_case(db)


def get_cancel_request_use_case(db: DbSession, container: Container) -> CancelRequestUseCase:
    return container.create_cancel_request_use_case(db)


def get_pending_requests_use_case(db: DbSession, container: Container) -> GetPendingRequestsUseCase:
    return container.create_get_pending_requests_use_case(db)


def get_pharmacy_history_use_case(db: DbSession, container: Container) -> GetPharmacyHistoryUseCase:
    return container.create_get_pharmacy_history_use_case(db)


def get_accept_request_use_case(db: DbSession, container: Container) -> AcceptRequestUseCase:
    return container.create_accept_request_use_case(db)


def get_reject_request_use_case(db: DbSession, container: Container) -> RejectRequestUseCase:
    return container.create_reject_request_use_case(db)


def get_partner_stats_use_case(db: DbSession, container: Container) -> GetPartnerStatsUseCase:
    return container.create_get_partner_stats_use_case(db)


__all__ = [
    "get_accept_request_use_case",
    "get_cancel_request_use_case",
    "get_create_request_use_case",
    "get_customer_requests_use_case",
    "get_partner_stats_use_case",
    "get_pending_requests_use_case",
    "get_pharmacy_history_use_case",
    "get_reject_request_use_case",
    "get_request_use_case",
]
