"""
Requests Application Use Cases
"""

from pharmalink.domains.requests.application.use_cases.cancel_request import CancelRequestUseCase
from pharmalink.domains.requests.application.use_cases.create_request import (
    CreateRequestCommand,
    CreateRequestUseCase,
)
from pharmalink.domains.requests.application.use_cases.query_requests import (
    GetCustomerRequestsUseCase,
    GetPartnerStatsUseCase,
    GetPendingRequestsUseCase,
    GetPharmacyHistoryUseCase,
    GetRequestUseCase,
    PartnerStats,
)
from pharmalink.domains.requests.application.use_cases.respond_to_request import (
    AcceptRequestUseCase,
    RejectRequestUseCase,
)

__all__ = [
    "AcceptRequestUseCase",
    "CancelRequestUseCase",
    "CreateRequestCommand",
    "CreateRequestUseCase",
    "GetCustomerRequestsUseCase",
    "GetPartnerStatsUseCase",
    "GetPendingRequestsUseCase",
    "GetPharmacyHistoryUseCase",
    "GetRequestUseCase",
    "PartnerStats",
    "RejectRequestUseCase",
]
