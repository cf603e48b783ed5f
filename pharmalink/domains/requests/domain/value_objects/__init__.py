"""
Requests Domain Value Objects
"""

from pharmalink.domains.requests.domain.value_objects.request_status import OPEN_STATUSES, RequestStatus

__all__ = ["OPEN_STATUSES", "RequestStatus"]
