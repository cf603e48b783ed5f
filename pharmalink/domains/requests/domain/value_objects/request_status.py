"""
Request Status Value Object

Lifecycle states of a medication request.
"""

from pharmalink.core.domain import StatusEnum


class RequestStatus(StatusEnum):
    """
    Medication request lifecycle states.

    Valid transitions:
    - PENDING / BROADCASTING -> ACCEPTED, REJECTED, CANCELLED, EXPIRED
    - ACCEPTED -> COMPLETED
    - REJECTED, CANCELLED, EXPIRED, COMPLETED -> (terminal)

    PENDING is the legacy spelling of BROADCASTING and behaves identically.
    EXPIRED is never written by this service; it is derived at read time.
    """

    PENDING = "pending"
    BROADCASTING = "broadcasting"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    CANCELLED = "cancelled"
    EXPIRED = "expired"
    COMPLETED = "completed"

    def is_open(self) -> bool:
        """Still visible to pharmacies (subject to the broadcast window)."""
        return self in OPEN_STATUSES

    def is_terminal(self) -> bool:
        return not self.is_open() and self != RequestStatus.ACCEPTED

    def has_response(self) -> bool:
        """Accepted and rejected requests carry a pharmacy and a response."""
        return self in (RequestStatus.ACCEPTED, RequestStatus.REJECTED)

    def can_transition_to(self, new_status: "RequestStatus") -> bool:
        """Check if transition to new status is valid."""
        return new_status in _TRANSITIONS[self]


OPEN_STATUSES = frozenset({RequestStatus.PENDING, RequestStatus.BROADCASTING})

_TRANSITIONS: dict[RequestStatus, frozenset[RequestStatus]] = {
    RequestStatus.PENDING: frozenset(
        {RequestStatus.ACCEPTED, RequestStatus.REJECTED, RequestStatus.CANCELLED, RequestStatus.EXPIRED}
    ),
    RequestStatus.BROADCASTING: frozenset(
        {RequestStatus.ACCEPTED, RequestStatus.REJECTED, RequestStatus.CANCELLED, RequestStatus.EXPIRED}
    ),
    RequestStatus.ACCEPTED: frozenset({RequestStatus.COMPLETED}),
    RequestStatus.REJECTED: frozenset(),
    RequestStatus.CANCELLED: frozenset(),
    RequestStatus.EXPIRED: frozenset(),
    RequestStatus.COMPLETED: frozenset(),
}
