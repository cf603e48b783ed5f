"""
Pharmacy Value Objects
"""

from pharmalink.core.domain import StatusEnum


class PharmacyStatus(StatusEnum):
    """
    Pharmacy verification states.

    Valid transitions (agent actions only):
    - DRAFT -> PENDING, VERIFIED, REJECTED
    - PENDING -> VERIFIED, REJECTED
    - VERIFIED -> REJECTED
    - REJECTED -> VERIFIED
    """

    DRAFT = "draft"
    PENDING = "pending"
    VERIFIED = "verified"
    REJECTED = "rejected"

    def can_transition_to(self, new_status: "PharmacyStatus") -> bool:
        return new_status in _TRANSITIONS[self]

    def is_listed(self) -> bool:
        """Only verified pharmacies receive broadcasts or show up in search."""
        return self == PharmacyStatus.VERIFIED


class Availability(StatusEnum):
    ONLINE = "online"
    BUSY = "busy"
    OFFLINE = "offline"


_TRANSITIONS: dict[PharmacyStatus, frozenset[PharmacyStatus]] = {
    PharmacyStatus.DRAFT: frozenset({PharmacyStatus.PENDING, PharmacyStatus.VERIFIED, PharmacyStatus.REJECTED}),
    PharmacyStatus.PENDING: frozenset({PharmacyStatus.VERIFIED, PharmacyStatus.REJECTED}),
    PharmacyStatus.VERIFIED: frozenset({PharmacyStatus.REJECTED}),
    PharmacyStatus.REJECTED: frozenset({PharmacyStatus.VERIFIED}),
}
