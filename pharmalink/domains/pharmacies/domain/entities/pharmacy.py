"""
Pharmacy Entity

A verifiable, locatable business. Agents onboard and verify pharmacies;
only verified ones are visible to customers.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from pharmalink.core.domain import (
    Entity,
    InvalidOperationException,
    ValidationException,
    generate_id,
    isoformat,
    utc_now,
)
from pharmalink.core.shared.geo import haversine_km

from ..value_objects.pharmacy_status import Availability, PharmacyStatus

DEFAULT_SEARCH_RADIUS_KM = 5.0

# Fields an agent may edit through a generic update
EDITABLE_FIELDS = (
    "name",
    "owner_name",
    "phone",
    "address",
    "city",
    "state",
    "pincode",
    "latitude",
    "longitude",
    "license_number",
    "gst_number",
    "is_open",
    "availability",
    "operating_hours",
)


@dataclass(eq=False)
class Pharmacy(Entity):
    """Pharmacy aggregate root."""

    name: str = ""

    # Owner
    owner_id: str = ""
    owner_phone: str | None = None
    owner_name: str = ""
    phone: str | None = None

    # Location
    address: str = ""
    city: str | None = None
    state: str | None = None
    pincode: str | None = None
    latitude: float = 0.0
    longitude: float = 0.0

    # License & verification
    license_number: str = ""
    gst_number: str | None = None
    status: PharmacyStatus = PharmacyStatus.PENDING
    verified_by: str | None = None
    verified_at: datetime | None = None
    rejection_reason: str | None = None
    onboarded_by: str | None = None

    # Operational
    is_open: bool = False
    availability: Availability = Availability.OFFLINE
    operating_hours: dict[str, Any] | None = None

    # Stats
    rating: float = 0.0
    total_ratings: int = 0
    total_requests: int = 0
    total_accepted: int = 0

    @classmethod
    def onboard(
        cls,
        name: str,
        owner_phone: str,
        owner_name: str,
        address: str,
        license_number: str,
        agent_id: str,
        latitude: float | None = None,
        longitude: float | None = None,
        gst_number: str | None = None,
        phone: str | None = None,
        city: str | None = None,
        state: str | None = None,
        pincode: str | None = None,
        now: datetime | None = None,
    ) -> "Pharmacy":
        """Create a pharmacy awaiting verification, owned by the user keyed by `owner_phone`."""
        now = now or utc_now()
        return cls(
            id=generate_id(),
            name=name,
            owner_id=owner_phone,
            owner_phone=owner_phone,
            owner_name=owner_name,
            phone=phone or owner_phone,
            address=address,
            city=city,
            state=state,
            pincode=pincode,
            latitude=latitude or 0.0,
            longitude=longitude or 0.0,
            license_number=license_number,
            gst_number=gst_number,
            status=PharmacyStatus.PENDING,
            onboarded_by=agent_id,
            created_at=now,
            updated_at=now,
        )

    def distance_km(self, latitude: float, longitude: float) -> float:
        return haversine_km(latitude, longitude, self.latitude, self.longitude)

    def verify(self, agent_id: str, now: datetime | None = None) -> None:
        """
        Mark as verified by an agent.

        Raises:
            InvalidOperationException: If already verified
        """
        self._transition(PharmacyStatus.VERIFIED, "approve")
        now = now or utc_now()
        self.verified_by = agent_id
        self.verified_at = now
        self.rejection_reason = None
        self.touch(now)

    def reject(self, agent_id: str, reason: str, now: datetime | None = None) -> None:
        if not reason or not reason.strip():
            raise ValidationException("Rejection reason required", field="reason")
        self._transition(PharmacyStatus.REJECTED, "reject")
        self.verified_by = agent_id
        self.rejection_reason = reason
        self.touch(now)

    def record_accept(self) -> None:
        """Counters bumped when this pharmacy accepts a request."""
        self.total_requests += 1
        self.total_accepted += 1

    def _transition(self, new_status: PharmacyStatus, operation: str) -> None:
        if not self.status.can_transition_to(new_status):
            raise InvalidOperationException(operation=operation, current_state=self.status.value)
        self.status = new_status

    def to_dict(self, distance: float | None = None) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "ownerId": self.owner_id,
            "ownerPhone": self.owner_phone,
            "ownerName": self.owner_name,
            "phone": self.phone,
            "address": self.address,
            "city": self.city,
            "state": self.state,
            "pincode": self.pincode,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "licenseNumber": self.license_number,
            "gstNumber": self.gst_number,
            "status": self.status.value,
            "verifiedBy": self.verified_by,
            "verifiedAt": isoformat(self.verified_at),
            "rejectionReason": self.rejection_reason,
            "onboardedBy": self.onboarded_by,
            "isOpen": self.is_open,
            "availability": self.availability.value,
            "operatingHours": self.operating_hours,
            "rating": self.rating,
            "totalRatings": self.total_ratings,
            "totalRequests": self.total_requests,
            "totalAccepted": self.total_accepted,
            "createdAt": isoformat(self.created_at),
            "updatedAt": isoformat(self.updated_at),
        }
        if distance is not None:
            data["distance"] = distance
        return data


@dataclass(frozen=True)
class NearbyPharmacy:
    """Search hit: a verified pharmacy and its distance from the query point."""

    pharmacy: Pharmacy
    distance: float = field(default=0.0)

    def to_dict(self) -> dict[str, Any]:
        return self.pharmacy.to_dict(distance=self.distance)
