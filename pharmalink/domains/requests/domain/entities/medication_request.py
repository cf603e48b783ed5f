"""
Medication Request Entity

The aggregate at the heart of the broadcast-and-response lifecycle. A request
is opened by a customer, broadcast to pharmacies for a fixed window, and then
claimed by exactly one pharmacy response or cancelled by its owner.
"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any

from pharmalink.core.domain import (
    AuthorizationException,
    Entity,
    InvalidOperationException,
    ValidationException,
    generate_id,
    isoformat,
    utc_now,
)

from ..value_objects.request_status import RequestStatus

BROADCAST_WINDOW = timedelta(minutes=5)
DEFAULT_RADIUS_KM = 5.0


@dataclass(frozen=True)
class Medicine:
    """One line of a medication request."""

    name: str
    quantity: int = 1
    dosage: str | None = None

    @classmethod
    def from_input(cls, value: "str | dict[str, Any] | Medicine") -> "Medicine":
        """Accept a bare medicine name or a {name, quantity, dosage} mapping."""
        if isinstance(value, Medicine):
            return value
        if isinstance(value, str):
            return cls(name=value)
        return cls(
            name=value["name"],
            quantity=int(value.get("quantity") or 1),
            dosage=value.get("dosage"),
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"name": self.name, "quantity": self.quantity}
        if self.dosage:
            data["dosage"] = self.dosage
        return data


@dataclass(frozen=True)
class PharmacyResponse:
    """What a pharmacy attached when it accepted or rejected a request."""

    responded_at: datetime
    total_price: float | None = None
    estimated_time: int | None = None
    notes: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PharmacyResponse":
        responded_at = data.get("respondedAt")
        return cls(
            responded_at=datetime.fromisoformat(responded_at) if responded_at else utc_now(),
            total_price=data.get("totalPrice"),
            estimated_time=data.get("estimatedTime"),
            notes=data.get("notes"),
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.total_price is not None:
            data["totalPrice"] = self.total_price
        if self.estimated_time is not None:
            data["estimatedTime"] = self.estimated_time
        if self.notes is not None:
            data["notes"] = self.notes
        data["respondedAt"] = isoformat(self.responded_at)
        return data


@dataclass(eq=False)
class MedicationRequest(Entity):
    """
    Medication request aggregate root.

    Example:
        ```python
        request = MedicationRequest.open(
            customer_id="+919800000001",
            medicines=["Paracetamol 500mg"],
            patient_name="Asha",
            patient_phone="+919800000001",
            patient_address="12 MG Road, Bangalore",
        )
        request.accept("ph-1", "City Pharmacy", total_price=120.0, estimated_time=15)
        ```
    """

    # Ownership
    customer_id: str = ""
    customer_phone: str | None = None
    customer_name: str = ""

    # Medicines
    medicines: list[Medicine] = field(default_factory=list)
    has_prescription: bool = False
    prescription_url: str | None = None

    # Patient
    patient_name: str = ""
    patient_phone: str = ""
    patient_address: str = ""
    patient_latitude: float = 0.0
    patient_longitude: float = 0.0

    # Metadata
    is_emergency: bool = False
    notes: str | None = None
    radius_km: float = DEFAULT_RADIUS_KM

    # Status & assignment
    status: RequestStatus = RequestStatus.BROADCASTING
    pharmacy_id: str | None = None
    pharmacy_name: str | None = None
    response: PharmacyResponse | None = None

    expires_at: datetime = field(default_factory=lambda: utc_now() + BROADCAST_WINDOW)
    completed_at: datetime | None = None

    @property
    def urgency(self) -> str:
        return "urgent" if self.is_emergency else "normal"

    # =====================================================================
    # Factory Methods
    # =====================================================================

    @classmethod
    def open(
        cls,
        customer_id: str,
        medicines: list[Any],
        patient_name: str,
        patient_phone: str,
        patient_address: str,
        patient_latitude: float | None = None,
        patient_longitude: float | None = None,
        customer_phone: str | None = None,
        customer_name: str = "",
        has_prescription: bool = False,
        prescription_url: str | None = None,
        is_emergency: bool = False,
        notes: str | None = None,
        radius_km: float | None = None,
        window: timedelta = BROADCAST_WINDOW,
        now: datetime | None = None,
    ) -> "MedicationRequest":
        """
        Open a new request for broadcast.

        The request starts BROADCASTING and expires exactly one broadcast
        window after creation.

        Raises:
            ValidationException: If there are no medicines or the radius is not positive
        """
        if not medicines:
            raise ValidationException("At least one medicine required", field="medicines")
        radius = DEFAULT_RADIUS_KM if radius_km is None else radius_km
        if radius <= 0:
            raise ValidationException("Radius must be positive", field="radius")

        now = now or utc_now()
        return cls(
            id=generate_id(),
            customer_id=customer_id,
            customer_phone=customer_phone,
            customer_name=customer_name,
            medicines=[Medicine.from_input(m) for m in medicines],
            has_prescription=has_prescription,
            prescription_url=prescription_url,
            patient_name=patient_name,
            patient_phone=patient_phone,
            patient_address=patient_address,
            patient_latitude=patient_latitude or 0.0,
            patient_longitude=patient_longitude or 0.0,
            is_emergency=is_emergency,
            notes=notes,
            radius_km=radius,
            status=RequestStatus.BROADCASTING,
            created_at=now,
            updated_at=now,
            expires_at=now + window,
        )

    # =====================================================================
    # Expiry
    # =====================================================================

    def is_expired(self, now: datetime | None = None) -> bool:
        """An open request whose broadcast window has passed."""
        return self.status.is_open() and self.expires_at <= (now or utc_now())

    def effective_status(self, now: datetime | None = None) -> RequestStatus:
        """Stored status, except open requests past their window read as EXPIRED."""
        return RequestStatus.EXPIRED if self.is_expired(now) else self.status

    def is_respondable(self, now: datetime | None = None) -> bool:
        return self.status.is_open() and not self.is_expired(now)

    def _ensure_respondable(self, operation: str, now: datetime) -> None:
        if not self.status.is_open():
            raise InvalidOperationException(
                operation=operation,
                current_state=self.status.value,
                message=f"Request is already {self.status.value}",
            )
        if self.is_expired(now):
            raise InvalidOperationException(
                operation=operation,
                current_state=RequestStatus.EXPIRED.value,
                message="Request has expired",
            )

    # =====================================================================
    # Transitions
    # =====================================================================

    def accept(
        self,
        pharmacy_id: str,
        pharmacy_name: str | None,
        total_price: float,
        estimated_time: int,
        notes: str | None = None,
        now: datetime | None = None,
    ) -> None:
        """
        Claim the request for a pharmacy.

        Raises:
            InvalidOperationException: If the request is no longer open or has expired
        """
        now = now or utc_now()
        self._ensure_respondable("accept", now)
        self.status = RequestStatus.ACCEPTED
        self.pharmacy_id = pharmacy_id
        self.pharmacy_name = pharmacy_name
        self.response = PharmacyResponse(
            responded_at=now,
            total_price=total_price,
            estimated_time=estimated_time,
            notes=notes,
        )
        self.touch(now)

    def reject(
        self,
        pharmacy_id: str,
        pharmacy_name: str | None = None,
        reason: str | None = None,
        now: datetime | None = None,
    ) -> None:
        """
        Record a pharmacy's rejection.

        Raises:
            InvalidOperationException: If the request is no longer open or has expired
        """
        now = now or utc_now()
        self._ensure_respondable("reject", now)
        self.status = RequestStatus.REJECTED
        self.pharmacy_id = pharmacy_id
        self.pharmacy_name = pharmacy_name
        self.response = PharmacyResponse(responded_at=now, notes=reason)
        self.touch(now)

    def cancel(self, customer_id: str, now: datetime | None = None) -> bool:
        """
        Cancel on behalf of the owning customer.

        Returns:
            False if the request was already cancelled (nothing changed)

        Raises:
            AuthorizationException: If customer_id is not the owner
            InvalidOperationException: If a pharmacy already responded
        """
        if customer_id != self.customer_id:
            raise AuthorizationException("cancel", resource=f"request:{self.id}", user_id=customer_id)
        if self.status == RequestStatus.CANCELLED:
            return False
        if not self.status.can_transition_to(RequestStatus.CANCELLED):
            raise InvalidOperationException(
                operation="cancel",
                current_state=self.status.value,
                message=f"Cannot cancel a request that is {self.status.value}",
            )

        self.status = RequestStatus.CANCELLED
        self.touch(now)
        return True

    # =====================================================================
    # Views
    # =====================================================================

    def broadcast_view(self) -> dict[str, Any]:
        """Redacted payload published to pharmacies; no customer contact fields."""
        return {
            "id": self.id,
            "patientName": self.patient_name,
            "patientAddress": self.patient_address,
            "coordinates": {"lat": self.patient_latitude, "lng": self.patient_longitude},
            "medicines": [m.to_dict() for m in self.medicines],
            "isEmergency": self.is_emergency,
            "radius": self.radius_km,
            "expiresAt": isoformat(self.expires_at),
            "createdAt": isoformat(self.created_at),
        }

    def to_dict(self, now: datetime | None = None) -> dict[str, Any]:
        return {
            "id": self.id,
            "customerId": self.customer_id,
            "customerPhone": self.customer_phone,
            "customerName": self.customer_name,
            "medicines": [m.to_dict() for m in self.medicines],
            "hasPrescription": self.has_prescription,
            "prescriptionUrl": self.prescription_url,
            "patientName": self.patient_name,
            "patientPhone": self.patient_phone,
            "patientAddress": self.patient_address,
            "patientLatitude": self.patient_latitude,
            "patientLongitude": self.patient_longitude,
            "isEmergency": self.is_emergency,
            "urgency": self.urgency,
            "notes": self.notes,
            "radius": self.radius_km,
            "status": self.status.value,
            "effectiveStatus": self.effective_status(now).value,
            "pharmacyId": self.pharmacy_id,
            "pharmacyName": self.pharmacy_name,
            "response": self.response.to_dict() if self.response else None,
            "createdAt": isoformat(self.created_at),
            "updatedAt": isoformat(self.updated_at),
            "expiresAt": isoformat(self.expires_at),
            "completedAt": isoformat(self.completed_at),
        }
