"""
Pharmacies API Schemas
"""

from typing import Any

from pydantic import BaseModel, Field

from pharmalink.domains.pharmacies.application.use_cases import OnboardPharmacyCommand


class OnboardPharmacyBody(BaseModel):
    """Agent onboarding schema."""

    name: str = Field(..., min_length=2, max_length=200)
    ownerName: str = Field(..., min_length=2, max_length=100)
    ownerPhone: str = Field(..., min_length=10)
    address: str = Field(..., min_length=5, max_length=500)
    licenseNumber: str = Field(..., min_length=3)
    gstNumber: str | None = None
    lat: float | None = Field(default=None, ge=-90, le=90)
    lng: float | None = Field(default=None, ge=-180, le=180)
    phone: str | None = None
    city: str | None = None
    state: str | None = None
    pincode: str | None = None

    def to_command(self) -> OnboardPharmacyCommand:
        return OnboardPharmacyCommand(
            name=self.name,
            owner_name=self.ownerName,
            owner_phone=self.ownerPhone,
            address=self.address,
            license_number=self.licenseNumber,
            gst_number=self.gstNumber,
            latitude=self.lat,
            longitude=self.lng,
            phone=self.phone,
            city=self.city,
            state=self.state,
            pincode=self.pincode,
        )


class UpdatePharmacyBody(BaseModel):
    """Partial pharmacy update; only provided fields change."""

    name: str | None = Field(default=None, min_length=2, max_length=200)
    ownerName: str | None = None
    phone: str | None = None
    address: str | None = Field(default=None, min_length=5, max_length=500)
    city: str | None = None
    state: str | None = None
    pincode: str | None = None
    latitude: float | None = Field(default=None, ge=-90, le=90)
    longitude: float | None = Field(default=None, ge=-180, le=180)
    licenseNumber: str | None = None
    gstNumber: str | None = None
    isOpen: bool | None = None
    availability: str | None = None
    operatingHours: dict[str, Any] | None = None

    def to_fields(self) -> dict[str, Any]:
        mapping = {
            "ownerName": "owner_name",
            "licenseNumber": "license_number",
            "gstNumber": "gst_number",
            "isOpen": "is_open",
            "operatingHours": "operating_hours",
        }
        return {mapping.get(k, k): v for k, v in self.model_dump(exclude_none=True).items()}


class RejectPharmacyBody(BaseModel):
    reason: str = Field(..., min_length=5, max_length=500)
