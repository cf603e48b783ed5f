"""
Requests API Schemas

Pydantic schemas for request bodies. Create uses the snake_case field names
mobile clients send; partner responses are camelCase.
"""

from pydantic import BaseModel, Field, field_validator

from pharmalink.domains.requests.application.use_cases import CreateRequestCommand


class MedicineInput(BaseModel):
    name: str = Field(..., min_length=1)
    quantity: int = Field(default=1, ge=1)
    dosage: str | None = None


class CreateRequestBody(BaseModel):
    """Medication request creation schema."""

    patient_name: str = Field(..., min_length=2, max_length=100)
    patient_phone: str = Field(..., min_length=10)
    patient_address: str = Field(..., min_length=5, max_length=500)
    patient_latitude: float | None = Field(default=None, ge=-90, le=90)
    patient_longitude: float | None = Field(default=None, ge=-180, le=180)
    medicines: list[MedicineInput | str] = Field(..., min_length=1)
    prescription_image_url: str | None = None
    has_prescription: bool = False
    is_emergency: bool = False
    notes: str | None = Field(default=None, max_length=500)
    radius: float | None = Field(default=None, gt=0)

    @field_validator("medicines")
    @classmethod
    def medicine_names_not_blank(cls, value: list[MedicineInput | str]) -> list[MedicineInput | str]:
        for item in value:
            if isinstance(item, str) and not item.strip():
                raise ValueError("Medicine name required")
        return value

    @field_validator("prescription_image_url")
    @classmethod
    def prescription_url_is_https(cls, value: str | None) -> str | None:
        if value is not None and not value.startswith("https://"):
            raise ValueError("Prescription URL must be an https URL")
        return value

    def to_command(self) -> CreateRequestCommand:
        return CreateRequestCommand(
            patient_name=self.patient_name,
            patient_phone=self.patient_phone,
            patient_address=self.patient_address,
            medicines=[m if isinstance(m, str) else m.model_dump(exclude_none=True) for m in self.medicines],
            patient_latitude=self.patient_latitude,
            patient_longitude=self.patient_longitude,
            prescription_url=self.prescription_image_url,
            has_prescription=self.has_prescription or bool(self.prescription_image_url),
            is_emergency=self.is_emergency,
            notes=self.notes,
            radius_km=self.radius,
        )


class AcceptRequestBody(BaseModel):
    totalPrice: float = Field(..., ge=0)
    estimatedTime: int = Field(..., ge=1)
    notes: str | None = Field(default=None, max_length=500)


class RejectRequestBody(BaseModel):
    reason: str | None = Field(default=None, max_length=500)
