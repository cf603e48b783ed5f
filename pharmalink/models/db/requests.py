"""
Medication request table.
"""

from sqlalchemy import JSON, Boolean, Column, DateTime, Float, String, Text

from pharmalink.models.db.base import Base, TimestampMixin


class MedicationRequestModel(Base, TimestampMixin):
    """A customer's medication request; rows are never deleted."""

    __tablename__ = "medication_requests"

    id = Column(String(64), primary_key=True)

    # Ownership
    customer_id = Column(String(128), nullable=False, index=True)
    customer_phone = Column(String(32), nullable=True)
    customer_name = Column(String(100), nullable=True)

    # Medicines
    medicines = Column(JSON, nullable=False, default=list)
    has_prescription = Column(Boolean, nullable=False, default=False)
    prescription_url = Column(Text, nullable=True)

    # Patient details
    patient_name = Column(String(100), nullable=False)
    patient_phone = Column(String(32), nullable=False)
    patient_address = Column(String(500), nullable=False)
    patient_latitude = Column(Float, nullable=False, default=0.0)
    patient_longitude = Column(Float, nullable=False, default=0.0)

    # Request metadata
    is_emergency = Column(Boolean, nullable=False, default=False)
    urgency = Column(String(16), nullable=False, default="normal")
    notes = Column(Text, nullable=True)
    radius_km = Column(Float, nullable=False, default=5.0)

    # Status & assignment
    status = Column(String(20), nullable=False, index=True)
    pharmacy_id = Column(String(64), nullable=True, index=True)
    pharmacy_name = Column(String(200), nullable=True)
    response = Column(JSON, nullable=True)

    expires_at = Column(DateTime(timezone=True), nullable=False)
    completed_at = Column(DateTime(timezone=True), nullable=True)
