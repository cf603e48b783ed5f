"""
Pharmacy table.
"""

from sqlalchemy import JSON, Boolean, Column, DateTime, Float, Integer, String, Text

from pharmalink.models.db.base import Base, TimestampMixin


class PharmacyModel(Base, TimestampMixin):
    """Onboarded pharmacy with verification state and response stats."""

    __tablename__ = "pharmacies"

    id = Column(String(64), primary_key=True)
    name = Column(String(200), nullable=False)

    # Owner
    owner_id = Column(String(128), nullable=False, index=True)
    owner_phone = Column(String(32), nullable=True)
    owner_name = Column(String(100), nullable=True)
    phone = Column(String(32), nullable=True)

    # Location
    address = Column(String(500), nullable=False)
    city = Column(String(100), nullable=True)
    state = Column(String(100), nullable=True)
    pincode = Column(String(16), nullable=True)
    latitude = Column(Float, nullable=False, default=0.0)
    longitude = Column(Float, nullable=False, default=0.0)

    # License & verification
    license_number = Column(String(64), nullable=False)
    gst_number = Column(String(64), nullable=True)
    status = Column(String(20), nullable=False, index=True)
    verified_by = Column(String(128), nullable=True)
    verified_at = Column(DateTime(timezone=True), nullable=True)
    rejection_reason = Column(Text, nullable=True)
    onboarded_by = Column(String(128), nullable=True, index=True)

    # Operational
    is_open = Column(Boolean, nullable=False, default=False)
    availability = Column(String(16), nullable=False, default="offline")
    operating_hours = Column(JSON, nullable=True)

    # Stats
    rating = Column(Float, nullable=False, default=0.0)
    total_ratings = Column(Integer, nullable=False, default=0)
    total_requests = Column(Integer, nullable=False, default=0)
    total_accepted = Column(Integer, nullable=False, default=0)
