"""
User table.
"""

from sqlalchemy import JSON, Column, String

from pharmalink.models.db.base import Base, TimestampMixin


class UserModel(Base, TimestampMixin):
    """Identity anchor keyed by phone number or provider uid."""

    __tablename__ = "users"

    id = Column(String(128), primary_key=True)
    phone = Column(String(32), nullable=True, index=True)
    email = Column(String(255), nullable=True)
    name = Column(String(100), nullable=False, default="")
    role = Column(String(16), nullable=False, default="customer")
    pharmacy_id = Column(String(64), nullable=True)
    profile = Column(JSON, nullable=False, default=dict)
