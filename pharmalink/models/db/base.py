"""
Declarative base and the timestamp columns shared by mutable tables.
"""

from sqlalchemy import Column, DateTime
from sqlalchemy.orm import declarative_base

from pharmalink.core.domain import utc_now

Base = declarative_base()


class TimestampMixin:
    """created_at is indexed for newest-first listings; updated_at moves on every UPDATE."""

    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now, index=True)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utc_now, onupdate=utc_now)
