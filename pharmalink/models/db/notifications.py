"""
Notification and device token tables.
"""

from datetime import UTC, datetime

from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text, UniqueConstraint

from pharmalink.models.db.base import Base


class NotificationModel(Base):
    """Durable notification shown in a user's inbox."""

    __tablename__ = "notifications"

    id = Column(String(64), primary_key=True)
    user_id = Column(String(128), nullable=False, index=True)
    title = Column(String(200), nullable=False)
    message = Column(Text, nullable=False)
    type = Column(String(16), nullable=False)
    related_id = Column(String(64), nullable=True)
    is_read = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(UTC))


class DeviceTokenModel(Base):
    """Push registration token of one of a user's devices."""

    __tablename__ = "device_tokens"
    __table_args__ = (UniqueConstraint("user_id", "token", name="uq_device_tokens_user_token"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String(128), nullable=False, index=True)
    token = Column(String(512), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(UTC))
