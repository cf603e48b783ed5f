"""
Chat thread and message tables.
"""

from datetime import UTC, datetime

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, String, Text

from pharmalink.models.db.base import Base


class ChatModel(Base):
    """One conversation per medication request."""

    __tablename__ = "chats"

    id = Column(String(64), primary_key=True)
    request_id = Column(String(64), nullable=False, unique=True, index=True)
    customer_id = Column(String(128), nullable=False, index=True)
    customer_name = Column(String(100), nullable=True)
    pharmacy_id = Column(String(64), nullable=True, index=True)
    pharmacy_name = Column(String(200), nullable=True)
    last_message = Column(Text, nullable=True)
    last_message_at = Column(DateTime(timezone=True), nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(UTC))


class ChatMessageModel(Base):
    """Append-only chat message."""

    __tablename__ = "chat_messages"

    id = Column(String(64), primary_key=True)
    chat_id = Column(String(64), ForeignKey("chats.id"), nullable=False, index=True)
    sender_id = Column(String(128), nullable=False)
    sender_role = Column(String(16), nullable=False)
    message = Column(Text, nullable=False, default="")
    type = Column(String(8), nullable=False, default="text")
    image_url = Column(Text, nullable=True)
    is_read = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(UTC), index=True)
