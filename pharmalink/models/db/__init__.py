"""
SQLAlchemy table models. Importing this package registers every table on
`Base.metadata` (used by Alembic).
"""

from pharmalink.models.db.base import Base, TimestampMixin
from pharmalink.models.db.chats import ChatMessageModel, ChatModel
from pharmalink.models.db.notifications import DeviceTokenModel, NotificationModel
from pharmalink.models.db.pharmacies import PharmacyModel
from pharmalink.models.db.requests import MedicationRequestModel
from pharmalink.models.db.users import UserModel

__all__ = [
    "Base",
    "TimestampMixin",
    "ChatMessageModel",
    "ChatModel",
    "DeviceTokenModel",
    "NotificationModel",
    "PharmacyModel",
    "MedicationRequestModel",
    "UserModel",
]
