"""
Chat Domain Container.
"""

from typing import TYPE_CHECKING

from pharmalink.domains.chat.application.use_cases import (
    GetChatMessagesUseCase,
    ListChatsUseCase,
    SendChatMessageUseCase,
)
from pharmalink.domains.chat.infrastructure.repositories import SQLAlchemyChatRepository
from pharmalink.domains.pharmacies.infrastructure.repositories import SQLAlchemyPharmacyRepository
from pharmalink.domains.requests.infrastructure.repositories import SQLAlchemyMedicationRequestRepository
from pharmalink.domains.users.infrastructure.repositories import SQLAlchemyUserRepository

if TYPE_CHECKING:
    from pharmalink.core.container.base import BaseContainer
    from pharmalink.core.container.notifications import NotificationsContainer


class ChatContainer:
    def __init__(self, base: "BaseContainer", notifications: "NotificationsContainer"):
        self._base = base
        self._notifications = notifications

    # ==================== REPOSITORIES ====================

    def create_chat_repository(self, db) -> SQLAlchemyChatRepository:
        return SQLAlchemyChatRepository(session=db)

    # ==================== USE CASES ====================

    def create_get_chat_messages_use_case(self, db) -> GetChatMessagesUseCase:
        return GetChatMessagesUseCase(
            chat_repository=self.create_chat_repository(db),
            request_repository=SQLAlchemyMedicationRequestRepository(session=db),
            user_repository=SQLAlchemyUserRepository(session=db),
        )

    def create_send_chat_message_use_case(self, db) -> SendChatMessageUseCase:
        return SendChatMessageUseCase(
            chat_repository=self.create_chat_repository(db),
            request_repository=SQLAlchemyMedicationRequestRepository(session=db),
            user_repository=SQLAlchemyUserRepository(session=db),
            pharmacy_repository=SQLAlchemyPharmacyRepository(session=db),
            publisher=self._base.get_publisher(),
            notifier=self._notifications.create_notifier(db),
        )

    def create_list_chats_use_case(self, db) -> ListChatsUseCase:
        return ListChatsUseCase(
            chat_repository=self.create_chat_repository(db),
            user_repository=SQLAlchemyUserRepository(session=db),
        )
