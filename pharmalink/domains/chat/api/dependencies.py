"""
Chat API Dependencies
"""

from pharmalink.api.dependencies import Container, DbSession
from pharmalink.domains.chat.application.use_cases import (
    GetChatMessagesUseCase,
    ListChatsUseCase,
    SendChatMessageUseCase,
)


def get_chat_messages_use_case(db: DbSession, container: Container) -> GetChatMessagesUseCase:
    return container.create_get_chat_messages_use_case(db)


def get_send_chat_message_use_case(db: DbSession, container: Container) -> SendChatMessageUseCase:
    return container.create_send_chat_message_use_case(db)


def get_list_chats_use_case(db: DbSession, container: Container) -> ListChatsUseCase:
    return container.create_list_chats_use_case(db)
