"""
Chat Application Use Cases
"""

from pharmalink.domains.chat.application.use_cases.chat_messages import (
    Conversation,
    GetChatMessagesUseCase,
    ListChatsUseCase,
    SendChatMessageUseCase,
)

__all__ = ["Conversation", "GetChatMessagesUseCase", "ListChatsUseCase", "SendChatMessageUseCase"]
