"""
Chat Domain Entities
"""

from pharmalink.domains.chat.domain.entities.chat import MAX_MESSAGE_LENGTH, Chat, ChatMessage, ChatMessageType

__all__ = ["MAX_MESSAGE_LENGTH", "Chat", "ChatMessage", "ChatMessageType"]
