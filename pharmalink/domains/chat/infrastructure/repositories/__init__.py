"""
Chat Infrastructure Repositories
"""

from pharmalink.domains.chat.infrastructure.repositories.chat_repository import SQLAlchemyChatRepository

__all__ = ["SQLAlchemyChatRepository"]
