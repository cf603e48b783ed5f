"""
Chat Repository Port
"""

from typing import Protocol, runtime_checkable

from pharmalink.domains.chat.domain.entities import Chat, ChatMessage


@runtime_checkable
class IChatRepository(Protocol):
    """Persistence contract for chats and their messages."""

    async def find_by_request(self, request_id: str) -> Chat | None: ...

    async def create(self, chat: Chat) -> Chat: ...

    async def add_message(self, chat: Chat, message: ChatMessage) -> ChatMessage:
        """Append a message and update the chat's last-message snapshot."""
        ...

    async def find_messages(self, chat_id: str) -> list[ChatMessage]:
        """Oldest first."""
        ...

    async def find_for_participant(
        self,
        customer_id: str,
        pharmacy_id: str | None = None,
        limit: int = 50,
    ) -> list[Chat]:
        """Chats of a customer or of a pharmacy, most recent activity first."""
        ...
