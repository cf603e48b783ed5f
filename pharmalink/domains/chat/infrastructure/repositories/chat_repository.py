"""
Chat Repository Implementation

SQLAlchemy implementation of IChatRepository.
"""

import logging

from sqlalchemy import or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from pharmalink.domains.chat.application.ports import IChatRepository
from pharmalink.domains.chat.domain.entities import Chat, ChatMessage, ChatMessageType
from pharmalink.models.db import ChatMessageModel, ChatModel

logger = logging.getLogger(__name__)


class SQLAlchemyChatRepository(IChatRepository):
    """
    SQLAlchemy implementation of chat repository.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_by_request(self, request_id: str) -> Chat | None:
        result = await self.session.execute(select(ChatModel).where(ChatModel.request_id == request_id))
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def create(self, chat: Chat) -> Chat:
        self.session.add(
            ChatModel(
                id=chat.id,
                request_id=chat.request_id,
                customer_id=chat.customer_id,
                customer_name=chat.customer_name,
                pharmacy_id=chat.pharmacy_id,
                pharmacy_name=chat.pharmacy_name,
                last_message=chat.last_message,
                last_message_at=chat.last_message_at,
                created_at=chat.created_at,
            )
        )
        await self.session.commit()
        return chat

    async def add_message(self, chat: Chat, message: ChatMessage) -> ChatMessage:
        chat.record(message)
        self.session.add(
            ChatMessageModel(
                id=message.id,
                chat_id=chat.id,
                sender_id=message.sender_id,
                sender_role=message.sender_role,
                message=message.message,
                type=message.type.value,
                image_url=message.image_url,
                is_read=message.is_read,
                created_at=message.created_at,
            )
        )
        await self.session.execute(
            update(ChatModel)
            .where(ChatModel.id == chat.id)
            .values(last_message=chat.last_message, last_message_at=chat.last_message_at)
        )
        await self.session.commit()
        return message

    async def find_messages(self, chat_id: str) -> list[ChatMessage]:
        query = (
            select(ChatMessageModel)
            .where(ChatMessageModel.chat_id == chat_id)
            .order_by(ChatMessageModel.created_at.asc())
        )
        result = await self.session.execute(query)
        return [self._message_to_entity(m) for m in result.scalars().all()]

    async def find_for_participant(
        self,
        customer_id: str,
        pharmacy_id: str | None = None,
        limit: int = 50,
    ) -> list[Chat]:
        condition = ChatModel.customer_id == customer_id
        if pharmacy_id:
            condition = or_(condition, ChatModel.pharmacy_id == pharmacy_id)

        query = (
            select(ChatModel)
            .where(condition)
            .order_by(ChatModel.last_message_at.desc().nulls_last())
            .limit(limit)
        )
        result = await self.session.execute(query)
        return [self._to_entity(m) for m in result.scalars().all()]

    # Mapping methods

    def _to_entity(self, model: ChatModel) -> Chat:
        return Chat(
            id=model.id,
            request_id=model.request_id,
            customer_id=model.customer_id,
            customer_name=model.customer_name or "",
            pharmacy_id=model.pharmacy_id,
            pharmacy_name=model.pharmacy_name,
            last_message=model.last_message,
            last_message_at=model.last_message_at,
            created_at=model.created_at,
            updated_at=model.last_message_at or model.created_at,
        )

    def _message_to_entity(self, model: ChatMessageModel) -> ChatMessage:
        return ChatMessage(
            id=model.id,
            chat_id=model.chat_id,
            sender_id=model.sender_id,
            sender_role=model.sender_role,
            message=model.message,
            type=ChatMessageType(model.type),
            image_url=model.image_url,
            is_read=model.is_read,
            created_at=model.created_at,
            updated_at=model.created_at,
        )
