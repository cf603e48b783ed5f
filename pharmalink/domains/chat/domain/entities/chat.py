"""
Chat Entities

One conversation per medication request between the customer and the
pharmacy that responded. Messages are append-only.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from pharmalink.core.domain import Entity, StatusEnum, ValidationException, generate_id, isoformat, utc_now

MAX_MESSAGE_LENGTH = 2000


class ChatMessageType(StatusEnum):
    TEXT = "text"
    IMAGE = "image"


@dataclass(eq=False)
class ChatMessage(Entity):
    chat_id: str = ""
    sender_id: str = ""
    sender_role: str = "customer"
    message: str = ""
    type: ChatMessageType = ChatMessageType.TEXT
    image_url: str | None = None
    is_read: bool = False

    @classmethod
    def compose(
        cls,
        chat_id: str,
        sender_id: str,
        sender_role: str,
        message: str | None,
        type: ChatMessageType = ChatMessageType.TEXT,
        image_url: str | None = None,
    ) -> "ChatMessage":
        """
        Raises:
            ValidationException: Text messages need content; nothing may exceed the length limit
        """
        message = message or ""
        if type == ChatMessageType.TEXT and not message.strip():
            raise ValidationException("Message content required for text messages", field="message")
        if type == ChatMessageType.IMAGE and not image_url:
            raise ValidationException("Image URL required for image messages", field="imageUrl")
        if len(message) > MAX_MESSAGE_LENGTH:
            raise ValidationException(f"Message exceeds {MAX_MESSAGE_LENGTH} characters", field="message")

        now = utc_now()
        return cls(
            id=generate_id(),
            chat_id=chat_id,
            sender_id=sender_id,
            sender_role=sender_role,
            message=message,
            type=type,
            image_url=image_url,
            created_at=now,
            updated_at=now,
        )

    @property
    def preview(self) -> str:
        return self.message or "[Image]"

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "chatId": self.chat_id,
            "senderId": self.sender_id,
            "senderRole": self.sender_role,
            "message": self.message,
            "type": self.type.value,
            "imageUrl": self.image_url,
            "isRead": self.is_read,
            "createdAt": isoformat(self.created_at),
        }


@dataclass(eq=False)
class Chat(Entity):
    request_id: str = ""
    customer_id: str = ""
    customer_name: str = ""
    pharmacy_id: str | None = None
    pharmacy_name: str | None = None
    last_message: str | None = None
    last_message_at: datetime | None = None

    @classmethod
    def for_request(
        cls,
        request_id: str,
        customer_id: str,
        customer_name: str = "",
        pharmacy_id: str | None = None,
        pharmacy_name: str | None = None,
    ) -> "Chat":
        now = utc_now()
        return cls(
            id=generate_id(),
            request_id=request_id,
            customer_id=customer_id,
            customer_name=customer_name,
            pharmacy_id=pharmacy_id,
            pharmacy_name=pharmacy_name,
            created_at=now,
            updated_at=now,
        )

    def record(self, message: ChatMessage) -> None:
        self.last_message = message.preview
        self.last_message_at = message.created_at

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "requestId": self.request_id,
            "participants": {
                "customerId": self.customer_id,
                "customerName": self.customer_name,
                "pharmacyId": self.pharmacy_id,
                "pharmacyName": self.pharmacy_name,
            },
            "lastMessage": self.last_message,
            "lastMessageAt": isoformat(self.last_message_at),
            "createdAt": isoformat(self.created_at),
        }
