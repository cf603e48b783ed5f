"""
Chat API Schemas
"""

from pydantic import BaseModel, Field, model_validator

from pharmalink.domains.chat.domain.entities import MAX_MESSAGE_LENGTH, ChatMessageType


class SendMessageBody(BaseModel):
    message: str | None = Field(default=None, max_length=MAX_MESSAGE_LENGTH)
    type: ChatMessageType = ChatMessageType.TEXT
    imageUrl: str | None = None

    @model_validator(mode="after")
    def text_needs_content(self) -> "SendMessageBody":
        if self.type == ChatMessageType.TEXT and not (self.message and self.message.strip()):
            raise ValueError("Message content required for text messages")
        return self
