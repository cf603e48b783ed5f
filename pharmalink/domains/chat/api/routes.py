"""
Chat API Routes

Conversation attached to a request, between its customer and the pharmacy
that responded.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from pharmalink.api.dependencies import CurrentIdentity
from pharmalink.api.responses import ok
from pharmalink.domains.chat.api.dependencies import (
    get_chat_messages_use_case,
    get_list_chats_use_case,
    get_send_chat_message_use_case,
)
from pharmalink.domains.chat.api.schemas import SendMessageBody
from pharmalink.domains.chat.application.use_cases import (
    GetChatMessagesUseCase,
    ListChatsUseCase,
    SendChatMessageUseCase,
)

router = APIRouter(prefix="/chat", tags=["Chat"])

ChatMessagesUseCaseDep = Annotated[GetChatMessagesUseCase, Depends(get_chat_messages_use_case)]
SendChatMessageUseCaseDep = Annotated[SendChatMessageUseCase, Depends(get_send_chat_message_use_case)]
ListChatsUseCaseDep = Annotated[ListChatsUseCase, Depends(get_list_chats_use_case)]


# Declared before /{request_id} so "list" is not taken as an id
@router.get("/list")
async def list_chats(identity: CurrentIdentity, use_case: ListChatsUseCaseDep):
    chats = await use_case.execute(identity)
    return ok([chat.to_dict() for chat in chats])


@router.get("/{request_id}")
async def get_messages(request_id: str, identity: CurrentIdentity, use_case: ChatMessagesUseCaseDep):
    conversation = await use_case.execute(identity, request_id)
    return ok(
        {
            "chatId": conversation.chat_id,
            "messages": [m.to_dict() for m in conversation.messages],
        }
    )


@router.post("/{request_id}", status_code=status.HTTP_201_CREATED)
async def send_message(
    request_id: str,
    body: SendMessageBody,
    identity: CurrentIdentity,
    use_case: SendChatMessageUseCaseDep,
):
    message = await use_case.execute(identity, request_id, body.message, type=body.type, image_url=body.imageUrl)
    return ok(message.to_dict())
