"""
Chat Use Cases

Only the request's customer and the pharmacy it was assigned to may read or
write its conversation.
"""

import logging
from dataclasses import dataclass, field

from pharmalink.core.domain import AuthorizationException, EntityNotFoundException
from pharmalink.domains.chat.application.ports import IChatRepository
from pharmalink.domains.chat.domain.entities import Chat, ChatMessage, ChatMessageType
from pharmalink.domains.notifications.application.ports import INotifier
from pharmalink.domains.pharmacies.application.ports import IPharmacyRepository
from pharmalink.domains.requests.application.ports import IBroadcastPublisher, IMedicationRequestRepository
from pharmalink.domains.requests.application.use_cases.side_effects import notify_quietly, publish_quietly
from pharmalink.domains.requests.domain.entities import MedicationRequest
from pharmalink.domains.users.application.ports import IUserRepository
from pharmalink.domains.users.domain.entities import Identity
from pharmalink.realtime.events import CHAT_MESSAGE, request_room

logger = logging.getLogger(__name__)


@dataclass
class Conversation:
    chat_id: str | None = None
    messages: list[ChatMessage] = field(default_factory=list)


class _ChatAccess:
    def __init__(
        self,
        chat_repository: IChatRepository,
        request_repository: IMedicationRequestRepository,
        user_repository: IUserRepository,
    ):
        self.chat_repo = chat_repository
        self.request_repo = request_repository
        self.user_repo = user_repository

    async def _authorize(self, identity: Identity, request_id: str) -> MedicationRequest:
        """
        Raises:
            EntityNotFoundException: If the request does not exist
            AuthorizationException: If the caller is neither the customer nor the assigned pharmacy
        """
        request = await self.request_repo.find_by_id(request_id)
        if not request:
            raise EntityNotFoundException("Request", request_id)
        if request.customer_id == identity.user_id:
            return request

        user = await self.user_repo.find_by_id(identity.user_id)
        if user and user.pharmacy_id and user.pharmacy_id == request.pharmacy_id:
            return request

        raise AuthorizationException("chat", resource=f"request:{request_id}", user_id=identity.user_id)


class GetChatMessagesUseCase(_ChatAccess):
    async def execute(self, identity: Identity, request_id: str) -> Conversation:
        await self._authorize(identity, request_id)
        chat = await self.chat_repo.find_by_request(request_id)
        if not chat:
            return Conversation()
        return Conversation(chat_id=chat.id, messages=await self.chat_repo.find_messages(chat.id))


class SendChatMessageUseCase(_ChatAccess):
    """
    Append a message, relay it to the request room and notify the other side.
    """

    def __init__(
        self,
        chat_repository: IChatRepository,
        request_repository: IMedicationRequestRepository,
        user_repository: IUserRepository,
        pharmacy_repository: IPharmacyRepository,
        publisher: IBroadcastPublisher,
        notifier: INotifier | None = None,
    ):
        super().__init__(chat_repository, request_repository, user_repository)
        self.pharmacy_repo = pharmacy_repository
        self.publisher = publisher
        self.notifier = notifier

    async def execute(
        self,
        identity: Identity,
        request_id: str,
        message: str | None,
        type: ChatMessageType = ChatMessageType.TEXT,
        image_url: str | None = None,
    ) -> ChatMessage:
        request = await self._authorize(identity, request_id)

        chat = await self.chat_repo.find_by_request(request_id)
        if not chat:
            chat = await self.chat_repo.create(
                Chat.for_request(
                    request_id=request_id,
                    customer_id=request.customer_id,
                    customer_name=request.customer_name,
                    pharmacy_id=request.pharmacy_id,
                    pharmacy_name=request.pharmacy_name,
                )
            )

        sender_role = "customer" if identity.user_id == request.customer_id else "partner"
        chat_message = ChatMessage.compose(
            chat_id=chat.id or "",
            sender_id=identity.user_id,
            sender_role=sender_role,
            message=message,
            type=type,
            image_url=image_url,
        )
        saved = await self.chat_repo.add_message(chat, chat_message)

        await publish_quietly(
            self.publisher,
            request_room(request_id),
            CHAT_MESSAGE,
            {
                "requestId": request_id,
                "message": saved.message,
                "timestamp": saved.created_at.isoformat(),
                "id": saved.id,
                "senderId": saved.sender_id,
                "senderRole": saved.sender_role,
                "type": saved.type.value,
                "imageUrl": saved.image_url,
            },
        )

        recipient = await self._counterpart(request, sender_role)
        if recipient:
            await notify_quietly(
                self.notifier,
                recipient,
                title="New message",
                message=saved.preview,
                type="chat",
                related_id=request_id,
            )
        return saved

    async def _counterpart(self, request: MedicationRequest, sender_role: str) -> str | None:
        if sender_role == "partner":
            return request.customer_id
        if not request.pharmacy_id:
            return None
        pharmacy = await self.pharmacy_repo.find_by_id(request.pharmacy_id)
        return pharmacy.owner_id if pharmacy else None


class ListChatsUseCase:
    def __init__(self, chat_repository: IChatRepository, user_repository: IUserRepository):
        self.chat_repo = chat_repository
        self.user_repo = user_repository

    async def execute(self, identity: Identity) -> list[Chat]:
        user = await self.user_repo.find_by_id(identity.user_id)
        pharmacy_id = user.pharmacy_id if user else None
        return await self.chat_repo.find_for_participant(identity.user_id, pharmacy_id=pharmacy_id)
