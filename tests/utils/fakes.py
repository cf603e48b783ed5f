"""
In-memory implementations of the application ports.

Stored entities are copied on the way in and out so use cases cannot mutate
"database" rows without going through the repository, the same as with
SQLAlchemy. Request and pharmacy lookups yield to the event loop once, letting
concurrent use cases interleave the way they would against a real database.
"""

import asyncio
from copy import deepcopy
from datetime import datetime
from typing import Any

from pharmalink.core.domain import generate_id
from pharmalink.domains.chat.domain.entities import Chat, ChatMessage
from pharmalink.domains.notifications.application.ports import PushResult
from pharmalink.domains.notifications.domain.entities import Notification
from pharmalink.domains.pharmacies.domain.entities import Pharmacy
from pharmalink.domains.pharmacies.domain.value_objects import PharmacyStatus
from pharmalink.domains.requests.domain.entities import MedicationRequest
from pharmalink.domains.requests.domain.value_objects import RequestStatus
from pharmalink.domains.users.domain.entities import Identity, User

USER_COLUMNS = ("phone", "email", "name", "role", "pharmacy_id")


# ============================================================================
# REPOSITORIES
# ============================================================================


class InMemoryPharmacyRepository:
    def __init__(self, pharmacies: list[Pharmacy] | None = None):
        self.rows: dict[str, Pharmacy] = {}
        for pharmacy in pharmacies or []:
            self.rows[pharmacy.id] = deepcopy(pharmacy)

    async def create(self, pharmacy: Pharmacy) -> Pharmacy:
        self.rows[pharmacy.id] = deepcopy(pharmacy)
        return pharmacy

    async def find_by_id(self, pharmacy_id: str) -> Pharmacy | None:
        row = deepcopy(self.rows.get(pharmacy_id))
        await asyncio.sleep(0)
        return row

    async def find_by_status(self, status: PharmacyStatus) -> list[Pharmacy]:
        return [deepcopy(p) for p in self.rows.values() if p.status == status]

    async def find_all(self, status: PharmacyStatus | None = None, limit: int = 20) -> list[Pharmacy]:
        rows = [p for p in self.rows.values() if status is None or p.status == status]
        rows.sort(key=lambda p: p.created_at, reverse=True)
        return [deepcopy(p) for p in rows[:limit]]

    async def save(self, pharmacy: Pharmacy) -> Pharmacy:
        self.rows[pharmacy.id] = deepcopy(pharmacy)
        return deepcopy(pharmacy)

    async def update_fields(self, pharmacy_id: str, fields: dict[str, Any]) -> Pharmacy | None:
        row = self.rows.get(pharmacy_id)
        if row is None:
            return None
        for key, value in fields.items():
            setattr(row, key, value)
        return deepcopy(row)

    async def count_by_status(self, since: datetime | None = None) -> dict[PharmacyStatus, int]:
        counts: dict[PharmacyStatus, int] = {}
        for pharmacy in self.rows.values():
            if since and pharmacy.created_at < since:
                continue
            counts[pharmacy.status] = counts.get(pharmacy.status, 0) + 1
        return counts

    async def find_recent(self, limit: int = 5) -> list[Pharmacy]:
        rows = sorted(self.rows.values(), key=lambda p: p.updated_at, reverse=True)
        return [deepcopy(p) for p in rows[:limit]]


class InMemoryRequestRepository:
    """
    Medication requests plus the conditional claim.

    `claim` checks and writes without awaiting in between, which is what the
    single conditional UPDATE guarantees in the SQL implementation.
    """

    def __init__(self, pharmacy_repository: InMemoryPharmacyRepository | None = None):
        self.rows: dict[str, MedicationRequest] = {}
        self.pharmacy_repo = pharmacy_repository

    async def create(self, request: MedicationRequest) -> MedicationRequest:
        self.rows[request.id] = deepcopy(request)
        return request

    async def find_by_id(self, request_id: str) -> MedicationRequest | None:
        # Snapshot before yielding, like a SELECT that completes before a concurrent UPDATE
        row = deepcopy(self.rows.get(request_id))
        await asyncio.sleep(0)
        return row

    async def find_open(self, limit: int = 50) -> list[MedicationRequest]:
        rows = [r for r in self.rows.values() if r.status.is_open()]
        rows.sort(key=lambda r: r.created_at, reverse=True)
        return [deepcopy(r) for r in rows[:limit]]

    async def find_by_customer(self, customer_id: str) -> list[MedicationRequest]:
        rows = [r for r in self.rows.values() if r.customer_id == customer_id]
        rows.sort(key=lambda r: r.created_at, reverse=True)
        return [deepcopy(r) for r in rows]

    async def find_by_pharmacy(self, pharmacy_id: str) -> list[MedicationRequest]:
        rows = [r for r in self.rows.values() if r.pharmacy_id == pharmacy_id]
        rows.sort(key=lambda r: r.created_at, reverse=True)
        return [deepcopy(r) for r in rows]

    async def count_open(self, now: datetime) -> int:
        return sum(1 for r in self.rows.values() if r.status.is_open() and r.expires_at > now)

    async def count_by_pharmacy(
        self,
        pharmacy_id: str,
        since: datetime | None = None,
        until: datetime | None = None,
    ) -> int:
        count = 0
        for row in self.rows.values():
            if row.pharmacy_id != pharmacy_id:
                continue
            if since and row.updated_at < since:
                continue
            if until and row.updated_at >= until:
                continue
            count += 1
        return count

    async def claim(self, request: MedicationRequest, now: datetime, count_for_pharmacy: bool = False) -> bool:
        stored = self.rows.get(request.id)
        if stored is None or not stored.status.is_open() or stored.expires_at <= now:
            return False

        self.rows[request.id] = deepcopy(request)
        if count_for_pharmacy and self.pharmacy_repo and request.pharmacy_id in self.pharmacy_repo.rows:
            pharmacy = self.pharmacy_repo.rows[request.pharmacy_id]
            pharmacy.total_requests += 1
            pharmacy.total_accepted += 1
        return True

    async def mark_cancelled(self, request: MedicationRequest) -> bool:
        stored = self.rows.get(request.id)
        if stored is None or not stored.status.is_open():
            return False
        stored.status = RequestStatus.CANCELLED
        stored.updated_at = request.updated_at
        return True


class InMemoryUserRepository:
    def __init__(self, users: list[User] | None = None):
        self.rows: dict[str, User] = {u.id: deepcopy(u) for u in users or []}

    async def find_by_id(self, user_id: str) -> User | None:
        row = self.rows.get(user_id)
        return deepcopy(row) if row else None

    async def get_or_create(self, identity: Identity) -> User:
        if identity.user_id not in self.rows:
            self.rows[identity.user_id] = User.from_identity(identity)
        return deepcopy(self.rows[identity.user_id])

    async def save(self, user: User) -> User:
        self.rows[user.id] = deepcopy(user)
        return user

    async def update_fields(self, user_id: str, fields: dict[str, Any]) -> User | None:
        row = self.rows.get(user_id)
        if row is None:
            return None
        for key, value in fields.items():
            if key in USER_COLUMNS:
                setattr(row, key, value)
            else:
                row.profile[key] = value
        return deepcopy(row)


class InMemoryChatRepository:
    def __init__(self) -> None:
        self.chats: dict[str, Chat] = {}
        self.messages: dict[str, list[ChatMessage]] = {}

    async def find_by_request(self, request_id: str) -> Chat | None:
        for chat in self.chats.values():
            if chat.request_id == request_id:
                return deepcopy(chat)
        return None

    async def create(self, chat: Chat) -> Chat:
        self.chats[chat.id] = deepcopy(chat)
        self.messages.setdefault(chat.id, [])
        return chat

    async def add_message(self, chat: Chat, message: ChatMessage) -> ChatMessage:
        self.messages.setdefault(chat.id, []).append(deepcopy(message))
        self.chats[chat.id].record(message)
        return message

    async def find_messages(self, chat_id: str) -> list[ChatMessage]:
        return sorted((deepcopy(m) for m in self.messages.get(chat_id, [])), key=lambda m: m.created_at)

    async def find_for_participant(
        self,
        customer_id: str,
        pharmacy_id: str | None = None,
        limit: int = 50,
    ) -> list[Chat]:
        chats = [
            c
            for c in self.chats.values()
            if c.customer_id == customer_id or (pharmacy_id and c.pharmacy_id == pharmacy_id)
        ]
        chats.sort(key=lambda c: c.last_message_at or c.created_at, reverse=True)
        return [deepcopy(c) for c in chats[:limit]]


class InMemoryNotificationRepository:
    def __init__(self) -> None:
        self.rows: dict[str, Notification] = {}

    async def create(self, notification: Notification) -> Notification:
        if notification.id is None:
            notification.id = generate_id()
        self.rows[notification.id] = deepcopy(notification)
        return notification

    async def find_by_id(self, notification_id: str) -> Notification | None:
        row = self.rows.get(notification_id)
        return deepcopy(row) if row else None

    async def find_by_user(self, user_id: str, limit: int = 50) -> list[Notification]:
        rows = [n for n in self.rows.values() if n.user_id == user_id]
        rows.sort(key=lambda n: n.created_at, reverse=True)
        return [deepcopy(n) for n in rows[:limit]]

    async def mark_read(self, notification_id: str) -> None:
        self.rows[notification_id].is_read = True

    async def mark_all_read(self, user_id: str) -> int:
        updated = 0
        for row in self.rows.values():
            if row.user_id == user_id and not row.is_read:
                row.is_read = True
                updated += 1
        return updated


class InMemoryDeviceTokenRepository:
    def __init__(self, tokens: dict[str, list[str]] | None = None):
        self.tokens: dict[str, list[str]] = {k: list(v) for k, v in (tokens or {}).items()}

    async def register(self, user_id: str, token: str) -> bool:
        user_tokens = self.tokens.setdefault(user_id, [])
        if token in user_tokens:
            return False
        user_tokens.append(token)
        return True

    async def find_tokens(self, user_id: str) -> list[str]:
        return list(self.tokens.get(user_id, []))

    async def delete_tokens(self, user_id: str, tokens: list[str]) -> int:
        before = self.tokens.get(user_id, [])
        after = [t for t in before if t not in tokens]
        self.tokens[user_id] = after
        return len(before) - len(after)


# ============================================================================
# SIDE-EFFECT PORTS
# ============================================================================


class RecordingPublisher:
    """Broadcast publisher that records every publish."""

    def __init__(self, delivered: int = 1, fail: bool = False):
        self.published: list[tuple[str, str, dict[str, Any]]] = []
        self.delivered = delivered
        self.fail = fail

    async def publish(self, room: str, event: str, payload: dict[str, Any]) -> int:
        if self.fail:
            raise RuntimeError("socket layer down")
        self.published.append((room, event, payload))
        return self.delivered

    def events(self) -> list[str]:
        return [event for _, event, _ in self.published]


class RecordingNotifier:
    def __init__(self, fail: bool = False):
        self.sent: list[dict[str, Any]] = []
        self.fail = fail

    async def notify(self, user_id: str, **kwargs: Any) -> None:
        if self.fail:
            raise RuntimeError("notification store down")
        self.sent.append({"user_id": user_id, **kwargs})


class StubPushGateway:
    """Push gateway returning a fixed result and recording calls."""

    def __init__(self, result: PushResult | None = None, fail: bool = False):
        self.result = result or PushResult()
        self.fail = fail
        self.calls: list[dict[str, Any]] = []
        self.closed = False

    async def send(
        self,
        tokens: list[str],
        title: str,
        body: str,
        data: dict[str, str] | None = None,
    ) -> PushResult:
        self.calls.append({"tokens": tokens, "title": title, "body": body, "data": data})
        if self.fail:
            raise RuntimeError("push provider unreachable")
        return self.result

    async def close(self) -> None:
        self.closed = True
