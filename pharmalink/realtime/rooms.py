"""
Room and connected-client registries.

Both are process-local and owned by the realtime module; only the socket
handler mutates them. Nothing here is a source of business truth.
"""

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from datetime import datetime

from pharmalink.core.domain import utc_now

logger = logging.getLogger(__name__)


class RoomRegistry:
    """Which connections belong to which rooms."""

    def __init__(self) -> None:
        self._members: dict[str, set[str]] = defaultdict(set)
        self._rooms_of: dict[str, set[str]] = defaultdict(set)

    def join(self, conn_id: str, room: str) -> bool:
        """
        Returns:
            False if the connection was already in the room
        """
        if conn_id in self._members[room]:
            return False
        self._members[room].add(conn_id)
        self._rooms_of[conn_id].add(room)
        return True

    def leave(self, conn_id: str, room: str) -> bool:
        members = self._members.get(room)
        if not members or conn_id not in members:
            return False
        members.discard(conn_id)
        if not members:
            del self._members[room]
        rooms = self._rooms_of.get(conn_id)
        if rooms is not None:
            rooms.discard(room)
            if not rooms:
                del self._rooms_of[conn_id]
        return True

    def members(self, room: str) -> set[str]:
        return set(self._members.get(room, ()))

    def rooms_of(self, conn_id: str) -> set[str]:
        return set(self._rooms_of.get(conn_id, ()))

    def drop(self, conn_id: str) -> set[str]:
        """Remove a connection from every room; returns the rooms it left."""
        rooms = self.rooms_of(conn_id)
        for room in rooms:
            self.leave(conn_id, room)
        return rooms

    @property
    def room_count(self) -> int:
        return len(self._members)


@dataclass(frozen=True)
class PartnerRegistration:
    pharmacy_id: str
    lat: float | None = None
    lng: float | None = None
    registered_at: datetime = field(default_factory=utc_now)


class ConnectedClientRegistry:
    """Live partner connections and their last reported coordinates."""

    def __init__(self) -> None:
        self._partners: dict[str, PartnerRegistration] = {}

    def register_partner(
        self,
        conn_id: str,
        pharmacy_id: str,
        lat: float | None = None,
        lng: float | None = None,
    ) -> PartnerRegistration:
        registration = PartnerRegistration(pharmacy_id=pharmacy_id, lat=lat, lng=lng)
        self._partners[conn_id] = registration
        return registration

    def unregister(self, conn_id: str) -> PartnerRegistration | None:
        return self._partners.pop(conn_id, None)

    def get(self, conn_id: str) -> PartnerRegistration | None:
        return self._partners.get(conn_id)

    def partners(self) -> dict[str, PartnerRegistration]:
        return dict(self._partners)
