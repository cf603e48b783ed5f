"""
Broadcast Dispatcher

Fire-and-forget fan-out of events to every connection in a room.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any

from pharmalink.realtime.rooms import RoomRegistry

logger = logging.getLogger(__name__)

Sender = Callable[[dict[str, Any]], Awaitable[None]]


def envelope(event: str, payload: Any) -> dict[str, Any]:
    return {"event": event, "data": payload}


class BroadcastDispatcher:
    """
    Delivers `{"event", "data"}` frames to room members.

    No acknowledgment and no retry: a socket that fails is logged and
    skipped, and publish never raises.
    """

    def __init__(self, rooms: RoomRegistry):
        self.rooms = rooms
        self._senders: dict[str, Sender] = {}

    def attach(self, conn_id: str, send: Sender) -> None:
        self._senders[conn_id] = send

    def detach(self, conn_id: str) -> None:
        self._senders.pop(conn_id, None)

    @property
    def connection_count(self) -> int:
        return len(self._senders)

    async def send_to(self, conn_id: str, event: str, payload: Any) -> bool:
        """Deliver to one connection (used for replies such as `error`)."""
        send = self._senders.get(conn_id)
        if send is None:
            return False
        return await self._deliver(conn_id, send, envelope(event, payload))

    async def publish(self, room: str, event: str, payload: dict[str, Any]) -> int:
        """
        Returns:
            Number of connections the frame was delivered to
        """
        try:
            targets = [(c, self._senders[c]) for c in self.rooms.members(room) if c in self._senders]
            if not targets:
                logger.debug(f"No connections in {room} for {event}")
                return 0

            frame = envelope(event, payload)
            results = await asyncio.gather(*(self._deliver(c, send, frame) for c, send in targets))
            delivered = sum(results)
            logger.debug(f"{event} delivered to {delivered}/{len(targets)} connections in {room}")
            return delivered
        except Exception as e:
            logger.error(f"Publish of {event} to {room} failed: {e}")
            return 0

    async def _deliver(self, conn_id: str, send: Sender, frame: dict[str, Any]) -> bool:
        try:
            await send(frame)
            return True
        except Exception as e:
            logger.warning(f"Dropping {frame['event']} for connection {conn_id}: {e}")
            return False
