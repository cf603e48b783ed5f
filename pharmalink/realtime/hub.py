"""
Realtime Hub

Process-wide owner of the room registry, the connected-client registry and
the dispatcher that publishes through them.
"""

import logging

from pharmalink.realtime.dispatcher import BroadcastDispatcher
from pharmalink.realtime.rooms import ConnectedClientRegistry, RoomRegistry

logger = logging.getLogger(__name__)


class RealtimeHub:
    def __init__(self) -> None:
        self.rooms = RoomRegistry()
        self.clients = ConnectedClientRegistry()
        self.dispatcher = BroadcastDispatcher(self.rooms)

    def disconnect(self, conn_id: str) -> None:
        """Forget a connection everywhere."""
        rooms = self.rooms.drop(conn_id)
        registration = self.clients.unregister(conn_id)
        self.dispatcher.detach(conn_id)
        if registration:
            logger.info(f"Partner {registration.pharmacy_id} disconnected ({conn_id})")
        logger.debug(f"Connection {conn_id} left {len(rooms)} rooms")

    def stats(self) -> dict[str, int]:
        return {
            "connections": self.dispatcher.connection_count,
            "partners": len(self.clients.partners()),
            "rooms": self.rooms.room_count,
        }


_hub: RealtimeHub | None = None


def get_realtime_hub() -> RealtimeHub:
    """Return the process-wide hub (created on first use)."""
    global _hub
    if _hub is None:
        _hub = RealtimeHub()
    return _hub
