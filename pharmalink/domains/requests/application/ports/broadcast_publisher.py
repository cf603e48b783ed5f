"""
Realtime Publisher Port
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class IBroadcastPublisher(Protocol):
    """Room-scoped realtime publish."""

    async def publish(self, room: str, event: str, payload: dict[str, Any]) -> int:
        """
        Publish an event to every member of a room.

        Returns:
            Number of connections the event was delivered to
        """
        ...
