"""
Realtime layer: rooms, connected clients and event broadcast over WebSocket.
"""

from pharmalink.realtime.dispatcher import BroadcastDispatcher
from pharmalink.realtime.hub import RealtimeHub, get_realtime_hub
from pharmalink.realtime.rooms import ConnectedClientRegistry, PartnerRegistration, RoomRegistry

__all__ = [
    "BroadcastDispatcher",
    "ConnectedClientRegistry",
    "PartnerRegistration",
    "RealtimeHub",
    "RoomRegistry",
    "get_realtime_hub",
]
