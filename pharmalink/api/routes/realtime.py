"""
Realtime WebSocket endpoint.
"""

from fastapi import APIRouter, WebSocket

from pharmalink.realtime import get_realtime_hub
from pharmalink.realtime.socket_handler import serve_socket

router = APIRouter(tags=["Realtime"])


@router.websocket("/ws")
async def realtime_socket(websocket: WebSocket) -> None:
    """Partners register here for `request:new`; any client may join a request room."""
    await serve_socket(websocket, get_realtime_hub())
