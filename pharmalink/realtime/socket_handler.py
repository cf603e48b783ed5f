"""
WebSocket Session Handler

Reads JSON frames `{"event": ..., "data": {...}}` from one connection and
applies them in arrival order. Malformed frames get an `error` reply and are
otherwise ignored; the connection stays open.
"""

import json
import logging
from typing import Any

from fastapi import WebSocket, WebSocketDisconnect
from pydantic import BaseModel, Field, ValidationError

from pharmalink.core.domain import generate_id, utc_now
from pharmalink.domains.chat.domain.entities import MAX_MESSAGE_LENGTH
from pharmalink.realtime.events import (
    CHAT_MESSAGE,
    CHAT_SEND,
    ERROR,
    JOIN_REQUEST,
    LEAVE_REQUEST,
    PARTNER_REGISTER,
    PARTNERS_ROOM,
    request_room,
)
from pharmalink.realtime.hub import RealtimeHub

logger = logging.getLogger(__name__)


# Inbound payloads


class PartnerRegisterPayload(BaseModel):
    pharmacyId: str = Field(..., min_length=1)
    lat: float | None = Field(None, ge=-90, le=90)
    lng: float | None = Field(None, ge=-180, le=180)


class RequestRoomPayload(BaseModel):
    requestId: str = Field(..., min_length=1)


class ChatSendPayload(BaseModel):
    requestId: str = Field(..., min_length=1)
    message: str = Field(..., min_length=1, max_length=MAX_MESSAGE_LENGTH)


class MalformedFrame(Exception):
    def __init__(self, message: str, event: str | None = None):
        super().__init__(message)
        self.message = message
        self.event = event


class SocketSession:
    """Event handling for a single connection."""

    def __init__(self, hub: RealtimeHub, conn_id: str):
        self.hub = hub
        self.conn_id = conn_id
        self._handlers = {
            PARTNER_REGISTER: self._on_partner_register,
            JOIN_REQUEST: self._on_join_request,
            LEAVE_REQUEST: self._on_leave_request,
            CHAT_SEND: self._on_chat_send,
        }

    async def handle_text(self, text: str) -> None:
        try:
            event, data = self._parse(text)
            handler = self._handlers.get(event)
            if handler is None:
                raise MalformedFrame(f"Unknown event '{event}'", event)
            await handler(data)
        except MalformedFrame as e:
            logger.debug(f"Malformed frame from {self.conn_id}: {e.message}")
            await self.hub.dispatcher.send_to(self.conn_id, ERROR, {"message": e.message, "event": e.event})

    @staticmethod
    def _parse(text: str) -> tuple[str, dict[str, Any]]:
        try:
            frame = json.loads(text)
        except ValueError as e:
            raise MalformedFrame("Frame is not valid JSON") from e
        if not isinstance(frame, dict) or not isinstance(frame.get("event"), str):
            raise MalformedFrame("Frame must be an object with an 'event' name")

        data = frame.get("data") or {}
        if not isinstance(data, dict):
            raise MalformedFrame("'data' must be an object", frame["event"])
        return frame["event"], data

    @staticmethod
    def _validate(model: type[BaseModel], event: str, data: dict[str, Any]) -> Any:
        try:
            return model.model_validate(data)
        except ValidationError as e:
            fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in e.errors())
            raise MalformedFrame(f"Invalid payload: {fields}", event) from e

    async def _on_partner_register(self, data: dict[str, Any]) -> None:
        payload = self._validate(PartnerRegisterPayload, PARTNER_REGISTER, data)
        self.hub.clients.register_partner(self.conn_id, payload.pharmacyId, payload.lat, payload.lng)
        self.hub.rooms.join(self.conn_id, PARTNERS_ROOM)
        logger.info(f"Partner {payload.pharmacyId} registered on {self.conn_id}")

    async def _on_join_request(self, data: dict[str, Any]) -> None:
        payload = self._validate(RequestRoomPayload, JOIN_REQUEST, data)
        self.hub.rooms.join(self.conn_id, request_room(payload.requestId))

    async def _on_leave_request(self, data: dict[str, Any]) -> None:
        payload = self._validate(RequestRoomPayload, LEAVE_REQUEST, data)
        self.hub.rooms.leave(self.conn_id, request_room(payload.requestId))

    async def _on_chat_send(self, data: dict[str, Any]) -> None:
        payload = self._validate(ChatSendPayload, CHAT_SEND, data)
        await self.hub.dispatcher.publish(
            request_room(payload.requestId),
            CHAT_MESSAGE,
            {
                "requestId": payload.requestId,
                "message": payload.message,
                "timestamp": utc_now().isoformat(),
            },
        )


async def serve_socket(websocket: WebSocket, hub: RealtimeHub) -> None:
    """Run one connection until the client goes away."""
    await websocket.accept()
    conn_id = generate_id()
    hub.dispatcher.attach(conn_id, websocket.send_json)
    session = SocketSession(hub, conn_id)
    logger.debug(f"Socket connected: {conn_id}")

    try:
        while True:
            text = await websocket.receive_text()
            await session.handle_text(text)
    except WebSocketDisconnect:
        logger.debug(f"Socket disconnected: {conn_id}")
    finally:
        hub.disconnect(conn_id)
