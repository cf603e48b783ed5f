"""
Unit tests for inbound WebSocket event handling.
"""

import json

import pytest

from pharmalink.realtime import RealtimeHub
from pharmalink.realtime.events import CHAT_MESSAGE, ERROR, PARTNERS_ROOM, request_room
from pharmalink.realtime.socket_handler import SocketSession


class Outbox:
    def __init__(self):
        self.frames: list[dict] = []

    async def send(self, frame: dict) -> None:
        self.frames.append(frame)


@pytest.fixture
def hub():
    return RealtimeHub()


def connect(hub: RealtimeHub, conn_id: str) -> tuple[SocketSession, Outbox]:
    outbox = Outbox()
    hub.dispatcher.attach(conn_id, outbox.send)
    return SocketSession(hub, conn_id), outbox


def frame(event: str, data: dict | None = None) -> str:
    return json.dumps({"event": event, "data": data or {}})


@pytest.mark.unit
@pytest.mark.realtime
class TestSocketSession:
    @pytest.mark.asyncio
    async def test_partner_register_joins_partners_room(self, hub):
        session, outbox = connect(hub, "c1")

        await session.handle_text(frame("partner:register", {"pharmacyId": "ph-1", "lat": 12.97, "lng": 77.59}))

        assert hub.rooms.members(PARTNERS_ROOM) == {"c1"}
        assert hub.clients.get("c1").pharmacy_id == "ph-1"
        assert outbox.frames == []

    @pytest.mark.asyncio
    async def test_join_and_leave_request_room(self, hub):
        session, _ = connect(hub, "c1")

        await session.handle_text(frame("join:request", {"requestId": "r1"}))
        assert hub.rooms.members(request_room("r1")) == {"c1"}

        await session.handle_text(frame("leave:request", {"requestId": "r1"}))
        assert hub.rooms.members(request_room("r1")) == set()

    @pytest.mark.asyncio
    async def test_chat_send_relays_to_request_room(self, hub):
        sender, sender_box = connect(hub, "c1")
        listener, listener_box = connect(hub, "c2")
        await sender.handle_text(frame("join:request", {"requestId": "r1"}))
        await listener.handle_text(frame("join:request", {"requestId": "r1"}))

        await sender.handle_text(frame("chat:send", {"requestId": "r1", "message": "Ready?"}))

        for box in (sender_box, listener_box):
            event = box.frames[0]
            assert event["event"] == CHAT_MESSAGE
            assert event["data"]["requestId"] == "r1"
            assert event["data"]["message"] == "Ready?"
            assert "timestamp" in event["data"]

    @pytest.mark.parametrize(
        "text,event",
        [
            ("not json", None),
            (json.dumps(["partner:register"]), None),
            (frame("partner:dance"), "partner:dance"),
            (frame("partner:register", {"lat": 12.9}), "partner:register"),
            (frame("partner:register", {"pharmacyId": "ph-1", "lat": 123}), "partner:register"),
            (frame("join:request"), "join:request"),
            (frame("chat:send", {"requestId": "r1", "message": ""}), "chat:send"),
            (json.dumps({"event": "join:request", "data": "r1"}), "join:request"),
        ],
    )
    @pytest.mark.asyncio
    async def test_malformed_frames_get_an_error_reply(self, hub, text, event):
        session, outbox = connect(hub, "c1")

        await session.handle_text(text)

        assert len(outbox.frames) == 1
        reply = outbox.frames[0]
        assert reply["event"] == ERROR
        assert reply["data"]["event"] == event
        assert reply["data"]["message"]
        assert hub.rooms.rooms_of("c1") == set()

    @pytest.mark.asyncio
    async def test_session_survives_a_bad_frame(self, hub):
        session, _ = connect(hub, "c1")

        await session.handle_text("{")
        await session.handle_text(frame("partner:register", {"pharmacyId": "ph-1"}))

        assert hub.rooms.members(PARTNERS_ROOM) == {"c1"}
