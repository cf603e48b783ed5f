"""
Realtime event names and room naming.

Every server-to-client frame is a JSON envelope `{"event": <name>, "data": <payload>}`.
"""

# Rooms
PARTNERS_ROOM = "partners"
REQUEST_ROOM_PREFIX = "request:"

# Server -> client
REQUEST_NEW = "request:new"
REQUEST_CANCELLED = "request:cancelled"
REQUEST_PHARMACY_RESPONDED = "request:pharmacy-responded"
CHAT_MESSAGE = "chat:message"
ERROR = "error"

# Client -> server
PARTNER_REGISTER = "partner:register"
JOIN_REQUEST = "join:request"
LEAVE_REQUEST = "leave:request"
CHAT_SEND = "chat:send"


def request_room(request_id: str) -> str:
    """Per-request room joined by whoever is tracking that request."""
    return f"{REQUEST_ROOM_PREFIX}{request_id}"
