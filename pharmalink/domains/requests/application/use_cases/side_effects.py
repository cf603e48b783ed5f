"""
Best-effort side effects of lifecycle transitions.

The persisted request is the authoritative state; a failed publish or push
is logged and never reaches the caller.
"""

import logging
from typing import Any

from pharmalink.domains.requests.application.ports import IBroadcastPublisher, INotifier

logger = logging.getLogger(__name__)


async def publish_quietly(publisher: IBroadcastPublisher, room: str, event: str, payload: dict[str, Any]) -> int:
    try:
        return await publisher.publish(room, event, payload)
    except Exception as e:
        logger.error(f"Realtime publish of {event} to {room} failed (non-fatal): {e}")
        return 0


async def notify_quietly(notifier: INotifier | None, user_id: str, **kwargs: Any) -> None:
    if notifier is None:
        return
    try:
        await notifier.notify(user_id, **kwargs)
    except Exception as e:
        logger.error(f"Notification to {user_id} failed (non-fatal): {e}")
