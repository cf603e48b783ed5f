"""
Unit tests for notification fanout and the FCM push gateway.
"""

import json
from unittest.mock import MagicMock

import httpx
import pytest
from tenacity import wait_none

from pharmalink.domains.notifications.application.fanout import NotificationFanout
from pharmalink.domains.notifications.application.ports import PushResult
from pharmalink.domains.notifications.domain.entities import NotificationType
from pharmalink.domains.notifications.infrastructure.push import FCMPushGateway, NoopPushGateway
from tests.utils import InMemoryDeviceTokenRepository, StubPushGateway

USER = "+919800000001"


# ============================================================================
# FANOUT
# ============================================================================


@pytest.mark.unit
class TestNotificationFanout:
    @pytest.mark.asyncio
    async def test_persists_then_pushes_to_every_device(self, notification_repository):
        tokens = InMemoryDeviceTokenRepository({USER: ["tok-a", "tok-b"]})
        gateway = StubPushGateway(PushResult(success_count=2))
        fanout = NotificationFanout(notification_repository, tokens, gateway)

        notification = await fanout.notify(USER, "Pharmacy responded", "Ready in 15 min", "status", related_id="r-1")

        stored = await notification_repository.find_by_id(notification.id)
        assert stored.type == NotificationType.STATUS
        assert stored.is_read is False

        call = gateway.calls[0]
        assert call["tokens"] == ["tok-a", "tok-b"]
        assert call["title"] == "Pharmacy responded"
        assert call["data"]["relatedId"] == "r-1"
        assert call["data"]["type"] == "status"

    @pytest.mark.asyncio
    async def test_invalid_tokens_are_pruned(self, notification_repository):
        tokens = InMemoryDeviceTokenRepository({USER: ["tok-a", "tok-dead"]})
        gateway = StubPushGateway(PushResult(success_count=1, failure_count=1, invalid_tokens=["tok-dead"]))
        fanout = NotificationFanout(notification_repository, tokens, gateway)

        await fanout.notify(USER, "Hi", "Hello", "system")

        assert tokens.tokens[USER] == ["tok-a"]

    @pytest.mark.asyncio
    async def test_push_failure_is_swallowed(self, notification_repository):
        tokens = InMemoryDeviceTokenRepository({USER: ["tok-a"]})
        fanout = NotificationFanout(notification_repository, tokens, StubPushGateway(fail=True))

        notification = await fanout.notify(USER, "Hi", "Hello", "chat")

        assert notification.id in notification_repository.rows
        assert tokens.tokens[USER] == ["tok-a"]

    @pytest.mark.asyncio
    async def test_no_devices_no_push(self, notification_repository, device_token_repository):
        gateway = StubPushGateway()
        fanout = NotificationFanout(notification_repository, device_token_repository, gateway)

        await fanout.notify(USER, "Hi", "Hello", "request")

        assert gateway.calls == []


# ============================================================================
# FCM GATEWAY
# ============================================================================


def fcm_handler(request: httpx.Request) -> httpx.Response:
    token = json.loads(request.content)["message"]["token"]
    if token == "good":
        return httpx.Response(200, json={"name": "projects/p/messages/1"})
    if token == "gone":
        return httpx.Response(404, json={"error": {"status": "NOT_FOUND"}})
    if token == "stale":
        return httpx.Response(
            400,
            json={
                "error": {
                    "status": "INVALID_ARGUMENT",
                    "details": [{"errorCode": "UNREGISTERED"}],
                }
            },
        )
    return httpx.Response(403, json={"error": {"status": "PERMISSION_DENIED"}})


@pytest.mark.unit
class TestFCMPushGateway:
    @pytest.mark.asyncio
    async def test_classifies_each_token(self):
        gateway = FCMPushGateway("pharmalink-test", "access-token", transport=httpx.MockTransport(fcm_handler))

        try:
            result = await gateway.send(["good", "gone", "stale", "forbidden"], "Title", "Body", {"requestId": "r-1"})
        finally:
            await gateway.close()

        assert result.success_count == 1
        assert result.failure_count == 3
        assert result.invalid_tokens == ["gone", "stale"]

    @pytest.mark.asyncio
    async def test_request_shape(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={})

        gateway = FCMPushGateway("pharmalink-test", "access-token", transport=httpx.MockTransport(handler))
        try:
            await gateway.send(["good"], "Title", "Body", {"count": "3"})
        finally:
            await gateway.close()

        request = seen[0]
        body = json.loads(request.content)
        assert str(request.url) == "https://fcm.googleapis.com/v1/projects/pharmalink-test/messages:send"
        assert request.headers["Authorization"] == "Bearer access-token"
        assert body["message"]["notification"] == {"title": "Title", "body": "Body"}
        assert body["message"]["data"] == {"count": "3"}

    @pytest.mark.asyncio
    async def test_noop_gateway_reports_nothing_sent(self):
        result = await NoopPushGateway().send(["a", "b"], "Title", "Body")

        assert result == PushResult()

    def test_backoff_is_exponential_with_jitter(self):
        wait = FCMPushGateway._post_with_retry.retry.wait

        first = [wait(MagicMock(attempt_number=1)) for _ in range(20)]
        late = [wait(MagicMock(attempt_number=10)) for _ in range(20)]

        assert all(0.5 <= seconds <= 1.5 for seconds in first)
        assert all(5.0 <= seconds <= 6.0 for seconds in late)

    @pytest.mark.asyncio
    async def test_server_errors_are_retried(self):
        statuses = iter([503, 200])

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(next(statuses), json={})

        gateway = FCMPushGateway("pharmalink-test", "access-token", transport=httpx.MockTransport(handler))
        post = FCMPushGateway._post_with_retry.retry_with(wait=wait_none())
        try:
            response = await post(gateway, {"message": {"token": "good"}})
        finally:
            await gateway.close()

        assert response.status_code == 200
