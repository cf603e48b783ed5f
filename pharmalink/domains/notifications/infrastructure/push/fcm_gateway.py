"""
Firebase Cloud Messaging Push Gateway

Sends one HTTP v1 request per device token.

Response handling:
- 2xx: delivered
- 404, or error code UNREGISTERED / INVALID_ARGUMENT: token is dead, prune it
- 500/502/503/504: retried with exponential backoff (tenacity)
- anything else: counted as a failure, token kept
"""

import asyncio
import logging
from typing import Any

import httpx
from tenacity import (
    RetryError,
    before_sleep_log,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
    wait_random,
)

from pharmalink.domains.notifications.application.ports import IPushGateway, PushResult

logger = logging.getLogger(__name__)

RETRYABLE_STATUS_CODES = frozenset({500, 502, 503, 504})
INVALID_TOKEN_ERRORS = frozenset({"UNREGISTERED", "INVALID_ARGUMENT"})


class PushRetryableError(Exception):
    """Transient FCM server error."""


class FCMPushGateway(IPushGateway):
    """
    FCM HTTP v1 client.

    Uses a persistent AsyncClient for connection reuse; `transport` lets tests
    plug in `httpx.MockTransport`.
    """

    def __init__(
        self,
        project_id: str,
        access_token: str,
        base_url: str = "https://fcm.googleapis.com/v1",
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._url = f"{base_url.rstrip('/')}/projects/{project_id}/messages:send"
        self._access_token = access_token
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def initialize(self) -> None:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout, transport=self._transport)

    async def close(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    async def _ensure_client(self) -> httpx.AsyncClient:
        if self._client is None:
            await self.initialize()
        return self._client  # type: ignore

    async def send(
        self,
        tokens: list[str],
        title: str,
        body: str,
        data: dict[str, str] | None = None,
    ) -> PushResult:
        outcomes = await asyncio.gather(*(self._send_one(token, title, body, data or {}) for token in tokens))

        result = PushResult()
        for token, outcome in zip(tokens, outcomes):
            if outcome == "ok":
                result.success_count += 1
            else:
                result.failure_count += 1
                if outcome == "invalid":
                    result.invalid_tokens.append(token)
        return result

    async def _send_one(self, token: str, title: str, body: str, data: dict[str, str]) -> str:
        payload = {
            "message": {
                "token": token,
                "notification": {"title": title, "body": body},
                "data": {k: str(v) for k, v in data.items()},
            }
        }
        try:
            response = await self._post_with_retry(payload)
        except (RetryError, PushRetryableError, httpx.HTTPError) as e:
            logger.warning(f"FCM send failed for token {token[:12]}...: {e}")
            return "failed"

        if response.is_success:
            return "ok"
        if self._is_invalid_token(response):
            return "invalid"

        logger.warning(f"FCM rejected message ({response.status_code}): {response.text[:200]}")
        return "failed"

    @retry(
        retry=retry_if_exception_type(PushRetryableError),
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=0.5, max=5.0) + wait_random(0, 1),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True,
    )
    async def _post_with_retry(self, payload: dict[str, Any]) -> httpx.Response:
        client = await self._ensure_client()
        response = await client.post(
            self._url,
            headers={
                "Authorization": f"Bearer {self._access_token}",
                "Content-Type": "application/json",
            },
            json=payload,
        )
        if response.status_code in RETRYABLE_STATUS_CODES:
            raise PushRetryableError(f"FCM server error {response.status_code}")
        return response

    @staticmethod
    def _is_invalid_token(response: httpx.Response) -> bool:
        if response.status_code == 404:
            return True
        try:
            error = response.json().get("error", {})
        except ValueError:
            return False

        codes = {error.get("status")}
        for detail in error.get("details", []):
            codes.add(detail.get("errorCode"))
        return bool(codes & INVALID_TOKEN_ERRORS)


class NoopPushGateway(IPushGateway):
    """Used when no push credentials are configured."""

    async def send(
        self,
        tokens: list[str],
        title: str,
        body: str,
        data: dict[str, str] | None = None,
    ) -> PushResult:
        logger.debug(f"Push disabled; dropping '{title}' for {len(tokens)} devices")
        return PushResult()

    async def close(self) -> None:
        return None
