"""Test utilities: in-memory port implementations and entity builders."""

from tests.utils.auth import (
    API_SECRET,
    agent_headers,
    bearer_headers,
    customer_headers,
    make_token,
    partner_headers,
)
from tests.utils.builders import (
    BASE_LAT,
    BASE_LNG,
    MedicationRequestBuilder,
    PharmacyBuilder,
    agent_identity,
    customer_identity,
    partner_identity,
    partner_user,
)
from tests.utils.fakes import (
    InMemoryChatRepository,
    InMemoryDeviceTokenRepository,
    InMemoryNotificationRepository,
    InMemoryPharmacyRepository,
    InMemoryRequestRepository,
    InMemoryUserRepository,
    RecordingNotifier,
    RecordingPublisher,
    StubPushGateway,
)

__all__ = [
    "API_SECRET",
    "agent_headers",
    "bearer_headers",
    "customer_headers",
    "make_token",
    "partner_headers",
    "BASE_LAT",
    "BASE_LNG",
    "MedicationRequestBuilder",
    "PharmacyBuilder",
    "agent_identity",
    "customer_identity",
    "partner_identity",
    "partner_user",
    "InMemoryChatRepository",
    "InMemoryDeviceTokenRepository",
    "InMemoryNotificationRepository",
    "InMemoryPharmacyRepository",
    "InMemoryRequestRepository",
    "InMemoryUserRepository",
    "RecordingNotifier",
    "RecordingPublisher",
    "StubPushGateway",
]
