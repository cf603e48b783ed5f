"""
Shared pytest fixtures for all tests.

Provides in-memory repositories wired the way the container wires the SQL
ones, a mocked AsyncSession for repository tests, and identities for each role.
"""

import os
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

# Ensure test environment before settings are first read
os.environ["ENVIRONMENT"] = "test"
os.environ.setdefault("IDENTITY_JWT_SECRET", "test-secret")
os.environ.setdefault("LOG_FORMAT", "plain")

from tests.utils import (  # noqa: E402
    InMemoryChatRepository,
    InMemoryDeviceTokenRepository,
    InMemoryNotificationRepository,
    InMemoryPharmacyRepository,
    InMemoryRequestRepository,
    InMemoryUserRepository,
    PharmacyBuilder,
    RecordingNotifier,
    RecordingPublisher,
    customer_identity,
    partner_identity,
    partner_user,
)


# ============================================================================
# DATABASE FIXTURES
# ============================================================================


@pytest.fixture
def mock_async_session():
    """Create a mock AsyncSession for repository tests."""
    session = AsyncMock(spec=AsyncSession)
    session.add = MagicMock()
    session.execute = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    return session


# ============================================================================
# IN-MEMORY REPOSITORIES
# ============================================================================


@pytest.fixture
def pharmacy_repository():
    return InMemoryPharmacyRepository()


@pytest.fixture
def request_repository(pharmacy_repository):
    """Request repository sharing pharmacy rows so accept counters are visible."""
    return InMemoryRequestRepository(pharmacy_repository)


@pytest.fixture
def user_repository():
    return InMemoryUserRepository()


@pytest.fixture
def chat_repository():
    return InMemoryChatRepository()


@pytest.fixture
def notification_repository():
    return InMemoryNotificationRepository()


@pytest.fixture
def device_token_repository():
    return InMemoryDeviceTokenRepository()


# ============================================================================
# SIDE-EFFECT PORTS
# ============================================================================


@pytest.fixture
def publisher():
    return RecordingPublisher()


@pytest.fixture
def notifier():
    return RecordingNotifier()


# ============================================================================
# IDENTITIES
# ============================================================================


@pytest.fixture
def customer():
    return customer_identity()


@pytest.fixture
def partner():
    return partner_identity()


@pytest.fixture
def pharmacy(pharmacy_repository):
    """A verified pharmacy owned by the `partner` identity."""
    pharmacy = PharmacyBuilder().with_id("ph-1").owned_by(partner_identity().user_id).build()
    pharmacy_repository.rows[pharmacy.id] = pharmacy
    return pharmacy


@pytest.fixture
def partner_with_pharmacy(partner, pharmacy, user_repository):
    """The `partner` identity, linked to `pharmacy` in the user store."""
    user_repository.rows[partner.user_id] = partner_user(partner, pharmacy.id)
    return partner
