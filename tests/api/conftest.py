"""
API test fixtures.

The app is built by the real factory; every use-case dependency is overridden
with the same use case wired to in-memory repositories, so routes, auth,
schemas and exception handlers run unchanged without a database.
"""

from dataclasses import dataclass, field

import pytest
from fastapi.testclient import TestClient

from pharmalink.config.settings import Settings
from pharmalink.core.app_factory import create_app
from pharmalink.domains.chat.api import dependencies as chat_deps
from pharmalink.domains.chat.application.use_cases import (
    GetChatMessagesUseCase,
    ListChatsUseCase,
    SendChatMessageUseCase,
)
from pharmalink.domains.notifications.api import dependencies as notification_deps
from pharmalink.domains.notifications.application.use_cases import (
    ListNotificationsUseCase,
    MarkAllNotificationsReadUseCase,
    MarkNotificationReadUseCase,
    RegisterDeviceTokenUseCase,
)
from pharmalink.domains.pharmacies.api import dependencies as pharmacy_deps
from pharmalink.domains.pharmacies.application.use_cases import (
    AgentDashboardUseCase,
    FindNearbyPharmaciesUseCase,
    GetPharmacyUseCase,
    ListPharmaciesUseCase,
    OnboardPharmacyUseCase,
    ReviewPharmacyUseCase,
    UpdatePharmacyUseCase,
)
from pharmalink.domains.requests.api import dependencies as request_deps
from pharmalink.domains.requests.application.use_cases import (
    AcceptRequestUseCase,
    CancelRequestUseCase,
    CreateRequestUseCase,
    GetCustomerRequestsUseCase,
    GetPartnerStatsUseCase,
    GetPendingRequestsUseCase,
    GetPharmacyHistoryUseCase,
    GetRequestUseCase,
    RejectRequestUseCase,
)
from pharmalink.domains.users.api import dependencies as user_deps
from pharmalink.domains.users.application.use_cases import (
    GetCurrentUserUseCase,
    GetPartnerProfileUseCase,
    UpdatePartnerProfileUseCase,
)
from pharmalink.integrations.identity import JWTIdentityVerifier, get_identity_verifier
from tests.utils import (
    API_SECRET,
    InMemoryChatRepository,
    InMemoryDeviceTokenRepository,
    InMemoryNotificationRepository,
    InMemoryPharmacyRepository,
    InMemoryRequestRepository,
    InMemoryUserRepository,
    PharmacyBuilder,
    RecordingNotifier,
    RecordingPublisher,
    partner_identity,
    partner_user,
)


@dataclass
class InMemoryBackend:
    """Everything a request handler would otherwise reach through the database."""

    pharmacies: InMemoryPharmacyRepository = field(default_factory=InMemoryPharmacyRepository)
    users: InMemoryUserRepository = field(default_factory=InMemoryUserRepository)
    chats: InMemoryChatRepository = field(default_factory=InMemoryChatRepository)
    notifications: InMemoryNotificationRepository = field(default_factory=InMemoryNotificationRepository)
    device_tokens: InMemoryDeviceTokenRepository = field(default_factory=InMemoryDeviceTokenRepository)
    publisher: RecordingPublisher = field(default_factory=RecordingPublisher)
    notifier: RecordingNotifier = field(default_factory=RecordingNotifier)

    def __post_init__(self) -> None:
        self.requests = InMemoryRequestRepository(self.pharmacies)

    def overrides(self) -> dict:
        return {
            # Requests
            request_deps.get_create_request_use_case: lambda: CreateRequestUseCase(
                self.requests, self.users, self.publisher
            ),
            request_deps.get_customer_requests_use_case: lambda: GetCustomerRequestsUseCase(self.requests),
            request_deps.get_request_use_case: lambda: GetRequestUseCase(self.requests),
            request_deps.get_cancel_request_use_case: lambda: CancelRequestUseCase(self.requests, self.publisher),
            request_deps.get_pending_requests_use_case: lambda: GetPendingRequestsUseCase(self.requests, self.users),
            request_deps.get_pharmacy_history_use_case: lambda: GetPharmacyHistoryUseCase(self.requests, self.users),
            request_deps.get_accept_request_use_case: lambda: AcceptRequestUseCase(
                self.requests, self.pharmacies, self.users, self.publisher, self.notifier
            ),
            request_deps.get_reject_request_use_case: lambda: RejectRequestUseCase(
                self.requests, self.pharmacies, self.users
            ),
            request_deps.get_partner_stats_use_case: lambda: GetPartnerStatsUseCase(self.requests, self.users),
            # Pharmacies
            pharmacy_deps.get_nearby_pharmacies_use_case: lambda: FindNearbyPharmaciesUseCase(self.pharmacies),
            pharmacy_deps.get_pharmacy_use_case: lambda: GetPharmacyUseCase(self.pharmacies),
            pharmacy_deps.get_list_pharmacies_use_case: lambda: ListPharmaciesUseCase(self.pharmacies),
            pharmacy_deps.get_onboard_pharmacy_use_case: lambda: OnboardPharmacyUseCase(self.pharmacies, self.users),
            pharmacy_deps.get_update_pharmacy_use_case: lambda: UpdatePharmacyUseCase(self.pharmacies),
            pharmacy_deps.get_review_pharmacy_use_case: lambda: ReviewPharmacyUseCase(self.pharmacies, self.notifier),
            pharmacy_deps.get_agent_dashboard_use_case: lambda: AgentDashboardUseCase(self.pharmacies),
            # Users
            user_deps.get_current_user_use_case: lambda: GetCurrentUserUseCase(self.users),
            user_deps.get_partner_profile_use_case: lambda: GetPartnerProfileUseCase(self.users, self.pharmacies),
            user_deps.get_update_partner_profile_use_case: lambda: UpdatePartnerProfileUseCase(self.users),
            # Chat
            chat_deps.get_chat_messages_use_case: lambda: GetChatMessagesUseCase(
                self.chats, self.requests, self.users
            ),
            chat_deps.get_send_chat_message_use_case: lambda: SendChatMessageUseCase(
                self.chats, self.requests, self.users, self.pharmacies, self.publisher, self.notifier
            ),
            chat_deps.get_list_chats_use_case: lambda: ListChatsUseCase(self.chats, self.users),
            # Notifications
            notification_deps.get_list_notifications_use_case: lambda: ListNotificationsUseCase(self.notifications),
            notification_deps.get_mark_notification_read_use_case: lambda: MarkNotificationReadUseCase(
                self.notifications
            ),
            notification_deps.get_mark_all_read_use_case: lambda: MarkAllNotificationsReadUseCase(self.notifications),
            notification_deps.get_register_device_token_use_case: lambda: RegisterDeviceTokenUseCase(
                self.device_tokens
            ),
        }


# ============================================================================
# APP FIXTURES
# ============================================================================


@pytest.fixture
def backend():
    return InMemoryBackend()


@pytest.fixture
def api_settings():
    return Settings(ENVIRONMENT="test", RATE_LIMIT_PER_MINUTE=10_000, IDENTITY_JWT_SECRET=API_SECRET)


@pytest.fixture
def fastapi_app(api_settings, backend):
    app = create_app(api_settings)
    app.dependency_overrides.update(backend.overrides())
    app.dependency_overrides[get_identity_verifier] = lambda: JWTIdentityVerifier(secret=API_SECRET)
    return app


@pytest.fixture
def api_client(fastapi_app) -> TestClient:
    """Create FastAPI test client (lifespan not started)."""
    return TestClient(fastapi_app)


# ============================================================================
# DATA FIXTURES
# ============================================================================


@pytest.fixture
def linked_pharmacy(backend):
    """Verified pharmacy ph-1 owned by the default partner, who is linked to it."""
    pharmacy = PharmacyBuilder().with_id("ph-1").build()
    backend.pharmacies.rows[pharmacy.id] = pharmacy
    identity = partner_identity()
    backend.users.rows[identity.user_id] = partner_user(identity, pharmacy.id)
    return pharmacy
