"""
API tests for the signed-in user, partner profile and notification inbox.
"""

import pytest

from pharmalink.domains.notifications.domain.entities import Notification
from tests.utils import agent_headers, customer_headers, partner_headers


def inbox(backend, user_id, *titles, read=False):
    for title in titles:
        notification = Notification.create(user_id, title, f"{title} body", "status")
        notification.is_read = read
        backend.notifications.rows[notification.id] = notification


# ============================================================================
# AUTH / PROFILE
# ============================================================================


@pytest.mark.api
class TestCurrentUser:
    def test_me_creates_user_on_first_call(self, api_client, backend):
        response = api_client.get("/api/auth/me", headers=customer_headers())

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["id"] == "+919800000001"
        assert data["role"] == "customer"
        assert "+919800000001" in backend.users.rows

    def test_agent_without_phone_keyed_by_uid(self, api_client):
        data = api_client.get("/api/auth/me", headers=agent_headers("agent-42")).json()["data"]

        assert data["id"] == "agent-42"
        assert data["role"] == "agent"


@pytest.mark.api
class TestPartnerProfile:
    def test_profile_includes_pharmacy(self, api_client, linked_pharmacy):
        data = api_client.get("/api/partner/profile", headers=partner_headers()).json()["data"]

        assert data["user"]["pharmacyId"] == "ph-1"
        assert data["pharmacy"]["name"] == linked_pharmacy.name

    def test_update_profile_ignores_privileged_fields(self, api_client, backend, linked_pharmacy):
        response = api_client.put(
            "/api/partner/profile",
            json={"bio": "20 years in retail pharmacy", "role": "agent", "pharmacy_id": "ph-2"},
            headers=partner_headers(),
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["bio"] == "20 years in retail pharmacy"
        assert data["role"] == "partner"
        assert data["pharmacyId"] == "ph-1"

    def test_update_profile_validates_email(self, api_client, linked_pharmacy):
        response = api_client.put("/api/partner/profile", json={"email": "not-an-email"}, headers=partner_headers())

        assert response.status_code == 400
        assert response.json()["details"][0]["field"] == "email"

    def test_customer_cannot_read_partner_profile(self, api_client):
        assert api_client.get("/api/partner/profile", headers=customer_headers()).status_code == 403


# ============================================================================
# NOTIFICATIONS
# ============================================================================


@pytest.mark.api
class TestNotificationRoutes:
    def test_list_own_notifications(self, api_client, backend):
        inbox(backend, "+919800000001", "Pharmacy responded")
        inbox(backend, "+919800000002", "Someone else's")

        data = api_client.get("/api/notifications", headers=customer_headers()).json()["data"]

        assert [n["title"] for n in data] == ["Pharmacy responded"]
        assert data[0]["isRead"] is False

    def test_mark_read(self, api_client, backend):
        inbox(backend, "+919800000001", "Pharmacy responded")
        notification_id = next(iter(backend.notifications.rows))

        response = api_client.put(f"/api/notifications/{notification_id}/read", headers=customer_headers())

        assert response.status_code == 200
        assert response.json() == {"success": True, "data": None, "message": "Notification marked as read"}
        assert backend.notifications.rows[notification_id].is_read is True

    def test_mark_someone_elses_notification(self, api_client, backend):
        inbox(backend, "+919800000002", "Not yours")
        notification_id = next(iter(backend.notifications.rows))

        response = api_client.put(f"/api/notifications/{notification_id}/read", headers=customer_headers())

        assert response.status_code == 403
        assert backend.notifications.rows[notification_id].is_read is False

    def test_mark_unknown_notification(self, api_client):
        assert api_client.put("/api/notifications/nope/read", headers=customer_headers()).status_code == 404

    def test_mark_all_read(self, api_client, backend):
        inbox(backend, "+919800000001", "One", "Two")
        inbox(backend, "+919800000001", "Old", read=True)

        response = api_client.put("/api/notifications/read-all", headers=customer_headers())

        assert response.json()["data"] == {"updated": 2}

    @pytest.mark.parametrize("key", ["token", "fcmToken"])
    def test_register_device_token(self, api_client, backend, key):
        first = api_client.post("/api/notifications/device-token", json={key: "fcm-abc"}, headers=customer_headers())
        again = api_client.post("/api/notifications/device-token", json={key: "fcm-abc"}, headers=customer_headers())

        assert first.json()["data"] == {"registered": True}
        assert again.json()["data"] == {"registered": False}
        assert backend.device_tokens.tokens["+919800000001"] == ["fcm-abc"]

    def test_register_blank_token(self, api_client):
        response = api_client.post("/api/notifications/device-token", json={"token": "   "}, headers=customer_headers())

        assert response.status_code == 400
        assert response.json()["error"] == "Device token required"
