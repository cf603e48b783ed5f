"""
Dependency Injection Container.

Centralized container wiring concrete repositories and gateways to the use
cases of every domain. This module is the facade that composes the
domain-specific containers.
"""

from __future__ import annotations

import logging

from pharmalink.config.settings import Settings

from .base import BaseContainer
from .chat import ChatContainer
from .notifications import NotificationsContainer
from .pharmacies import PharmaciesContainer
from .requests import RequestsContainer
from .users import UsersContainer

logger = logging.getLogger(__name__)


class DependencyContainer:
    """
    Dependency Injection Container (Facade).

    Repositories and use cases are created per database session; the
    publisher and push gateway are process-wide singletons.
    """

    def __init__(self, settings: Settings | None = None):
        self._base = BaseContainer(settings)

        self._notifications = NotificationsContainer(self._base)
        self._users = UsersContainer(self._base)
        self._pharmacies = PharmaciesContainer(self._base, self._notifications)
        self._requests = RequestsContainer(self._base, self._notifications)
        self._chat = ChatContainer(self._base, self._notifications)

        logger.info("DependencyContainer initialized with all domain containers")

    @property
    def settings(self) -> Settings:
        return self._base.settings

    # ============================================================
    # SINGLETONS (delegated to BaseContainer)
    # ============================================================

    def get_realtime_hub(self):
        return self._base.get_realtime_hub()

    def get_publisher(self):
        return self._base.get_publisher()

    def get_push_gateway(self):
        return self._base.get_push_gateway()

    async def shutdown(self) -> None:
        await self._base.shutdown()

    # ============================================================
    # USERS
    # ============================================================

    def create_user_repository(self, db):
        return self._users.create_user_repository(db)

    def create_get_current_user_use_case(self, db):
        return self._users.create_get_current_user_use_case(db)

    def create_get_partner_profile_use_case(self, db):
        return self._users.create_get_partner_profile_use_case(db)

    def create_update_partner_profile_use_case(self, db):
        return self._users.create_update_partner_profile_use_case(db)

    # ============================================================
    # REQUESTS
    # ============================================================

    def create_request_repository(self, db):
        return self._requests.create_request_repository(db)

    def create_create_request_use_case(self, db):
        return self._requests.create_create_request_use_case(db)

    def create_accept_request_use_case(self, db):
        return self._requests.create_accept_request_use_case(db)

    def create_reject_request_use_case(self, db):
        return self._requests.create_reject_request_use_case(db)

    def create_cancel_request_use_case(self, db):
        return self._requests.create_cancel_request_use_case(db)

    def create_get_pending_requests_use_case(self, db):
        return self._requests.create_get_pending_requests_use_case(db)

    def create_get_pharmacy_history_use_case(self, db):
        return self._requests.create_get_pharmacy_history_use_case(db)

    def create_get_customer_requests_use_case(self, db):
        return self._requests.create_get_customer_requests_use_case(db)

    def create_get_request_use_case(self, db):
        return self._requests.create_get_request_use_case(db)

    def create_get_partner_stats_use_case(self, db):
        return self._requests.create_get_partner_stats_use_case(db)

    # ============================================================
    # PHARMACIES
    # ============================================================

    def create_pharmacy_repository(self, db):
        return self._pharmacies.create_pharmacy_repository(db)

    def create_find_nearby_pharmacies_use_case(self, db):
        return self._pharmacies.create_find_nearby_pharmacies_use_case(db)

    def create_get_pharmacy_use_case(self, db):
        return self._pharmacies.create_get_pharmacy_use_case(db)

    def create_list_pharmacies_use_case(self, db):
        return self._pharmacies.create_list_pharmacies_use_case(db)

    def create_onboard_pharmacy_use_case(self, db):
        return self._pharmacies.create_onboard_pharmacy_use_case(db)

    def create_update_pharmacy_use_case(self, db):
        return self._pharmacies.create_update_pharmacy_use_case(db)

    def create_review_pharmacy_use_case(self, db):
        return self._pharmacies.create_review_pharmacy_use_case(db)

    def create_agent_dashboard_use_case(self, db):
        return self._pharmacies.create_agent_dashboard_use_case(db)

    # ============================================================
    # NOTIFICATIONS
    # ============================================================

    def create_notifier(self, db):
        return self._notifications.create_notifier(db)

    def create_list_notifications_use_case(self, db):
        return self._notifications.create_list_notifications_use_case(db)

    def create_mark_notification_read_use_case(self, db):
        return self._notifications.create_mark_notification_read_use_case(db)

    def create_mark_all_notifications_read_use_case(self, db):
        return self._notifications.create_mark_all_notifications_read_use_case(db)

    def create_register_device_token_use_case(self, db):
        return self._notifications.create_register_device_token_use_case(db)

    # ============================================================
    # CHAT
    # ============================================================

    def create_get_chat_messages_use_case(self, db):
        return self._chat.create_get_chat_messages_use_case(db)

    def create_send_chat_message_use_case(self, db):
        return self._chat.create_send_chat_message_use_case(db)

    def create_list_chats_use_case(self, db):
        return self._chat.create_list_chats_use_case(db)


# Global container instance
_container: DependencyContainer | None = None


def get_container(settings: Settings | None = None) -> DependencyContainer:
    """
    Get global container instance (singleton).

    Args:
        settings: Optional settings (only used on first call)
    """
    global _container

    if _container is None:
        logger.info("Initializing global DependencyContainer")
        _container = DependencyContainer(settings)
    return _container


def reset_container() -> None:
    """Drop the global container (tests)."""
    global _container
    _container = None


__all__ = ["DependencyContainer", "get_container", "reset_container"]
