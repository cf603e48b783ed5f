"""
Push gateways
"""

from pharmalink.domains.notifications.infrastructure.push.fcm_gateway import FCMPushGateway, NoopPushGateway

__all__ = ["FCMPushGateway", "NoopPushGateway"]
