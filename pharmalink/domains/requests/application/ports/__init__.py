"""
Requests Application Ports
"""

from pharmalink.domains.notifications.application.ports import INotifier
from pharmalink.domains.requests.application.ports.broadcast_publisher import IBroadcastPublisher
from pharmalink.domains.requests.application.ports.request_repository import IMedicationRequestRepository

__all__ = ["IBroadcastPublisher", "IMedicationRequestRepository", "INotifier"]
