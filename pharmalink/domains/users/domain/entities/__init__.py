"""
Users Domain Entities
"""

from pharmalink.domains.users.domain.entities.user import EDITABLE_PROFILE_FIELDS, Identity, User, UserRole

__all__ = ["EDITABLE_PROFILE_FIELDS", "Identity", "User", "UserRole"]
