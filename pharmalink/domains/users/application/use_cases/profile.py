"""
User Profile Use Cases
"""

import logging
from typing import Any

from pharmalink.core.domain import ValidationException
from pharmalink.domains.pharmacies.application.ports import IPharmacyRepository
from pharmalink.domains.users.application.ports import IUserRepository
from pharmalink.domains.users.domain.entities import EDITABLE_PROFILE_FIELDS, Identity, User

logger = logging.getLogger(__name__)

# Columns a user may change on their own record, besides profile keys
EDITABLE_USER_FIELDS = ("name", "email", "phone")


class GetCurrentUserUseCase:
    """Return the caller's user record, registering it on first sight."""

    def __init__(self, user_repository: IUserRepository):
        self.user_repo = user_repository

    async def execute(self, identity: Identity) -> User:
        return await self.user_repo.get_or_create(identity)


class GetPartnerProfileUseCase:
    def __init__(self, user_repository: IUserRepository, pharmacy_repository: IPharmacyRepository):
        self.user_repo = user_repository
        self.pharmacy_repo = pharmacy_repository

    async def execute(self, identity: Identity) -> dict[str, Any]:
        """
        Returns:
            {"user": ..., "pharmacy": ...}; pharmacy only when one is linked
        """
        user = await self.user_repo.get_or_create(identity)
        profile: dict[str, Any] = {"user": user.to_dict()}
        if user.pharmacy_id:
            pharmacy = await self.pharmacy_repo.find_by_id(user.pharmacy_id)
            if pharmacy:
                profile["pharmacy"] = pharmacy.to_dict()
        return profile


class UpdatePartnerProfileUseCase:
    """
    Update whitelisted fields of the caller's own record.

    Role and pharmacy link are never writable here.
    """

    def __init__(self, user_repository: IUserRepository):
        self.user_repo = user_repository

    async def execute(self, identity: Identity, fields: dict[str, Any]) -> User:
        allowed = EDITABLE_USER_FIELDS + EDITABLE_PROFILE_FIELDS
        updates = {k: v for k, v in fields.items() if k in allowed and v is not None}
        if not updates:
            raise ValidationException("No valid fields to update")

        await self.user_repo.get_or_create(identity)
        user = await self.user_repo.update_fields(identity.user_id, updates)
        logger.info(f"Profile of {identity.user_id} updated: {sorted(updates)}")
        return user  # type: ignore[return-value]
