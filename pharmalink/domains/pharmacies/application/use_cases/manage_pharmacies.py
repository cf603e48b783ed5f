"""
Pharmacy Management Use Cases

Agent-side onboarding, review and editing of pharmacies.
"""

import logging
from dataclasses import dataclass
from typing import Any

from pharmalink.core.domain import EntityNotFoundException, ValidationException
from pharmalink.domains.notifications.application.ports import INotifier
from pharmalink.domains.pharmacies.application.ports import IPharmacyRepository
from pharmalink.domains.pharmacies.domain.entities import EDITABLE_FIELDS, Pharmacy
from pharmalink.domains.pharmacies.domain.value_objects import Availability, PharmacyStatus
from pharmalink.domains.users.application.ports import IUserRepository
from pharmalink.domains.users.domain.entities import Identity, UserRole

logger = logging.getLogger(__name__)


@dataclass
class OnboardPharmacyCommand:
    name: str
    owner_name: str
    owner_phone: str
    address: str
    license_number: str
    gst_number: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    phone: str | None = None
    city: str | None = None
    state: str | None = None
    pincode: str | None = None


class OnboardPharmacyUseCase:
    """
    Create a pharmacy awaiting verification and link it to its owner.

    The owner is the user keyed by the owner phone; they are created if they
    have never signed in and are promoted to partner.
    """

    def __init__(self, pharmacy_repository: IPharmacyRepository, user_repository: IUserRepository):
        self.pharmacy_repo = pharmacy_repository
        self.user_repo = user_repository

    async def execute(self, agent: Identity, command: OnboardPharmacyCommand) -> Pharmacy:
        pharmacy = Pharmacy.onboard(
            name=command.name,
            owner_phone=command.owner_phone,
            owner_name=command.owner_name,
            address=command.address,
            license_number=command.license_number,
            agent_id=agent.user_id,
            latitude=command.latitude,
            longitude=command.longitude,
            gst_number=command.gst_number,
            phone=command.phone,
            city=command.city,
            state=command.state,
            pincode=command.pincode,
        )
        saved = await self.pharmacy_repo.create(pharmacy)

        owner = await self.user_repo.get_or_create(
            Identity(uid=command.owner_phone, phone=command.owner_phone, role=UserRole.PARTNER, name=command.owner_name)
        )
        await self.user_repo.update_fields(owner.id, {"role": UserRole.PARTNER, "pharmacy_id": saved.id})

        logger.info(f"Agent {agent.user_id} onboarded pharmacy {saved.id} for owner {owner.id}")
        return saved


class GetPharmacyUseCase:
    def __init__(self, pharmacy_repository: IPharmacyRepository):
        self.pharmacy_repo = pharmacy_repository

    async def execute(self, pharmacy_id: str) -> Pharmacy:
        pharmacy = await self.pharmacy_repo.find_by_id(pharmacy_id)
        if not pharmacy:
            raise EntityNotFoundException("Pharmacy", pharmacy_id)
        return pharmacy


class ListPharmaciesUseCase:
    """Newest pharmacies, optionally filtered by status and a name/address/owner search."""

    def __init__(self, pharmacy_repository: IPharmacyRepository):
        self.pharmacy_repo = pharmacy_repository

    async def execute(
        self,
        status: PharmacyStatus | None = None,
        search: str | None = None,
        limit: int = 20,
    ) -> list[Pharmacy]:
        pharmacies = await self.pharmacy_repo.find_all(status=status, limit=limit)
        if not search:
            return pharmacies

        needle = search.lower()
        return [
            p
            for p in pharmacies
            if needle in (p.name or "").lower()
            or needle in (p.address or "").lower()
            or needle in (p.owner_name or "").lower()
        ]


class UpdatePharmacyUseCase:
    """Edit operational and contact details; status and verification fields are not editable here."""

    def __init__(self, pharmacy_repository: IPharmacyRepository):
        self.pharmacy_repo = pharmacy_repository

    async def execute(self, pharmacy_id: str, fields: dict[str, Any]) -> Pharmacy:
        updates = {k: v for k, v in fields.items() if k in EDITABLE_FIELDS and v is not None}
        if not updates:
            raise ValidationException("No valid fields to update")
        if "availability" in updates:
            try:
                updates["availability"] = Availability.from_string(str(updates["availability"]))
            except ValueError as e:
                raise ValidationException(str(e), field="availability") from e

        pharmacy = await self.pharmacy_repo.update_fields(pharmacy_id, updates)
        if not pharmacy:
            raise EntityNotFoundException("Pharmacy", pharmacy_id)

        logger.info(f"Pharmacy {pharmacy_id} updated: {sorted(updates)}")
        return pharmacy


class ReviewPharmacyUseCase:
    """
    Agent verification decisions.

    The owner receives a system notification either way.
    """

    def __init__(self, pharmacy_repository: IPharmacyRepository, notifier: INotifier | None = None):
        self.pharmacy_repo = pharmacy_repository
        self.notifier = notifier

    async def approve(self, agent: Identity, pharmacy_id: str) -> Pharmacy:
        pharmacy = await self._load(pharmacy_id)
        pharmacy.verify(agent.user_id)
        saved = await self.pharmacy_repo.save(pharmacy)
        logger.info(f"Pharmacy {pharmacy_id} verified by {agent.user_id}")

        await self._notify_owner(
            saved,
            "Pharmacy verified",
            f"{saved.name} has been verified and can now receive requests",
        )
        return saved

    async def reject(self, agent: Identity, pharmacy_id: str, reason: str) -> Pharmacy:
        pharmacy = await self._load(pharmacy_id)
        pharmacy.reject(agent.user_id, reason)
        saved = await self.pharmacy_repo.save(pharmacy)
        logger.info(f"Pharmacy {pharmacy_id} rejected by {agent.user_id}: {reason}")

        await self._notify_owner(saved, "Pharmacy verification rejected", f"{saved.name}: {reason}")
        return saved

    async def _load(self, pharmacy_id: str) -> Pharmacy:
        pharmacy = await self.pharmacy_repo.find_by_id(pharmacy_id)
        if not pharmacy:
            raise EntityNotFoundException("Pharmacy", pharmacy_id)
        return pharmacy

    async def _notify_owner(self, pharmacy: Pharmacy, title: str, message: str) -> None:
        if self.notifier is None or not pharmacy.owner_id:
            return
        try:
            await self.notifier.notify(
                pharmacy.owner_id,
                title=title,
                message=message,
                type="system",
                related_id=pharmacy.id,
            )
        except Exception as e:
            logger.error(f"Owner notification for pharmacy {pharmacy.id} failed (non-fatal): {e}")
