"""
Pharmacy Repository Implementation

SQLAlchemy implementation of IPharmacyRepository.
"""

import logging
from datetime import datetime
from enum import Enum
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from pharmalink.core.domain import utc_now
from pharmalink.domains.pharmacies.application.ports import IPharmacyRepository
from pharmalink.domains.pharmacies.domain.entities import EDITABLE_FIELDS, Pharmacy
from pharmalink.domains.pharmacies.domain.value_objects import Availability, PharmacyStatus
from pharmalink.models.db import PharmacyModel

logger = logging.getLogger(__name__)


class SQLAlchemyPharmacyRepository(IPharmacyRepository):
    """
    SQLAlchemy implementation of pharmacy repository.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, pharmacy: Pharmacy) -> Pharmacy:
        self.session.add(self._to_model(pharmacy))
        await self.session.commit()
        return pharmacy

    async def find_by_id(self, pharmacy_id: str) -> Pharmacy | None:
        """Find pharmacy by ID."""
        model = await self._get_model(pharmacy_id)
        return self._to_entity(model) if model else None

    async def find_by_status(self, status: PharmacyStatus) -> list[Pharmacy]:
        result = await self.session.execute(select(PharmacyModel).where(PharmacyModel.status == status.value))
        return [self._to_entity(m) for m in result.scalars().all()]

    async def find_all(self, status: PharmacyStatus | None = None, limit: int = 20) -> list[Pharmacy]:
        query = select(PharmacyModel)
        if status:
            query = query.where(PharmacyModel.status == status.value)
        query = query.order_by(PharmacyModel.created_at.desc()).limit(limit)

        result = await self.session.execute(query)
        return [self._to_entity(m) for m in result.scalars().all()]

    async def save(self, pharmacy: Pharmacy) -> Pharmacy:
        model = await self._get_model(pharmacy.id)
        if not model:
            return await self.create(pharmacy)

        model.status = pharmacy.status.value
        model.verified_by = pharmacy.verified_by
        model.verified_at = pharmacy.verified_at
        model.rejection_reason = pharmacy.rejection_reason
        model.updated_at = pharmacy.updated_at

        await self.session.commit()
        return self._to_entity(model)

    async def update_fields(self, pharmacy_id: str, fields: dict[str, Any]) -> Pharmacy | None:
        model = await self._get_model(pharmacy_id)
        if not model:
            return None

        for key, value in fields.items():
            if key not in EDITABLE_FIELDS:
                logger.warning(f"Ignoring non-editable pharmacy field '{key}'")
                continue
            setattr(model, key, value.value if isinstance(value, Enum) else value)
        model.updated_at = utc_now()

        await self.session.commit()
        return self._to_entity(model)

    async def count_by_status(self, since: datetime | None = None) -> dict[PharmacyStatus, int]:
        query = select(PharmacyModel.status, func.count(PharmacyModel.id)).group_by(PharmacyModel.status)
        if since:
            query = query.where(PharmacyModel.created_at >= since)

        result = await self.session.execute(query)
        counts = {status: 0 for status in PharmacyStatus}
        for status, count in result.all():
            counts[PharmacyStatus(status)] = count
        return counts

    async def find_recent(self, limit: int = 5) -> list[Pharmacy]:
        query = select(PharmacyModel).order_by(PharmacyModel.updated_at.desc()).limit(limit)
        result = await self.session.execute(query)
        return [self._to_entity(m) for m in result.scalars().all()]

    async def _get_model(self, pharmacy_id: str | None) -> PharmacyModel | None:
        if not pharmacy_id:
            return None
        result = await self.session.execute(select(PharmacyModel).where(PharmacyModel.id == pharmacy_id))
        return result.scalar_one_or_none()

    # Mapping methods

    def _to_entity(self, model: PharmacyModel) -> Pharmacy:
        return Pharmacy(
            id=model.id,
            name=model.name,
            owner_id=model.owner_id,
            owner_phone=model.owner_phone,
            owner_name=model.owner_name or "",
            phone=model.phone,
            address=model.address,
            city=model.city,
            state=model.state,
            pincode=model.pincode,
            latitude=model.latitude,
            longitude=model.longitude,
            license_number=model.license_number,
            gst_number=model.gst_number,
            status=PharmacyStatus(model.status),
            verified_by=model.verified_by,
            verified_at=model.verified_at,
            rejection_reason=model.rejection_reason,
            onboarded_by=model.onboarded_by,
            is_open=model.is_open,
            availability=Availability(model.availability),
            operating_hours=model.operating_hours,
            rating=model.rating,
            total_ratings=model.total_ratings,
            total_requests=model.total_requests,
            total_accepted=model.total_accepted,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, pharmacy: Pharmacy) -> PharmacyModel:
        return PharmacyModel(
            id=pharmacy.id,
            name=pharmacy.name,
            owner_id=pharmacy.owner_id,
            owner_phone=pharmacy.owner_phone,
            owner_name=pharmacy.owner_name,
            phone=pharmacy.phone,
            address=pharmacy.address,
            city=pharmacy.city,
            state=pharmacy.state,
            pincode=pharmacy.pincode,
            latitude=pharmacy.latitude,
            longitude=pharmacy.longitude,
            license_number=pharmacy.license_number,
            gst_number=pharmacy.gst_number,
            status=pharmacy.status.value,
            verified_by=pharmacy.verified_by,
            verified_at=pharmacy.verified_at,
            rejection_reason=pharmacy.rejection_reason,
            onboarded_by=pharmacy.onboarded_by,
            is_open=pharmacy.is_open,
            availability=pharmacy.availability.value,
            operating_hours=pharmacy.operating_hours,
            rating=pharmacy.rating,
            total_ratings=pharmacy.total_ratings,
            total_requests=pharmacy.total_requests,
            total_accepted=pharmacy.total_accepted,
            created_at=pharmacy.created_at,
            updated_at=pharmacy.updated_at,
        )
