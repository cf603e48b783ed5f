"""
Medication Request Repository Implementation

SQLAlchemy implementation of IMedicationRequestRepository.
"""

import logging
from datetime import datetime

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from pharmalink.domains.requests.application.ports import IMedicationRequestRepository
from pharmalink.domains.requests.domain.entities import MedicationRequest, Medicine, PharmacyResponse
from pharmalink.domains.requests.domain.value_objects import OPEN_STATUSES, RequestStatus
from pharmalink.models.db import MedicationRequestModel, PharmacyModel

logger = logging.getLogger(__name__)

_OPEN_VALUES = [s.value for s in OPEN_STATUSES]


class SQLAlchemyMedicationRequestRepository(IMedicationRequestRepository):
    """
    SQLAlchemy implementation of medication request repository.

    Accept, reject and cancel are conditional UPDATEs guarded on the stored
    status, so concurrent responders cannot overwrite each other.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize repository.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def create(self, request: MedicationRequest) -> MedicationRequest:
        self.session.add(self._to_model(request))
        await self.session.commit()
        return request

    async def find_by_id(self, request_id: str) -> MedicationRequest | None:
        """Find request by ID."""
        result = await self.session.execute(
            select(MedicationRequestModel).where(MedicationRequestModel.id == request_id)
        )
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def find_open(self, limit: int = 50) -> list[MedicationRequest]:
        query = (
            select(MedicationRequestModel)
            .where(MedicationRequestModel.status.in_(_OPEN_VALUES))
            .order_by(MedicationRequestModel.created_at.desc())
            .limit(limit)
        )
        result = await self.session.execute(query)
        return [self._to_entity(m) for m in result.scalars().all()]

    async def find_by_customer(self, customer_id: str) -> list[MedicationRequest]:
        query = (
            select(MedicationRequestModel)
            .where(MedicationRequestModel.customer_id == customer_id)
            .order_by(MedicationRequestModel.created_at.desc())
        )
        result = await self.session.execute(query)
        return [self._to_entity(m) for m in result.scalars().all()]

    async def find_by_pharmacy(self, pharmacy_id: str) -> list[MedicationRequest]:
        query = (
            select(MedicationRequestModel)
            .where(MedicationRequestModel.pharmacy_id == pharmacy_id)
            .order_by(MedicationRequestModel.created_at.desc())
        )
        result = await self.session.execute(query)
        return [self._to_entity(m) for m in result.scalars().all()]

    async def count_open(self, now: datetime) -> int:
        query = select(func.count(MedicationRequestModel.id)).where(
            MedicationRequestModel.status.in_(_OPEN_VALUES),
            MedicationRequestModel.expires_at > now,
        )
        result = await self.session.execute(query)
        return result.scalar() or 0

    async def count_by_pharmacy(
        self,
        pharmacy_id: str,
        since: datetime | None = None,
        until: datetime | None = None,
    ) -> int:
        query = select(func.count(MedicationRequestModel.id)).where(
            MedicationRequestModel.pharmacy_id == pharmacy_id
        )
        if since:
            query = query.where(MedicationRequestModel.updated_at >= since)
        if until:
            query = query.where(MedicationRequestModel.updated_at < until)

        result = await self.session.execute(query)
        return result.scalar() or 0

    async def claim(self, request: MedicationRequest, now: datetime, count_for_pharmacy: bool = False) -> bool:
        stmt = (
            update(MedicationRequestModel)
            .where(
                MedicationRequestModel.id == request.id,
                MedicationRequestModel.status.in_(_OPEN_VALUES),
                MedicationRequestModel.expires_at > now,
            )
            .values(
                status=request.status.value,
                pharmacy_id=request.pharmacy_id,
                pharmacy_name=request.pharmacy_name,
                response=request.response.to_dict() if request.response else None,
                updated_at=request.updated_at,
            )
        )
        result = await self.session.execute(stmt)
        if result.rowcount != 1:
            await self.session.rollback()
            return False

        if count_for_pharmacy and request.pharmacy_id:
            await self.session.execute(
                update(PharmacyModel)
                .where(PharmacyModel.id == request.pharmacy_id)
                .values(
                    total_requests=PharmacyModel.total_requests + 1,
                    total_accepted=PharmacyModel.total_accepted + 1,
                )
            )

        await self.session.commit()
        return True

    async def mark_cancelled(self, request: MedicationRequest) -> bool:
        stmt = (
            update(MedicationRequestModel)
            .where(
                MedicationRequestModel.id == request.id,
                MedicationRequestModel.status.in_(_OPEN_VALUES),
            )
            .values(status=RequestStatus.CANCELLED.value, updated_at=request.updated_at)
        )
        result = await self.session.execute(stmt)
        if result.rowcount != 1:
            await self.session.rollback()
            return False

        await self.session.commit()
        return True

    # Mapping methods

    def _to_entity(self, model: MedicationRequestModel) -> MedicationRequest:
        return MedicationRequest(
            id=model.id,
            customer_id=model.customer_id,
            customer_phone=model.customer_phone,
            customer_name=model.customer_name or "",
            medicines=[Medicine.from_input(m) for m in model.medicines or []],
            has_prescription=model.has_prescription,
            prescription_url=model.prescription_url,
            patient_name=model.patient_name,
            patient_phone=model.patient_phone,
            patient_address=model.patient_address,
            patient_latitude=model.patient_latitude,
            patient_longitude=model.patient_longitude,
            is_emergency=model.is_emergency,
            notes=model.notes,
            radius_km=model.radius_km,
            status=RequestStatus(model.status),
            pharmacy_id=model.pharmacy_id,
            pharmacy_name=model.pharmacy_name,
            response=PharmacyResponse.from_dict(model.response) if model.response else None,
            created_at=model.created_at,
            updated_at=model.updated_at,
            expires_at=model.expires_at,
            completed_at=model.completed_at,
        )

    def _to_model(self, request: MedicationRequest) -> MedicationRequestModel:
        return MedicationRequestModel(
            id=request.id,
            customer_id=request.customer_id,
            customer_phone=request.customer_phone,
            customer_name=request.customer_name,
            medicines=[m.to_dict() for m in request.medicines],
            has_prescription=request.has_prescription,
            prescription_url=request.prescription_url,
            patient_name=request.patient_name,
            patient_phone=request.patient_phone,
            patient_address=request.patient_address,
            patient_latitude=request.patient_latitude,
            patient_longitude=request.patient_longitude,
            is_emergency=request.is_emergency,
            urgency=request.urgency,
            notes=request.notes,
            radius_km=request.radius_km,
            status=request.status.value,
            pharmacy_id=request.pharmacy_id,
            pharmacy_name=request.pharmacy_name,
            response=request.response.to_dict() if request.response else None,
            created_at=request.created_at,
            updated_at=request.updated_at,
            expires_at=request.expires_at,
            completed_at=request.completed_at,
        )
