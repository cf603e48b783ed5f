"""
Notification and Device Token Repository Implementations

These writes run after the request's own changes are committed and their
failures are swallowed by the caller, so a failed statement rolls the
session back here. Otherwise the request-scoped session would refuse the
final commit.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from pharmalink.domains.notifications.application.ports import IDeviceTokenRepository, INotificationRepository
from pharmalink.domains.notifications.domain.entities import Notification, NotificationType
from pharmalink.models.db import DeviceTokenModel, NotificationModel

logger = logging.getLogger(__name__)


@asynccontextmanager
async def rollback_on_error(session: AsyncSession) -> AsyncIterator[None]:
    try:
        yield
    except Exception:
        await session.rollback()
        raise


class SQLAlchemyNotificationRepository(INotificationRepository):
    """
    SQLAlchemy implementation of notification repository.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, notification: Notification) -> Notification:
        async with rollback_on_error(self.session):
            self.session.add(
                NotificationModel(
                    id=notification.id,
                    user_id=notification.user_id,
                    title=notification.title,
                    message=notification.message,
                    type=notification.type.value,
                    related_id=notification.related_id,
                    is_read=notification.is_read,
                    created_at=notification.created_at,
                )
            )
            await self.session.commit()
        return notification

    async def find_by_id(self, notification_id: str) -> Notification | None:
        result = await self.session.execute(select(NotificationModel).where(NotificationModel.id == notification_id))
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def find_by_user(self, user_id: str, limit: int = 50) -> list[Notification]:
        query = (
            select(NotificationModel)
            .where(NotificationModel.user_id == user_id)
            .order_by(NotificationModel.created_at.desc())
            .limit(limit)
        )
        result = await self.session.execute(query)
        return [self._to_entity(m) for m in result.scalars().all()]

    async def mark_read(self, notification_id: str) -> None:
        await self.session.execute(
            update(NotificationModel).where(NotificationModel.id == notification_id).values(is_read=True)
        )
        await self.session.commit()

    async def mark_all_read(self, user_id: str) -> int:
        result = await self.session.execute(
            update(NotificationModel)
            .where(NotificationModel.user_id == user_id, NotificationModel.is_read.is_(False))
            .values(is_read=True)
        )
        await self.session.commit()
        return result.rowcount or 0

    def _to_entity(self, model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            user_id=model.user_id,
            title=model.title,
            message=model.message,
            type=NotificationType(model.type),
            related_id=model.related_id,
            is_read=model.is_read,
            created_at=model.created_at,
            updated_at=model.created_at,
        )


class SQLAlchemyDeviceTokenRepository(IDeviceTokenRepository):
    """
    SQLAlchemy implementation of device token repository.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def register(self, user_id: str, token: str) -> bool:
        existing = await self.session.execute(
            select(DeviceTokenModel.id).where(DeviceTokenModel.user_id == user_id, DeviceTokenModel.token == token)
        )
        if existing.scalar_one_or_none() is not None:
            return False

        async with rollback_on_error(self.session):
            self.session.add(DeviceTokenModel(user_id=user_id, token=token))
            await self.session.commit()
        return True

    async def find_tokens(self, user_id: str) -> list[str]:
        async with rollback_on_error(self.session):
            result = await self.session.execute(
                select(DeviceTokenModel.token).where(DeviceTokenModel.user_id == user_id)
            )
        return list(result.scalars().all())

    async def delete_tokens(self, user_id: str, tokens: list[str]) -> int:
        if not tokens:
            return 0
        async with rollback_on_error(self.session):
            result = await self.session.execute(
                delete(DeviceTokenModel).where(DeviceTokenModel.user_id == user_id, DeviceTokenModel.token.in_(tokens))
            )
            await self.session.commit()
        return result.rowcount or 0
