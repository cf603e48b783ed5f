"""
User Repository Implementation

SQLAlchemy implementation of IUserRepository.
"""

import logging
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from pharmalink.core.domain import utc_now
from pharmalink.domains.users.application.ports import IUserRepository
from pharmalink.domains.users.domain.entities import Identity, User, UserRole
from pharmalink.models.db.users import UserModel

logger = logging.getLogger(__name__)

# Columns that map one-to-one onto entity attributes
_COLUMNS = ("phone", "email", "name", "role", "pharmacy_id", "profile")


class SQLAlchemyUserRepository(IUserRepository):
    """
    SQLAlchemy implementation of user repository.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_by_id(self, user_id: str) -> User | None:
        """Find user by ID."""
        model = await self._get_model(user_id)
        return self._to_entity(model) if model else None

    async def get_or_create(self, identity: Identity) -> User:
        model = await self._get_model(identity.user_id)
        if model:
            return self._to_entity(model)

        user = User.from_identity(identity)
        model = self._to_model(user)
        self.session.add(model)
        await self.session.commit()
        logger.info(f"Registered user {user.id} as {user.role.value}")
        return user

    async def save(self, user: User) -> User:
        model = await self._get_model(user.id)
        if model:
            for column in _COLUMNS:
                value = getattr(user, column)
                setattr(model, column, value.value if column == "role" else value)
            model.updated_at = utc_now()
        else:
            model = self._to_model(user)
            self.session.add(model)

        await self.session.commit()
        return self._to_entity(model)

    async def update_fields(self, user_id: str, fields: dict[str, Any]) -> User | None:
        model = await self._get_model(user_id)
        if not model:
            return None

        for key, value in fields.items():
            if key in _COLUMNS:
                setattr(model, key, value.value if isinstance(value, UserRole) else value)
            else:
                model.profile = {**(model.profile or {}), key: value}
        model.updated_at = utc_now()

        await self.session.commit()
        return self._to_entity(model)

    async def _get_model(self, user_id: str | None) -> UserModel | None:
        if not user_id:
            return None
        result = await self.session.execute(select(UserModel).where(UserModel.id == user_id))
        return result.scalar_one_or_none()

    # Mapping methods

    def _to_entity(self, model: UserModel) -> User:
        return User(
            id=model.id,
            phone=model.phone,
            email=model.email,
            name=model.name or "",
            role=UserRole(model.role),
            pharmacy_id=model.pharmacy_id,
            profile=dict(model.profile or {}),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, user: User) -> UserModel:
        return UserModel(
            id=user.id,
            phone=user.phone,
            email=user.email,
            name=user.name,
            role=user.role.value,
            pharmacy_id=user.pharmacy_id,
            profile=dict(user.profile),
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
