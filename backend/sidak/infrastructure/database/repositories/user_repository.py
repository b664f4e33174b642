"""Concrete repository implementation for User backed by SQLAlchemy."""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from sidak.application.interfaces import UserRepository
from sidak.domain.entities import User
from sidak.infrastructure.database.models import UserModel
from sidak.infrastructure.database.repositories._time import as_utc


class SQLAlchemyUserRepository(UserRepository):
    """Implements the UserRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: UserModel) -> User:
        return User(
            id=model.id,
            username=model.username,
            email=model.email,
            role=model.role,
            password_hash=model.password_hash,
            password_salt=model.password_salt,
            allowed_units=list(model.allowed_units or []),
            is_active=model.is_active,
            created_at=as_utc(model.created_at),
            updated_at=as_utc(model.updated_at),
        )

    def _to_model(self, entity: User) -> UserModel:
        return UserModel(
            id=entity.id,
            username=entity.username,
            email=entity.email,
            role=entity.role,
            password_hash=entity.password_hash,
            password_salt=entity.password_salt,
            allowed_units=list(entity.allowed_units),
            is_active=entity.is_active,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

    async def _first(self, stmt) -> User | None:
        result = await self._session.execute(stmt.limit(1))
        model = result.scalars().first()
        return self._to_entity(model) if model else None

    async def get_by_id(self, user_id: str) -> User | None:
        result = await self._session.get(UserModel, user_id)
        return self._to_entity(result) if result else None

    async def get_by_username(self, username: str) -> User | None:
        return await self._first(
            select(UserModel).where(func.lower(UserModel.username) == username.lower())
        )

    async def get_by_email(self, email: str) -> User | None:
        return await self._first(
            select(UserModel).where(func.lower(UserModel.email) == email.lower())
        )

    async def get_all(self) -> list[User]:
        result = await self._session.execute(
            select(UserModel).order_by(UserModel.created_at.asc())
        )
        return [self._to_entity(row) for row in result.scalars().all()]

    async def count(self) -> int:
        result = await self._session.execute(select(func.count()).select_from(UserModel))
        return result.scalar_one()

    async def create(self, user: User) -> User:
        model = self._to_model(user)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, user: User) -> User:
        model = await self._session.get(UserModel, user.id)
        if model is None:
            raise ValueError(f"User {user.id} not found in database")
        model.username = user.username
        model.email = user.email
        model.role = user.role
        model.password_hash = user.password_hash
        model.password_salt = user.password_salt
        model.allowed_units = list(user.allowed_units)
        model.is_active = user.is_active
        model.updated_at = user.updated_at
        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, user_id: str) -> bool:
        model = await self._session.get(UserModel, user_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True
