"""Application service for admin user management."""

import logging
from datetime import datetime, timezone

from sidak.application.interfaces import UserRepository
from sidak.application.schemas.user import UserCreate, UserUpdate
from sidak.application.services.access_policy import effective_role
from sidak.domain.entities import Role, User, UserContext
from sidak.domain.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    PermissionDeniedError,
)
from sidak.infrastructure.security import generate_salt, hash_password

audit = logging.getLogger("sidak.audit")


def _clean_units(units: list[str]) -> list[str]:
    """Trim, drop blanks and de-duplicate while keeping the given order."""
    seen: dict[str, None] = {}
    for unit in units:
        unit = unit.strip()
        if unit:
            seen.setdefault(unit, None)
    return list(seen)


class UserService:
    """User CRUD, restricted to admins."""

    def __init__(self, repository: UserRepository):
        self._repository = repository

    def _require_admin(self, actor: UserContext, action: str) -> None:
        if effective_role(actor) is not Role.ADMIN:
            audit.warning("Denied %s for user=%s role=%s", action, actor.username, actor.role)
            raise PermissionDeniedError(action, "admin only")

    async def list_users(self, actor: UserContext) -> list[User]:
        self._require_admin(actor, "list_users")
        return await self._repository.get_all()

    async def get_user(self, actor: UserContext, user_id: str) -> User:
        self._require_admin(actor, "get_user")
        user = await self._repository.get_by_id(user_id)
        if user is None:
            raise EntityNotFoundError("User", user_id)
        return user

    async def create_user(self, actor: UserContext, data: UserCreate) -> User:
        self._require_admin(actor, "create_user")
        username = data.username.strip()
        email = data.email.strip()
        await self._ensure_unique(username=username, email=email)

        salt = generate_salt()
        user = User(
            username=username,
            email=email,
            role=data.role.value,
            password_hash=hash_password(data.password, salt),
            password_salt=salt,
            allowed_units=_clean_units(data.allowed_units),
        )
        created = await self._repository.create(user)
        audit.info("User created: %s (%s) by=%s", created.username, created.role, actor.username)
        return created

    async def update_user(self, actor: UserContext, user_id: str, data: UserUpdate) -> User:
        user = await self.get_user(actor, user_id)

        username = data.username.strip() if data.username is not None else None
        email = data.email.strip() if data.email is not None else None
        await self._ensure_unique(username=username, email=email, exclude_id=user.id)

        if username is not None:
            user.username = username
        if email is not None:
            user.email = email
        if data.role is not None:
            user.role = data.role.value
        if data.allowed_units is not None:
            user.allowed_units = _clean_units(data.allowed_units)
        if data.is_active is not None:
            user.is_active = data.is_active
        if data.password is not None:
            user.password_salt = generate_salt()
            user.password_hash = hash_password(data.password, user.password_salt)
        user.updated_at = datetime.now(timezone.utc)

        updated = await self._repository.update(user)
        audit.info("User updated: %s by=%s", updated.username, actor.username)
        return updated

    async def delete_user(self, actor: UserContext, user_id: str) -> bool:
        user = await self.get_user(actor, user_id)
        if user.username == actor.username:
            raise PermissionDeniedError("delete_user", "admins cannot delete their own account")
        deleted = await self._repository.delete(user_id)
        audit.info("User deleted: %s by=%s", user.username, actor.username)
        return deleted

    async def _ensure_unique(
        self,
        *,
        username: str | None,
        email: str | None,
        exclude_id: str | None = None,
    ) -> None:
        if username is not None:
            existing = await self._repository.get_by_username(username)
            if existing is not None and existing.id != exclude_id:
                raise DuplicateEntityError("User", "username", username)
        if email is not None:
            existing = await self._repository.get_by_email(email)
            if existing is not None and existing.id != exclude_id:
                raise DuplicateEntityError("User", "email", email)
