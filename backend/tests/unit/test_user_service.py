"""Unit tests for admin user management."""

import pytest

from sidak.application.schemas import UserCreate, UserUpdate
from sidak.application.services import UserService
from sidak.domain.entities import UserContext
from sidak.domain.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    PermissionDeniedError,
)
from sidak.infrastructure.security import verify_password

ADMIN = UserContext(role="admin", username="admin")
EDITOR = UserContext(role="editor", username="editor")


def _new(username="operator", email="operator@sidak.kelurahan.id", **kwargs) -> UserCreate:
    return UserCreate(
        username=username,
        email=email,
        password=kwargs.pop("password", "rahasia1"),
        role=kwargs.pop("role", "editor"),
        **kwargs,
    )


@pytest.fixture
def service(user_repo) -> UserService:
    return UserService(user_repo)


@pytest.mark.asyncio
async def test_create_user_hashes_password(service: UserService):
    user = await service.create_user(ADMIN, _new(allowedUnits=[" Unit A ", "Unit B", "Unit A", ""]))
    assert user.role == "editor"
    assert user.allowed_units == ["Unit A", "Unit B"]
    assert user.password_hash != "rahasia1"
    assert verify_password("rahasia1", user.password_salt, user.password_hash)


@pytest.mark.asyncio
async def test_non_admin_is_refused(service: UserService):
    with pytest.raises(PermissionDeniedError):
        await service.list_users(EDITOR)
    with pytest.raises(PermissionDeniedError):
        await service.create_user(EDITOR, _new())


@pytest.mark.asyncio
async def test_username_and_email_are_unique_case_insensitively(service: UserService):
    await service.create_user(ADMIN, _new())
    with pytest.raises(DuplicateEntityError):
        await service.create_user(ADMIN, _new(username="OPERATOR", email="other@x.id"))
    with pytest.raises(DuplicateEntityError):
        await service.create_user(ADMIN, _new(username="other", email="Operator@Sidak.Kelurahan.id"))


def test_invalid_role_is_rejected_by_schema():
    with pytest.raises(ValueError):
        _new(role="superuser")


@pytest.mark.asyncio
async def test_update_user(service: UserService):
    created = await service.create_user(ADMIN, _new())
    old_salt = created.password_salt
    updated = await service.update_user(
        ADMIN,
        created.id,
        UserUpdate(role="viewer", allowedUnits=["Unit C"], password="barudong", isActive=False),
    )
    assert updated.role == "viewer"
    assert updated.allowed_units == ["Unit C"]
    assert updated.is_active is False
    assert updated.password_salt != old_salt
    assert verify_password("barudong", updated.password_salt, updated.password_hash)


@pytest.mark.asyncio
async def test_update_may_keep_own_username(service: UserService):
    created = await service.create_user(ADMIN, _new())
    updated = await service.update_user(ADMIN, created.id, UserUpdate(username="Operator"))
    assert updated.username == "Operator"


@pytest.mark.asyncio
async def test_update_unknown_user(service: UserService):
    with pytest.raises(EntityNotFoundError):
        await service.update_user(ADMIN, "missing", UserUpdate(role="viewer"))


@pytest.mark.asyncio
async def test_delete_user(service: UserService):
    created = await service.create_user(ADMIN, _new())
    assert await service.delete_user(ADMIN, created.id) is True
    assert await service.list_users(ADMIN) == []


@pytest.mark.asyncio
async def test_admin_cannot_delete_own_account(service: UserService):
    me = await service.create_user(ADMIN, _new(username="admin", email="admin@x.id", role="admin"))
    with pytest.raises(PermissionDeniedError):
        await service.delete_user(ADMIN, me.id)
