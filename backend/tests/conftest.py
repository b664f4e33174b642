"""Shared fixtures: in-memory fake repositories and a throwaway SQLite database."""

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from sidak.application.interfaces import (
    AssetRepository,
    MasterDataRepository,
    UserRepository,
)
from sidak.application.services.asset_classifier import kind_of, resolve_alias
from sidak.domain.entities import (
    Asset,
    AssetKind,
    MasterDataItem,
    MasterDataType,
    User,
)
from sidak.infrastructure.database import Base


class FakeAssetRepository(AssetRepository):
    """In-memory fake repository for unit testing."""

    def __init__(self):
        self._assets: dict[str, Asset] = {}

    async def get_by_id(self, asset_id: str) -> Asset | None:
        return self._assets.get(asset_id)

    async def get_all(self) -> list[Asset]:
        return list(self._assets.values())

    async def find_by_code(
        self, kind: AssetKind, code: str, *, exclude_id: str | None = None
    ) -> Asset | None:
        for asset in self._assets.values():
            if asset.id == exclude_id or kind_of(asset.jenis_inventaris) is not kind:
                continue
            if resolve_alias(asset, "code").lower() == code.strip().lower():
                return asset
        return None

    async def create(self, asset: Asset) -> Asset:
        self._assets[asset.id] = asset
        return asset

    async def update(self, asset: Asset) -> Asset:
        if asset.id not in self._assets:
            raise ValueError(f"Asset {asset.id} not found")
        self._assets[asset.id] = asset
        return asset

    async def delete(self, asset_id: str) -> bool:
        return self._assets.pop(asset_id, None) is not None


class FakeUserRepository(UserRepository):
    def __init__(self):
        self._users: dict[str, User] = {}

    async def get_by_id(self, user_id: str) -> User | None:
        return self._users.get(user_id)

    async def get_by_username(self, username: str) -> User | None:
        for user in self._users.values():
            if user.username.lower() == username.lower():
                return user
        return None

    async def get_by_email(self, email: str) -> User | None:
        for user in self._users.values():
            if user.email.lower() == email.lower():
                return user
        return None

    async def get_all(self) -> list[User]:
        return list(self._users.values())

    async def count(self) -> int:
        return len(self._users)

    async def create(self, user: User) -> User:
        self._users[user.id] = user
        return user

    async def update(self, user: User) -> User:
        if user.id not in self._users:
            raise ValueError(f"User {user.id} not found")
        self._users[user.id] = user
        return user

    async def delete(self, user_id: str) -> bool:
        return self._users.pop(user_id, None) is not None


class FakeMasterDataRepository(MasterDataRepository):
    def __init__(self):
        self._items: dict[str, MasterDataItem] = {}

    async def get_by_id(self, item_type: MasterDataType, item_id: str) -> MasterDataItem | None:
        item = self._items.get(item_id)
        return item if item is not None and item.type is item_type else None

    async def get_all(
        self, item_type: MasterDataType, *, active_only: bool = False
    ) -> list[MasterDataItem]:
        return [
            i for i in self._items.values()
            if i.type is item_type and (i.is_active or not active_only)
        ]

    async def create(self, item: MasterDataItem) -> MasterDataItem:
        self._items[item.id] = item
        return item

    async def update(self, item: MasterDataItem) -> MasterDataItem:
        self._items[item.id] = item
        return item

    async def delete(self, item_type: MasterDataType, item_id: str) -> bool:
        if await self.get_by_id(item_type, item_id) is None:
            return False
        del self._items[item_id]
        return True


@pytest.fixture
def asset_repo() -> FakeAssetRepository:
    return FakeAssetRepository()


@pytest.fixture
def user_repo() -> FakeUserRepository:
    return FakeUserRepository()


@pytest.fixture
def master_repo() -> FakeMasterDataRepository:
    return FakeMasterDataRepository()


@pytest_asyncio.fixture
async def db_session_factory():
    """Sessions over a fresh in-memory SQLite schema, shared by every connection."""
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(db_session_factory):
    async with db_session_factory() as session:
        yield session
