"""Unit tests for master data management and seeding."""

from pathlib import Path

import pytest

from sidak.application.schemas import MasterDataCreate, MasterDataUpdate
from sidak.application.services import DataSeeder, MasterDataService
from sidak.domain.entities import MasterDataType, UserContext
from sidak.domain.exceptions import (
    AssetValidationError,
    DuplicateEntityError,
    EntityNotFoundError,
    PermissionDeniedError,
)

ADMIN = UserContext(role="admin", username="admin")
VIEWER = UserContext(role="viewer", username="viewer")

_SEED_FILE = Path(__file__).resolve().parents[2] / "data" / "master-data.yaml"


@pytest.fixture
def service(master_repo) -> MasterDataService:
    return MasterDataService(master_repo)


@pytest.mark.asyncio
async def test_create_and_list(service: MasterDataService):
    await service.create_item(ADMIN, MasterDataType.UNITS, MasterDataCreate(name=" Unit A "))
    await service.create_item(ADMIN, MasterDataType.SOURCES, MasterDataCreate(name="Hibah"))
    units = await service.list_items(MasterDataType.UNITS)
    assert [u.name for u in units] == ["Unit A"]


@pytest.mark.asyncio
async def test_only_admin_writes(service: MasterDataService):
    with pytest.raises(PermissionDeniedError):
        await service.create_item(VIEWER, MasterDataType.UNITS, MasterDataCreate(name="Unit A"))


@pytest.mark.asyncio
async def test_names_are_unique_per_list(service: MasterDataService):
    await service.create_item(ADMIN, MasterDataType.UNITS, MasterDataCreate(name="Unit A"))
    with pytest.raises(DuplicateEntityError):
        await service.create_item(ADMIN, MasterDataType.UNITS, MasterDataCreate(name="unit a"))
    # same name in another list is fine
    await service.create_item(ADMIN, MasterDataType.SOURCES, MasterDataCreate(name="Unit A"))


@pytest.mark.asyncio
async def test_blank_name_is_rejected(service: MasterDataService):
    with pytest.raises(AssetValidationError):
        await service.create_item(ADMIN, MasterDataType.UNITS, MasterDataCreate(name="   "))


@pytest.mark.asyncio
async def test_category_code_is_required_uppercased_and_unique(service: MasterDataService):
    with pytest.raises(AssetValidationError):
        await service.create_item(ADMIN, MasterDataType.CATEGORIES, MasterDataCreate(name="Elektronik"))

    item = await service.create_item(
        ADMIN, MasterDataType.CATEGORIES, MasterDataCreate(name="Elektronik", code=" elk ")
    )
    assert item.code == "ELK"
    with pytest.raises(DuplicateEntityError):
        await service.create_item(
            ADMIN, MasterDataType.CATEGORIES, MasterDataCreate(name="Listrik", code="Elk")
        )


@pytest.mark.asyncio
async def test_update_and_delete(service: MasterDataService):
    item = await service.create_item(ADMIN, MasterDataType.UNITS, MasterDataCreate(name="Unit A"))
    updated = await service.update_item(
        ADMIN, MasterDataType.UNITS, item.id, MasterDataUpdate(name="Unit B", isActive=False)
    )
    assert updated.name == "Unit B"
    assert await service.list_items(MasterDataType.UNITS, active_only=True) == []

    assert await service.delete_item(ADMIN, MasterDataType.UNITS, item.id) is True
    with pytest.raises(EntityNotFoundError):
        await service.get_item(MasterDataType.UNITS, item.id)


@pytest.mark.asyncio
async def test_item_is_not_found_under_another_type(service: MasterDataService):
    item = await service.create_item(ADMIN, MasterDataType.UNITS, MasterDataCreate(name="Unit A"))
    with pytest.raises(EntityNotFoundError):
        await service.get_item(MasterDataType.SOURCES, item.id)


# ── Seeding ──────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_seeder_loads_master_data_and_default_users(master_repo, user_repo):
    seeder = DataSeeder(master_repo, user_repo, seed_file=str(_SEED_FILE))
    created = await seeder.seed()

    assert created["units"] == 13
    assert created["sources"] == 12
    assert created["users"] == 3

    categories = await master_repo.get_all(MasterDataType.CATEGORIES)
    assert ("Elektronik", "ELK") in {(c.name, c.code) for c in categories}

    editor = await user_repo.get_by_username("editor")
    viewer = await user_repo.get_by_username("viewer")
    admin = await user_repo.get_by_username("admin")
    assert editor.allowed_units == ["Kelurahan Babakan", "Balai Warga RW 001", "Balai Warga RW 002"]
    assert len(viewer.allowed_units) == 4
    assert admin.allowed_units == []


@pytest.mark.asyncio
async def test_seeder_is_idempotent(master_repo, user_repo):
    seeder = DataSeeder(master_repo, user_repo, seed_file=str(_SEED_FILE))
    await seeder.seed()
    second = await seeder.seed()
    assert second == {"units": 0, "categories": 0, "sources": 0, "users": 0}


@pytest.mark.asyncio
async def test_seeder_tolerates_missing_file(master_repo, user_repo):
    seeder = DataSeeder(master_repo, user_repo, seed_file="does/not/exist.yaml", seed_default_users=False)
    created = await seeder.seed()
    assert created == {"units": 0, "categories": 0, "sources": 0, "users": 0}
