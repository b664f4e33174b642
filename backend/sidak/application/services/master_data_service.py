"""Application service for master data lists (units, categories, sources)."""

import logging

from sidak.application.interfaces import MasterDataRepository
from sidak.application.schemas.master_data import MasterDataCreate, MasterDataUpdate
from sidak.application.services.access_policy import effective_role
from sidak.domain.entities import MasterDataItem, MasterDataType, Role, UserContext
from sidak.domain.exceptions import (
    AssetValidationError,
    DuplicateEntityError,
    EntityNotFoundError,
    PermissionDeniedError,
)

audit = logging.getLogger("sidak.audit")


class MasterDataService:
    """Anyone signed in may read the lists; only admins change them."""

    def __init__(self, repository: MasterDataRepository):
        self._repository = repository

    async def list_items(
        self, item_type: MasterDataType, *, active_only: bool = False
    ) -> list[MasterDataItem]:
        return await self._repository.get_all(item_type, active_only=active_only)

    async def get_item(self, item_type: MasterDataType, item_id: str) -> MasterDataItem:
        item = await self._repository.get_by_id(item_type, item_id)
        if item is None:
            raise EntityNotFoundError(f"MasterData[{item_type.value}]", item_id)
        return item

    async def create_item(
        self, actor: UserContext, item_type: MasterDataType, data: MasterDataCreate
    ) -> MasterDataItem:
        self._require_admin(actor, f"create_{item_type.value}")
        name = data.name.strip()
        if not name:
            raise AssetValidationError(["Name is required"])
        code = self._clean_code(item_type, data.code)
        await self._ensure_unique(item_type, name=name, code=code)

        item = MasterDataItem(type=item_type, name=name, code=code, is_active=data.is_active)
        created = await self._repository.create(item)
        audit.info(
            "Master data created: %s '%s' by=%s", item_type.value, created.name, actor.username
        )
        return created

    async def update_item(
        self,
        actor: UserContext,
        item_type: MasterDataType,
        item_id: str,
        data: MasterDataUpdate,
    ) -> MasterDataItem:
        self._require_admin(actor, f"update_{item_type.value}")
        item = await self.get_item(item_type, item_id)

        name = data.name.strip() if data.name is not None else None
        if name == "":
            raise AssetValidationError(["Name is required"])
        code = self._clean_code(item_type, data.code) if data.code is not None else None
        await self._ensure_unique(item_type, name=name, code=code, exclude_id=item.id)

        item.update(name=name, code=code, is_active=data.is_active)
        updated = await self._repository.update(item)
        audit.info(
            "Master data updated: %s '%s' by=%s", item_type.value, updated.name, actor.username
        )
        return updated

    async def delete_item(
        self, actor: UserContext, item_type: MasterDataType, item_id: str
    ) -> bool:
        self._require_admin(actor, f"delete_{item_type.value}")
        item = await self.get_item(item_type, item_id)
        deleted = await self._repository.delete(item_type, item_id)
        audit.info(
            "Master data deleted: %s '%s' by=%s", item_type.value, item.name, actor.username
        )
        return deleted

    # ── Helpers ──────────────────────────────────────────────────────

    def _require_admin(self, actor: UserContext, action: str) -> None:
        if effective_role(actor) is not Role.ADMIN:
            audit.warning("Denied %s for user=%s role=%s", action, actor.username, actor.role)
            raise PermissionDeniedError(action, "admin only")

    @staticmethod
    def _clean_code(item_type: MasterDataType, code: str | None) -> str | None:
        cleaned = (code or "").strip().upper() or None
        if item_type is MasterDataType.CATEGORIES and cleaned is None:
            raise AssetValidationError(["Category code is required"])
        return cleaned

    async def _ensure_unique(
        self,
        item_type: MasterDataType,
        *,
        name: str | None,
        code: str | None,
        exclude_id: str | None = None,
    ) -> None:
        others = [
            i for i in await self._repository.get_all(item_type) if i.id != exclude_id
        ]
        if name is not None and name.lower() in {i.name.strip().lower() for i in others}:
            raise DuplicateEntityError(f"MasterData[{item_type.value}]", "name", name)
        if code is not None and code in {(i.code or "").strip().upper() for i in others}:
            raise DuplicateEntityError(f"MasterData[{item_type.value}]", "code", code)
