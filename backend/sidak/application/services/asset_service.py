"""Application service (use case) for Asset operations.

Every read goes through ``access_policy.filter_visible``/``can_view`` and every
write through the matching ``can_*`` check, so the policy lives in one place.
"""

import dataclasses
import logging
from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

from sidak.application.interfaces import AssetRepository, MasterDataRepository
from sidak.application.schemas.asset import AssetCreate, AssetUpdate, DuplicateAssetRequest
from sidak.application.services import access_policy
from sidak.application.services.access_policy import DEFAULT_POLICY, AccessPolicyConfig
from sidak.application.services.asset_classifier import (
    AssetClassification,
    classify,
    kind_of,
    resolve_alias,
)
from sidak.application.services.asset_code_generator import (
    JENIS_CODE_PREFIXES,
    generate_item_code,
)
from sidak.domain.entities import (
    Asset,
    AssetCondition,
    AssetKind,
    MasterDataType,
    UserContext,
)
from sidak.domain.exceptions import (
    AssetValidationError,
    DuplicateEntityError,
    EntityNotFoundError,
    PermissionDeniedError,
)

logger = logging.getLogger(__name__)
audit = logging.getLogger("sidak.audit")

_CONDITIONS = frozenset(c.value for c in AssetCondition)


@dataclasses.dataclass(frozen=True)
class AssetPermissions:
    can_view: bool
    can_edit: bool
    can_delete: bool


def _normalize(payload: dict[str, Any]) -> dict[str, Any]:
    """Trim strings and turn empty strings into None."""
    normalized: dict[str, Any] = {}
    for key, value in payload.items():
        if isinstance(value, str):
            value = value.strip() or None
        normalized[key] = value
    return normalized


class AssetService:
    """Orchestrates asset CRUD. Depends on the repository ports (DI)."""

    def __init__(
        self,
        repository: AssetRepository,
        master_data_repository: MasterDataRepository | None = None,
        policy: AccessPolicyConfig = DEFAULT_POLICY,
    ):
        self._repository = repository
        self._master_data = master_data_repository
        self._policy = policy

    # ── Reads ────────────────────────────────────────────────────────

    async def list_assets(
        self,
        user: UserContext,
        *,
        search: str | None = None,
        kind: AssetKind | None = None,
    ) -> list[Asset]:
        assets = access_policy.filter_visible(
            user, await self._repository.get_all(), self._policy
        )
        if kind is not None:
            assets = [a for a in assets if kind_of(a.jenis_inventaris) is kind]
        if search:
            needle = search.strip().lower()
            assets = [a for a in assets if needle in (a.nama_barang or "").lower()]
        return assets

    async def get_asset(self, user: UserContext, asset_id: str) -> Asset:
        asset = await self._repository.get_by_id(asset_id)
        if asset is None or not access_policy.can_view(user, asset, self._policy):
            raise EntityNotFoundError("Asset", asset_id)
        return asset

    async def classify_asset(self, user: UserContext, asset_id: str) -> AssetClassification:
        return classify(await self.get_asset(user, asset_id))

    async def permissions_for(self, user: UserContext, asset_id: str) -> AssetPermissions:
        asset = await self.get_asset(user, asset_id)
        return AssetPermissions(
            can_view=True,
            can_edit=access_policy.can_edit(user, asset, self._policy),
            can_delete=access_policy.can_delete(user, asset),
        )

    # ── Writes ───────────────────────────────────────────────────────

    async def create_asset(self, user: UserContext, data: AssetCreate) -> Asset:
        if not access_policy.can_create(user):
            self._deny(user, "create", "role may not create assets")

        payload = {
            k: v for k, v in _normalize(data.model_dump()).items() if v is not None
        }
        asset = Asset(**payload, created_by=user.username or None)
        await self._validate(asset)
        if not access_policy.can_edit(user, asset, self._policy):
            self._deny(user, "create", f"unit '{asset.unit}' is outside the allowed units")

        kind = kind_of(asset.jenis_inventaris)
        if kind is AssetKind.ITEM and not resolve_alias(asset, "code"):
            asset.no_kode_barang = generate_item_code(
                asset.jenis_inventaris,
                await self._repository.get_all(),
                await self._code_prefixes(),
            )
            logger.debug("Generated item code %s", asset.no_kode_barang)

        await self._ensure_code_unique(asset)
        created = await self._repository.create(asset)
        audit.info(
            "Asset created: id=%s code=%s kind=%s unit=%s by=%s",
            created.id, resolve_alias(created, "code"), kind.value, created.unit, user.username,
        )
        return created

    async def update_asset(
        self, user: UserContext, asset_id: str, data: AssetUpdate
    ) -> Asset:
        current = await self.get_asset(user, asset_id)
        if not access_policy.can_edit(user, current, self._policy):
            self._deny(user, "update", f"asset belongs to unit '{current.unit}'")

        changes = _normalize(data.model_dump(exclude_unset=True))
        if "photos" in changes and changes["photos"] is None:
            changes["photos"] = []

        asset = dataclasses.replace(current, photos=list(current.photos))
        asset.update(**changes)
        await self._validate(asset)
        if not access_policy.can_edit(user, asset, self._policy):
            self._deny(user, "update", f"unit '{asset.unit}' is outside the allowed units")

        await self._ensure_code_unique(asset)
        updated = await self._repository.update(asset)
        audit.info(
            "Asset updated: id=%s fields=%s by=%s",
            updated.id, sorted(changes), user.username,
        )
        return updated

    async def delete_asset(self, user: UserContext, asset_id: str) -> bool:
        asset = await self.get_asset(user, asset_id)
        if not access_policy.can_delete(user, asset):
            self._deny(user, "delete", "only admins may delete assets")
        deleted = await self._repository.delete(asset_id)
        audit.info(
            "Asset deleted: id=%s name=%s by=%s", asset_id, asset.nama_barang, user.username
        )
        return deleted

    async def duplicate_asset(
        self, user: UserContext, asset_id: str, request: DuplicateAssetRequest
    ) -> list[Asset]:
        """Copy an item into other rooms; each copy gets its own id and code."""
        base = await self.get_asset(user, asset_id)
        if not access_policy.can_create(user) or not access_policy.can_edit(
            user, base, self._policy
        ):
            self._deny(user, "duplicate", f"asset belongs to unit '{base.unit}'")
        if kind_of(base.jenis_inventaris) is not AssetKind.ITEM:
            raise AssetValidationError(["Only movable items can be duplicated"])

        known = await self._repository.get_all()
        prefixes = await self._code_prefixes()
        created: list[Asset] = []
        for entry in request.entries:
            now = datetime.now(timezone.utc)
            copy = dataclasses.replace(
                base,
                id=str(uuid4()),
                ruangan=entry.ruangan,
                jumlah_barang=entry.jumlah_barang,
                photos=list(base.photos),
                no_kode_barang=generate_item_code(base.jenis_inventaris, known + created, prefixes),
                created_by=user.username or None,
                tanggal_input=now,
                updated_at=now,
            )
            created.append(await self._repository.create(copy))

        audit.info(
            "Asset duplicated: source=%s copies=%d by=%s", asset_id, len(created), user.username
        )
        return created

    # ── Helpers ──────────────────────────────────────────────────────

    def _deny(self, user: UserContext, action: str, reason: str) -> None:
        audit.warning(
            "Denied %s for user=%s role=%s: %s", action, user.username, user.role, reason
        )
        raise PermissionDeniedError(action, reason)

    async def _validate(self, asset: Asset) -> None:
        errors: list[str] = []
        if not (asset.nama_barang or "").strip():
            errors.append("namaBarang is required")
        if not (asset.jenis_inventaris or "").strip():
            errors.append("jenisInventaris is required")
        if not (asset.unit or "").strip():
            errors.append("unit is required")
        for name in ("jumlah_barang", "harga_beli", "harga", "luas_tanah", "luas_bangunan"):
            value = getattr(asset, name)
            if value is not None and value < 0:
                errors.append(f"{name} must not be negative")
        if (
            kind_of(asset.jenis_inventaris) is AssetKind.ITEM
            and asset.keadaan_barang is not None
            and asset.keadaan_barang not in _CONDITIONS
        ):
            errors.append(
                "keadaanBarang must be one of: " + ", ".join(c.value for c in AssetCondition)
            )
        if asset.unit and self._master_data is not None:
            units = await self._master_data.get_all(MasterDataType.UNITS, active_only=True)
            if units and asset.unit not in {u.name for u in units}:
                errors.append(f"Unknown unit '{asset.unit}'")
        if errors:
            raise AssetValidationError(errors)

    async def _ensure_code_unique(self, asset: Asset) -> None:
        code = resolve_alias(asset, "code")
        if not code:
            return
        clash = await self._repository.find_by_code(
            kind_of(asset.jenis_inventaris), code, exclude_id=asset.id
        )
        if clash is not None:
            raise DuplicateEntityError("Asset", "code", code)

    async def _code_prefixes(self) -> dict[str, str]:
        prefixes = dict(JENIS_CODE_PREFIXES)
        if self._master_data is not None:
            for category in await self._master_data.get_all(
                MasterDataType.CATEGORIES, active_only=True
            ):
                if category.code:
                    prefixes[category.name] = category.code
        return prefixes
