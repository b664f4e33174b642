"""Concrete repository implementation for Asset backed by SQLAlchemy."""

from typing import Any

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from sidak.application.interfaces import AssetRepository
from sidak.application.services.asset_classifier import kind_of, resolve_alias
from sidak.domain.entities import ASSET_FIELD_NAMES, Asset, AssetKind
from sidak.infrastructure.database.models import AssetModel
from sidak.infrastructure.database.repositories._time import as_utc

_COLUMN_FIELDS = frozenset({
    "id",
    "jenis_inventaris",
    "nama_barang",
    "unit",
    "photos",
    "created_by",
    "tanggal_input",
    "updated_at",
})
_DETAIL_FIELDS = ASSET_FIELD_NAMES - _COLUMN_FIELDS


class SQLAlchemyAssetRepository(AssetRepository):
    """Implements the AssetRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: AssetModel) -> Asset:
        """Map ORM model → domain entity."""
        details = {k: v for k, v in (model.details or {}).items() if k in _DETAIL_FIELDS}
        return Asset(
            id=model.id,
            jenis_inventaris=model.jenis_inventaris,
            nama_barang=model.nama_barang,
            unit=model.unit,
            photos=list(model.photos or []),
            created_by=model.created_by,
            tanggal_input=as_utc(model.tanggal_input),
            updated_at=as_utc(model.updated_at),
            **details,
        )

    @staticmethod
    def _details(entity: Asset) -> dict[str, Any]:
        return {
            name: getattr(entity, name)
            for name in sorted(_DETAIL_FIELDS)
            if getattr(entity, name) is not None
        }

    def _to_model(self, entity: Asset) -> AssetModel:
        """Map domain entity → ORM model (for creation)."""
        return AssetModel(
            id=entity.id,
            kind=kind_of(entity.jenis_inventaris).value,
            code=resolve_alias(entity, "code") or None,
            jenis_inventaris=entity.jenis_inventaris,
            nama_barang=entity.nama_barang,
            unit=entity.unit,
            photos=list(entity.photos),
            details=self._details(entity),
            created_by=entity.created_by,
            tanggal_input=entity.tanggal_input,
            updated_at=entity.updated_at,
        )

    async def get_by_id(self, asset_id: str) -> Asset | None:
        result = await self._session.get(AssetModel, asset_id)
        return self._to_entity(result) if result else None

    async def get_all(self) -> list[Asset]:
        stmt = select(AssetModel).order_by(AssetModel.tanggal_input.asc())
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def find_by_code(
        self, kind: AssetKind, code: str, *, exclude_id: str | None = None
    ) -> Asset | None:
        stmt = select(AssetModel).where(
            AssetModel.kind == kind.value,
            func.lower(AssetModel.code) == code.strip().lower(),
        )
        if exclude_id is not None:
            stmt = stmt.where(AssetModel.id != exclude_id)
        result = await self._session.execute(stmt.limit(1))
        model = result.scalars().first()
        return self._to_entity(model) if model else None

    async def create(self, asset: Asset) -> Asset:
        model = self._to_model(asset)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, asset: Asset) -> Asset:
        model = await self._session.get(AssetModel, asset.id)
        if model is None:
            raise ValueError(f"Asset {asset.id} not found in database")
        model.kind = kind_of(asset.jenis_inventaris).value
        model.code = resolve_alias(asset, "code") or None
        model.jenis_inventaris = asset.jenis_inventaris
        model.nama_barang = asset.nama_barang
        model.unit = asset.unit
        model.photos = list(asset.photos)
        model.details = self._details(asset)
        model.updated_at = asset.updated_at
        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, asset_id: str) -> bool:
        model = await self._session.get(AssetModel, asset_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True
