"""Concrete repository implementation for master data backed by SQLAlchemy."""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from sidak.application.interfaces import MasterDataRepository
from sidak.domain.entities import MasterDataItem, MasterDataType
from sidak.infrastructure.database.models import MasterDataItemModel
from sidak.infrastructure.database.repositories._time import as_utc


class SQLAlchemyMasterDataRepository(MasterDataRepository):
    """Implements the MasterDataRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: MasterDataItemModel) -> MasterDataItem:
        return MasterDataItem(
            id=model.id,
            type=MasterDataType(model.type),
            name=model.name,
            code=model.code,
            is_active=model.is_active,
            created_at=as_utc(model.created_at),
            updated_at=as_utc(model.updated_at),
        )

    async def _get_model(
        self, item_type: MasterDataType, item_id: str
    ) -> MasterDataItemModel | None:
        model = await self._session.get(MasterDataItemModel, item_id)
        if model is None or model.type != item_type.value:
            return None
        return model

    async def get_by_id(self, item_type: MasterDataType, item_id: str) -> MasterDataItem | None:
        model = await self._get_model(item_type, item_id)
        return self._to_entity(model) if model else None

    async def get_all(
        self, item_type: MasterDataType, *, active_only: bool = False
    ) -> list[MasterDataItem]:
        stmt = select(MasterDataItemModel).where(MasterDataItemModel.type == item_type.value)
        if active_only:
            stmt = stmt.where(MasterDataItemModel.is_active.is_(True))
        stmt = stmt.order_by(MasterDataItemModel.position.asc())
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, item: MasterDataItem) -> MasterDataItem:
        last = await self._session.execute(
            select(func.max(MasterDataItemModel.position)).where(
                MasterDataItemModel.type == item.type.value
            )
        )
        model = MasterDataItemModel(
            id=item.id,
            type=item.type.value,
            name=item.name,
            code=item.code,
            position=(last.scalar() or 0) + 1,
            is_active=item.is_active,
            created_at=item.created_at,
            updated_at=item.updated_at,
        )
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, item: MasterDataItem) -> MasterDataItem:
        model = await self._get_model(item.type, item.id)
        if model is None:
            raise ValueError(f"MasterData {item.type.value}/{item.id} not found in database")
        model.name = item.name
        model.code = item.code
        model.is_active = item.is_active
        model.updated_at = item.updated_at
        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, item_type: MasterDataType, item_id: str) -> bool:
        model = await self._get_model(item_type, item_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True
