"""Abstract repository interface (port) for master data lists."""

from abc import ABC, abstractmethod

from sidak.domain.entities import MasterDataItem, MasterDataType


class MasterDataRepository(ABC):
    """Port for units/categories/sources persistence."""

    @abstractmethod
    async def get_by_id(self, item_type: MasterDataType, item_id: str) -> MasterDataItem | None:
        ...

    @abstractmethod
    async def get_all(
        self, item_type: MasterDataType, *, active_only: bool = False
    ) -> list[MasterDataItem]:
        """All items of one list, in insertion order."""
        ...

    @abstractmethod
    async def create(self, item: MasterDataItem) -> MasterDataItem:
        ...

    @abstractmethod
    async def update(self, item: MasterDataItem) -> MasterDataItem:
        ...

    @abstractmethod
    async def delete(self, item_type: MasterDataType, item_id: str) -> bool:
        ...
