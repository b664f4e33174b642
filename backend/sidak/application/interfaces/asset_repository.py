"""Abstract repository interface (port) for Asset persistence."""

from abc import ABC, abstractmethod

from sidak.domain.entities import Asset, AssetKind


class AssetRepository(ABC):
    """Port for asset persistence: implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, asset_id: str) -> Asset | None:
        """Retrieve a single asset by its UUID."""
        ...

    @abstractmethod
    async def get_all(self) -> list[Asset]:
        """Retrieve every asset, oldest first.

        Access filtering is not applied here; callers run the result through
        the access policy.
        """
        ...

    @abstractmethod
    async def find_by_code(
        self, kind: AssetKind, code: str, *, exclude_id: str | None = None
    ) -> Asset | None:
        """Find an asset of ``kind`` whose canonical code equals ``code`` (case-insensitive)."""
        ...

    @abstractmethod
    async def create(self, asset: Asset) -> Asset:
        """Persist a new asset and return it."""
        ...

    @abstractmethod
    async def update(self, asset: Asset) -> Asset:
        """Update an existing asset."""
        ...

    @abstractmethod
    async def delete(self, asset_id: str) -> bool:
        """Delete an asset. Returns True if deleted, False if not found."""
        ...
