from .asset_repository import AssetRepository
from .user_repository import UserRepository
from .master_data_repository import MasterDataRepository

__all__ = [
    "AssetRepository",
    "UserRepository",
    "MasterDataRepository",
]
