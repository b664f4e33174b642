from .asset_repository import SQLAlchemyAssetRepository
from .master_data_repository import SQLAlchemyMasterDataRepository
from .user_repository import SQLAlchemyUserRepository

__all__ = [
    "SQLAlchemyAssetRepository",
    "SQLAlchemyMasterDataRepository",
    "SQLAlchemyUserRepository",
]
