from .asset import AssetModel
from .master_data import MasterDataItemModel
from .user import UserModel

__all__ = [
    "AssetModel",
    "MasterDataItemModel",
    "UserModel",
]
