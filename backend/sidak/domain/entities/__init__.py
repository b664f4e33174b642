from .asset import Asset, AssetCondition, AssetKind, ASSET_FIELD_NAMES, IMMUTABLE_FIELDS
from .user import Role, User, UserContext
from .master_data import MasterDataItem, MasterDataType

__all__ = [
    "Asset",
    "AssetCondition",
    "AssetKind",
    "ASSET_FIELD_NAMES",
    "IMMUTABLE_FIELDS",
    "Role",
    "User",
    "UserContext",
    "MasterDataItem",
    "MasterDataType",
]
