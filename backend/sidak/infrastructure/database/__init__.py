from .base import Base
from .session import engine, async_session_factory, get_db_session
from .models import AssetModel, MasterDataItemModel, UserModel

__all__ = [
    "Base",
    "engine",
    "async_session_factory",
    "get_db_session",
    "AssetModel",
    "MasterDataItemModel",
    "UserModel",
]
