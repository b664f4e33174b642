from .base import CamelModel
from .asset import (
    AssetClassificationResponse,
    AssetCreate,
    AssetPermissionsResponse,
    AssetResponse,
    AssetUpdate,
    DuplicateAssetRequest,
    DuplicateEntry,
)
from .auth import ChangePasswordRequest, LoginRequest, LoginResponse, UserProfile
from .dashboard import AssetTotalsResponse, DashboardSummaryResponse, YearlyPointResponse
from .master_data import MasterDataCreate, MasterDataResponse, MasterDataUpdate
from .user import UserCreate, UserResponse, UserUpdate

__all__ = [
    "CamelModel",
    "AssetClassificationResponse",
    "AssetCreate",
    "AssetPermissionsResponse",
    "AssetResponse",
    "AssetUpdate",
    "DuplicateAssetRequest",
    "DuplicateEntry",
    "ChangePasswordRequest",
    "LoginRequest",
    "LoginResponse",
    "UserProfile",
    "AssetTotalsResponse",
    "DashboardSummaryResponse",
    "YearlyPointResponse",
    "MasterDataCreate",
    "MasterDataResponse",
    "MasterDataUpdate",
    "UserCreate",
    "UserResponse",
    "UserUpdate",
]
