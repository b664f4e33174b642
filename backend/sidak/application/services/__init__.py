from .asset_service import AssetPermissions, AssetService
from .auth_service import AuthService
from .dashboard_service import DashboardService, DashboardSummary
from .data_seeder import DataSeeder
from .master_data_service import MasterDataService
from .user_service import UserService

__all__ = [
    "AssetPermissions",
    "AssetService",
    "AuthService",
    "DashboardService",
    "DashboardSummary",
    "DataSeeder",
    "MasterDataService",
    "UserService",
]
