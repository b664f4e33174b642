"""V1 API router: aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from sidak.presentation.api.v1.endpoints.health import router as health_router
from sidak.presentation.api.v1.endpoints.auth import router as auth_router
from sidak.presentation.api.v1.endpoints.assets import router as assets_router
from sidak.presentation.api.v1.endpoints.dashboard import router as dashboard_router
from sidak.presentation.api.v1.endpoints.users import router as users_router
from sidak.presentation.api.v1.endpoints.master_data import router as master_data_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(auth_router)
router.include_router(assets_router)
router.include_router(dashboard_router)
router.include_router(users_router)
router.include_router(master_data_router)
