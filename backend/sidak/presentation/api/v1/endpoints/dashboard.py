"""Dashboard summary endpoint."""

from fastapi import APIRouter, Depends

from sidak.application.schemas.asset import AssetResponse
from sidak.application.schemas.dashboard import (
    AssetTotalsResponse,
    DashboardSummaryResponse,
    YearlyPointResponse,
)
from sidak.application.services import DashboardService
from sidak.application.services.asset_classifier import kind_of
from sidak.domain.entities import UserContext
from sidak.infrastructure.dependencies import get_current_context, get_dashboard_service

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get("/summary", response_model=DashboardSummaryResponse)
async def dashboard_summary(
    user: UserContext = Depends(get_current_context),
    service: DashboardService = Depends(get_dashboard_service),
) -> DashboardSummaryResponse:
    """Totals, yearly series and the five most recent assets the caller may see."""
    summary = await service.get_summary(user)
    return DashboardSummaryResponse(
        totals=AssetTotalsResponse(
            total_item_quantity=summary.totals.total_item_quantity,
            total_land_count=summary.totals.total_land_count,
            total_building_count=summary.totals.total_building_count,
        ),
        yearly=[
            YearlyPointResponse(
                year=p.year,
                item_qty=p.item_qty,
                land_count=p.land_count,
                building_count=p.building_count,
            )
            for p in summary.yearly
        ],
        recent=[
            AssetResponse.from_entity(a, kind_of(a.jenis_inventaris)) for a in summary.recent
        ],
    )
