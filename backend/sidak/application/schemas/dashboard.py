"""Pydantic DTOs for the dashboard summary."""

from sidak.application.schemas.asset import AssetResponse
from sidak.application.schemas.base import CamelModel


class AssetTotalsResponse(CamelModel):
    total_item_quantity: int
    total_land_count: int
    total_building_count: int


class YearlyPointResponse(CamelModel):
    year: str
    item_qty: int
    land_count: int
    building_count: int


class DashboardSummaryResponse(CamelModel):
    """Totals, yearly trend and most recent assets visible to the caller."""

    totals: AssetTotalsResponse
    yearly: list[YearlyPointResponse]
    recent: list[AssetResponse]
