"""Application service for the dashboard summary."""

from dataclasses import dataclass

from sidak.application.interfaces import AssetRepository
from sidak.application.services import access_policy
from sidak.application.services.access_policy import DEFAULT_POLICY, AccessPolicyConfig
from sidak.application.services.aggregation import (
    AssetTotals,
    YearlyPoint,
    compute_totals,
    compute_yearly_series,
)
from sidak.domain.entities import Asset, UserContext

RECENT_LIMIT = 5


@dataclass(frozen=True)
class DashboardSummary:
    totals: AssetTotals
    yearly: list[YearlyPoint]
    recent: list[Asset]


class DashboardService:
    """Aggregates the assets the caller may see."""

    def __init__(self, repository: AssetRepository, policy: AccessPolicyConfig = DEFAULT_POLICY):
        self._repository = repository
        self._policy = policy

    async def get_summary(self, user: UserContext, recent_limit: int = RECENT_LIMIT) -> DashboardSummary:
        visible = access_policy.filter_visible(user, await self._repository.get_all(), self._policy)
        recent = sorted(visible, key=lambda a: a.tanggal_input, reverse=True)[:recent_limit]
        return DashboardSummary(
            totals=compute_totals(visible),
            yearly=compute_yearly_series(visible),
            recent=recent,
        )
