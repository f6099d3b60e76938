"""Dashboard report query."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fintrack.application.dtos.analytics import AnalyticsReport
from fintrack.application.queries.analytics._month import resolve_period
from fintrack.application.services import AnalyticsService

if TYPE_CHECKING:
    from fintrack.application.context import UserContext
    from fintrack.application.factories import RepositoryFactory


class AnalyticsStatsQuery:
    """Build the full dashboard report for one month."""

    def __init__(self, analytics_service: AnalyticsService, user_context: UserContext):
        self._analytics = analytics_service
        self._user_id = user_context.user_id

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        trend_months: int = 6,
        recent_limit: int = 10,
    ) -> AnalyticsStatsQuery:
        return cls(
            analytics_service=AnalyticsService.from_factory(
                factory,
                trend_months=trend_months,
                recent_limit=recent_limit,
            ),
            user_context=factory.user_context,
        )

    async def execute(self, month: str | None = None) -> AnalyticsReport:
        return await self._analytics.build_report(self._user_id, resolve_period(month))
