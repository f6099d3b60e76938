"""Monthly trend query."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fintrack.application.queries.analytics._month import resolve_period
from fintrack.application.services import AnalyticsService
from fintrack.domain.analytics.value_objects import MonthlyTrendItem

if TYPE_CHECKING:
    from fintrack.application.context import UserContext
    from fintrack.application.factories import RepositoryFactory


class TrendSeriesQuery:
    """Income and expenses for the months ending at a reference month."""

    def __init__(self, analytics_service: AnalyticsService, user_context: UserContext):
        self._analytics = analytics_service
        self._user_id = user_context.user_id

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        trend_months: int = 6,
    ) -> TrendSeriesQuery:
        return cls(
            analytics_service=AnalyticsService.from_factory(
                factory,
                trend_months=trend_months,
            ),
            user_context=factory.user_context,
        )

    async def execute(
        self,
        month: str | None = None,
        months: int | None = None,
    ) -> list[MonthlyTrendItem]:
        return await self._analytics.get_trend_series(
            self._user_id,
            resolve_period(month),
            months,
        )
