"""Current-vs-previous month summary query."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fintrack.application.queries.analytics._month import resolve_period
from fintrack.application.services import AnalyticsService
from fintrack.domain.analytics.value_objects import AnalyticsSummary

if TYPE_CHECKING:
    from fintrack.application.context import UserContext
    from fintrack.application.factories import RepositoryFactory


class ComparativeSummaryQuery:
    """Compare income and expenses of a month with the month before."""

    def __init__(self, analytics_service: AnalyticsService, user_context: UserContext):
        self._analytics = analytics_service
        self._user_id = user_context.user_id

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ComparativeSummaryQuery:
        return cls(
            analytics_service=AnalyticsService.from_factory(factory),
            user_context=factory.user_context,
        )

    async def execute(self, month: str | None = None) -> AnalyticsSummary:
        return await self._analytics.get_comparative_summary(
            self._user_id,
            resolve_period(month),
        )
