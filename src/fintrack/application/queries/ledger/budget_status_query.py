"""Budget status query."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from fintrack.application.dtos.analytics import BudgetWithStatus
from fintrack.application.queries.analytics._month import resolve_period
from fintrack.application.services import AnalyticsService

if TYPE_CHECKING:
    from fintrack.application.context import UserContext
    from fintrack.application.factories import RepositoryFactory


class BudgetStatusQuery:
    """Spending against the budget of one category in one month."""

    def __init__(self, analytics_service: AnalyticsService, user_context: UserContext):
        self._analytics = analytics_service
        self._user_id = user_context.user_id

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> BudgetStatusQuery:
        return cls(
            analytics_service=AnalyticsService.from_factory(factory),
            user_context=factory.user_context,
        )

    async def execute(
        self,
        category_id: UUID,
        month: str | None = None,
    ) -> BudgetWithStatus:
        return await self._analytics.get_budget_status(
            self._user_id,
            category_id,
            resolve_period(month),
        )
