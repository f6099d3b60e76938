"""List budgets with their spending status."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fintrack.application.dtos.analytics import BudgetWithStatus
from fintrack.application.queries.analytics._month import resolve_period
from fintrack.application.services import AnalyticsService
from fintrack.domain.ledger.repositories import BudgetRepository

if TYPE_CHECKING:
    from fintrack.application.context import UserContext
    from fintrack.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class ListBudgetsQuery:
    """Budgets of the current user, newest month first, each with its status."""

    def __init__(
        self,
        budget_repository: BudgetRepository,
        analytics_service: AnalyticsService,
        user_context: UserContext,
    ):
        self._budget_repo = budget_repository
        self._analytics = analytics_service
        self._user_id = user_context.user_id

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListBudgetsQuery:
        return cls(
            budget_repository=factory.budget_repository(),
            analytics_service=AnalyticsService.from_factory(factory),
            user_context=factory.user_context,
        )

    async def execute(self, month: str | None = None) -> list[BudgetWithStatus]:
        month_filter = resolve_period(month).first_day if month else None
        budgets = await self._budget_repo.find_all(month=month_filter)

        # One aggregate per budget; sequential because the session is shared
        results = []
        for budget in budgets:
            results.append(await self._analytics.budget_with_status(self._user_id, budget))
        logger.debug("Computed status for %d budgets", len(results))
        return results
