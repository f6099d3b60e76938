"""Category breakdown query."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fintrack.application.queries.analytics._month import resolve_period
from fintrack.application.services import AnalyticsService
from fintrack.domain.analytics.value_objects import CategoryBreakdownItem
from fintrack.domain.ledger.entities import TransactionType

if TYPE_CHECKING:
    from fintrack.application.context import UserContext
    from fintrack.application.factories import RepositoryFactory


class CategoryBreakdownQuery:
    """Per-category totals of one transaction type within a month."""

    def __init__(self, analytics_service: AnalyticsService, user_context: UserContext):
        self._analytics = analytics_service
        self._user_id = user_context.user_id

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> CategoryBreakdownQuery:
        return cls(
            analytics_service=AnalyticsService.from_factory(factory),
            user_context=factory.user_context,
        )

    async def execute(
        self,
        transaction_type: str | TransactionType = TransactionType.EXPENSE,
        month: str | None = None,
    ) -> list[CategoryBreakdownItem]:
        period = resolve_period(month)
        return await self._analytics.get_category_breakdown(
            self._user_id,
            TransactionType.parse(transaction_type),
            period.start,
            period.end,
        )
