"""Period total query."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING

from fintrack.application.services import AnalyticsService
from fintrack.domain.ledger.entities import TransactionType

if TYPE_CHECKING:
    from fintrack.application.context import UserContext
    from fintrack.application.factories import RepositoryFactory


class PeriodTotalQuery:
    """Sum of one transaction type over an inclusive interval."""

    def __init__(self, analytics_service: AnalyticsService, user_context: UserContext):
        self._analytics = analytics_service
        self._user_id = user_context.user_id

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> PeriodTotalQuery:
        return cls(
            analytics_service=AnalyticsService.from_factory(factory),
            user_context=factory.user_context,
        )

    async def execute(
        self,
        transaction_type: str | TransactionType,
        start: datetime,
        end: datetime,
    ) -> Decimal:
        return await self._analytics.get_period_total(
            self._user_id,
            TransactionType.parse(transaction_type),
            start,
            end,
        )
