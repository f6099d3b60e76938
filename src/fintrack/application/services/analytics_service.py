"""Analytics service: the read-side contract behind the dashboard.

Each operation reads one snapshot from the ledger port and hands it to the
pure builders in ``fintrack.domain.analytics.services``. Months inside a
snapshot are aggregated independently, so a report needs a single read per
concern rather than one pair of queries per month.
"""

from __future__ import annotations

import logging
from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING
from uuid import UUID

from fintrack.application.dtos.analytics import (
    AnalyticsReport,
    BudgetWithStatus,
    CategoryBreakdown,
    ReportPeriod,
    TransactionView,
)
from fintrack.application.ports.analytics import LedgerReadPort
from fintrack.domain.analytics.services import (
    DEFAULT_TREND_MONTHS,
    build_category_breakdown,
    build_comparative_summary,
    build_trend_series,
    calculate_budget_status,
    period_totals,
)
from fintrack.domain.analytics.value_objects import (
    ZERO,
    AnalyticsSummary,
    CategoryBreakdownItem,
    MonthlyTrendItem,
    Period,
    trailing_periods,
)
from fintrack.domain.ledger.entities import Budget, TransactionType
from fintrack.domain.ledger.exceptions import BudgetNotFoundError
from fintrack.domain.ledger.repositories import BudgetRepository
from fintrack.domain.shared.exceptions import ValidationError
from fintrack.domain.shared.time import to_utc

if TYPE_CHECKING:
    from fintrack.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)

DEFAULT_RECENT_LIMIT = 10


class AnalyticsService:
    """Compute period totals, breakdowns, trends, summaries and budget status."""

    def __init__(
        self,
        ledger_read_port: LedgerReadPort,
        budget_repository: BudgetRepository | None = None,
        trend_months: int = DEFAULT_TREND_MONTHS,
        recent_limit: int = DEFAULT_RECENT_LIMIT,
    ):
        self._ledger = ledger_read_port
        self._budgets = budget_repository
        self._trend_months = trend_months
        self._recent_limit = recent_limit

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        trend_months: int = DEFAULT_TREND_MONTHS,
        recent_limit: int = DEFAULT_RECENT_LIMIT,
    ) -> AnalyticsService:
        return cls(
            ledger_read_port=factory.ledger_read_port(),
            budget_repository=factory.budget_repository(),
            trend_months=trend_months,
            recent_limit=recent_limit,
        )

    async def get_period_total(
        self,
        user_id: str,
        transaction_type: TransactionType,
        start: datetime,
        end: datetime,
        *,
        category_id: UUID | None = None,
    ) -> Decimal:
        start, end = to_utc(start), to_utc(end)
        if end < start:
            msg = "End of the interval must not precede its start"
            raise ValidationError(msg, fields=["start", "end"])
        total = await self._ledger.sum_amounts(
            user_id=user_id,
            transaction_type=transaction_type,
            start=start,
            end=end,
            category_id=category_id,
        )
        return total if total and total > 0 else ZERO

    async def get_category_breakdown(
        self,
        user_id: str,
        transaction_type: TransactionType,
        start: datetime,
        end: datetime,
    ) -> list[CategoryBreakdownItem]:
        transactions = await self._ledger.transactions_between(
            user_id=user_id,
            start=start,
            end=end,
            transaction_type=transaction_type,
        )
        categories = await self._ledger.categories_by_ids(
            {t.category_id for t in transactions},
        )
        return build_category_breakdown(transactions, transaction_type, categories)

    async def get_trend_series(
        self,
        user_id: str,
        reference: Period,
        months: int | None = None,
    ) -> list[MonthlyTrendItem]:
        months = self._trend_months if months is None else months
        if months < 1:
            msg = "Trend window must cover at least one month"
            raise ValidationError(msg, fields=["months"])

        window = trailing_periods(reference, months)
        snapshot = await self._ledger.transactions_between(
            user_id=user_id,
            start=window[0].start,
            end=reference.end,
        )
        return build_trend_series(snapshot, reference, months)

    async def get_comparative_summary(
        self,
        user_id: str,
        reference: Period,
    ) -> AnalyticsSummary:
        previous = reference.previous()
        snapshot = await self._ledger.transactions_between(
            user_id=user_id,
            start=previous.start,
            end=reference.end,
        )
        return build_comparative_summary(
            period_totals(snapshot, reference),
            period_totals(snapshot, previous),
        )

    async def get_budget_status(
        self,
        user_id: str,
        category_id: UUID,
        month: Period,
    ) -> BudgetWithStatus:
        if self._budgets is None:
            msg = "Budget status requires a budget repository"
            raise RuntimeError(msg)
        budget = await self._budgets.find_for_category_month(
            category_id,
            month.first_day,
        )
        if budget is None:
            raise BudgetNotFoundError(category_id=category_id, month=month.first_day)
        return await self.budget_with_status(user_id, budget)

    async def budget_with_status(self, user_id: str, budget: Budget) -> BudgetWithStatus:
        period = Period.containing(budget.month)
        spent = await self.get_period_total(
            user_id,
            TransactionType.EXPENSE,
            period.start,
            period.end,
            category_id=budget.category_id,
        )
        categories = await self._ledger.categories_by_ids([budget.category_id])
        return BudgetWithStatus(
            budget=budget,
            category=categories.get(budget.category_id),
            status=calculate_budget_status(budget.amount, spent),
        )

    async def build_report(self, user_id: str, reference: Period) -> AnalyticsReport:
        """Compose summary, breakdowns, recent activity and trend for a month."""
        previous = reference.previous()
        window = trailing_periods(reference, self._trend_months)
        start = min(window[0].start, previous.start)

        snapshot = await self._ledger.transactions_between(
            user_id=user_id,
            start=start,
            end=reference.end,
        )
        recent = await self._ledger.recent_transactions(
            user_id=user_id,
            start=reference.start,
            end=reference.end,
            limit=self._recent_limit,
        )

        current = [t for t in snapshot if reference.contains(t.date)]
        categories = await self._ledger.categories_by_ids(
            {t.category_id for t in current} | {t.category_id for t in recent},
        )

        logger.debug(
            "Building report for %s (%s): %d rows in snapshot, %d in period",
            user_id,
            reference.key,
            len(snapshot),
            len(current),
        )

        return AnalyticsReport(
            summary=build_comparative_summary(
                period_totals(snapshot, reference),
                period_totals(snapshot, previous),
            ),
            category_breakdown=CategoryBreakdown(
                expenses=build_category_breakdown(
                    current,
                    TransactionType.EXPENSE,
                    categories,
                ),
                income=build_category_breakdown(
                    current,
                    TransactionType.INCOME,
                    categories,
                ),
            ),
            recent_transactions=[
                TransactionView(transaction=t, category=categories.get(t.category_id))
                for t in recent
            ],
            monthly_trend=build_trend_series(snapshot, reference, self._trend_months),
            period=ReportPeriod(
                start=reference.start,
                end=reference.end,
                label=reference.label,
            ),
        )
