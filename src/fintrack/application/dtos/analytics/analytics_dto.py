"""Analytics DTOs for dashboard rendering.

The composed report mirrors what the dashboard draws: summary cards, two
pie charts, a recent-activity list and a trend chart.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional

from fintrack.domain.analytics.value_objects import (
    AnalyticsSummary,
    BudgetStatus,
    CategoryBreakdownItem,
    MonthlyTrendItem,
)
from fintrack.domain.ledger.entities import Budget, Category, Transaction


@dataclass
class ReportPeriod:
    start: datetime
    end: datetime
    label: str  # "June 2024"


@dataclass
class TransactionView:
    """A transaction together with its (possibly deleted) category."""

    transaction: Transaction
    category: Optional[Category]


@dataclass
class CategoryBreakdown:
    expenses: list[CategoryBreakdownItem] = field(default_factory=list)
    income: list[CategoryBreakdownItem] = field(default_factory=list)


@dataclass
class AnalyticsReport:
    summary: AnalyticsSummary
    category_breakdown: CategoryBreakdown
    recent_transactions: list[TransactionView]
    monthly_trend: list[MonthlyTrendItem]
    period: ReportPeriod


@dataclass
class BudgetWithStatus:
    budget: Budget
    category: Optional[Category]
    status: BudgetStatus

    @property
    def spent(self) -> Decimal:
        return self.status.spent
