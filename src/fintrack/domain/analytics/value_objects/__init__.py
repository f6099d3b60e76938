"""Analytics value objects."""

from fintrack.domain.analytics.value_objects.period import Period, trailing_periods
from fintrack.domain.analytics.value_objects.report_items import (
    ZERO,
    AnalyticsSummary,
    BudgetStatus,
    CategoryBreakdownItem,
    MonthlyTrendItem,
    PeriodTotals,
)

__all__ = [
    "ZERO",
    "AnalyticsSummary",
    "BudgetStatus",
    "CategoryBreakdownItem",
    "MonthlyTrendItem",
    "Period",
    "PeriodTotals",
    "trailing_periods",
]
