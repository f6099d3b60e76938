"""Pure aggregation services over ledger snapshots."""

from fintrack.domain.analytics.services.budget_status_calculator import (
    calculate_budget_status,
)
from fintrack.domain.analytics.services.category_breakdown_builder import (
    UNKNOWN_CATEGORY_NAME,
    build_category_breakdown,
    percentage_of,
)
from fintrack.domain.analytics.services.comparative_summary_builder import (
    build_comparative_summary,
    percentage_change,
)
from fintrack.domain.analytics.services.period_aggregator import (
    period_total,
    period_totals,
)
from fintrack.domain.analytics.services.trend_series_builder import (
    DEFAULT_TREND_MONTHS,
    build_trend_series,
)

__all__ = [
    "DEFAULT_TREND_MONTHS",
    "UNKNOWN_CATEGORY_NAME",
    "build_category_breakdown",
    "build_comparative_summary",
    "build_trend_series",
    "calculate_budget_status",
    "percentage_change",
    "percentage_of",
    "period_total",
    "period_totals",
]
