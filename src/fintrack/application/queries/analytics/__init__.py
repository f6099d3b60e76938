from fintrack.application.queries.analytics.analytics_stats_query import (
    AnalyticsStatsQuery,
)
from fintrack.application.queries.analytics.category_breakdown_query import (
    CategoryBreakdownQuery,
)
from fintrack.application.queries.analytics.comparative_summary_query import (
    ComparativeSummaryQuery,
)
from fintrack.application.queries.analytics.period_total_query import (
    PeriodTotalQuery,
)
from fintrack.application.queries.analytics.trend_series_query import (
    TrendSeriesQuery,
)

__all__ = [
    "AnalyticsStatsQuery",
    "CategoryBreakdownQuery",
    "ComparativeSummaryQuery",
    "PeriodTotalQuery",
    "TrendSeriesQuery",
]
