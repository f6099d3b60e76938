from fintrack.application.dtos.analytics.analytics_dto import (
    AnalyticsReport,
    BudgetWithStatus,
    CategoryBreakdown,
    ReportPeriod,
    TransactionView,
)

__all__ = [
    "AnalyticsReport",
    "BudgetWithStatus",
    "CategoryBreakdown",
    "ReportPeriod",
    "TransactionView",
]
