"""Analytics router for dashboard and chart endpoints."""

import logging
from datetime import datetime
from typing import Annotated, Literal

from fastapi import APIRouter, Query

from fintrack.application.queries.analytics import (
    AnalyticsStatsQuery,
    CategoryBreakdownQuery,
    ComparativeSummaryQuery,
    PeriodTotalQuery,
    TrendSeriesQuery,
)
from fintrack.presentation.api.dependencies import ApiSettings, RepoFactory
from fintrack.presentation.api.schemas.analytics import (
    AnalyticsStatsResponse,
    BreakdownItemResponse,
    PeriodTotalResponse,
    SummaryResponse,
    TrendPointResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()

MonthParam = Annotated[
    str | None,
    Query(description="Reference month, YYYY-MM or YYYY-MM-DD (default: current)"),
]
TypeParam = Annotated[
    Literal["INCOME", "EXPENSE"],
    Query(alias="type", description="Transaction type"),
]
MonthsParam = Annotated[
    int | None,
    Query(ge=1, le=60, description="Number of months ending at the reference month"),
]


@router.get(
    "/stats",
    summary="Get the dashboard report for a month",
    responses={
        200: {"description": "Summary, breakdowns, recent activity and trend"},
        400: {"description": "Missing user_id or malformed month"},
    },
)
async def get_stats(
    factory: RepoFactory,
    settings: ApiSettings,
    month: MonthParam = None,
) -> AnalyticsStatsResponse:
    """
    Compose everything the dashboard renders for one month.

    - **summary**: totals and change against the previous month
    - **categoryBreakdown**: expense and income slices, largest first
    - **recentTransactions**: latest transactions of the month
    - **monthlyTrend**: income/expenses for the trailing months, oldest first
    """
    query = AnalyticsStatsQuery.from_factory(
        factory,
        trend_months=settings.analytics_trend_months,
        recent_limit=settings.analytics_recent_limit,
    )
    report = await query.execute(month=month)
    return AnalyticsStatsResponse.from_report(report)


@router.get("/summary", summary="Compare a month with the previous one")
async def get_summary(
    factory: RepoFactory,
    month: MonthParam = None,
) -> SummaryResponse:
    query = ComparativeSummaryQuery.from_factory(factory)
    summary = await query.execute(month=month)
    return SummaryResponse.from_domain(summary)


@router.get("/breakdown", summary="Get per-category totals for a month")
async def get_breakdown(
    factory: RepoFactory,
    transaction_type: TypeParam = "EXPENSE",
    month: MonthParam = None,
) -> list[BreakdownItemResponse]:
    """Categories sorted by amount (highest first); percentages sum to ~100."""
    query = CategoryBreakdownQuery.from_factory(factory)
    items = await query.execute(transaction_type=transaction_type, month=month)
    return [BreakdownItemResponse.from_domain(item) for item in items]


@router.get("/trend", summary="Get the monthly income/expense trend")
async def get_trend(
    factory: RepoFactory,
    settings: ApiSettings,
    month: MonthParam = None,
    months: MonthsParam = None,
) -> list[TrendPointResponse]:
    """Exactly ``months`` points, oldest first; empty months are zero-filled."""
    query = TrendSeriesQuery.from_factory(
        factory,
        trend_months=settings.analytics_trend_months,
    )
    items = await query.execute(month=month, months=months)
    return [TrendPointResponse.from_domain(item) for item in items]


@router.get("/period-total", summary="Sum one transaction type over an interval")
async def get_period_total(
    factory: RepoFactory,
    transaction_type: TypeParam,
    start: Annotated[datetime, Query(description="Inclusive start")],
    end: Annotated[datetime, Query(description="Inclusive end")],
) -> PeriodTotalResponse:
    query = PeriodTotalQuery.from_factory(factory)
    total = await query.execute(transaction_type=transaction_type, start=start, end=end)
    return PeriodTotalResponse(
        type=transaction_type,
        start=start,
        end=end,
        total=total,
    )
