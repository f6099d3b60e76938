"""Pydantic schemas for analytics endpoints.

Shapes follow what the dashboard charts consume: summary cards, pie-chart
slices, a trend line and the recent-activity list.
"""

from datetime import datetime
from typing import Literal
from uuid import UUID

from pydantic import Field

from fintrack.application.dtos.analytics import AnalyticsReport
from fintrack.domain.analytics.value_objects import (
    AnalyticsSummary,
    CategoryBreakdownItem,
    MonthlyTrendItem,
)
from fintrack.presentation.api.schemas.common import Amount, CamelModel
from fintrack.presentation.api.schemas.transactions import TransactionResponse


class SummaryResponse(CamelModel):
    """Current month totals and change against the previous month."""

    total_income: Amount
    total_expenses: Amount
    net_balance: Amount
    income_change: Amount = Field(description="Percent change, one decimal place")
    expense_change: Amount = Field(description="Percent change, one decimal place")

    model_config = {
        "json_schema_extra": {
            "example": {
                "totalIncome": 5000.0,
                "totalExpenses": 45.5,
                "netBalance": 4954.5,
                "incomeChange": 0.0,
                "expenseChange": 12.5,
            },
        },
    }

    @classmethod
    def from_domain(cls, summary: AnalyticsSummary) -> "SummaryResponse":
        return cls(
            total_income=summary.total_income,
            total_expenses=summary.total_expenses,
            net_balance=summary.net_balance,
            income_change=summary.income_change_pct,
            expense_change=summary.expense_change_pct,
        )


class BreakdownItemResponse(CamelModel):
    """One pie-chart slice."""

    category_id: UUID | None = None
    category_name: str
    icon: str | None = None
    color: str | None = None
    amount: Amount
    percentage: Amount = Field(description="Share of the type total, 0-100")

    @classmethod
    def from_domain(cls, item: CategoryBreakdownItem) -> "BreakdownItemResponse":
        return cls(
            category_id=item.category_id,
            category_name=item.category_name,
            icon=item.icon,
            color=item.color,
            amount=item.amount,
            percentage=item.percentage,
        )


class CategoryBreakdownResponse(CamelModel):
    expenses: list[BreakdownItemResponse]
    income: list[BreakdownItemResponse]


class TrendPointResponse(CamelModel):
    period: str = Field(description="Sortable identifier, YYYY-MM")
    month: str = Field(description="Chart label, e.g. 'Jun 2024'")
    income: Amount
    expenses: Amount
    net: Amount

    @classmethod
    def from_domain(cls, item: MonthlyTrendItem) -> "TrendPointResponse":
        return cls(
            period=item.period,
            month=item.month,
            income=item.income,
            expenses=item.expenses,
            net=item.net,
        )


class PeriodResponse(CamelModel):
    start: datetime
    end: datetime
    label: str


class AnalyticsStatsResponse(CamelModel):
    """Everything the dashboard renders for one month."""

    summary: SummaryResponse
    category_breakdown: CategoryBreakdownResponse
    recent_transactions: list[TransactionResponse]
    monthly_trend: list[TrendPointResponse]
    period: PeriodResponse

    @classmethod
    def from_report(cls, report: AnalyticsReport) -> "AnalyticsStatsResponse":
        return cls(
            summary=SummaryResponse.from_domain(report.summary),
            category_breakdown=CategoryBreakdownResponse(
                expenses=[
                    BreakdownItemResponse.from_domain(i)
                    for i in report.category_breakdown.expenses
                ],
                income=[
                    BreakdownItemResponse.from_domain(i)
                    for i in report.category_breakdown.income
                ],
            ),
            recent_transactions=[
                TransactionResponse.from_view(v) for v in report.recent_transactions
            ],
            monthly_trend=[TrendPointResponse.from_domain(i) for i in report.monthly_trend],
            period=PeriodResponse(
                start=report.period.start,
                end=report.period.end,
                label=report.period.label,
            ),
        )


class PeriodTotalResponse(CamelModel):
    type: Literal["INCOME", "EXPENSE"]
    start: datetime
    end: datetime
    total: Amount
