"""Tests for the ``fintrack report`` command."""

from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import patch
from uuid import uuid4

from typer.testing import CliRunner

from fintrack.application.dtos.analytics import (
    AnalyticsReport,
    CategoryBreakdown,
    ReportPeriod,
    TransactionView,
)
from fintrack.domain.analytics.value_objects import (
    AnalyticsSummary,
    CategoryBreakdownItem,
    MonthlyTrendItem,
)
from fintrack.domain.ledger.entities import Category, Transaction, TransactionType
from fintrack.domain.ledger.exceptions import InvalidMonthError
from fintrack.presentation.cli.app import app

runner = CliRunner()


def _june_report() -> AnalyticsReport:
    food = Category.system("Food & Dining", TransactionType.EXPENSE, icon="🍔")
    dinner = Transaction(
        "user-1",
        TransactionType.EXPENSE,
        Decimal("45.50"),
        food.id,
        date=datetime(2024, 6, 12, 18, 30, tzinfo=timezone.utc),
        description="Dinner",
    )
    orphan = Transaction(
        "user-1",
        TransactionType.INCOME,
        Decimal("5000.00"),
        uuid4(),
        date=datetime(2024, 6, 1, 9, tzinfo=timezone.utc),
    )
    return AnalyticsReport(
        summary=AnalyticsSummary(
            total_income=Decimal("5000.00"),
            total_expenses=Decimal("45.50"),
            income_change_pct=Decimal("0"),
            expense_change_pct=Decimal("-12.5"),
        ),
        category_breakdown=CategoryBreakdown(
            expenses=[
                CategoryBreakdownItem(
                    food.id, "Food & Dining", "🍔", None, Decimal("45.50"), Decimal("100"),
                ),
            ],
        ),
        recent_transactions=[
            TransactionView(dinner, food),
            TransactionView(orphan, None),
        ],
        monthly_trend=[
            MonthlyTrendItem("2024-06", "Jun 2024", Decimal("5000.00"), Decimal("45.50")),
        ],
        period=ReportPeriod(
            start=datetime(2024, 6, 1, tzinfo=timezone.utc),
            end=datetime(2024, 6, 30, 23, 59, 59, 999999, tzinfo=timezone.utc),
            label="June 2024",
        ),
    )


def test_report_renders_tables():
    async def fake_load(user_id, month):
        assert (user_id, month) == ("user-1", "2024-06")
        return _june_report()

    with patch("fintrack.presentation.cli.app._load_report", side_effect=fake_load):
        result = runner.invoke(app, ["report", "--user-id", "user-1", "--month", "2024-06"])

    assert result.exit_code == 0, result.output
    assert "June 2024" in result.output
    assert "4,954.50" in result.output
    assert "Food & Dining" in result.output
    assert "Unknown" in result.output
    assert "-12.5%" in result.output


def test_report_domain_error_exits_nonzero():
    async def fake_load(user_id, month):
        raise InvalidMonthError(month)

    with patch("fintrack.presentation.cli.app._load_report", side_effect=fake_load):
        result = runner.invoke(app, ["report", "-u", "user-1", "-m", "June"])

    assert result.exit_code == 1
    assert "Error" in result.output


def test_report_requires_user_id():
    result = runner.invoke(app, ["report"])

    assert result.exit_code != 0
