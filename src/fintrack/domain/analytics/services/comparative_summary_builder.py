"""Current vs previous period summary."""

from decimal import ROUND_HALF_UP, Decimal

from fintrack.domain.analytics.value_objects import ZERO, AnalyticsSummary, PeriodTotals

_ONE_DECIMAL = Decimal("0.1")


def percentage_change(previous: Decimal, current: Decimal) -> Decimal:
    """Relative change in percent, rounded to one decimal place.

    A zero baseline yields 0: there is no meaningful comparison.
    """
    if previous == 0:
        return ZERO
    change = (current - previous) / abs(previous) * 100
    return change.quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP)


def build_comparative_summary(
    current: PeriodTotals,
    previous: PeriodTotals,
) -> AnalyticsSummary:
    return AnalyticsSummary(
        total_income=current.income,
        total_expenses=current.expenses,
        income_change_pct=percentage_change(previous.income, current.income),
        expense_change_pct=percentage_change(previous.expenses, current.expenses),
    )
