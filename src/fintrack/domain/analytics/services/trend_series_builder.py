"""Fixed-length monthly trend series."""

from collections.abc import Iterable

from fintrack.domain.analytics.services.period_aggregator import period_totals
from fintrack.domain.analytics.value_objects import (
    MonthlyTrendItem,
    Period,
    trailing_periods,
)
from fintrack.domain.ledger.entities import Transaction
from fintrack.domain.shared.exceptions import ValidationError

DEFAULT_TREND_MONTHS = 6


def build_trend_series(
    transactions: Iterable[Transaction],
    reference: Period,
    months: int = DEFAULT_TREND_MONTHS,
) -> list[MonthlyTrendItem]:
    """One entry per month in ``[reference - (months - 1), reference]``.

    Always exactly ``months`` entries, oldest first; empty months are
    emitted with zero totals. Each month is aggregated independently.
    """
    if months < 1:
        msg = "Trend window must cover at least one month"
        raise ValidationError(msg, fields=["months"])

    snapshot = list(transactions)
    series: list[MonthlyTrendItem] = []
    for period in trailing_periods(reference, months):
        totals = period_totals(snapshot, period)
        series.append(
            MonthlyTrendItem(
                period=period.key,
                month=period.short_label,
                income=totals.income,
                expenses=totals.expenses,
            ),
        )
    return series
