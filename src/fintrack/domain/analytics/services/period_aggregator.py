"""Period totals over a ledger snapshot."""

from collections.abc import Iterable
from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from fintrack.domain.analytics.value_objects import ZERO, Period, PeriodTotals
from fintrack.domain.ledger.entities import Transaction, TransactionType
from fintrack.domain.shared.time import to_utc


def period_total(
    transactions: Iterable[Transaction],
    transaction_type: TransactionType,
    start: datetime,
    end: datetime,
    category_id: Optional[UUID] = None,
) -> Decimal:
    """Sum amounts of one type whose date lies in the closed interval.

    No matching transaction yields 0, never an error.
    """
    start, end = to_utc(start), to_utc(end)
    return sum(
        (
            t.amount
            for t in transactions
            if t.transaction_type is transaction_type
            and start <= t.date <= end
            and (category_id is None or t.category_id == category_id)
        ),
        ZERO,
    )


def period_totals(transactions: Iterable[Transaction], period: Period) -> PeriodTotals:
    """Income and expense totals for one calendar month."""
    snapshot = list(transactions)
    return PeriodTotals(
        income=period_total(snapshot, TransactionType.INCOME, period.start, period.end),
        expenses=period_total(
            snapshot,
            TransactionType.EXPENSE,
            period.start,
            period.end,
        ),
    )
