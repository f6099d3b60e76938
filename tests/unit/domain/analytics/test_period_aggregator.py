"""Tests for period totals over a ledger snapshot."""

from datetime import datetime, timezone
from decimal import Decimal
from uuid import uuid4

from fintrack.domain.analytics.services import period_total, period_totals
from fintrack.domain.analytics.value_objects import Period
from fintrack.domain.ledger.entities import Transaction, TransactionType

USER = "user-1"
FOOD = uuid4()
RENT = uuid4()


def _txn(kind, amount, day, category_id=FOOD, month=6):
    return Transaction(
        user_id=USER,
        transaction_type=kind,
        amount=Decimal(amount),
        category_id=category_id,
        date=datetime(2024, month, day, 12, tzinfo=timezone.utc),
    )


class TestPeriodTotal:
    def test_sums_only_requested_type(self):
        txns = [
            _txn(TransactionType.EXPENSE, "10.00", 1),
            _txn(TransactionType.EXPENSE, "5.50", 2),
            _txn(TransactionType.INCOME, "1000.00", 3),
        ]
        june = Period(2024, 6)

        total = period_total(txns, TransactionType.EXPENSE, june.start, june.end)

        assert total == Decimal("15.50")

    def test_empty_interval_yields_zero(self):
        june = Period(2024, 6)

        assert period_total([], TransactionType.INCOME, june.start, june.end) == 0

    def test_bounds_are_inclusive(self):
        start = datetime(2024, 6, 1, 12, tzinfo=timezone.utc)
        end = datetime(2024, 6, 3, 12, tzinfo=timezone.utc)
        txns = [
            _txn(TransactionType.EXPENSE, "1", 1),
            _txn(TransactionType.EXPENSE, "2", 3),
            _txn(TransactionType.EXPENSE, "4", 4),
        ]

        assert period_total(txns, TransactionType.EXPENSE, start, end) == Decimal("3")

    def test_category_filter(self):
        txns = [
            _txn(TransactionType.EXPENSE, "20", 1, FOOD),
            _txn(TransactionType.EXPENSE, "800", 2, RENT),
        ]
        june = Period(2024, 6)

        total = period_total(
            txns,
            TransactionType.EXPENSE,
            june.start,
            june.end,
            category_id=RENT,
        )

        assert total == Decimal("800")

    def test_naive_bounds_are_treated_as_utc(self):
        txns = [_txn(TransactionType.INCOME, "100", 30)]

        total = period_total(
            txns,
            TransactionType.INCOME,
            datetime(2024, 6, 1),
            datetime(2024, 6, 30, 23, 59, 59),
        )

        assert total == Decimal("100")


class TestPeriodTotals:
    def test_months_are_aggregated_independently(self):
        txns = [
            _txn(TransactionType.INCOME, "3000", 15, month=5),
            _txn(TransactionType.EXPENSE, "200", 20, month=5),
            _txn(TransactionType.INCOME, "3500", 15, month=6),
        ]

        may = period_totals(txns, Period(2024, 5))
        june = period_totals(txns, Period(2024, 6))

        assert (may.income, may.expenses, may.net) == (
            Decimal("3000"),
            Decimal("200"),
            Decimal("2800"),
        )
        assert (june.income, june.expenses) == (Decimal("3500"), Decimal("0"))

    def test_accepts_one_shot_iterables(self):
        txns = (t for t in [_txn(TransactionType.INCOME, "10", 1)])

        totals = period_totals(txns, Period(2024, 6))

        assert totals.income == Decimal("10")
