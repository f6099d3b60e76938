"""Tests for the SQLAlchemy ledger read adapter."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from uuid import uuid4

import pytest

from fintrack.application.services import AnalyticsService
from fintrack.domain.analytics.value_objects import Period
from fintrack.domain.ledger.entities import TransactionType
from fintrack.infrastructure.persistence.sqlalchemy.adapters.analytics import (
    SqlAlchemyLedgerReadAdapter,
)

JUNE = Period(2024, 6)


def _utc(month: int, day: int, hour: int = 12) -> datetime:
    return datetime(2024, month, day, hour, tzinfo=timezone.utc)


@pytest.mark.asyncio
async def test_sum_amounts_with_no_rows_is_zero(async_session, user_context):
    adapter = SqlAlchemyLedgerReadAdapter(async_session, user_context)

    total = await adapter.sum_amounts(
        user_id=user_context.user_id,
        transaction_type=TransactionType.EXPENSE,
        start=JUNE.start,
        end=JUNE.end,
    )

    assert total == Decimal("0")


@pytest.mark.asyncio
async def test_sum_amounts_inclusive_bounds(async_session, user_context, models):
    uid = user_context.user_id
    food = uuid4()
    async_session.add_all(
        [
            models.transaction(user_id=uid, category_id=food, amount="1.10", dt=JUNE.start),
            models.transaction(user_id=uid, category_id=food, amount="2.20", dt=JUNE.end),
            models.transaction(
                user_id=uid,
                category_id=food,
                amount="99",
                dt=JUNE.end + timedelta(microseconds=1),
            ),
            models.transaction(
                user_id=uid,
                category_id=food,
                amount="99",
                dt=JUNE.start - timedelta(seconds=1),
            ),
        ],
    )
    await async_session.flush()
    adapter = SqlAlchemyLedgerReadAdapter(async_session, user_context)

    total = await adapter.sum_amounts(
        user_id=uid,
        transaction_type=TransactionType.EXPENSE,
        start=JUNE.start,
        end=JUNE.end,
    )

    assert total == Decimal("3.30")


@pytest.mark.asyncio
async def test_sum_amounts_filters_type_category_and_user(
    async_session, user_context, models,
):
    uid = user_context.user_id
    food, rent = uuid4(), uuid4()
    async_session.add_all(
        [
            models.transaction(user_id=uid, category_id=food, amount="20", dt=_utc(6, 2)),
            models.transaction(user_id=uid, category_id=rent, amount="900", dt=_utc(6, 3)),
            models.transaction(
                user_id=uid,
                category_id=food,
                amount="5000",
                dt=_utc(6, 1),
                transaction_type="INCOME",
            ),
            models.transaction(user_id="user-2", category_id=food, amount="7", dt=_utc(6, 2)),
        ],
    )
    await async_session.flush()
    adapter = SqlAlchemyLedgerReadAdapter(async_session, user_context)

    food_total = await adapter.sum_amounts(
        user_id=uid,
        transaction_type=TransactionType.EXPENSE,
        start=JUNE.start,
        end=JUNE.end,
        category_id=food,
    )
    income_total = await adapter.sum_amounts(
        user_id=uid,
        transaction_type=TransactionType.INCOME,
        start=JUNE.start,
        end=JUNE.end,
    )

    assert food_total == Decimal("20")
    assert income_total == Decimal("5000")


@pytest.mark.asyncio
async def test_transactions_between_oldest_first(async_session, user_context, models):
    uid = user_context.user_id
    food = uuid4()
    async_session.add_all(
        [
            models.transaction(user_id=uid, category_id=food, amount="2", dt=_utc(6, 20)),
            models.transaction(user_id=uid, category_id=food, amount="1", dt=_utc(6, 5)),
            models.transaction(
                user_id=uid,
                category_id=food,
                amount="3",
                dt=_utc(6, 10),
                transaction_type="INCOME",
            ),
            models.transaction(user_id=uid, category_id=food, amount="9", dt=_utc(7, 1)),
        ],
    )
    await async_session.flush()
    adapter = SqlAlchemyLedgerReadAdapter(async_session, user_context)

    all_types = await adapter.transactions_between(
        user_id=uid, start=JUNE.start, end=JUNE.end,
    )
    expenses = await adapter.transactions_between(
        user_id=uid,
        start=JUNE.start,
        end=JUNE.end,
        transaction_type=TransactionType.EXPENSE,
    )

    assert [t.amount for t in all_types] == [Decimal("1"), Decimal("3"), Decimal("2")]
    assert [t.amount for t in expenses] == [Decimal("1"), Decimal("2")]
    assert all(t.date.tzinfo is not None for t in all_types)


@pytest.mark.asyncio
async def test_recent_transactions_newest_first_with_limit(
    async_session, user_context, models,
):
    uid = user_context.user_id
    food = uuid4()
    async_session.add_all(
        [
            models.transaction(user_id=uid, category_id=food, amount=str(day), dt=_utc(6, day))
            for day in range(1, 16)
        ],
    )
    await async_session.flush()
    adapter = SqlAlchemyLedgerReadAdapter(async_session, user_context)

    recent = await adapter.recent_transactions(
        user_id=uid, start=JUNE.start, end=JUNE.end, limit=10,
    )

    assert len(recent) == 10
    assert recent[0].amount == Decimal("15")
    assert recent[-1].amount == Decimal("6")


@pytest.mark.asyncio
async def test_categories_by_ids_respects_visibility(
    async_session, user_context, models,
):
    system = models.category("Salary", "INCOME")
    own = models.category("Pets", user_id="user-1", icon="🐶")
    foreign = models.category("Secret", user_id="user-2")
    async_session.add_all([system, own, foreign])
    await async_session.flush()
    adapter = SqlAlchemyLedgerReadAdapter(async_session, user_context)

    found = await adapter.categories_by_ids([system.id, own.id, foreign.id, uuid4()])

    assert set(found) == {system.id, own.id}
    assert found[own.id].icon == "🐶"
    assert found[system.id].is_system
    assert await adapter.categories_by_ids([]) == {}


@pytest.mark.asyncio
async def test_report_over_real_adapter(async_session, user_context, models):
    """The June example end to end: one salary, one dinner."""
    uid = user_context.user_id
    salary = models.category("Salary", "INCOME", icon="💰", color="#22c55e")
    food = models.category("Food & Dining", icon="🍔", color="#ef4444")
    async_session.add_all([salary, food])
    async_session.add_all(
        [
            models.transaction(
                user_id=uid,
                category_id=salary.id,
                amount="5000.00",
                dt=_utc(6, 1),
                transaction_type="INCOME",
            ),
            models.transaction(
                user_id=uid,
                category_id=food.id,
                amount="45.50",
                dt=_utc(6, 12),
                description="Dinner",
            ),
        ],
    )
    await async_session.flush()

    service = AnalyticsService(SqlAlchemyLedgerReadAdapter(async_session, user_context))
    report = await service.build_report(uid, JUNE)

    assert report.summary.total_income == Decimal("5000.00")
    assert report.summary.total_expenses == Decimal("45.50")
    assert report.summary.net_balance == Decimal("4954.50")
    assert report.category_breakdown.expenses[0].category_name == "Food & Dining"
    assert report.category_breakdown.expenses[0].percentage == 100
    assert [v.transaction.description for v in report.recent_transactions] == [
        "Dinner",
        None,
    ]
    assert report.monthly_trend[-1].expenses == Decimal("45.50")
    assert sum(p.income for p in report.monthly_trend[:-1]) == 0
