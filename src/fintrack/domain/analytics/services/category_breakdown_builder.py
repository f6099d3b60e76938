"""Per-category breakdown of one transaction type."""

from collections.abc import Iterable, Mapping
from decimal import Decimal
from uuid import UUID

from fintrack.domain.analytics.value_objects import ZERO, CategoryBreakdownItem
from fintrack.domain.ledger.entities import Category, Transaction, TransactionType

UNKNOWN_CATEGORY_NAME = "Unknown"


def percentage_of(amount: Decimal, total: Decimal) -> Decimal:
    """``amount`` as a 0-100 share of ``total``; 0 when ``total`` is 0."""
    if total == 0:
        return ZERO
    return amount / total * 100


def build_category_breakdown(
    transactions: Iterable[Transaction],
    transaction_type: TransactionType,
    categories: Mapping[UUID, Category],
) -> list[CategoryBreakdownItem]:
    """Group transactions of one type by category.

    Only categories that actually occur are emitted, sorted by amount
    descending (ties keep first-seen order). References missing from
    ``categories`` resolve to an "Unknown" entry instead of failing.
    Percentages are unrounded.
    """
    sums: dict[UUID, Decimal] = {}
    for txn in transactions:
        if txn.transaction_type is not transaction_type:
            continue
        sums[txn.category_id] = sums.get(txn.category_id, ZERO) + txn.amount

    total = sum(sums.values(), ZERO)

    items = [
        _build_item(category_id, amount, total, categories.get(category_id))
        for category_id, amount in sums.items()
    ]
    items.sort(key=lambda item: item.amount, reverse=True)
    return items


def _build_item(
    category_id: UUID,
    amount: Decimal,
    total: Decimal,
    category: Category | None,
) -> CategoryBreakdownItem:
    if category is None:
        name, icon, color = UNKNOWN_CATEGORY_NAME, None, None
    else:
        name, icon, color = category.name, category.icon, category.color
    return CategoryBreakdownItem(
        category_id=category_id,
        category_name=name,
        icon=icon,
        color=color,
        amount=amount,
        percentage=percentage_of(amount, total),
    )
