"""Budget consumption status."""

from decimal import ROUND_HALF_UP, Decimal

from fintrack.domain.analytics.value_objects import ZERO, BudgetStatus

_HUNDRED = Decimal("100")
_ONE_DECIMAL = Decimal("0.1")


def calculate_budget_status(limit: Decimal, spent: Decimal) -> BudgetStatus:
    if limit > 0:
        used = (spent / limit * 100).quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP)
    else:
        used = _HUNDRED if spent > 0 else ZERO
    return BudgetStatus(
        limit=limit,
        spent=spent,
        percentage_used=min(used, _HUNDRED),
        is_exceeded=spent > limit,
    )
