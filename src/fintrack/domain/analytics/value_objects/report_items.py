"""Derived analytics structures (never persisted)."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional
from uuid import UUID

ZERO = Decimal("0")


@dataclass(frozen=True)
class CategoryBreakdownItem:
    """One slice of a per-type category breakdown.

    ``percentage`` is on a 0-100 scale and 0 when the type total is 0.
    """

    category_id: Optional[UUID]
    category_name: str
    icon: Optional[str]
    color: Optional[str]
    amount: Decimal
    percentage: Decimal


@dataclass(frozen=True)
class MonthlyTrendItem:
    """Income and expense totals of one calendar month."""

    period: str  # YYYY-MM
    month: str  # "Jun 2024"
    income: Decimal
    expenses: Decimal

    @property
    def net(self) -> Decimal:
        return self.income - self.expenses


@dataclass(frozen=True)
class PeriodTotals:
    """Income and expense totals of one period."""

    income: Decimal = ZERO
    expenses: Decimal = ZERO

    @property
    def net(self) -> Decimal:
        return self.income - self.expenses


@dataclass(frozen=True)
class AnalyticsSummary:
    """Current-period totals compared against the preceding period."""

    total_income: Decimal
    total_expenses: Decimal
    income_change_pct: Decimal
    expense_change_pct: Decimal

    @property
    def net_balance(self) -> Decimal:
        return self.total_income - self.total_expenses


@dataclass(frozen=True)
class BudgetStatus:
    """Actual spending against a monthly budget limit.

    ``percentage_used`` is capped at 100 for display; ``is_exceeded`` is
    independent of the cap.
    """

    limit: Decimal
    spent: Decimal
    percentage_used: Decimal
    is_exceeded: bool

    @property
    def remaining(self) -> Decimal:
        return self.limit - self.spent
