"""Category catalogue and demo transaction templates.

System categories are shared by every user. The demo templates describe a
plausible household budget; all data is fictional.
"""

from dataclasses import dataclass
from decimal import Decimal

from fintrack.domain.ledger.entities import TransactionType


@dataclass(frozen=True)
class SystemCategoryDef:
    name: str
    category_type: TransactionType
    icon: str
    color: str


@dataclass(frozen=True)
class TransactionTemplate:
    """Template for generating a transaction."""

    category_name: str
    description: str
    amount_min: Decimal
    amount_max: Decimal


@dataclass(frozen=True)
class MonthlyDistribution:
    """How many transactions per month to draw from a template group."""

    templates: list[TransactionTemplate]
    min_per_month: int
    max_per_month: int
    is_fixed_monthly: bool = False


# =============================================================================
# System Categories
# =============================================================================

_EXPENSE = TransactionType.EXPENSE
_INCOME = TransactionType.INCOME

SYSTEM_CATEGORIES: list[SystemCategoryDef] = [
    SystemCategoryDef("Food & Dining", _EXPENSE, "🍕", "#ef4444"),
    SystemCategoryDef("Transportation", _EXPENSE, "🚗", "#f59e0b"),
    SystemCategoryDef("Shopping", _EXPENSE, "🛍️", "#ec4899"),
    SystemCategoryDef("Entertainment", _EXPENSE, "🎬", "#8b5cf6"),
    SystemCategoryDef("Bills & Utilities", _EXPENSE, "💡", "#06b6d4"),
    SystemCategoryDef("Healthcare", _EXPENSE, "🏥", "#10b981"),
    SystemCategoryDef("Education", _EXPENSE, "📚", "#3b82f6"),
    SystemCategoryDef("Travel", _EXPENSE, "✈️", "#f97316"),
    SystemCategoryDef("Other Expenses", _EXPENSE, "📦", "#6b7280"),
    SystemCategoryDef("Salary", _INCOME, "💰", "#22c55e"),
    SystemCategoryDef("Freelance", _INCOME, "💼", "#10b981"),
    SystemCategoryDef("Investments", _INCOME, "📈", "#14b8a6"),
    SystemCategoryDef("Gifts", _INCOME, "🎁", "#84cc16"),
    SystemCategoryDef("Other Income", _INCOME, "💵", "#22d3ee"),
]


# =============================================================================
# Demo User
# =============================================================================

DEMO_USER_ID = "demo-user"
MONTHS_OF_HISTORY = 6
RANDOM_SEED = 42


# =============================================================================
# Templates
# =============================================================================

SALARY_TEMPLATES = [
    TransactionTemplate("Salary", "Monthly salary", Decimal("5000.00"), Decimal("5000.00")),
]

FREELANCE_TEMPLATES = [
    TransactionTemplate("Freelance", "Website project", Decimal("300.00"), Decimal("1200.00")),
    TransactionTemplate("Freelance", "Consulting hours", Decimal("150.00"), Decimal("600.00")),
]

BILLS_TEMPLATES = [
    TransactionTemplate("Bills & Utilities", "Rent", Decimal("1400.00"), Decimal("1400.00")),
    TransactionTemplate("Bills & Utilities", "Electricity", Decimal("60.00"), Decimal("95.00")),
    TransactionTemplate("Bills & Utilities", "Internet", Decimal("39.99"), Decimal("39.99")),
]

FOOD_TEMPLATES = [
    TransactionTemplate("Food & Dining", "Groceries", Decimal("25.00"), Decimal("120.00")),
    TransactionTemplate("Food & Dining", "Dinner", Decimal("30.00"), Decimal("85.00")),
    TransactionTemplate("Food & Dining", "Coffee", Decimal("3.50"), Decimal("6.00")),
]

TRANSPORT_TEMPLATES = [
    TransactionTemplate("Transportation", "Fuel", Decimal("40.00"), Decimal("75.00")),
    TransactionTemplate("Transportation", "Train ticket", Decimal("8.00"), Decimal("45.00")),
]

LEISURE_TEMPLATES = [
    TransactionTemplate("Entertainment", "Cinema", Decimal("12.00"), Decimal("30.00")),
    TransactionTemplate("Entertainment", "Streaming subscription", Decimal("12.99"), Decimal("12.99")),
    TransactionTemplate("Shopping", "Clothing", Decimal("25.00"), Decimal("150.00")),
    TransactionTemplate("Healthcare", "Pharmacy", Decimal("5.00"), Decimal("40.00")),
]

MONTHLY_DISTRIBUTIONS: list[MonthlyDistribution] = [
    MonthlyDistribution(SALARY_TEMPLATES, 1, 1, is_fixed_monthly=True),
    MonthlyDistribution(FREELANCE_TEMPLATES, 0, 2),
    MonthlyDistribution(BILLS_TEMPLATES, 3, 3, is_fixed_monthly=True),
    MonthlyDistribution(FOOD_TEMPLATES, 8, 14),
    MonthlyDistribution(TRANSPORT_TEMPLATES, 2, 5),
    MonthlyDistribution(LEISURE_TEMPLATES, 2, 6),
]

# Monthly limits created for the current month
DEMO_BUDGETS: dict[str, Decimal] = {
    "Food & Dining": Decimal("400.00"),
    "Transportation": Decimal("150.00"),
    "Entertainment": Decimal("60.00"),
}
