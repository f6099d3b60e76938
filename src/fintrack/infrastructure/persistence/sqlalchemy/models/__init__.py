from fintrack.infrastructure.persistence.sqlalchemy.models.base import Base
from fintrack.infrastructure.persistence.sqlalchemy.models.budget_model import (
    BudgetModel,
)
from fintrack.infrastructure.persistence.sqlalchemy.models.category_model import (
    CategoryModel,
)
from fintrack.infrastructure.persistence.sqlalchemy.models.transaction_model import (
    TransactionModel,
)

__all__ = [
    "Base",
    "BudgetModel",
    "CategoryModel",
    "TransactionModel",
]
