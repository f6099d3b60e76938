from fintrack.infrastructure.persistence.sqlalchemy.repositories.budget_repository import (  # NOQA: E501
    BudgetRepositorySQLAlchemy,
)
from fintrack.infrastructure.persistence.sqlalchemy.repositories.category_repository import (  # NOQA: E501
    CategoryRepositorySQLAlchemy,
)
from fintrack.infrastructure.persistence.sqlalchemy.repositories.transaction_repository import (  # NOQA: E501
    TransactionRepositorySQLAlchemy,
)

__all__ = [
    "BudgetRepositorySQLAlchemy",
    "CategoryRepositorySQLAlchemy",
    "TransactionRepositorySQLAlchemy",
]
