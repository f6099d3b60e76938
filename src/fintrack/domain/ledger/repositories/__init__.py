"""Repository interfaces for the ledger domain."""

from fintrack.domain.ledger.repositories.budget_repository import BudgetRepository
from fintrack.domain.ledger.repositories.category_repository import (
    CategoryRepository,
)
from fintrack.domain.ledger.repositories.transaction_repository import (
    TransactionRepository,
)

__all__ = ["BudgetRepository", "CategoryRepository", "TransactionRepository"]
