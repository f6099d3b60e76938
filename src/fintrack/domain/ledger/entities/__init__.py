"""Domain entities for the ledger bounded context."""

from fintrack.domain.ledger.entities.budget import Budget, first_of_month
from fintrack.domain.ledger.entities.category import Category
from fintrack.domain.ledger.entities.transaction import Transaction
from fintrack.domain.ledger.entities.transaction_type import TransactionType

__all__ = ["Budget", "Category", "Transaction", "TransactionType", "first_of_month"]
