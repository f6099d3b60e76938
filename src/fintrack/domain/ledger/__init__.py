"""Ledger bounded context: transactions, categories and budgets."""

from fintrack.domain.ledger.entities import (
    Budget,
    Category,
    Transaction,
    TransactionType,
)

__all__ = ["Budget", "Category", "Transaction", "TransactionType"]
