"""Transaction repository interface.

Implementations are user-scoped via UserContext: every query filters by the
current user's id.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional
from uuid import UUID

from fintrack.domain.ledger.entities import Transaction, TransactionType


class TransactionRepository(ABC):
    """Repository interface for Transaction entities."""

    @abstractmethod
    async def save(self, transaction: Transaction) -> None:
        """Insert or update a transaction for the current user."""

    @abstractmethod
    async def find_by_id(self, transaction_id: UUID) -> Optional[Transaction]:
        """Find a transaction of the current user by ID."""

    @abstractmethod
    async def find_all(
        self,
        transaction_type: Optional[TransactionType] = None,
        category_id: Optional[UUID] = None,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
    ) -> list[Transaction]:
        """Find transactions matching the filters, newest first.

        ``start_date`` and ``end_date`` are both inclusive.
        """

    @abstractmethod
    async def delete(self, transaction_id: UUID) -> None:
        """Delete a transaction."""
