"""Budget repository interface."""

from abc import ABC, abstractmethod
from datetime import date
from typing import Optional
from uuid import UUID

from fintrack.domain.ledger.entities import Budget


class BudgetRepository(ABC):
    """
    Repository interface for Budget entities.

    ``save`` raises BudgetAlreadyExistsError when the storage layer reports a
    duplicate (user, category, month).
    """

    @abstractmethod
    async def save(self, budget: Budget) -> None:
        """Insert or update a budget."""

    @abstractmethod
    async def find_by_id(self, budget_id: UUID) -> Optional[Budget]:
        """Find a budget of the current user by ID."""

    @abstractmethod
    async def find_for_category_month(
        self,
        category_id: UUID,
        month: date,
    ) -> Optional[Budget]:
        """Find the budget for a category in the month containing ``month``."""

    @abstractmethod
    async def find_all(self, month: Optional[date] = None) -> list[Budget]:
        """List budgets, newest month first, optionally for one month."""

    @abstractmethod
    async def delete(self, budget_id: UUID) -> None:
        """Delete a budget."""

    @abstractmethod
    async def delete_for_category(self, category_id: UUID) -> int:
        """Delete every budget of a category; returns the number removed."""
