"""Category repository interface."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from fintrack.domain.ledger.entities import Category, TransactionType


class CategoryRepository(ABC):
    """
    Repository interface for Category entities.

    Visibility is user-scoped: system categories plus the current user's own.
    """

    @abstractmethod
    async def save(self, category: Category) -> None:
        """Insert or update a category."""

    @abstractmethod
    async def find_by_id(self, category_id: UUID) -> Optional[Category]:
        """Find a category visible to the current user."""

    @abstractmethod
    async def find_visible(
        self,
        category_type: Optional[TransactionType] = None,
    ) -> list[Category]:
        """List visible categories, system categories first, then by name."""

    @abstractmethod
    async def delete(self, category_id: UUID) -> None:
        """Delete a category."""
