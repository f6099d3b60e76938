"""List categories query."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fintrack.domain.ledger.entities import Category, TransactionType
from fintrack.domain.ledger.repositories import CategoryRepository

if TYPE_CHECKING:
    from fintrack.application.factories import RepositoryFactory


class ListCategoriesQuery:
    """System categories plus the user's own, system ones first."""

    def __init__(self, category_repository: CategoryRepository):
        self._category_repo = category_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListCategoriesQuery:
        return cls(category_repository=factory.category_repository())

    async def execute(self, category_type: str | None = None) -> list[Category]:
        type_filter = TransactionType.parse(category_type) if category_type else None
        return await self._category_repo.find_visible(category_type=type_filter)
