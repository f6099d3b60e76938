"""Delete a user-owned category.

System categories are shared by every user and cannot be removed. The
category's budgets go with it; transactions keep their reference and show
up as "Unknown" in analytics.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from fintrack.domain.ledger.exceptions import CategoryNotFoundError
from fintrack.domain.ledger.repositories import BudgetRepository, CategoryRepository

if TYPE_CHECKING:
    from fintrack.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class DeleteCategoryCommand:
    def __init__(
        self,
        category_repository: CategoryRepository,
        budget_repository: BudgetRepository,
    ):
        self._category_repo = category_repository
        self._budget_repo = budget_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> DeleteCategoryCommand:
        return cls(
            category_repository=factory.category_repository(),
            budget_repository=factory.budget_repository(),
        )

    async def execute(self, category_id: UUID) -> None:
        category = await self._category_repo.find_by_id(category_id)
        if category is None:
            raise CategoryNotFoundError(category_id)
        category.ensure_deletable()

        removed = await self._budget_repo.delete_for_category(category.id)
        await self._category_repo.delete(category.id)
        logger.info(
            "Deleted category '%s' (%s) and %d budget(s)",
            category.name,
            category.id,
            removed,
        )
