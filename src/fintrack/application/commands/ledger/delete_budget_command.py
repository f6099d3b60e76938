"""Delete a budget."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from fintrack.domain.ledger.exceptions import BudgetNotFoundError
from fintrack.domain.ledger.repositories import BudgetRepository

if TYPE_CHECKING:
    from fintrack.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class DeleteBudgetCommand:
    def __init__(self, budget_repository: BudgetRepository):
        self._budget_repo = budget_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> DeleteBudgetCommand:
        return cls(budget_repository=factory.budget_repository())

    async def execute(self, budget_id: UUID) -> None:
        budget = await self._budget_repo.find_by_id(budget_id)
        if budget is None:
            raise BudgetNotFoundError(budget_id=budget_id)
        await self._budget_repo.delete(budget.id)
        logger.info("Deleted budget %s", budget.id)
