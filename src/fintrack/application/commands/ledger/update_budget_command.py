"""Update a budget."""

from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING
from uuid import UUID

from fintrack.application.commands.ledger._category_lookup import require_category
from fintrack.domain.ledger.entities import Budget, first_of_month
from fintrack.domain.ledger.exceptions import (
    BudgetAlreadyExistsError,
    BudgetNotFoundError,
)
from fintrack.domain.ledger.repositories import BudgetRepository, CategoryRepository

if TYPE_CHECKING:
    from fintrack.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class UpdateBudgetCommand:
    def __init__(
        self,
        budget_repository: BudgetRepository,
        category_repository: CategoryRepository,
    ):
        self._budget_repo = budget_repository
        self._category_repo = category_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> UpdateBudgetCommand:
        return cls(
            budget_repository=factory.budget_repository(),
            category_repository=factory.category_repository(),
        )

    async def execute(
        self,
        budget_id: UUID,
        amount: Decimal | None = None,
        month: date | None = None,
        category_id: UUID | None = None,
    ) -> Budget:
        budget = await self._budget_repo.find_by_id(budget_id)
        if budget is None:
            raise BudgetNotFoundError(budget_id=budget_id)

        if category_id is not None:
            await require_category(self._category_repo, category_id)

        target_category = category_id or budget.category_id
        target_month = first_of_month(month) if month else budget.month
        if (target_category, target_month) != (budget.category_id, budget.month):
            clash = await self._budget_repo.find_for_category_month(
                target_category,
                target_month,
            )
            if clash is not None and clash.id != budget.id:
                raise BudgetAlreadyExistsError(target_category, target_month)

        budget.update(amount=amount, month=month, category_id=category_id)
        await self._budget_repo.save(budget)
        logger.info("Updated budget %s", budget.id)
        return budget
