"""Create a monthly budget."""

from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING
from uuid import UUID

from fintrack.application.commands.ledger._category_lookup import require_category
from fintrack.domain.ledger.entities import Budget, first_of_month
from fintrack.domain.ledger.exceptions import BudgetAlreadyExistsError
from fintrack.domain.ledger.repositories import BudgetRepository, CategoryRepository

if TYPE_CHECKING:
    from fintrack.application.context import UserContext
    from fintrack.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class CreateBudgetCommand:
    """One budget per category and month; the month is normalised to its first day."""

    def __init__(
        self,
        budget_repository: BudgetRepository,
        category_repository: CategoryRepository,
        user_context: UserContext,
    ):
        self._budget_repo = budget_repository
        self._category_repo = category_repository
        self._user_id = user_context.user_id

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> CreateBudgetCommand:
        return cls(
            budget_repository=factory.budget_repository(),
            category_repository=factory.category_repository(),
            user_context=factory.user_context,
        )

    async def execute(
        self,
        category_id: UUID | None,
        amount: Decimal,
        month: date,
    ) -> Budget:
        category = await require_category(self._category_repo, category_id)
        month = first_of_month(month)

        existing = await self._budget_repo.find_for_category_month(category.id, month)
        if existing is not None:
            raise BudgetAlreadyExistsError(category.id, month)

        budget = Budget(
            user_id=self._user_id,
            category_id=category.id,
            amount=amount,
            month=month,
        )
        await self._budget_repo.save(budget)
        logger.info(
            "Created budget of %s for '%s' in %s",
            budget.amount,
            category.name,
            budget.month.isoformat(),
        )
        return budget
