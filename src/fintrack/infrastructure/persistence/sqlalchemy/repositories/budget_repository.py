"""SQLAlchemy implementation of BudgetRepository."""

from __future__ import annotations

import logging
from datetime import date
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from fintrack.domain.ledger.entities import Budget, first_of_month
from fintrack.domain.ledger.exceptions import BudgetAlreadyExistsError
from fintrack.domain.ledger.repositories import BudgetRepository
from fintrack.infrastructure.persistence.sqlalchemy.models import BudgetModel

if TYPE_CHECKING:
    from fintrack.application.context import UserContext

logger = logging.getLogger(__name__)


class BudgetRepositorySQLAlchemy(BudgetRepository):
    """User-scoped budget storage."""

    def __init__(self, session: AsyncSession, user_context: UserContext):
        self._session = session
        self._user_id = user_context.user_id

    async def save(self, budget: Budget) -> None:
        model = await self._find_model_by_id(budget.id)

        if model:
            logger.debug("Updating existing budget: %s", budget.id)
            model.category_id = budget.category_id
            model.amount = budget.amount
            model.month = budget.month
        else:
            logger.debug("Creating new budget: %s", budget.id)
            self._session.add(
                BudgetModel(
                    id=budget.id,
                    user_id=budget.user_id,
                    category_id=budget.category_id,
                    amount=budget.amount,
                    month=budget.month,
                ),
            )

        try:
            await self._session.flush()
        except IntegrityError as exc:
            # Keep session usable after a failed flush
            await self._session.rollback()

            msg = str(getattr(exc, "orig", exc))
            # Matches SQLite and PostgreSQL constraint messages
            if "uq_budgets_user_category_month" in msg or "budgets.user_id" in msg:
                raise BudgetAlreadyExistsError(budget.category_id, budget.month) from exc

            error_msg = f"Failed to save budget due to database constraint: {msg}"
            raise ValueError(error_msg) from exc

        logger.info("Budget saved: %s (ID: %s)", budget.month.isoformat(), budget.id)

    async def find_by_id(self, budget_id: UUID) -> Optional[Budget]:
        model = await self._find_model_by_id(budget_id)
        return self._map_to_domain(model) if model else None

    async def find_for_category_month(
        self,
        category_id: UUID,
        month: date,
    ) -> Optional[Budget]:
        stmt = select(BudgetModel).where(
            BudgetModel.user_id == self._user_id,
            BudgetModel.category_id == category_id,
            BudgetModel.month == first_of_month(month),
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._map_to_domain(model) if model else None

    async def find_all(self, month: Optional[date] = None) -> list[Budget]:
        stmt = select(BudgetModel).where(BudgetModel.user_id == self._user_id)
        if month is not None:
            stmt = stmt.where(BudgetModel.month == first_of_month(month))
        stmt = stmt.order_by(BudgetModel.month.desc(), BudgetModel.created_at)

        result = await self._session.execute(stmt)
        return [self._map_to_domain(model) for model in result.scalars().all()]

    async def delete(self, budget_id: UUID) -> None:
        model = await self._find_model_by_id(budget_id)

        if model:
            await self._session.delete(model)
            await self._session.flush()
            logger.info("Budget deleted: %s", budget_id)

    async def delete_for_category(self, category_id: UUID) -> int:
        stmt = delete(BudgetModel).where(
            BudgetModel.user_id == self._user_id,
            BudgetModel.category_id == category_id,
        )
        result = await self._session.execute(stmt)
        return result.rowcount or 0

    async def _find_model_by_id(self, budget_id: UUID) -> Optional[BudgetModel]:
        stmt = select(BudgetModel).where(
            BudgetModel.user_id == self._user_id,
            BudgetModel.id == budget_id,
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    @staticmethod
    def _map_to_domain(model: BudgetModel) -> Budget:
        return Budget(
            id=model.id,
            user_id=model.user_id,
            category_id=model.category_id,
            amount=model.amount,
            month=model.month,
        )
