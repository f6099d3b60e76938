"""SQLAlchemy implementation of LedgerReadPort.

Totals are summed in SQL. Everything else is returned as plain row
snapshots; grouping by month and by category happens in the pure domain
builders, so no DB-specific date functions (strftime/to_char) are needed
and the adapter runs unchanged on SQLite and PostgreSQL.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from fintrack.application.ports.analytics import LedgerReadPort
from fintrack.domain.ledger.entities import Category, Transaction, TransactionType
from fintrack.domain.shared.time import to_utc
from fintrack.infrastructure.persistence.sqlalchemy.models import (
    CategoryModel,
    TransactionModel,
)
from fintrack.infrastructure.persistence.sqlalchemy.repositories.category_repository import (  # NOQA: E501
    map_category,
    visible_to,
)
from fintrack.infrastructure.persistence.sqlalchemy.repositories.transaction_repository import (  # NOQA: E501
    map_transaction,
)

if TYPE_CHECKING:
    from fintrack.application.context import UserContext


class SqlAlchemyLedgerReadAdapter(LedgerReadPort):
    """SQLAlchemy ledger read adapter."""

    def __init__(self, session: AsyncSession, user_context: UserContext):
        self._session = session
        self._user_id = user_context.user_id

    async def sum_amounts(
        self,
        *,
        user_id: str,
        transaction_type: TransactionType,
        start: datetime,
        end: datetime,
        category_id: UUID | None = None,
    ) -> Decimal:
        stmt = select(func.coalesce(func.sum(TransactionModel.amount), 0)).where(
            TransactionModel.user_id == user_id,
            TransactionModel.transaction_type == transaction_type.value,
            TransactionModel.date >= to_utc(start),
            TransactionModel.date <= to_utc(end),
        )
        if category_id is not None:
            stmt = stmt.where(TransactionModel.category_id == category_id)

        total = (await self._session.execute(stmt)).scalar_one()
        return Decimal(str(total))

    async def transactions_between(
        self,
        *,
        user_id: str,
        start: datetime,
        end: datetime,
        transaction_type: TransactionType | None = None,
    ) -> list[Transaction]:
        stmt = select(TransactionModel).where(
            TransactionModel.user_id == user_id,
            TransactionModel.date >= to_utc(start),
            TransactionModel.date <= to_utc(end),
        )
        if transaction_type is not None:
            stmt = stmt.where(TransactionModel.transaction_type == transaction_type.value)
        stmt = stmt.order_by(TransactionModel.date, TransactionModel.created_at)

        models = (await self._session.execute(stmt)).scalars().all()
        return [map_transaction(m) for m in models]

    async def recent_transactions(
        self,
        *,
        user_id: str,
        start: datetime,
        end: datetime,
        limit: int = 10,
    ) -> list[Transaction]:
        stmt = (
            select(TransactionModel)
            .where(
                TransactionModel.user_id == user_id,
                TransactionModel.date >= to_utc(start),
                TransactionModel.date <= to_utc(end),
            )
            .order_by(TransactionModel.date.desc(), TransactionModel.created_at.desc())
            .limit(limit)
        )
        models = (await self._session.execute(stmt)).scalars().all()
        return [map_transaction(m) for m in models]

    async def categories_by_ids(
        self,
        category_ids: Iterable[UUID],
    ) -> dict[UUID, Category]:
        ids = set(category_ids)
        if not ids:
            return {}

        stmt = select(CategoryModel).where(
            CategoryModel.id.in_(ids),
            visible_to(self._user_id),
        )
        models = (await self._session.execute(stmt)).scalars().all()
        return {model.id: map_category(model) for model in models}
