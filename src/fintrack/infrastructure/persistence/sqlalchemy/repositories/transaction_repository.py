"""SQLAlchemy implementation of TransactionRepository."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from fintrack.domain.ledger.entities import Transaction, TransactionType
from fintrack.domain.ledger.repositories import TransactionRepository
from fintrack.domain.shared.time import ensure_tz_aware, to_utc
from fintrack.infrastructure.persistence.sqlalchemy.models import TransactionModel

if TYPE_CHECKING:
    from fintrack.application.context import UserContext

logger = logging.getLogger(__name__)


class TransactionRepositorySQLAlchemy(TransactionRepository):
    """User-scoped transaction storage."""

    def __init__(self, session: AsyncSession, user_context: UserContext):
        self._session = session
        self._user_id = user_context.user_id

    async def save(self, transaction: Transaction) -> None:
        model = await self._find_model_by_id(transaction.id)

        if model:
            logger.debug("Updating existing transaction: %s", transaction.id)
            self._update_model_from_domain(model, transaction)
        else:
            logger.debug("Creating new transaction: %s", transaction.id)
            self._session.add(self._create_model_from_domain(transaction))

        await self._session.flush()

    async def find_by_id(self, transaction_id: UUID) -> Optional[Transaction]:
        model = await self._find_model_by_id(transaction_id)
        return map_transaction(model) if model else None

    async def find_all(
        self,
        transaction_type: Optional[TransactionType] = None,
        category_id: Optional[UUID] = None,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
    ) -> list[Transaction]:
        stmt = select(TransactionModel).where(TransactionModel.user_id == self._user_id)
        if transaction_type is not None:
            stmt = stmt.where(TransactionModel.transaction_type == transaction_type.value)
        if category_id is not None:
            stmt = stmt.where(TransactionModel.category_id == category_id)
        if start_date is not None:
            stmt = stmt.where(TransactionModel.date >= to_utc(start_date))
        if end_date is not None:
            stmt = stmt.where(TransactionModel.date <= to_utc(end_date))
        stmt = stmt.order_by(TransactionModel.date.desc(), TransactionModel.created_at.desc())

        result = await self._session.execute(stmt)
        return [map_transaction(model) for model in result.scalars().all()]

    async def delete(self, transaction_id: UUID) -> None:
        model = await self._find_model_by_id(transaction_id)

        if model:
            await self._session.delete(model)
            await self._session.flush()
            logger.info("Transaction deleted: %s", transaction_id)

    async def _find_model_by_id(self, transaction_id: UUID) -> Optional[TransactionModel]:
        stmt = select(TransactionModel).where(
            TransactionModel.user_id == self._user_id,
            TransactionModel.id == transaction_id,
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _create_model_from_domain(self, transaction: Transaction) -> TransactionModel:
        return TransactionModel(
            id=transaction.id,
            user_id=transaction.user_id,
            transaction_type=transaction.transaction_type.value,
            amount=transaction.amount,
            category_id=transaction.category_id,
            date=to_utc(transaction.date),
            description=transaction.description,
            created_at=to_utc(transaction.created_at),
        )

    def _update_model_from_domain(
        self,
        model: TransactionModel,
        transaction: Transaction,
    ) -> None:
        model.transaction_type = transaction.transaction_type.value
        model.amount = transaction.amount
        model.category_id = transaction.category_id
        model.date = to_utc(transaction.date)
        model.description = transaction.description


def map_transaction(model: TransactionModel) -> Transaction:
    return Transaction.reconstitute(
        id=model.id,
        user_id=model.user_id,
        transaction_type=TransactionType(model.transaction_type),
        amount=model.amount,
        category_id=model.category_id,
        date=ensure_tz_aware(model.date),
        description=model.description,
        created_at=ensure_tz_aware(model.created_at),
    )
