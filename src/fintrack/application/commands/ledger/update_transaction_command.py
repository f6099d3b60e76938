"""Edit an existing transaction."""

from __future__ import annotations

import logging
from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING
from uuid import UUID

from fintrack.application.commands.ledger._category_lookup import require_category
from fintrack.application.dtos.analytics import TransactionView
from fintrack.domain.ledger.entities import TransactionType
from fintrack.domain.ledger.exceptions import TransactionNotFoundError
from fintrack.domain.ledger.repositories import (
    CategoryRepository,
    TransactionRepository,
)

if TYPE_CHECKING:
    from fintrack.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class UpdateTransactionCommand:
    """Apply a partial update; omitted fields keep their value."""

    def __init__(
        self,
        transaction_repository: TransactionRepository,
        category_repository: CategoryRepository,
    ):
        self._transaction_repo = transaction_repository
        self._category_repo = category_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> UpdateTransactionCommand:
        return cls(
            transaction_repository=factory.transaction_repository(),
            category_repository=factory.category_repository(),
        )

    async def execute(  # NOQA: PLR0913
        self,
        transaction_id: UUID,
        transaction_type: str | TransactionType | None = None,
        amount: Decimal | None = None,
        category_id: UUID | None = None,
        date: datetime | None = None,
        description: str | None = None,
    ) -> TransactionView:
        transaction = await self._transaction_repo.find_by_id(transaction_id)
        if transaction is None:
            raise TransactionNotFoundError(transaction_id)

        if category_id is not None:
            await require_category(self._category_repo, category_id)

        transaction.update(
            transaction_type=(
                TransactionType.parse(transaction_type) if transaction_type else None
            ),
            amount=amount,
            category_id=category_id,
            date=date,
            description=description,
        )
        await self._transaction_repo.save(transaction)
        logger.info("Updated transaction %s", transaction.id)

        category = await self._category_repo.find_by_id(transaction.category_id)
        return TransactionView(transaction=transaction, category=category)
