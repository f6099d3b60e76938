"""Record a new income or expense."""

from __future__ import annotations

import logging
from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING
from uuid import UUID

from fintrack.application.commands.ledger._category_lookup import require_category
from fintrack.application.dtos.analytics import TransactionView
from fintrack.domain.ledger.entities import Transaction, TransactionType
from fintrack.domain.ledger.repositories import (
    CategoryRepository,
    TransactionRepository,
)

if TYPE_CHECKING:
    from fintrack.application.context import UserContext
    from fintrack.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class CreateTransactionCommand:
    """Validate and store a transaction for the current user."""

    def __init__(
        self,
        transaction_repository: TransactionRepository,
        category_repository: CategoryRepository,
        user_context: UserContext,
    ):
        self._transaction_repo = transaction_repository
        self._category_repo = category_repository
        self._user_id = user_context.user_id

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> CreateTransactionCommand:
        return cls(
            transaction_repository=factory.transaction_repository(),
            category_repository=factory.category_repository(),
            user_context=factory.user_context,
        )

    async def execute(  # NOQA: PLR0913
        self,
        transaction_type: str | TransactionType,
        amount: Decimal,
        category_id: UUID | None,
        date: datetime | None = None,
        description: str | None = None,
    ) -> TransactionView:
        category = await require_category(self._category_repo, category_id)

        transaction = Transaction(
            user_id=self._user_id,
            transaction_type=TransactionType.parse(transaction_type),
            amount=amount,
            category_id=category.id,
            date=date,
            description=description,
        )
        await self._transaction_repo.save(transaction)

        logger.info(
            "Recorded %s of %s in '%s'",
            transaction.transaction_type.value,
            transaction.amount,
            category.name,
        )
        return TransactionView(transaction=transaction, category=category)
