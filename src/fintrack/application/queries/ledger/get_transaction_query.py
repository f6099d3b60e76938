"""Get a single transaction."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from fintrack.application.dtos.analytics import TransactionView
from fintrack.domain.ledger.exceptions import TransactionNotFoundError
from fintrack.domain.ledger.repositories import (
    CategoryRepository,
    TransactionRepository,
)

if TYPE_CHECKING:
    from fintrack.application.factories import RepositoryFactory


class GetTransactionQuery:
    def __init__(
        self,
        transaction_repository: TransactionRepository,
        category_repository: CategoryRepository,
    ):
        self._transaction_repo = transaction_repository
        self._category_repo = category_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> GetTransactionQuery:
        return cls(
            transaction_repository=factory.transaction_repository(),
            category_repository=factory.category_repository(),
        )

    async def execute(self, transaction_id: UUID) -> TransactionView:
        transaction = await self._transaction_repo.find_by_id(transaction_id)
        if transaction is None:
            raise TransactionNotFoundError(transaction_id)
        category = await self._category_repo.find_by_id(transaction.category_id)
        return TransactionView(transaction=transaction, category=category)
