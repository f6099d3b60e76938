"""List transactions query."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID

from fintrack.application.dtos.analytics import TransactionView
from fintrack.application.ports.analytics import LedgerReadPort
from fintrack.domain.ledger.entities import TransactionType
from fintrack.domain.ledger.repositories import TransactionRepository

if TYPE_CHECKING:
    from fintrack.application.factories import RepositoryFactory

ALL_TYPES = "ALL"


class ListTransactionsQuery:
    """List the current user's transactions, newest first, with categories."""

    def __init__(
        self,
        transaction_repository: TransactionRepository,
        ledger_read_port: LedgerReadPort,
    ):
        self._transaction_repo = transaction_repository
        self._ledger = ledger_read_port

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListTransactionsQuery:
        return cls(
            transaction_repository=factory.transaction_repository(),
            ledger_read_port=factory.ledger_read_port(),
        )

    async def execute(
        self,
        transaction_type: str | None = None,
        category_id: UUID | None = None,
        start_date: datetime | None = None,
        end_date: datetime | None = None,
    ) -> list[TransactionView]:
        type_filter = None
        if transaction_type and transaction_type.upper() != ALL_TYPES:
            type_filter = TransactionType.parse(transaction_type)

        transactions = await self._transaction_repo.find_all(
            transaction_type=type_filter,
            category_id=category_id,
            start_date=start_date,
            end_date=end_date,
        )
        categories = await self._ledger.categories_by_ids(
            {t.category_id for t in transactions},
        )
        return [
            TransactionView(transaction=t, category=categories.get(t.category_id))
            for t in transactions
        ]
