"""Ledger read port.

Read-only contract the analytics service consumes. Implementations supply
snapshots of a user's transactions and resolve category metadata; they never
mutate the ledger.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime
from decimal import Decimal
from typing import Protocol
from uuid import UUID

from fintrack.domain.ledger.entities import Category, Transaction, TransactionType


class LedgerReadPort(Protocol):
    """Read-side access to the transaction ledger."""

    async def sum_amounts(
        self,
        *,
        user_id: str,
        transaction_type: TransactionType,
        start: datetime,
        end: datetime,
        category_id: UUID | None = None,
    ) -> Decimal:
        """Sum of amounts in the closed interval; 0 when nothing matches."""
        ...

    async def transactions_between(
        self,
        *,
        user_id: str,
        start: datetime,
        end: datetime,
        transaction_type: TransactionType | None = None,
    ) -> list[Transaction]:
        """Transactions dated within the closed interval."""
        ...

    async def recent_transactions(
        self,
        *,
        user_id: str,
        start: datetime,
        end: datetime,
        limit: int = 10,
    ) -> list[Transaction]:
        """Latest transactions within the interval, newest first."""
        ...

    async def categories_by_ids(
        self,
        category_ids: Iterable[UUID],
    ) -> dict[UUID, Category]:
        """Category metadata for the given ids; unknown ids are omitted."""
        ...
