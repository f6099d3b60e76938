"""Repository factory protocol for application layer."""

from __future__ import annotations

from typing import Any, Protocol

from fintrack.application.context import UserContext
from fintrack.application.ports.analytics import LedgerReadPort
from fintrack.domain.ledger.repositories import (
    BudgetRepository,
    CategoryRepository,
    TransactionRepository,
)


class RepositoryFactory(Protocol):
    """Protocol for creating user-scoped repositories."""

    @property
    def user_context(self) -> UserContext:
        """Get the requesting user for repository scoping."""
        ...

    @property
    def session(self) -> Any:
        """Get the database session for transaction management.

        Typed as ``Any`` so the application layer stays independent of the
        database implementation. Used for commit/rollback at the
        presentation layer.
        """
        ...

    def transaction_repository(self) -> TransactionRepository:
        ...

    def category_repository(self) -> CategoryRepository:
        ...

    def budget_repository(self) -> BudgetRepository:
        ...

    def ledger_read_port(self) -> LedgerReadPort:
        ...
