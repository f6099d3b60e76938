"""SQLAlchemy repository factory for creating user-scoped repositories."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy.ext.asyncio import AsyncSession

from fintrack.infrastructure.persistence.sqlalchemy.adapters.analytics import (
    SqlAlchemyLedgerReadAdapter,
)
from fintrack.infrastructure.persistence.sqlalchemy.repositories.budget_repository import (  # NOQA: E501
    BudgetRepositorySQLAlchemy,
)
from fintrack.infrastructure.persistence.sqlalchemy.repositories.category_repository import (  # NOQA: E501
    CategoryRepositorySQLAlchemy,
)
from fintrack.infrastructure.persistence.sqlalchemy.repositories.transaction_repository import (  # NOQA: E501
    TransactionRepositorySQLAlchemy,
)

if TYPE_CHECKING:
    from fintrack.application.context import UserContext


class SQLAlchemyRepositoryFactory:
    """SQLAlchemy implementation of the RepositoryFactory Protocol."""

    def __init__(self, session: AsyncSession, user_context: UserContext):
        self._session = session
        self._user_context = user_context

        # Cached instances (created on demand)
        self._transaction_repo: TransactionRepositorySQLAlchemy | None = None
        self._category_repo: CategoryRepositorySQLAlchemy | None = None
        self._budget_repo: BudgetRepositorySQLAlchemy | None = None
        self._ledger_read_adapter: SqlAlchemyLedgerReadAdapter | None = None

    @property
    def user_context(self) -> UserContext:
        return self._user_context

    @property
    def session(self) -> AsyncSession:
        return self._session

    def transaction_repository(self) -> TransactionRepositorySQLAlchemy:
        if self._transaction_repo is None:
            self._transaction_repo = TransactionRepositorySQLAlchemy(
                self._session,
                self._user_context,
            )
        return self._transaction_repo

    def category_repository(self) -> CategoryRepositorySQLAlchemy:
        if self._category_repo is None:
            self._category_repo = CategoryRepositorySQLAlchemy(
                self._session,
                self._user_context,
            )
        return self._category_repo

    def budget_repository(self) -> BudgetRepositorySQLAlchemy:
        if self._budget_repo is None:
            self._budget_repo = BudgetRepositorySQLAlchemy(
                self._session,
                self._user_context,
            )
        return self._budget_repo

    def ledger_read_port(self) -> SqlAlchemyLedgerReadAdapter:
        if self._ledger_read_adapter is None:
            self._ledger_read_adapter = SqlAlchemyLedgerReadAdapter(
                self._session,
                self._user_context,
            )
        return self._ledger_read_adapter
