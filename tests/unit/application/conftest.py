"""Shared fixtures for application layer tests."""

from datetime import datetime
from decimal import Decimal
from unittest.mock import AsyncMock, Mock

import pytest

from fintrack.application.context import UserContext
from fintrack.domain.ledger.entities import Category, Transaction, TransactionType

USER_ID = "user-1"


@pytest.fixture
def user_context() -> UserContext:
    return UserContext(user_id=USER_ID)


@pytest.fixture
def mock_ledger_port():
    """Ledger read port with empty defaults."""
    port = AsyncMock()
    port.sum_amounts.return_value = Decimal("0")
    port.transactions_between.return_value = []
    port.recent_transactions.return_value = []
    port.categories_by_ids.return_value = {}
    return port


@pytest.fixture
def mock_transaction_repo():
    return AsyncMock()


@pytest.fixture
def mock_category_repo():
    return AsyncMock()


@pytest.fixture
def mock_budget_repo():
    return AsyncMock()


@pytest.fixture
def mock_factory(
    user_context,
    mock_ledger_port,
    mock_transaction_repo,
    mock_category_repo,
    mock_budget_repo,
):
    factory = Mock()
    factory.user_context = user_context
    factory.ledger_read_port.return_value = mock_ledger_port
    factory.transaction_repository.return_value = mock_transaction_repo
    factory.category_repository.return_value = mock_category_repo
    factory.budget_repository.return_value = mock_budget_repo
    return factory


@pytest.fixture
def food() -> Category:
    return Category.system("Food & Dining", TransactionType.EXPENSE, "🍔", "#ef4444")


@pytest.fixture
def salary() -> Category:
    return Category.system("Salary", TransactionType.INCOME, "💰", "#22c55e")


def _make_transaction(
    category: Category,
    amount: str,
    when: datetime,
    kind: TransactionType | None = None,
    description: str | None = None,
) -> Transaction:
    return Transaction(
        user_id=USER_ID,
        transaction_type=kind or category.category_type,
        amount=Decimal(amount),
        category_id=category.id,
        date=when,
        description=description,
    )


@pytest.fixture
def make_transaction():
    """Build a transaction of the test user; the type defaults to the category's."""
    return _make_transaction
