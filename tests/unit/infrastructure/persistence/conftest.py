"""
Pytest fixtures for infrastructure persistence tests.

Each test gets a fresh in-memory SQLite database. The repositories only use
portable SQL, so the same code runs against PostgreSQL in production.
"""

from dataclasses import dataclass
from datetime import date, datetime, timezone
from decimal import Decimal
from uuid import UUID, uuid4

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from fintrack.infrastructure.persistence.sqlalchemy.models import (
    Base,
    BudgetModel,
    CategoryModel,
    TransactionModel,
)

TEST_USER_ID = "user-1"

# Secondary test user for isolation tests
TEST_USER_ID_2 = "user-2"


@dataclass(frozen=True)
class MockUserContext:
    """Mock UserContext for testing."""

    user_id: str


@pytest.fixture
def user_context():
    """Provide a test UserContext for repository tests."""
    return MockUserContext(user_id=TEST_USER_ID)


@pytest.fixture
def other_user_context():
    return MockUserContext(user_id=TEST_USER_ID_2)


@pytest_asyncio.fixture(scope="function")
async def async_session():
    """
    Create a fresh database session for each test.

    Tables are created on a private in-memory database that disappears
    with the engine.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async_session_maker = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session_maker() as session:
        yield session
        await session.rollback()

    await engine.dispose()


# ---------------------------------------------------------------------------
# Model builders
# ---------------------------------------------------------------------------


def mk_category(
    name: str,
    category_type: str = "EXPENSE",
    user_id: str | None = None,
    icon: str | None = None,
    color: str | None = None,
) -> CategoryModel:
    return CategoryModel(
        id=uuid4(),
        user_id=user_id,
        name=name,
        category_type=category_type,
        icon=icon,
        color=color,
    )


def mk_transaction(  # NOQA: PLR0913
    *,
    user_id: str,
    category_id: UUID,
    amount: str,
    dt: datetime,
    transaction_type: str = "EXPENSE",
    description: str | None = None,
) -> TransactionModel:
    return TransactionModel(
        id=uuid4(),
        user_id=user_id,
        transaction_type=transaction_type,
        amount=Decimal(amount),
        category_id=category_id,
        date=dt,
        description=description,
        created_at=datetime.now(tz=timezone.utc),
    )


def mk_budget(
    *,
    user_id: str,
    category_id: UUID,
    amount: str,
    month: date,
) -> BudgetModel:
    return BudgetModel(
        id=uuid4(),
        user_id=user_id,
        category_id=category_id,
        amount=Decimal(amount),
        month=month,
    )


@pytest.fixture
def models():
    """Model builders, so tests can seed rows without importing this module."""

    class _Builders:
        category = staticmethod(mk_category)
        transaction = staticmethod(mk_transaction)
        budget = staticmethod(mk_budget)

    return _Builders
