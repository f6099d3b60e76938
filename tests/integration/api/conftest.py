"""Pytest fixtures for API integration tests."""

from uuid import UUID, uuid4

import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from fintrack.infrastructure.persistence.sqlalchemy.models import Base, CategoryModel
from fintrack.presentation.api.app import API_V1_PREFIX, create_app
from fintrack.presentation.api.config import get_api_settings
from fintrack.presentation.api.dependencies import get_db_session
from fintrack_config.settings import Settings

SYSTEM_CATEGORIES = [
    ("Salary", "INCOME", "💰", "#22c55e"),
    ("Freelance", "INCOME", "💼", "#10b981"),
    ("Food & Dining", "EXPENSE", "🍔", "#ef4444"),
    ("Transportation", "EXPENSE", "🚗", "#f97316"),
    ("Entertainment", "EXPENSE", "🎬", "#a855f7"),
]

TEST_USER_ID = "test-user"


@pytest.fixture
def api_v1_prefix() -> str:
    """Get the API v1 prefix for building URLs."""
    return API_V1_PREFIX


@pytest.fixture
def api_settings() -> Settings:
    """Test API settings with debug enabled."""
    return Settings(
        postgres_password=SecretStr("test-password"),
        database_url_override="sqlite+aiosqlite:///:memory:",
        api_host="127.0.0.1",
        api_port=8000,
        api_debug=True,
        api_cors_origins="http://localhost:3000",
        analytics_trend_months=6,
        analytics_recent_limit=10,
    )


@pytest.fixture
def test_db_engine() -> AsyncEngine:
    """In-memory SQLite engine; one shared connection keeps the data alive."""
    return create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
    )


async def _create_schema(engine: AsyncEngine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def _insert_system_categories(engine: AsyncEngine) -> dict[str, UUID]:
    models = [
        CategoryModel(
            id=uuid4(),
            user_id=None,
            name=name,
            category_type=category_type,
            icon=icon,
            color=color,
        )
        for name, category_type, icon, color in SYSTEM_CATEGORIES
    ]
    session_maker = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    async with session_maker() as session:
        session.add_all(models)
        await session.commit()

    return {model.name: model.id for model in models}


@pytest.fixture
def test_app(api_settings, test_db_engine):
    """FastAPI app bound to the in-memory database."""
    app = create_app(settings=api_settings)

    test_session_maker = async_sessionmaker(
        test_db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    # Override the database session dependency
    async def override_get_db_session():
        async with test_session_maker() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session
    app.dependency_overrides[get_api_settings] = lambda: api_settings
    return app


@pytest.fixture
def test_client(test_app, test_db_engine):
    """Test client; the database is prepared on the client's own event loop."""
    with TestClient(test_app) as client:
        client.portal.call(_create_schema, test_db_engine)
        yield client
        client.portal.call(test_db_engine.dispose)


@pytest.fixture
def system_categories(test_client, test_db_engine) -> dict[str, str]:
    """Insert the system categories; returns their ids (as strings) by name."""
    ids = test_client.portal.call(_insert_system_categories, test_db_engine)
    return {name: str(cid) for name, cid in ids.items()}


@pytest.fixture
def user_params() -> dict:
    return {"user_id": TEST_USER_ID}


@pytest.fixture
def create_transaction(test_client, api_v1_prefix, user_params):
    """POST a transaction for the test user and return the response body."""

    def _create(category_id: str, amount: float, date: str, type_: str = "EXPENSE", **extra):
        payload = {
            "type": type_,
            "amount": amount,
            "categoryId": category_id,
            "date": date,
            **extra,
        }
        response = test_client.post(
            f"{api_v1_prefix}/transactions",
            params=user_params,
            json=payload,
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _create
