"""FastAPI dependency injection for the FinTrack API.

Provides dependencies for:
- Database engine and sessions
- User context for repository scoping (from the ``user_id`` query parameter)
- The repository factory handed to application queries and commands
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Annotated, AsyncGenerator

from fastapi import Depends, Query
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from fintrack.application.context import UserContext
from fintrack.infrastructure.persistence.sqlalchemy.repositories.factory import (
    SQLAlchemyRepositoryFactory,
)
from fintrack.presentation.api.config import get_api_settings
from fintrack_config.settings import Settings

logger = logging.getLogger(__name__)


@lru_cache()
def get_database_url() -> str:
    """Database URL from application settings."""
    url = get_api_settings().database_url

    # Ensure data directory exists for file-based SQLite
    if url.startswith("sqlite") and ":memory:" not in url:
        db_path = url.split("///")[-1]
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    return url


# -----------------------------------------------------------------------------
# Database Engine & Session (Singleton)
# -----------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    """
    Get the shared async database engine (singleton).

    The engine manages the connection pool and is reused across all requests.
    """
    return create_async_engine(
        get_database_url(),
        echo=False,
        pool_pre_ping=True,
    )


@lru_cache(maxsize=1)
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Yield one async session per request from the shared pool."""
    async with get_session_maker()() as session:
        yield session


# Type alias for injected session
DBSession = Annotated[AsyncSession, Depends(get_db_session)]

# Type alias for injected settings
ApiSettings = Annotated[Settings, Depends(get_api_settings)]


# -----------------------------------------------------------------------------
# User Context & Repository Factory
# -----------------------------------------------------------------------------


async def get_user_context(
    user_id: Annotated[
        str | None,
        Query(description="Opaque identifier of the user whose ledger is read"),
    ] = None,
) -> UserContext:
    """
    Get UserContext for repository scoping.

    Raises ``MissingUserIdError`` (400) when ``user_id`` is absent or blank,
    before any database access happens.
    """
    return UserContext.from_user_id(user_id)


# Type alias for injected user context
CurrentUserContext = Annotated[UserContext, Depends(get_user_context)]


async def get_repository_factory(
    user_context: CurrentUserContext,
    session: DBSession,
) -> SQLAlchemyRepositoryFactory:
    """Repository factory scoped to the requesting user."""
    return SQLAlchemyRepositoryFactory(session=session, user_context=user_context)


# Type alias for injected repository factory
RepoFactory = Annotated[SQLAlchemyRepositoryFactory, Depends(get_repository_factory)]


# -----------------------------------------------------------------------------
# Application Queries & Commands
# -----------------------------------------------------------------------------
# Application layer classes have from_factory() classmethods that encapsulate
# their dependency knowledge. Use them directly in routers:
#
#   async def list_budgets(factory: RepoFactory, ...):
#       query = ListBudgetsQuery.from_factory(factory)  # NOQA: ERA001
