"""FastAPI application factory.

Creates and configures the FastAPI application with all routers,
middleware, and exception handlers.

API Versioning:
    All API endpoints are versioned under /api/v1/ prefix.
    The health check endpoint remains unversioned at /health.
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.ext.asyncio import AsyncEngine

from fintrack import __version__
from fintrack.infrastructure.persistence.sqlalchemy.init_db import create_tables
from fintrack.presentation.api.dependencies import get_engine
from fintrack.presentation.api.exception_handlers import setup_exception_handlers
from fintrack.presentation.api.routers import (
    analytics_router,
    budgets_router,
    categories_router,
    transactions_router,
)
from fintrack_config.settings import Settings, get_settings


@lru_cache(maxsize=1)
def _configure_logging() -> None:
    """Configure application logging.

    Console output with timestamps and module names, the configured level
    for fintrack modules and WARNING for noisy third-party libraries.
    """
    settings = get_settings()
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,  # Override any existing config
    )

    logging.getLogger("fintrack").setLevel(log_level)

    # Quiet down noisy third-party loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

API_VERSION = __version__
API_V1_PREFIX = "/api/v1"

OPENAPI_TAGS = [
    {
        "name": "Analytics",
        "description": """Monthly aggregates for the dashboard.

**Endpoints:**
- `/stats` - Full dashboard report (summary, breakdowns, recent, trend)
- `/summary` - Totals and change against the previous month
- `/breakdown` - Per-category totals (pie charts)
- `/trend` - Income/expenses per month (line charts)
- `/period-total` - Sum of one type over an arbitrary interval

Every request needs the `user_id` query parameter.
""",
    },
    {
        "name": "Transactions",
        "description": "Record, edit and browse income and expenses.",
    },
    {
        "name": "Categories",
        "description": """Shared system categories plus user-owned ones.

System categories cannot be deleted. Deleting a user category keeps its
transactions; they show up as "Unknown" in analytics.
""",
    },
    {
        "name": "Budgets",
        "description": "Monthly spending limits per category.",
    },
    {"name": "Health", "description": "Service health monitoring endpoints."},
    {"name": "Info", "description": "API information and discovery."},
]


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    logger.info("Starting FinTrack API v%s...", API_VERSION)
    engine = get_engine()
    await _init_database_schema(engine)
    yield

    logger.info("Shutting down FinTrack API...")
    await engine.dispose()
    logger.info("Database connections closed")


async def _init_database_schema(engine: AsyncEngine) -> None:
    """Initialize database schema (if not existent) and verify connectivity."""
    try:
        await create_tables(engine)
    except ConnectionRefusedError:
        logger.critical("Could not connect to the database.")
        raise SystemExit(1) from None


def create_v1_router() -> APIRouter:
    v1_router = APIRouter()

    v1_router.include_router(analytics_router, prefix="/analytics", tags=["Analytics"])
    v1_router.include_router(
        transactions_router,
        prefix="/transactions",
        tags=["Transactions"],
    )
    v1_router.include_router(
        categories_router,
        prefix="/categories",
        tags=["Categories"],
    )
    v1_router.include_router(budgets_router, prefix="/budgets", tags=["Budgets"])

    return v1_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override for testing.

    Returns
    -------
    Configured FastAPI application instance.
    """
    # Configure logging on first app creation (not on module import)
    _configure_logging()

    if settings is None:
        settings = get_settings()

    app_name = settings.app_name

    app = FastAPI(
        title=f"{app_name} API",
        description="Personal finance tracking with **monthly analytics**.",
        version=API_VERSION,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_exception_handlers(app)

    app.include_router(create_v1_router(), prefix=API_V1_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health_check() -> dict:
        """Unversioned for load balancer/monitoring compatibility."""
        return {
            "status": "healthy",
            "version": API_VERSION,
            "api_versions": ["v1"],
        }

    @app.get("/", tags=["Info"])
    async def root() -> dict:
        return {
            "name": f"{app_name} API",
            "version": API_VERSION,
            "docs": "/docs" if settings.api_debug else None,
            "api_base": API_V1_PREFIX,
            "endpoints": {
                "health": "/health",
                "analytics": f"{API_V1_PREFIX}/analytics",
                "transactions": f"{API_V1_PREFIX}/transactions",
                "categories": f"{API_V1_PREFIX}/categories",
                "budgets": f"{API_V1_PREFIX}/budgets",
            },
        }

    return app


# Application instance for uvicorn
app = create_app()
