from fintrack.presentation.api.routers.analytics import router as analytics_router
from fintrack.presentation.api.routers.budgets import router as budgets_router
from fintrack.presentation.api.routers.categories import router as categories_router
from fintrack.presentation.api.routers.transactions import (
    router as transactions_router,
)

__all__ = [
    "analytics_router",
    "budgets_router",
    "categories_router",
    "transactions_router",
]
