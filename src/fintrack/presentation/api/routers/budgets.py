"""Budgets router: monthly limits per category and spending against them."""

import logging
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Query, status

from fintrack.application.commands.ledger import (
    CreateBudgetCommand,
    DeleteBudgetCommand,
    UpdateBudgetCommand,
)
from fintrack.application.queries.ledger import BudgetStatusQuery, ListBudgetsQuery
from fintrack.presentation.api.dependencies import RepoFactory
from fintrack.presentation.api.schemas.budgets import (
    BudgetCreateRequest,
    BudgetResponse,
    BudgetUpdateRequest,
    BudgetWithStatusResponse,
)
from fintrack.presentation.api.schemas.common import MessageResponse

logger = logging.getLogger(__name__)

router = APIRouter()

MonthParam = Annotated[
    str | None,
    Query(description="Month, YYYY-MM or YYYY-MM-DD"),
]


@router.get("", summary="List budgets with spending")
async def list_budgets(
    factory: RepoFactory,
    month: MonthParam = None,
) -> list[BudgetWithStatusResponse]:
    """Newest month first. Without ``month`` all budgets are returned."""
    query = ListBudgetsQuery.from_factory(factory)
    items = await query.execute(month=month)
    return [BudgetWithStatusResponse.from_status(item) for item in items]


@router.get(
    "/status",
    summary="Get spending against one budget",
    responses={404: {"description": "No budget for this category and month"}},
)
async def get_budget_status(
    factory: RepoFactory,
    category_id: Annotated[UUID, Query(description="Budgeted category")],
    month: MonthParam = None,
) -> BudgetWithStatusResponse:
    query = BudgetStatusQuery.from_factory(factory)
    item = await query.execute(category_id=category_id, month=month)
    return BudgetWithStatusResponse.from_status(item)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create a budget",
    responses={409: {"description": "Budget already exists for this category and month"}},
)
async def create_budget(
    request: BudgetCreateRequest,
    factory: RepoFactory,
) -> BudgetResponse:
    command = CreateBudgetCommand.from_factory(factory)

    try:
        budget = await command.execute(
            category_id=request.category_id,
            amount=request.amount,
            month=request.month,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return BudgetResponse.from_domain(budget)


@router.put(
    "/{budget_id}",
    summary="Update a budget",
    responses={404: {"description": "Budget not found"}},
)
async def update_budget(
    budget_id: UUID,
    request: BudgetUpdateRequest,
    factory: RepoFactory,
) -> BudgetResponse:
    command = UpdateBudgetCommand.from_factory(factory)

    try:
        budget = await command.execute(
            budget_id=budget_id,
            amount=request.amount,
            month=request.month,
            category_id=request.category_id,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return BudgetResponse.from_domain(budget)


@router.delete(
    "/{budget_id}",
    summary="Delete a budget",
    responses={404: {"description": "Budget not found"}},
)
async def delete_budget(
    budget_id: UUID,
    factory: RepoFactory,
) -> MessageResponse:
    command = DeleteBudgetCommand.from_factory(factory)

    try:
        await command.execute(budget_id)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return MessageResponse(message="Budget deleted successfully")
