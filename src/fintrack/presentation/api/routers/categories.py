"""Categories router."""

import logging
from typing import Annotated, Literal
from uuid import UUID

from fastapi import APIRouter, Query, status

from fintrack.application.commands.ledger import (
    CreateCategoryCommand,
    DeleteCategoryCommand,
)
from fintrack.application.queries.ledger import ListCategoriesQuery
from fintrack.presentation.api.dependencies import RepoFactory
from fintrack.presentation.api.schemas.categories import (
    CategoryCreateRequest,
    CategoryResponse,
)
from fintrack.presentation.api.schemas.common import MessageResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", summary="List categories visible to the user")
async def list_categories(
    factory: RepoFactory,
    category_type: Annotated[
        Literal["INCOME", "EXPENSE"] | None,
        Query(alias="type", description="Filter by type"),
    ] = None,
) -> list[CategoryResponse]:
    """System categories first, then the user's own; each group by name."""
    query = ListCategoriesQuery.from_factory(factory)
    categories = await query.execute(category_type=category_type)
    return [CategoryResponse.from_domain(c) for c in categories]


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create a category",
    responses={400: {"description": "Invalid name or color"}},
)
async def create_category(
    request: CategoryCreateRequest,
    factory: RepoFactory,
) -> CategoryResponse:
    command = CreateCategoryCommand.from_factory(factory)

    try:
        category = await command.execute(
            name=request.name,
            category_type=request.type,
            icon=request.icon,
            color=request.color,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return CategoryResponse.from_domain(category)


@router.delete(
    "/{category_id}",
    summary="Delete a user category",
    responses={
        403: {"description": "System categories cannot be deleted"},
        404: {"description": "Category not found"},
    },
)
async def delete_category(
    category_id: UUID,
    factory: RepoFactory,
) -> MessageResponse:
    """Removes the category and its budgets; transactions keep their reference."""
    command = DeleteCategoryCommand.from_factory(factory)

    try:
        await command.execute(category_id)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return MessageResponse(message="Category deleted successfully")
