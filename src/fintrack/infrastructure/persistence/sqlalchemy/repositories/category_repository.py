"""SQLAlchemy implementation of CategoryRepository."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from sqlalchemy import case, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from fintrack.domain.ledger.entities import Category, TransactionType
from fintrack.domain.ledger.repositories import CategoryRepository
from fintrack.infrastructure.persistence.sqlalchemy.models import CategoryModel

if TYPE_CHECKING:
    from fintrack.application.context import UserContext

logger = logging.getLogger(__name__)


def visible_to(user_id: str):
    """Filter clause: system categories plus those owned by ``user_id``."""
    return or_(CategoryModel.user_id.is_(None), CategoryModel.user_id == user_id)


class CategoryRepositorySQLAlchemy(CategoryRepository):
    """Categories visible to the current user."""

    def __init__(self, session: AsyncSession, user_context: UserContext):
        self._session = session
        self._user_id = user_context.user_id

    async def save(self, category: Category) -> None:
        model = await self._session.get(CategoryModel, category.id)

        if model:
            logger.debug("Updating existing category: %s", category.name)
            model.name = category.name
            model.category_type = category.category_type.value
            model.icon = category.icon
            model.color = category.color
        else:
            logger.debug("Creating new category: %s", category.name)
            self._session.add(
                CategoryModel(
                    id=category.id,
                    user_id=category.user_id,
                    name=category.name,
                    category_type=category.category_type.value,
                    icon=category.icon,
                    color=category.color,
                ),
            )

        await self._session.flush()

    async def find_by_id(self, category_id: UUID) -> Optional[Category]:
        stmt = select(CategoryModel).where(
            CategoryModel.id == category_id,
            visible_to(self._user_id),
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return map_category(model) if model else None

    async def find_visible(
        self,
        category_type: Optional[TransactionType] = None,
    ) -> list[Category]:
        stmt = select(CategoryModel).where(visible_to(self._user_id))
        if category_type is not None:
            stmt = stmt.where(CategoryModel.category_type == category_type.value)
        stmt = stmt.order_by(
            case((CategoryModel.user_id.is_(None), 0), else_=1),
            CategoryModel.name,
        )
        result = await self._session.execute(stmt)
        return [map_category(model) for model in result.scalars().all()]

    async def delete(self, category_id: UUID) -> None:
        stmt = select(CategoryModel).where(
            CategoryModel.id == category_id,
            CategoryModel.user_id == self._user_id,
        )
        model = (await self._session.execute(stmt)).scalar_one_or_none()

        if model:
            await self._session.delete(model)
            await self._session.flush()
            logger.info("Category deleted: %s", category_id)


def map_category(model: CategoryModel) -> Category:
    return Category(
        id=model.id,
        name=model.name,
        category_type=TransactionType(model.category_type),
        user_id=model.user_id,
        icon=model.icon,
        color=model.color,
    )
