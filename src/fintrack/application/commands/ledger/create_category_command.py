"""Create a user-owned category."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fintrack.domain.ledger.entities import Category, TransactionType
from fintrack.domain.ledger.repositories import CategoryRepository

if TYPE_CHECKING:
    from fintrack.application.context import UserContext
    from fintrack.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class CreateCategoryCommand:
    def __init__(
        self,
        category_repository: CategoryRepository,
        user_context: UserContext,
    ):
        self._category_repo = category_repository
        self._user_id = user_context.user_id

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> CreateCategoryCommand:
        return cls(
            category_repository=factory.category_repository(),
            user_context=factory.user_context,
        )

    async def execute(
        self,
        name: str,
        category_type: str | TransactionType,
        icon: str | None = None,
        color: str | None = None,
    ) -> Category:
        category = Category(
            name=name,
            category_type=TransactionType.parse(category_type),
            user_id=self._user_id,
            icon=icon,
            color=color,
        )
        await self._category_repo.save(category)
        logger.info("Created category '%s' (%s)", category.name, category.id)
        return category
