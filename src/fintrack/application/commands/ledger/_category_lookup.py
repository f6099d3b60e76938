from uuid import UUID

from fintrack.domain.ledger.entities import Category
from fintrack.domain.ledger.exceptions import InvalidCategoryError
from fintrack.domain.ledger.repositories import CategoryRepository


async def require_category(
    category_repository: CategoryRepository,
    category_id: UUID | None,
) -> Category:
    """Resolve a category visible to the current user or fail validation."""
    if category_id is None:
        raise InvalidCategoryError(None)
    category = await category_repository.find_by_id(category_id)
    if category is None:
        raise InvalidCategoryError(category_id)
    return category
