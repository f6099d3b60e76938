"""Pydantic schemas for category endpoints."""

from typing import Literal
from uuid import UUID

from pydantic import Field

from fintrack.domain.ledger.entities import Category
from fintrack.presentation.api.schemas.common import CamelModel


class CategoryResponse(CamelModel):
    id: UUID
    name: str
    type: Literal["INCOME", "EXPENSE"]
    icon: str | None = None
    color: str | None = None
    is_system: bool = Field(description="Shared system category (cannot be deleted)")

    @classmethod
    def from_domain(cls, category: Category) -> "CategoryResponse":
        return cls(
            id=category.id,
            name=category.name,
            type=category.category_type.value,
            icon=category.icon,
            color=category.color,
            is_system=category.is_system,
        )


class CategoryCreateRequest(CamelModel):
    """Request to create a user-owned category."""

    name: str = Field(description="Display name (1-50 characters)")
    type: Literal["INCOME", "EXPENSE"]
    icon: str | None = Field(None, description="Emoji or short icon name")
    color: str | None = Field(None, description="Hex color, e.g. #ef4444")

    model_config = {
        "json_schema_extra": {
            "example": {
                "name": "Pets",
                "type": "EXPENSE",
                "icon": "🐶",
                "color": "#a855f7",
            },
        },
    }
