"""Pydantic schemas for transaction endpoints."""

from datetime import datetime
from typing import Literal
from uuid import UUID

from pydantic import Field

from fintrack.application.dtos.analytics import TransactionView
from fintrack.presentation.api.schemas.categories import CategoryResponse
from fintrack.presentation.api.schemas.common import Amount, CamelModel


class TransactionResponse(CamelModel):
    """A transaction with its category (``null`` once the category is deleted)."""

    id: UUID
    type: Literal["INCOME", "EXPENSE"]
    amount: Amount
    category_id: UUID
    category: CategoryResponse | None = None
    date: datetime
    description: str | None = None
    created_at: datetime

    @classmethod
    def from_view(cls, view: TransactionView) -> "TransactionResponse":
        txn = view.transaction
        return cls(
            id=txn.id,
            type=txn.transaction_type.value,
            amount=txn.amount,
            category_id=txn.category_id,
            category=CategoryResponse.from_domain(view.category) if view.category else None,
            date=txn.date,
            description=txn.description,
            created_at=txn.created_at,
        )


class TransactionCreateRequest(CamelModel):
    type: Literal["INCOME", "EXPENSE"]
    amount: Amount = Field(
        description="Positive, at most two decimal places; the type implies the sign",
    )
    category_id: UUID
    date: datetime | None = Field(None, description="Defaults to now")
    description: str | None = Field(None, max_length=500)

    model_config = {
        "json_schema_extra": {
            "example": {
                "type": "EXPENSE",
                "amount": 45.5,
                "categoryId": "3fa85f64-5717-4562-b3fc-2c963f66afa6",
                "date": "2024-06-12T18:30:00Z",
                "description": "Dinner",
            },
        },
    }


class TransactionUpdateRequest(CamelModel):
    """Partial update: omitted fields keep their value.

    An empty ``description`` clears it.
    """

    type: Literal["INCOME", "EXPENSE"] | None = None
    amount: Amount | None = None
    category_id: UUID | None = None
    date: datetime | None = None
    description: str | None = Field(None, max_length=500)
