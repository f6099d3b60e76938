"""Pydantic schemas for budget endpoints."""

from datetime import date
from uuid import UUID

from pydantic import Field

from fintrack.application.dtos.analytics import BudgetWithStatus
from fintrack.domain.ledger.entities import Budget
from fintrack.presentation.api.schemas.categories import CategoryResponse
from fintrack.presentation.api.schemas.common import Amount, CamelModel


class BudgetResponse(CamelModel):
    id: UUID
    category_id: UUID
    amount: Amount
    month: date

    @classmethod
    def from_domain(cls, budget: Budget) -> "BudgetResponse":
        return cls(
            id=budget.id,
            category_id=budget.category_id,
            amount=budget.amount,
            month=budget.month,
        )


class BudgetWithStatusResponse(BudgetResponse):
    """Budget plus actual spending in its month."""

    category: CategoryResponse | None = None
    spent: Amount
    remaining: Amount = Field(description="Limit minus spent; negative when exceeded")
    percentage_used: Amount = Field(description="0-100, capped at 100")
    is_exceeded: bool

    @classmethod
    def from_status(cls, item: BudgetWithStatus) -> "BudgetWithStatusResponse":
        budget, status = item.budget, item.status
        return cls(
            id=budget.id,
            category_id=budget.category_id,
            amount=budget.amount,
            month=budget.month,
            category=CategoryResponse.from_domain(item.category) if item.category else None,
            spent=status.spent,
            remaining=status.remaining,
            percentage_used=status.percentage_used,
            is_exceeded=status.is_exceeded,
        )


class BudgetCreateRequest(CamelModel):
    category_id: UUID
    amount: Amount = Field(
        description="Monthly limit (positive, at most two decimal places)",
    )
    month: date = Field(description="Any day of the month; stored as the first day")


class BudgetUpdateRequest(CamelModel):
    category_id: UUID | None = None
    amount: Amount | None = None
    month: date | None = None
