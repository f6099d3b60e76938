"""Ledger domain exceptions."""

from datetime import date
from decimal import Decimal
from typing import Any
from uuid import UUID

from fintrack.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
    ForbiddenError,
    ValidationError,
)

CENT = Decimal("0.01")
MAX_AMOUNT = Decimal("1E13")


class MissingUserIdError(ValidationError):
    """Raised when a request does not identify the user."""

    def __init__(self) -> None:
        super().__init__(
            message="User ID is required",
            code=ErrorCode.MISSING_USER_ID,
            fields=["user_id"],
        )


class InvalidAmountError(ValidationError):
    """Raised when a monetary amount is not strictly positive or not in cents."""

    def __init__(
        self,
        amount: Any,
        field: str = "amount",
        message: str = "Amount must be positive",
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCode.INVALID_AMOUNT,
            details={"amount": str(amount)},
            fields=[field],
        )


class InvalidCategoryError(ValidationError):
    """Raised when a referenced category does not exist for the user."""

    def __init__(self, category_id: UUID | str | None) -> None:
        super().__init__(
            message="Category is required" if category_id is None
            else f"Category '{category_id}' does not exist",
            code=ErrorCode.INVALID_CATEGORY,
            details={"category_id": str(category_id) if category_id else None},
            fields=["category_id"],
        )


class InvalidCategoryNameError(ValidationError):
    def __init__(self, name: str, max_length: int) -> None:
        super().__init__(
            message=f"Name is required and must be at most {max_length} characters",
            details={"name": name},
            fields=["name"],
        )


class InvalidColorError(ValidationError):
    def __init__(self, color: str) -> None:
        super().__init__(
            message="Invalid color format",
            code=ErrorCode.INVALID_FORMAT,
            details={"color": color},
            fields=["color"],
        )


class InvalidMonthError(ValidationError):
    """Raised when a month/reference date cannot be parsed."""

    def __init__(self, value: str, field: str = "month") -> None:
        super().__init__(
            message=f"Invalid month '{value}', expected YYYY-MM or YYYY-MM-DD",
            code=ErrorCode.INVALID_DATE,
            details={"value": value},
            fields=[field],
        )


class TransactionNotFoundError(EntityNotFoundError):
    def __init__(self, transaction_id: UUID | str) -> None:
        super().__init__(
            message="Transaction not found",
            code=ErrorCode.TRANSACTION_NOT_FOUND,
            details={"transaction_id": str(transaction_id)},
        )


class CategoryNotFoundError(EntityNotFoundError):
    def __init__(self, category_id: UUID | str) -> None:
        super().__init__(
            message="Category not found",
            code=ErrorCode.CATEGORY_NOT_FOUND,
            details={"category_id": str(category_id)},
        )


class BudgetNotFoundError(EntityNotFoundError):
    def __init__(
        self,
        budget_id: UUID | str | None = None,
        category_id: UUID | str | None = None,
        month: date | None = None,
    ) -> None:
        super().__init__(
            message="Budget not found",
            code=ErrorCode.BUDGET_NOT_FOUND,
            details={
                "budget_id": str(budget_id) if budget_id else None,
                "category_id": str(category_id) if category_id else None,
                "month": month.isoformat() if month else None,
            },
        )


class BudgetAlreadyExistsError(ConflictError):
    """Raised when a budget for the same category and month already exists."""

    def __init__(self, category_id: UUID | str, month: date) -> None:
        super().__init__(
            message="Budget already exists for this category and month",
            code=ErrorCode.DUPLICATE_BUDGET,
            details={"category_id": str(category_id), "month": month.isoformat()},
        )


class SystemCategoryDeletionError(ForbiddenError):
    def __init__(self, category_id: UUID | str) -> None:
        super().__init__(
            message="Cannot delete system categories",
            code=ErrorCode.SYSTEM_CATEGORY_PROTECTED,
            details={"category_id": str(category_id)},
        )


def ensure_positive_amount(amount: Decimal | int | float | str, field: str = "amount") -> Decimal:
    """Coerce an amount to Decimal and reject zero, negative or malformed values."""
    try:
        value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    except ArithmeticError as e:
        raise InvalidAmountError(amount, field) from e
    if not value.is_finite() or value <= 0:
        raise InvalidAmountError(amount, field)
    # Stored as NUMERIC(15, 2); anything finer would be silently rounded
    if value >= MAX_AMOUNT or value != value.quantize(CENT):
        raise InvalidAmountError(
            amount,
            field,
            message="Amount must be below 10^13 with at most two decimal places",
        )
    return value
