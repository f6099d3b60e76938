"""SQLAlchemy model for monthly budgets."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from sqlalchemy import Date, DateTime, Index, Numeric, String, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from fintrack.domain.shared.time import utc_now
from fintrack.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class BudgetModel(Base, TimestampMixin):
    """Database model for budgets; one per user, category and month."""

    __tablename__ = "budgets"

    __table_args__ = (
        Index("ix_budgets_user_month", "user_id", "month"),
        UniqueConstraint(
            "user_id",
            "category_id",
            "month",
            name="uq_budgets_user_category_month",
        ),
    )

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    user_id: Mapped[str] = mapped_column(String(255), nullable=False)
    category_id: Mapped[UUID] = mapped_column(Uuid, nullable=False, index=True)

    amount: Mapped[Decimal] = mapped_column(Numeric(15, 2), nullable=False)
    # Always the first day of the month
    month: Mapped[date] = mapped_column(Date, nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<BudgetModel(id={self.id}, category_id={self.category_id}, month={self.month})>"
