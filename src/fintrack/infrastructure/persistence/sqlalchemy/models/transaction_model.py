"""SQLAlchemy model for ledger transactions."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from sqlalchemy import DateTime, Index, Numeric, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from fintrack.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class TransactionModel(Base, TimestampMixin):
    """Database model for income and expense records."""

    __tablename__ = "transactions"

    __table_args__ = (
        # Analytics filter on (user, type, date range)
        Index("ix_transactions_user_type_date", "user_id", "transaction_type", "date"),
        Index("ix_transactions_user_category", "user_id", "category_id"),
    )

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    user_id: Mapped[str] = mapped_column(String(255), nullable=False)

    transaction_type: Mapped[str] = mapped_column(String(10), nullable=False)
    amount: Mapped[Decimal] = mapped_column(Numeric(15, 2), nullable=False)
    # Not a foreign key: rows outlive their category and resolve to "Unknown"
    category_id: Mapped[UUID] = mapped_column(Uuid, nullable=False)
    date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
    )

    def __repr__(self) -> str:
        return (
            f"<TransactionModel(id={self.id}, type={self.transaction_type}, "
            f"amount={self.amount})>"
        )
