"""Budget entity."""

from datetime import date
from decimal import Decimal
from typing import Optional
from uuid import UUID, uuid4

from fintrack.domain.ledger.exceptions import ensure_positive_amount


def first_of_month(value: date) -> date:
    return date(value.year, value.month, 1)


class Budget:
    """
    A monthly spending limit for one category.

    A budget is identified by ``(user_id, category_id, month)``; ``month`` is
    always normalised to the first day of the month.
    """

    def __init__(
        self,
        user_id: str,
        category_id: UUID,
        amount: Decimal,
        month: date,
        id: Optional[UUID] = None,
    ):
        self._id = id if id is not None else uuid4()
        self._user_id = user_id
        self._category_id = category_id
        self._amount = ensure_positive_amount(amount)
        self._month = first_of_month(month)

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def user_id(self) -> str:
        return self._user_id

    @property
    def category_id(self) -> UUID:
        return self._category_id

    @property
    def amount(self) -> Decimal:
        return self._amount

    @property
    def month(self) -> date:
        return self._month

    def update(
        self,
        *,
        amount: Optional[Decimal] = None,
        month: Optional[date] = None,
        category_id: Optional[UUID] = None,
    ) -> None:
        if amount is not None:
            self._amount = ensure_positive_amount(amount)
        if month is not None:
            self._month = first_of_month(month)
        if category_id is not None:
            self._category_id = category_id

    def __repr__(self) -> str:
        return (
            f"Budget(id={self._id}, category_id={self._category_id}, "
            f"amount={self._amount}, month={self._month.isoformat()})"
        )
