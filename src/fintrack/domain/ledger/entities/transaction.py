"""Transaction entity."""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID, uuid4

from fintrack.domain.ledger.entities.transaction_type import TransactionType
from fintrack.domain.ledger.exceptions import ensure_positive_amount
from fintrack.domain.shared.time import to_utc, utc_now


class Transaction:
    """
    A dated income or expense recorded against a category.

    The amount is always positive; ``transaction_type`` implies the sign.
    Each transaction belongs to exactly one user and is only changed
    through ``update``.
    """

    def __init__(  # NOQA: PLR0913
        self,
        user_id: str,
        transaction_type: TransactionType,
        amount: Decimal,
        category_id: UUID,
        date: Optional[datetime] = None,
        description: Optional[str] = None,
        id: Optional[UUID] = None,
        created_at: Optional[datetime] = None,
    ):
        self._id = id if id is not None else uuid4()
        self._user_id = user_id
        self._type = TransactionType.parse(transaction_type)
        self._amount = ensure_positive_amount(amount)
        self._category_id = category_id
        self._date = to_utc(date) if date else utc_now()
        self._description = _clean(description)
        self._created_at = created_at or utc_now()

    @classmethod
    def reconstitute(  # NOQA: PLR0913
        cls,
        id: UUID,
        user_id: str,
        transaction_type: TransactionType,
        amount: Decimal,
        category_id: UUID,
        date: datetime,
        description: Optional[str],
        created_at: datetime,
    ) -> "Transaction":
        return cls(
            id=id,
            user_id=user_id,
            transaction_type=transaction_type,
            amount=amount,
            category_id=category_id,
            date=date,
            description=description,
            created_at=created_at,
        )

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def user_id(self) -> str:
        return self._user_id

    @property
    def transaction_type(self) -> TransactionType:
        return self._type

    @property
    def amount(self) -> Decimal:
        return self._amount

    @property
    def category_id(self) -> UUID:
        return self._category_id

    @property
    def date(self) -> datetime:
        return self._date

    @property
    def description(self) -> Optional[str]:
        return self._description

    @property
    def created_at(self) -> datetime:
        return self._created_at

    def is_income(self) -> bool:
        return self._type is TransactionType.INCOME

    def is_expense(self) -> bool:
        return self._type is TransactionType.EXPENSE

    def update(  # NOQA: PLR0913
        self,
        *,
        transaction_type: Optional[TransactionType] = None,
        amount: Optional[Decimal] = None,
        category_id: Optional[UUID] = None,
        date: Optional[datetime] = None,
        description: Optional[str] = None,
    ) -> None:
        """Apply a partial update; ``None`` leaves a field unchanged.

        A blank ``description`` clears it.
        """
        if amount is not None:
            self._amount = ensure_positive_amount(amount)
        if transaction_type is not None:
            self._type = TransactionType.parse(transaction_type)
        if category_id is not None:
            self._category_id = category_id
        if date is not None:
            self._date = to_utc(date)
        if description is not None:
            self._description = _clean(description)

    def __repr__(self) -> str:
        return (
            f"Transaction(id={self._id}, type={self._type.value}, "
            f"amount={self._amount}, date={self._date.date().isoformat()})"
        )


def _clean(description: Optional[str]) -> Optional[str]:
    if description is None:
        return None
    return description.strip() or None
