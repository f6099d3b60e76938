"""Transaction type enumeration."""

from enum import Enum

from fintrack.domain.shared.exceptions import ValidationError


class TransactionType(Enum):
    """Direction of a ledger transaction.

    Amounts are always stored positive; the type carries the sign.
    """

    INCOME = "INCOME"  # Salary, freelance, gifts
    EXPENSE = "EXPENSE"  # Food, rent, transport

    @classmethod
    def parse(cls, value: "str | TransactionType") -> "TransactionType":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError as e:
            valid = ", ".join(t.value for t in cls)
            msg = f"Invalid transaction type '{value}'. Valid types: {valid}"
            raise ValidationError(msg, fields=["type"]) from e
