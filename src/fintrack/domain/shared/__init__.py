"""Shared domain building blocks."""

from fintrack.domain.shared.exceptions import (
    BusinessRuleViolation,
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ForbiddenError,
    ValidationError,
)
from fintrack.domain.shared.time import ensure_tz_aware, to_utc, today_utc, utc_now

__all__ = [
    "BusinessRuleViolation",
    "ConflictError",
    "DomainException",
    "EntityNotFoundError",
    "ErrorCode",
    "ForbiddenError",
    "ValidationError",
    "ensure_tz_aware",
    "to_utc",
    "today_utc",
    "utc_now",
]
