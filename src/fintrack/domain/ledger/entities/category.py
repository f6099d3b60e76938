"""Category entity."""

import re
from typing import Optional
from uuid import UUID, uuid4

from fintrack.domain.ledger.entities.transaction_type import TransactionType
from fintrack.domain.ledger.exceptions import (
    InvalidCategoryNameError,
    InvalidColorError,
    SystemCategoryDeletionError,
)

MAX_NAME_LENGTH = 50
_COLOR_PATTERN = re.compile(r"^#[0-9A-F]{6}$", re.IGNORECASE)


class Category:
    """
    A label transactions are booked against.

    Categories without an owner (``user_id is None``) are system categories:
    shared by every user and never deletable. All other categories belong to
    exactly one user.
    """

    def __init__(  # NOQA: PLR0913
        self,
        name: str,
        category_type: TransactionType,
        user_id: Optional[str] = None,
        icon: Optional[str] = None,
        color: Optional[str] = None,
        id: Optional[UUID] = None,
    ):
        name = (name or "").strip()
        if not name or len(name) > MAX_NAME_LENGTH:
            raise InvalidCategoryNameError(name, MAX_NAME_LENGTH)
        if color is not None and not _COLOR_PATTERN.match(color):
            raise InvalidColorError(color)

        self._id = id if id is not None else uuid4()
        self._name = name
        self._type = TransactionType.parse(category_type)
        self._user_id = user_id
        self._icon = icon or None
        self._color = color

    @classmethod
    def system(
        cls,
        name: str,
        category_type: TransactionType,
        icon: Optional[str] = None,
        color: Optional[str] = None,
    ) -> "Category":
        return cls(name=name, category_type=category_type, icon=icon, color=color)

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def category_type(self) -> TransactionType:
        return self._type

    @property
    def user_id(self) -> Optional[str]:
        return self._user_id

    @property
    def icon(self) -> Optional[str]:
        return self._icon

    @property
    def color(self) -> Optional[str]:
        return self._color

    @property
    def is_system(self) -> bool:
        return self._user_id is None

    def is_visible_to(self, user_id: str) -> bool:
        return self.is_system or self._user_id == user_id

    def ensure_deletable(self) -> None:
        if self.is_system:
            raise SystemCategoryDeletionError(self._id)

    def __repr__(self) -> str:
        owner = "system" if self.is_system else self._user_id
        return f"Category(id={self._id}, name={self._name!r}, owner={owner})"
