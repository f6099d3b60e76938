"""User context for request-scoped user identity."""

from __future__ import annotations

from dataclasses import dataclass

from fintrack.domain.ledger.exceptions import MissingUserIdError


@dataclass(frozen=True)
class UserContext:
    """
    Immutable context for the requesting user.

    Created once per request/command execution and passed to repositories,
    which use ``user_id`` to scope every query to the user's data.
    """

    user_id: str

    @classmethod
    def from_user_id(cls, user_id: str | None) -> UserContext:
        if user_id is None or not user_id.strip():
            raise MissingUserIdError
        return cls(user_id=user_id.strip())

    def __str__(self) -> str:
        return f"UserContext({self.user_id})"
