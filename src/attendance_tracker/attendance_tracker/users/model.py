from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """Domain entity: a registered account.

    Note: Plain data object (no DB access). ``password_hash`` never leaves the
    service layer; use ``to_public`` for responses.
    """

    user_id: int
    username: str
    password_hash: str

    def to_public(self) -> dict:
        return {"id": self.user_id, "username": self.username}
