from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional


def _as_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


@dataclass(frozen=True)
class CredentialsRequest:
    """Body of POST /register and POST /login."""

    username: Optional[str]
    password: Optional[str]

    @classmethod
    def from_json(cls, payload: Mapping[str, Any]) -> "CredentialsRequest":
        return cls(
            username=_as_text(payload.get("username")),
            password=_as_text(payload.get("password")),
        )
