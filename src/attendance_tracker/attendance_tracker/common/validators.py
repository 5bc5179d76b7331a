from __future__ import annotations

from typing import Any, Mapping

from ..core.exceptions import MissingFieldsError, ValidationError


def is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def require_fields(payload: Mapping[str, Any], *names: str, message: str = "Missing fields") -> None:
    missing = [name for name in names if is_blank(payload.get(name))]
    if missing:
        raise MissingFieldsError(missing, message)


def require_non_empty(value: Any, field_name: str) -> str:
    """Reject blank values; the value itself is returned as sent (lookup keys match exactly)."""

    if is_blank(value):
        raise MissingFieldsError([field_name])
    return value if isinstance(value, str) else str(value)


def require_int(value: Any, field_name: str) -> int:
    # bool is an int subclass; a JSON true/false is not an hour
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be an integer")
    if isinstance(value, float) and not value.is_integer():
        raise ValidationError(f"{field_name} must be an integer")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be an integer")
