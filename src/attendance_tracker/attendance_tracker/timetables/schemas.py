from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping

from ..common.validators import require_fields
from ..core.enums import Weekday
from ..core.exceptions import ValidationError


def normalize_schedule(raw: Any) -> Dict[str, List[str]]:
    """Keep the five weekdays only; a missing day becomes an empty list."""

    if not isinstance(raw, Mapping):
        raise ValidationError("timetable must be an object")

    schedule: Dict[str, List[str]] = {}
    for day in Weekday:
        subjects = raw.get(day.value)
        if subjects is None:
            schedule[day.value] = []
            continue
        if not isinstance(subjects, list):
            raise ValidationError(f"timetable.{day.value} must be a list")
        schedule[day.value] = ["" if s is None else str(s) for s in subjects]
    return schedule


@dataclass(frozen=True)
class SaveTimetableRequest:
    """Body of POST /timetable."""

    student_id: str
    schedule: Dict[str, List[str]]

    @classmethod
    def from_json(cls, payload: Mapping[str, Any]) -> "SaveTimetableRequest":
        require_fields(payload, "studentId", "timetable", message="Missing data")
        return cls(
            student_id=str(payload["studentId"]),
            schedule=normalize_schedule(payload["timetable"]),
        )
