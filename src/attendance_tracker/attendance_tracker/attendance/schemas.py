from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Tuple

from ..common.validators import require_fields, require_int
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from .model import AttendanceEntry


def parse_entry(raw: Any, position: int) -> AttendanceEntry:
    if not isinstance(raw, Mapping):
        raise ValidationError(f"dailyAttendance[{position}] must be an object")

    hour = require_int(raw.get("hour"), f"dailyAttendance[{position}].hour")

    subject = raw.get("subject")
    subject = "" if subject is None else str(subject)

    status_raw = raw.get("status")
    if status_raw is None or status_raw == "":
        status = AttendanceStatus.ABSENT
    else:
        try:
            status = AttendanceStatus(status_raw)
        except ValueError:
            allowed = ", ".join(s.value for s in AttendanceStatus)
            raise ValidationError(f"dailyAttendance[{position}].status must be one of: {allowed}")

    return AttendanceEntry(hour=hour, subject=subject, status=status)


@dataclass(frozen=True)
class MarkAttendanceRequest:
    """Body of POST /mark-attendance."""

    student_id: str
    date: str
    entries: Tuple[AttendanceEntry, ...]

    @classmethod
    def from_json(cls, payload: Mapping[str, Any]) -> "MarkAttendanceRequest":
        # An empty dailyAttendance list is accepted: it clears the day.
        require_fields(payload, "studentId", "date", "dailyAttendance")

        raw_entries = payload["dailyAttendance"]
        if not isinstance(raw_entries, list):
            raise ValidationError("dailyAttendance must be a list")

        return cls(
            student_id=str(payload["studentId"]),
            date=str(payload["date"]),
            entries=tuple(parse_entry(raw, i) for i, raw in enumerate(raw_entries)),
        )
