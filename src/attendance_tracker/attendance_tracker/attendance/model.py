from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceEntry:
    """One teaching hour of a day."""

    hour: int
    subject: str = ""
    status: AttendanceStatus = AttendanceStatus.ABSENT

    def to_dict(self) -> dict:
        return {"hour": self.hour, "subject": self.subject, "status": self.status.value}


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: all entries of one student for one calendar day."""

    attendance_id: int
    student_id: str
    date: str
    entries: Tuple[AttendanceEntry, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            "id": self.attendance_id,
            "studentId": self.student_id,
            "date": self.date,
            "dailyAttendance": [e.to_dict() for e in self.entries],
        }
