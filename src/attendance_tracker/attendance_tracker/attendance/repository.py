from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import AttendanceEntry, AttendanceRecord


class AttendanceRepository(Protocol):
    def get_for_student_and_date(self, student_id: str, date: str) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def replace_day(self, *, student_id: str, date: str, entries: Sequence[AttendanceEntry]) -> int:
        """Store ``entries`` as the whole day for (student_id, date).

        Any previous entries of that day are discarded in the same statement.
        Returns attendance_id.
        """

        raise NotImplementedError

    def list_for_student(self, student_id: str) -> Sequence[AttendanceRecord]:
        raise NotImplementedError
