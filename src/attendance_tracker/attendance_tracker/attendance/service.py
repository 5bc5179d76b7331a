from __future__ import annotations

import logging
from typing import Sequence

from ..common.validators import require_non_empty
from ..core.exceptions import MissingFieldsError, NotFoundError
from .model import AttendanceEntry, AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Use cases: full-day overwrite of a student's attendance, day lookup."""

    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def save_day(self, student_id: str, date: str, entries: Sequence[AttendanceEntry]) -> int:
        student_id = require_non_empty(student_id, "studentId")
        date = require_non_empty(date, "date")
        if entries is None:
            raise MissingFieldsError(["dailyAttendance"])

        attendance_id = self._attendance.replace_day(student_id=student_id, date=date, entries=list(entries))
        logger.info("attendance saved student=%s date=%s entries=%d", student_id, date, len(entries))
        return attendance_id

    def get_day(self, student_id: str, date: str) -> AttendanceRecord:
        record = self._attendance.get_for_student_and_date(student_id, date)
        if not record:
            raise NotFoundError("No attendance found for this date")
        return record
