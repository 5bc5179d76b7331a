from __future__ import annotations

from typing import Dict, List

from ..attendance.repository import AttendanceRepository
from ..core.enums import AttendanceStatus
from .model import SubjectReport


class AttendanceReportService:
    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def build_report(self, student_id: str) -> List[SubjectReport]:
        """Per-subject totals over the student's whole attendance history.

        Subjects appear in the order they are first met; entries without a
        subject are ignored.
        """

        records = self._attendance.list_for_student(student_id)

        totals: Dict[str, int] = {}
        present: Dict[str, int] = {}

        for record in records:
            for entry in record.entries:
                if not entry.subject:
                    continue
                totals[entry.subject] = totals.get(entry.subject, 0) + 1
                present.setdefault(entry.subject, 0)
                if entry.status == AttendanceStatus.PRESENT:
                    present[entry.subject] += 1

        return [SubjectReport(subject=s, total=t, present=present[s]) for s, t in totals.items()]
