from __future__ import annotations

from typing import Dict, List, Optional, Protocol

from .model import Timetable


class TimetableRepository(Protocol):
    def get_for_student(self, student_id: str) -> Optional[Timetable]:
        raise NotImplementedError

    def upsert(self, *, student_id: str, schedule: Dict[str, List[str]]) -> Timetable:
        """Create or replace the timetable of a student.

        Returns the stored timetable.
        """

        raise NotImplementedError
