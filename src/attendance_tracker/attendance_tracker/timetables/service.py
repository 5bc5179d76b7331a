from __future__ import annotations

import logging
from typing import Dict, List, Optional

from ..common.validators import require_non_empty
from ..core.exceptions import MissingFieldsError
from .model import Timetable
from .repository import TimetableRepository
from .schemas import normalize_schedule

logger = logging.getLogger(__name__)


class TimetableService:
    def __init__(self, timetables: TimetableRepository):
        self._timetables = timetables

    def save(self, student_id: str, schedule: Optional[Dict[str, List[str]]]) -> Timetable:
        student_id = require_non_empty(student_id, "studentId")
        if schedule is None:
            raise MissingFieldsError(["timetable"], "Missing data")

        timetable = self._timetables.upsert(student_id=student_id, schedule=normalize_schedule(schedule))
        logger.info("timetable saved student=%s", student_id)
        return timetable

    def get_for_student(self, student_id: str) -> Optional[Timetable]:
        """Return the timetable or None; having none set is not an error."""

        return self._timetables.get_for_student(student_id)
