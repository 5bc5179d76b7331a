from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from ..core.enums import Weekday


def empty_schedule() -> Dict[str, List[str]]:
    return {day.value: [] for day in Weekday}


@dataclass(frozen=True)
class Timetable:
    """Weekly class schedule of one student (monday..friday → subjects)."""

    timetable_id: int
    student_id: str
    schedule: Dict[str, List[str]] = field(default_factory=empty_schedule)

    def to_dict(self) -> dict:
        return {
            "id": self.timetable_id,
            "studentId": self.student_id,
            "timetable": {day.value: list(self.schedule.get(day.value, [])) for day in Weekday},
        }
