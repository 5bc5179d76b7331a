from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Status of one teaching hour, stored exactly as clients send it."""

    PRESENT = "Present"
    ABSENT = "Absent"


class Weekday(str, Enum):
    """Days covered by a weekly timetable."""

    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
