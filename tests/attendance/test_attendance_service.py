from __future__ import annotations

import pytest

from src.attendance_tracker.attendance_tracker.attendance.model import AttendanceEntry
from src.attendance_tracker.attendance_tracker.attendance.schemas import MarkAttendanceRequest
from src.attendance_tracker.attendance_tracker.attendance.service import AttendanceService
from src.attendance_tracker.attendance_tracker.core.enums import AttendanceStatus
from src.attendance_tracker.attendance_tracker.core.exceptions import (
    MissingFieldsError,
    NotFoundError,
    ValidationError,
)


def test_second_save_replaces_whole_day(attendance_repo):
    svc = AttendanceService(attendance_repo)
    first = [
        AttendanceEntry(hour=1, subject="Math", status=AttendanceStatus.PRESENT),
        AttendanceEntry(hour=2, subject="Physics", status=AttendanceStatus.PRESENT),
    ]
    second = [AttendanceEntry(hour=3, subject="Chemistry", status=AttendanceStatus.ABSENT)]

    first_id = svc.save_day("s1", "2024-03-01", first)
    second_id = svc.save_day("s1", "2024-03-01", second)

    record = svc.get_day("s1", "2024-03-01")
    assert record.entries == tuple(second)
    assert first_id == second_id
    assert len(attendance_repo.list_for_student("s1")) == 1


def test_days_of_other_students_are_untouched(attendance_repo):
    svc = AttendanceService(attendance_repo)
    svc.save_day("s1", "2024-03-01", [AttendanceEntry(hour=1, subject="Math")])
    svc.save_day("s2", "2024-03-01", [])

    assert svc.get_day("s1", "2024-03-01").entries[0].subject == "Math"
    assert svc.get_day("s2", "2024-03-01").entries == ()


def test_get_day_missing_raises_not_found(attendance_repo):
    svc = AttendanceService(attendance_repo)

    with pytest.raises(NotFoundError):
        svc.get_day("s1", "2024-03-01")


def test_save_day_requires_keys(attendance_repo):
    svc = AttendanceService(attendance_repo)

    with pytest.raises(MissingFieldsError):
        svc.save_day("", "2024-03-01", [])
    with pytest.raises(MissingFieldsError):
        svc.save_day("s1", "2024-03-01", None)


def test_request_parses_entries_with_default_status():
    req = MarkAttendanceRequest.from_json(
        {
            "studentId": 42,
            "date": "2024-03-01",
            "dailyAttendance": [
                {"hour": 1, "subject": "Math", "status": "Present"},
                {"hour": "2", "subject": "Biology"},
                {"hour": 3},
            ],
        }
    )

    assert req.student_id == "42"
    assert req.entries == (
        AttendanceEntry(hour=1, subject="Math", status=AttendanceStatus.PRESENT),
        AttendanceEntry(hour=2, subject="Biology", status=AttendanceStatus.ABSENT),
        AttendanceEntry(hour=3, subject="", status=AttendanceStatus.ABSENT),
    )


@pytest.mark.parametrize(
    "payload",
    [
        {"date": "2024-03-01", "dailyAttendance": []},
        {"studentId": "s1", "dailyAttendance": []},
        {"studentId": "s1", "date": "2024-03-01"},
        {"studentId": "s1", "date": "  ", "dailyAttendance": []},
    ],
)
def test_request_missing_fields(payload):
    with pytest.raises(MissingFieldsError):
        MarkAttendanceRequest.from_json(payload)


@pytest.mark.parametrize(
    "daily",
    [
        "not-a-list",
        ["not-an-object"],
        [{"hour": "first", "subject": "Math"}],
        [{"hour": True, "subject": "Math"}],
        [{"hour": 1.7, "subject": "Math"}],
        [{"hour": "1.7", "subject": "Math"}],
        [{"hour": 1, "subject": "Math", "status": "Late"}],
    ],
)
def test_request_rejects_malformed_entries(daily):
    with pytest.raises(ValidationError):
        MarkAttendanceRequest.from_json({"studentId": "s1", "date": "2024-03-01", "dailyAttendance": daily})


def test_request_keeps_keys_and_subject_as_sent():
    req = MarkAttendanceRequest.from_json(
        {
            "studentId": "S1 ",
            "date": "2024-03-01",
            "dailyAttendance": [{"hour": 2.0, "subject": "Math "}, {"hour": 3, "subject": " "}],
        }
    )

    assert req.student_id == "S1 "
    assert req.entries == (
        AttendanceEntry(hour=2, subject="Math "),
        AttendanceEntry(hour=3, subject=" "),
    )
