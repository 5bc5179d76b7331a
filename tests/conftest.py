from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple

import pytest

from src.attendance_tracker.attendance_tracker.attendance.model import AttendanceEntry, AttendanceRecord
from src.attendance_tracker.attendance_tracker.container import assemble
from src.attendance_tracker.attendance_tracker.core.exceptions import DuplicateUsernameError
from src.attendance_tracker.attendance_tracker.main import create_app
from src.attendance_tracker.attendance_tracker.timetables.model import Timetable
from src.attendance_tracker.attendance_tracker.users.model import User

FAST_HASH = "pbkdf2:sha256:1000"


class InMemoryUsers:
    def __init__(self):
        self._by_username: Dict[str, User] = {}
        self._id = 0

    def get_by_username(self, username: str) -> Optional[User]:
        return self._by_username.get(username)

    def create_user(self, *, username: str, password_hash: str) -> User:
        if username in self._by_username:
            raise DuplicateUsernameError("Username already exists")
        self._id += 1
        user = User(user_id=self._id, username=username, password_hash=password_hash)
        self._by_username[username] = user
        return user


class InMemoryAttendance:
    def __init__(self):
        self._by_key: Dict[Tuple[str, str], AttendanceRecord] = {}
        self._id = 0

    def get_for_student_and_date(self, student_id: str, date: str) -> Optional[AttendanceRecord]:
        return self._by_key.get((student_id, date))

    def replace_day(self, *, student_id: str, date: str, entries: Sequence[AttendanceEntry]) -> int:
        existing = self._by_key.get((student_id, date))
        if existing:
            attendance_id = existing.attendance_id
        else:
            self._id += 1
            attendance_id = self._id
        self._by_key[(student_id, date)] = AttendanceRecord(
            attendance_id=attendance_id,
            student_id=student_id,
            date=date,
            entries=tuple(entries),
        )
        return attendance_id

    def list_for_student(self, student_id: str) -> List[AttendanceRecord]:
        items = [r for r in self._by_key.values() if r.student_id == student_id]
        items.sort(key=lambda r: r.attendance_id)
        return items


class InMemoryTimetables:
    def __init__(self):
        self._by_student: Dict[str, Timetable] = {}
        self._id = 0

    def get_for_student(self, student_id: str) -> Optional[Timetable]:
        return self._by_student.get(student_id)

    def upsert(self, *, student_id: str, schedule) -> Timetable:
        existing = self._by_student.get(student_id)
        if existing:
            timetable_id = existing.timetable_id
        else:
            self._id += 1
            timetable_id = self._id
        timetable = Timetable(timetable_id=timetable_id, student_id=student_id, schedule=dict(schedule))
        self._by_student[student_id] = timetable
        return timetable


@pytest.fixture
def users_repo():
    return InMemoryUsers()


@pytest.fixture
def attendance_repo():
    return InMemoryAttendance()


@pytest.fixture
def timetables_repo():
    return InMemoryTimetables()


@pytest.fixture
def container(users_repo, attendance_repo, timetables_repo):
    return assemble(
        users_repo=users_repo,
        attendance_repo=attendance_repo,
        timetables_repo=timetables_repo,
        hash_method=FAST_HASH,
    )


@pytest.fixture
def app(monkeypatch, container):
    monkeypatch.setenv("APP_ENV", "testing")
    return create_app(container)


@pytest.fixture
def client(app):
    return app.test_client()
