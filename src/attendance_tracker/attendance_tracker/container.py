from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .database.connection import DBConfig, DatabaseConnection
from .reports.service import AttendanceReportService
from .timetables.mysql_timetable_repository import MySQLTimetableRepository
from .timetables.repository import TimetableRepository
from .timetables.service import TimetableService
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import AuthService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    users_repo: UserRepository
    attendance_repo: AttendanceRepository
    timetables_repo: TimetableRepository

    auth_service: AuthService
    attendance_service: AttendanceService
    timetable_service: TimetableService
    report_service: AttendanceReportService


def assemble(
    *,
    users_repo: UserRepository,
    attendance_repo: AttendanceRepository,
    timetables_repo: TimetableRepository,
    conn: Optional[DatabaseConnection] = None,
    hash_method: Optional[str] = None,
) -> Container:
    return Container(
        conn=conn,
        users_repo=users_repo,
        attendance_repo=attendance_repo,
        timetables_repo=timetables_repo,
        auth_service=AuthService(users_repo, hash_method=hash_method),
        attendance_service=AttendanceService(attendance_repo),
        timetable_service=TimetableService(timetables_repo),
        report_service=AttendanceReportService(attendance_repo),
    )


def build_container(*, db_config: dict, hash_method: Optional[str] = None) -> Container:
    conn = DatabaseConnection(DBConfig.from_dict(db_config))

    return assemble(
        users_repo=MySQLUserRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        timetables_repo=MySQLTimetableRepository(conn),
        conn=conn,
        hash_method=hash_method,
    )
