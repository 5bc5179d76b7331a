from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, dump_json, fetchall, fetchone, load_json, load_text
from .model import AttendanceEntry, AttendanceRecord
from .repository import AttendanceRepository


def _row_to_record(r: Dict[str, Any]) -> AttendanceRecord:
    entries = tuple(
        AttendanceEntry(
            hour=int(e["hour"]),
            subject=e.get("subject") or "",
            status=AttendanceStatus(e.get("status") or AttendanceStatus.ABSENT.value),
        )
        for e in load_json(r.get("entries_json"), [])
    )
    return AttendanceRecord(
        attendance_id=int(r["attendance_id"]),
        student_id=load_text(r["student_id"]),
        date=load_text(r["work_date"]),
        entries=entries,
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_student_and_date(self, student_id: str, date: str) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT attendance_id, student_id, work_date, entries_json
                FROM attendance_records
                WHERE student_id=%s AND work_date=%s
                """,
                (student_id, date),
            )
            r = fetchone(cur)
            return _row_to_record(r) if r else None

    def replace_day(self, *, student_id: str, date: str, entries: Sequence[AttendanceEntry]) -> int:
        payload = dump_json([e.to_dict() for e in entries])
        with db_cursor(self._conn_factory) as (_, cur):
            # LAST_INSERT_ID(expr) makes lastrowid the existing id on update.
            cur.execute(
                """
                INSERT INTO attendance_records(student_id, work_date, entries_json)
                VALUES(%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    attendance_id=LAST_INSERT_ID(attendance_id),
                    entries_json=VALUES(entries_json)
                """,
                (student_id, date, payload),
            )
            return int(cur.lastrowid or 0)

    def list_for_student(self, student_id: str) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT attendance_id, student_id, work_date, entries_json
                FROM attendance_records
                WHERE student_id=%s
                ORDER BY attendance_id ASC
                """,
                (student_id,),
            )
            return [_row_to_record(r) for r in fetchall(cur)]
