from __future__ import annotations

from typing import Dict, List, Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, dump_json, fetchone, load_json, load_text
from .model import Timetable, empty_schedule
from .repository import TimetableRepository


class MySQLTimetableRepository(TimetableRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_student(self, student_id: str) -> Optional[Timetable]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT timetable_id, student_id, schedule_json
                FROM timetables
                WHERE student_id=%s
                """,
                (student_id,),
            )
            r = fetchone(cur)
            if not r:
                return None
            return Timetable(
                timetable_id=int(r["timetable_id"]),
                student_id=load_text(r["student_id"]),
                schedule=load_json(r.get("schedule_json"), empty_schedule()),
            )

    def upsert(self, *, student_id: str, schedule: Dict[str, List[str]]) -> Timetable:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO timetables(student_id, schedule_json)
                VALUES(%s,%s)
                ON DUPLICATE KEY UPDATE
                    timetable_id=LAST_INSERT_ID(timetable_id),
                    schedule_json=VALUES(schedule_json)
                """,
                (student_id, dump_json(schedule)),
            )
            timetable_id = int(cur.lastrowid or 0)

        return Timetable(timetable_id=timetable_id, student_id=student_id, schedule=schedule)
