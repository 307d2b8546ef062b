from __future__ import annotations

import uuid
from datetime import date
from typing import Sequence

from ..common.datetime_utils import to_iso
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_date, db_cursor, fetchall, in_clause
from .model import AttendanceEntry
from .repository import AttendanceRecordPayload, AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_entries(self, *, teacher_id: str, class_id: str, start: date, end: date) -> Sequence[AttendanceEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT ls.student_id, ls.lesson_date, ar.attended
                FROM attendance_records ar
                JOIN lesson_schedules ls ON ls.id = ar.lesson_schedule_id
                WHERE ls.teacher_id=%s AND ls.class_id=%s AND ls.lesson_date BETWEEN %s AND %s
                """,
                (teacher_id, class_id, start, end),
            )
            return [
                AttendanceEntry(
                    student_id=str(r["student_id"]),
                    lesson_date=as_date(r["lesson_date"]),
                    present=bool(r["attended"]),
                )
                for r in fetchall(cur)
            ]

    def save_month(
        self,
        *,
        teacher_id: str,
        class_id: str,
        month_label: str,
        lesson_dates: Sequence[date],
        records: Sequence[AttendanceRecordPayload],
    ) -> int:
        if not records or not lesson_dates:
            return 0

        student_ids = [str(r["student_id"]) for r in records]
        dates = sorted(set(lesson_dates))

        with db_cursor(self._conn_factory) as (_, cur):
            cur.executemany(
                """
                INSERT IGNORE INTO lesson_schedules (id, teacher_id, class_id, student_id, lesson_date)
                VALUES (%s, %s, %s, %s, %s)
                """,
                [(str(uuid.uuid4()), teacher_id, class_id, sid, d) for sid in student_ids for d in dates],
            )

            cur.execute(
                f"""
                SELECT id, student_id, lesson_date
                FROM lesson_schedules
                WHERE teacher_id=%s AND class_id=%s
                  AND student_id IN ({in_clause(student_ids)})
                  AND lesson_date IN ({in_clause(dates)})
                """,
                (teacher_id, class_id, *student_ids, *dates),
            )
            schedule_ids = {
                (str(r["student_id"]), to_iso(as_date(r["lesson_date"]))): str(r["id"]) for r in fetchall(cur)
            }

            rows = []
            for record in records:
                sid = str(record["student_id"])
                for d in dates:
                    iso = to_iso(d)
                    schedule_id = schedule_ids.get((sid, iso))
                    if schedule_id:
                        rows.append((str(uuid.uuid4()), schedule_id, 1 if record.get(iso) else 0))

            if rows:
                cur.executemany(
                    """
                    INSERT INTO attendance_records (id, lesson_schedule_id, attended)
                    VALUES (%s, %s, %s)
                    ON DUPLICATE KEY UPDATE attended=VALUES(attended)
                    """,
                    rows,
                )
                return max(cur.rowcount, 0)
            return 0
