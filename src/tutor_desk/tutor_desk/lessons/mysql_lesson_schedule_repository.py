from __future__ import annotations

import uuid
from datetime import date
from typing import Iterable, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_date, db_cursor, fetchall, in_clause
from .model import LessonSchedule
from .repository import LessonScheduleRepository


class MySQLLessonScheduleRepository(LessonScheduleRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_lesson_dates(self, *, teacher_id: str, class_id: str, start: date, end: date) -> Sequence[date]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT lesson_date
                FROM lesson_schedules
                WHERE teacher_id=%s AND class_id=%s AND lesson_date BETWEEN %s AND %s
                """,
                (teacher_id, class_id, start, end),
            )
            return [as_date(r["lesson_date"]) for r in fetchall(cur)]

    def list_enrolled_student_ids(self, *, teacher_id: str, class_id: str) -> set[str]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT DISTINCT student_id FROM lesson_schedules WHERE teacher_id=%s AND class_id=%s",
                (teacher_id, class_id),
            )
            return {str(r["student_id"]) for r in fetchall(cur)}

    def count_students_by_class(self, *, teacher_id: str, class_ids: Sequence[str]) -> dict[str, int]:
        if not class_ids:
            return {}
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT class_id, COUNT(DISTINCT student_id) AS student_count
                FROM lesson_schedules
                WHERE teacher_id=%s AND class_id IN ({in_clause(class_ids)})
                GROUP BY class_id
                """,
                (teacher_id, *class_ids),
            )
            return {str(r["class_id"]): int(r["student_count"]) for r in fetchall(cur)}

    def list_for_student(
        self, *, teacher_id: str, class_id: str, student_id: str, start: date, end: date
    ) -> Sequence[LessonSchedule]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, class_id, student_id, lesson_date
                FROM lesson_schedules
                WHERE teacher_id=%s AND class_id=%s AND student_id=%s
                  AND lesson_date BETWEEN %s AND %s
                ORDER BY lesson_date ASC
                """,
                (teacher_id, class_id, student_id, start, end),
            )
            return [
                LessonSchedule(
                    schedule_id=str(r["id"]),
                    class_id=str(r["class_id"]),
                    student_id=str(r["student_id"]),
                    lesson_date=as_date(r["lesson_date"]),
                )
                for r in fetchall(cur)
            ]

    def add_schedules(self, *, teacher_id: str, class_id: str, student_id: str, lesson_dates: Iterable[date]) -> int:
        rows = [(str(uuid.uuid4()), teacher_id, class_id, student_id, d) for d in sorted(set(lesson_dates))]
        if not rows:
            return 0
        with db_cursor(self._conn_factory) as (_, cur):
            cur.executemany(
                """
                INSERT IGNORE INTO lesson_schedules (id, teacher_id, class_id, student_id, lesson_date)
                VALUES (%s, %s, %s, %s, %s)
                """,
                rows,
            )
            return max(cur.rowcount, 0)
