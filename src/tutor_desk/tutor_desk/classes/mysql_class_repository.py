from __future__ import annotations

import uuid
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_money, db_cursor, fetchall, fetchone
from .model import TutorClass
from .repository import ClassRepository

_UPDATABLE = ("class_name", "hourly_rate")


def _to_class(row: dict) -> TutorClass:
    return TutorClass(
        class_id=str(row["id"]),
        class_name=row["class_name"],
        subject=row.get("subject") or None,
        hourly_rate=as_money(row.get("hourly_rate")),
    )


class MySQLClassRepository(ClassRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_teacher(self, *, teacher_id: str) -> Sequence[TutorClass]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, class_name, subject, hourly_rate
                FROM classes
                WHERE teacher_id=%s
                ORDER BY class_name ASC
                """,
                (teacher_id,),
            )
            return [_to_class(r) for r in fetchall(cur)]

    def get_by_id(self, *, teacher_id: str, class_id: str) -> Optional[TutorClass]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT id, class_name, subject, hourly_rate FROM classes WHERE id=%s AND teacher_id=%s",
                (class_id, teacher_id),
            )
            row = fetchone(cur)
            return _to_class(row) if row else None

    def create(
        self, *, teacher_id: str, class_name: str, subject: Optional[str], hourly_rate: Optional[float]
    ) -> TutorClass:
        class_id = str(uuid.uuid4())
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO classes (id, teacher_id, class_name, subject, hourly_rate)
                VALUES (%s, %s, %s, %s, %s)
                """,
                (class_id, teacher_id, class_name, subject, hourly_rate),
            )
        return TutorClass(class_id=class_id, class_name=class_name, subject=subject, hourly_rate=hourly_rate)

    def delete(self, *, teacher_id: str, class_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM classes WHERE id=%s AND teacher_id=%s", (class_id, teacher_id))
            return cur.rowcount > 0

    def update(self, *, teacher_id: str, class_id: str, **fields) -> bool:
        unknown = set(fields) - set(_UPDATABLE)
        if unknown:
            raise ValueError(f"Cannot update class fields: {sorted(unknown)}")
        if not fields:
            return False

        assignments = ", ".join(f"{name}=%s" for name in fields)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"UPDATE classes SET {assignments} WHERE id=%s AND teacher_id=%s",
                (*fields.values(), class_id, teacher_id),
            )
            return cur.rowcount > 0
