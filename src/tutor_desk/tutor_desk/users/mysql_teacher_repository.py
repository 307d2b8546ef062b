from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import Teacher
from .repository import TeacherRepository


class MySQLTeacherRepository(TeacherRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_email(self, email: str) -> Optional[Teacher]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT id, email, full_name, password_hash, is_active FROM teachers WHERE email=%s",
                (email,),
            )
            row = fetchone(cur)
            if not row:
                return None
            return Teacher(
                teacher_id=str(row["id"]),
                email=row["email"],
                full_name=row["full_name"],
                password_hash=row["password_hash"],
                is_active=bool(row.get("is_active", True)),
            )
