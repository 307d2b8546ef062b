from __future__ import annotations

import uuid
from datetime import date
from typing import Iterable, Optional, Sequence

from ..core.enums import PaymentStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_date, as_money, db_cursor, fetchall, fetchone, in_clause
from .model import Student
from .repository import StudentRepository

_COLUMNS = "id, student_name, parent_email, payment_status, last_payment_date, invoice_amount"


def _to_student(row: dict) -> Student:
    status = row.get("payment_status")
    return Student(
        student_id=str(row["id"]),
        student_name=row["student_name"],
        parent_email=row.get("parent_email") or None,
        payment_status=PaymentStatus(status) if status else None,
        last_payment_date=as_date(row.get("last_payment_date")),
        invoice_amount=as_money(row.get("invoice_amount")),
    )


class MySQLStudentRepository(StudentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_teacher(self, *, teacher_id: str, ids: Optional[Iterable[str]] = None) -> Sequence[Student]:
        clauses = ["teacher_id=%s"]
        params: list[object] = [teacher_id]
        if ids is not None:
            ids = list(ids)
            if not ids:
                return []
            clauses.append(f"id IN ({in_clause(ids)})")
            params.extend(ids)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM students WHERE {' AND '.join(clauses)} ORDER BY student_name ASC",
                tuple(params),
            )
            return [_to_student(r) for r in fetchall(cur)]

    def get_by_id(self, *, teacher_id: str, student_id: str) -> Optional[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM students WHERE id=%s AND teacher_id=%s",
                (student_id, teacher_id),
            )
            row = fetchone(cur)
            return _to_student(row) if row else None

    def create(self, *, teacher_id: str, student_name: str, parent_email: Optional[str] = None) -> Student:
        student_id = str(uuid.uuid4())
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO students (id, teacher_id, student_name, parent_email) VALUES (%s, %s, %s, %s)",
                (student_id, teacher_id, student_name, parent_email),
            )
        return Student(student_id=student_id, student_name=student_name, parent_email=parent_email)

    def update_payment_status(
        self,
        *,
        teacher_id: str,
        student_id: str,
        payment_status: PaymentStatus,
        last_payment_date: date,
        invoice_amount: float,
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE students
                SET payment_status=%s, last_payment_date=%s, invoice_amount=%s
                WHERE id=%s AND teacher_id=%s
                """,
                (payment_status.value, last_payment_date, invoice_amount, student_id, teacher_id),
            )
            return cur.rowcount > 0
