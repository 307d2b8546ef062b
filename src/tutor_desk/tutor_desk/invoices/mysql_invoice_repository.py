from __future__ import annotations

import uuid
from datetime import date
from typing import Optional, Sequence

from ..core.enums import InvoiceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_date, as_money, db_cursor, fetchall, fetchone
from .model import Invoice, InvoiceLineItem
from .repository import InvoiceRepository

_SELECT = """
    SELECT i.id, i.invoice_number, i.student_id, i.total_amount, i.invoice_date,
           i.due_date, i.status, i.notes, s.student_name
    FROM invoices i
    JOIN students s ON s.id = i.student_id
"""


def _to_invoice(row: dict) -> Invoice:
    return Invoice(
        invoice_id=str(row["id"]),
        invoice_number=row["invoice_number"],
        student_id=str(row["student_id"]),
        total_amount=as_money(row["total_amount"]) or 0.0,
        invoice_date=as_date(row["invoice_date"]),
        due_date=as_date(row["due_date"]),
        status=InvoiceStatus(row["status"]),
        notes=row.get("notes"),
        student_name=row.get("student_name"),
    )


class MySQLInvoiceRepository(InvoiceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create_with_line_item(
        self,
        *,
        teacher_id: str,
        student_id: str,
        invoice_number: str,
        total_amount: float,
        invoice_date: date,
        due_date: date,
        status: InvoiceStatus,
        notes: Optional[str],
        line_item: InvoiceLineItem,
    ) -> Invoice:
        invoice_id = str(uuid.uuid4())
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO invoices
                    (id, teacher_id, student_id, invoice_number, total_amount, invoice_date, due_date, status, notes)
                VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s)
                """,
                (
                    invoice_id,
                    teacher_id,
                    student_id,
                    invoice_number,
                    total_amount,
                    invoice_date,
                    due_date,
                    status.value,
                    notes,
                ),
            )
            cur.execute(
                """
                INSERT INTO invoice_line_items (id, invoice_id, description, quantity, unit_price, total_price)
                VALUES (%s, %s, %s, %s, %s, %s)
                """,
                (
                    str(uuid.uuid4()),
                    invoice_id,
                    line_item.description,
                    line_item.quantity,
                    line_item.unit_price,
                    line_item.total_price,
                ),
            )

        return Invoice(
            invoice_id=invoice_id,
            invoice_number=invoice_number,
            student_id=student_id,
            total_amount=total_amount,
            invoice_date=invoice_date,
            due_date=due_date,
            status=status,
            notes=notes,
        )

    def get_by_id(self, *, teacher_id: str, invoice_id: str) -> Optional[Invoice]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE i.id=%s AND i.teacher_id=%s", (invoice_id, teacher_id))
            row = fetchone(cur)
            return _to_invoice(row) if row else None

    def list_for_teacher(self, *, teacher_id: str) -> Sequence[Invoice]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                _SELECT + " WHERE i.teacher_id=%s ORDER BY i.invoice_date DESC, i.invoice_number DESC",
                (teacher_id,),
            )
            return [_to_invoice(r) for r in fetchall(cur)]

    def update_status(self, *, teacher_id: str, invoice_id: str, status: InvoiceStatus) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE invoices SET status=%s WHERE id=%s AND teacher_id=%s",
                (status.value, invoice_id, teacher_id),
            )
            return cur.rowcount > 0
