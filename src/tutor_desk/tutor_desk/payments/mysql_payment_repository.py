from __future__ import annotations

import uuid
from typing import Optional

from ..core.enums import PaymentMethod
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor
from .model import Payment
from .repository import PaymentRepository


class MySQLPaymentRepository(PaymentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(
        self,
        *,
        invoice_id: str,
        student_id: str,
        amount: float,
        payment_method: PaymentMethod,
        payment_reference: str,
        notes: Optional[str],
    ) -> Payment:
        payment_id = str(uuid.uuid4())
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO payments (id, invoice_id, student_id, amount, payment_method, payment_reference, notes)
                VALUES (%s, %s, %s, %s, %s, %s, %s)
                """,
                (payment_id, invoice_id, student_id, amount, payment_method.value, payment_reference, notes),
            )
        return Payment(
            payment_id=payment_id,
            invoice_id=invoice_id,
            student_id=student_id,
            amount=amount,
            payment_method=payment_method,
            payment_reference=payment_reference,
            notes=notes,
        )
