from __future__ import annotations

from datetime import datetime
from typing import Optional

from ..common.datetime_utils import now_local
from ..common.validators import optional_text, parse_amount
from ..core.enums import InvoiceStatus, PaymentMethod, PaymentStatus
from ..core.exceptions import ValidationError
from ..invoices.service import InvoiceService
from ..invoices.repository import InvoiceRepository
from ..students.repository import StudentRepository
from .model import PaymentOutcome
from .repository import PaymentRepository


class PaymentService:
    """Use case: record a payment against an invoice.

    Side effects, in order: payment row, invoice status, student payment status.
    Each step is its own backend call; a failure stops the sequence.
    """

    def __init__(
        self,
        payments: PaymentRepository,
        invoices: InvoiceRepository,
        students: StudentRepository,
        invoice_service: InvoiceService,
    ):
        self._payments = payments
        self._invoices = invoices
        self._students = students
        self._invoice_service = invoice_service

    def record_payment(
        self,
        *,
        teacher_id: str,
        invoice_id: str,
        amount,
        method: str,
        notes: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> PaymentOutcome:
        now = now or now_local()
        amount = parse_amount(amount, "Payment amount")
        try:
            payment_method = PaymentMethod(method or PaymentMethod.CASH.value)
        except ValueError:
            raise ValidationError("Unknown payment method") from None

        invoice = self._invoice_service.get(teacher_id=teacher_id, invoice_id=invoice_id)

        payment = self._payments.create(
            invoice_id=invoice.invoice_id,
            student_id=invoice.student_id,
            amount=amount,
            payment_method=payment_method,
            payment_reference=f"PAY-{int(now.timestamp() * 1000)}",
            notes=optional_text(notes),
        )

        invoice_status = InvoiceStatus.PAID if amount >= invoice.total_amount else InvoiceStatus.PARTIAL
        self._invoices.update_status(teacher_id=teacher_id, invoice_id=invoice.invoice_id, status=invoice_status)

        student_status = PaymentStatus.PAID if invoice_status == InvoiceStatus.PAID else PaymentStatus.PENDING
        self._students.update_payment_status(
            teacher_id=teacher_id,
            student_id=invoice.student_id,
            payment_status=student_status,
            last_payment_date=now.date(),
            invoice_amount=invoice.total_amount,
        )

        return PaymentOutcome(payment=payment, invoice_status=invoice_status, student_status=student_status)
