from __future__ import annotations

import secrets
import string
from datetime import date, timedelta
from typing import Optional, Sequence

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import now_local, parse_iso_month
from ..common.validators import parse_rate, require_non_empty
from ..core.constants import DEFAULT_INVOICE_DUE_DAYS
from ..core.enums import InvoiceStatus
from ..core.exceptions import ValidationError
from ..lessons.repository import LessonScheduleRepository
from .calculator.base import InvoiceCalculator
from .calculator.session_rate_calculator import SessionRateCalculator
from .model import AttendanceSummary, Invoice, InvoiceLineItem
from .repository import InvoiceRepository

_NUMBER_ALPHABET = string.ascii_uppercase + string.digits


def new_invoice_number(today: date) -> str:
    suffix = "".join(secrets.choice(_NUMBER_ALPHABET) for _ in range(6))
    return f"INV-{today.year}-{suffix}"


class InvoiceService:
    def __init__(
        self,
        invoices: InvoiceRepository,
        schedules: LessonScheduleRepository,
        attendance: AttendanceRepository,
        *,
        calculator: Optional[InvoiceCalculator] = None,
        due_days: int = DEFAULT_INVOICE_DUE_DAYS,
    ):
        self._invoices = invoices
        self._schedules = schedules
        self._attendance = attendance
        self._calculator = calculator or SessionRateCalculator()
        self._due_days = int(due_days)

    def attendance_summary(self, *, teacher_id: str, class_id: str, student_id: str, month: str) -> AttendanceSummary:
        """Planned vs attended lessons of one student in a class for a "YYYY-MM" month."""

        class_id = require_non_empty(class_id, "Class")
        student_id = require_non_empty(student_id, "Student")
        bounds = parse_iso_month(month)

        schedules = self._schedules.list_for_student(
            teacher_id=teacher_id, class_id=class_id, student_id=student_id, start=bounds.start, end=bounds.end
        )
        if not schedules:
            return AttendanceSummary(student_id=student_id, attended_sessions=0, total_sessions=0)

        planned = {s.lesson_date for s in schedules}
        entries = self._attendance.list_entries(
            teacher_id=teacher_id, class_id=class_id, start=bounds.start, end=bounds.end
        )
        attended = sum(1 for e in entries if e.student_id == student_id and e.present and e.lesson_date in planned)
        return AttendanceSummary(student_id=student_id, attended_sessions=attended, total_sessions=len(planned))

    def generate(
        self,
        *,
        teacher_id: str,
        class_id: str,
        student_id: str,
        month: str,
        hourly_rate,
        today: Optional[date] = None,
    ) -> Invoice:
        today = today or now_local().date()
        rate = parse_rate(hourly_rate)
        summary = self.attendance_summary(teacher_id=teacher_id, class_id=class_id, student_id=student_id, month=month)
        if summary.total_sessions == 0:
            raise ValidationError(f"No lessons planned for this student in {month}")

        sessions = self._calculator.billable_sessions(summary)
        total = self._calculator.total(summary, rate)

        return self._invoices.create_with_line_item(
            teacher_id=teacher_id,
            student_id=student_id,
            invoice_number=new_invoice_number(today),
            total_amount=total,
            invoice_date=today,
            due_date=today + timedelta(days=self._due_days),
            status=InvoiceStatus.PENDING,
            notes=(
                f"Invoice for {month} — {summary.attended_sessions}/{summary.total_sessions} sessions attended"
            ),
            line_item=InvoiceLineItem(
                description=f"Tutoring sessions for {month}",
                quantity=sessions,
                unit_price=rate,
                total_price=total,
            ),
        )

    def list_for_teacher(self, *, teacher_id: str) -> Sequence[Invoice]:
        return self._invoices.list_for_teacher(teacher_id=teacher_id)

    def get(self, *, teacher_id: str, invoice_id: str) -> Invoice:
        invoice = self._invoices.get_by_id(teacher_id=teacher_id, invoice_id=require_non_empty(invoice_id, "Invoice"))
        if not invoice:
            raise ValidationError("Invoice not found")
        return invoice
