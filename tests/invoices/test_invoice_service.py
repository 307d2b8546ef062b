from __future__ import annotations

import re
from dataclasses import replace
from datetime import date

import pytest

from tutor_desk.attendance.model import AttendanceEntry
from tutor_desk.core.enums import InvoiceStatus
from tutor_desk.core.exceptions import ParseError, ValidationError
from tutor_desk.invoices.calculator.session_rate_calculator import SessionRateCalculator
from tutor_desk.invoices.model import AttendanceSummary, Invoice
from tutor_desk.invoices.service import InvoiceService, new_invoice_number
from tutor_desk.lessons.model import LessonSchedule


class InMemoryInvoices:
    def __init__(self):
        self.items: dict[str, Invoice] = {}
        self.line_items = {}

    def create_with_line_item(
        self, *, teacher_id, student_id, invoice_number, total_amount, invoice_date, due_date, status, notes, line_item
    ):
        invoice = Invoice(
            invoice_id=f"i{len(self.items) + 1}",
            invoice_number=invoice_number,
            student_id=student_id,
            total_amount=total_amount,
            invoice_date=invoice_date,
            due_date=due_date,
            status=status,
            notes=notes,
        )
        self.items[invoice.invoice_id] = invoice
        self.line_items[invoice.invoice_id] = line_item
        return invoice

    def get_by_id(self, *, teacher_id, invoice_id):
        return self.items.get(invoice_id)

    def list_for_teacher(self, *, teacher_id):
        return list(self.items.values())

    def update_status(self, *, teacher_id, invoice_id, status):
        self.items[invoice_id] = replace(self.items[invoice_id], status=status)
        return True


class FakeSchedules:
    def __init__(self, dates):
        self.dates = dates

    def list_for_student(self, *, teacher_id, class_id, student_id, start, end):
        return [
            LessonSchedule(schedule_id=f"l{i}", class_id=class_id, student_id=student_id, lesson_date=d)
            for i, d in enumerate(self.dates)
            if start <= d <= end
        ]


class FakeAttendance:
    def __init__(self, entries):
        self.entries = entries

    def list_entries(self, *, teacher_id, class_id, start, end):
        return [e for e in self.entries if start <= e.lesson_date <= end]


AUG = [date(2025, 8, 5), date(2025, 8, 12), date(2025, 8, 19), date(2025, 8, 26)]


def _service(dates=AUG, entries=None):
    if entries is None:
        entries = [
            AttendanceEntry(student_id="s1", lesson_date=date(2025, 8, 5), present=True),
            AttendanceEntry(student_id="s1", lesson_date=date(2025, 8, 12), present=True),
            AttendanceEntry(student_id="s1", lesson_date=date(2025, 8, 19), present=False),
            AttendanceEntry(student_id="s1", lesson_date=date(2025, 8, 26), present=True),
            AttendanceEntry(student_id="s2", lesson_date=date(2025, 8, 5), present=True),
        ]
    invoices = InMemoryInvoices()
    return InvoiceService(invoices, FakeSchedules(dates), FakeAttendance(entries)), invoices


def test_attendance_summary_counts_only_this_student():
    svc, _ = _service()

    summary = svc.attendance_summary(teacher_id="t1", class_id="c1", student_id="s1", month="2025-08")

    assert summary == AttendanceSummary(student_id="s1", attended_sessions=3, total_sessions=4)


def test_generate_bills_attended_sessions():
    svc, invoices = _service()

    invoice = svc.generate(
        teacher_id="t1", class_id="c1", student_id="s1", month="2025-08", hourly_rate="50", today=date(2025, 9, 1)
    )

    assert invoice.total_amount == 150.0
    assert invoice.status == InvoiceStatus.PENDING
    assert invoice.invoice_date == date(2025, 9, 1)
    assert invoice.due_date == date(2025, 10, 1)
    assert invoice.notes == "Invoice for 2025-08 — 3/4 sessions attended"
    assert re.fullmatch(r"INV-2025-[A-Z0-9]{6}", invoice.invoice_number)
    line = invoices.line_items[invoice.invoice_id]
    assert (line.quantity, line.unit_price, line.total_price) == (3, 50.0, 150.0)


def test_generate_rejects_month_without_lessons():
    svc, invoices = _service(dates=[])

    with pytest.raises(ValidationError):
        svc.generate(teacher_id="t1", class_id="c1", student_id="s1", month="2025-08", hourly_rate="50")

    assert invoices.items == {}


def test_generate_rejects_bad_rate():
    svc, _ = _service()

    with pytest.raises(ParseError):
        svc.generate(teacher_id="t1", class_id="c1", student_id="s1", month="2025-08", hourly_rate="lots")


def test_due_days_are_configurable():
    invoices = InMemoryInvoices()
    svc = InvoiceService(invoices, FakeSchedules(AUG), FakeAttendance([]), due_days=14)

    invoice = svc.generate(
        teacher_id="t1", class_id="c1", student_id="s1", month="2025-08", hourly_rate="50", today=date(2025, 9, 1)
    )

    assert invoice.due_date == date(2025, 9, 15)
    assert invoice.total_amount == 0.0


def test_session_rate_calculator_rounds_to_cents():
    summary = AttendanceSummary(student_id="s1", attended_sessions=3, total_sessions=4)

    assert SessionRateCalculator().total(summary, 33.333) == 100.0


def test_invoice_number_format():
    assert new_invoice_number(date(2026, 1, 2)).startswith("INV-2026-")


def test_get_unknown_invoice():
    svc, _ = _service()

    with pytest.raises(ValidationError, match="Invoice not found"):
        svc.get(teacher_id="t1", invoice_id="missing")
