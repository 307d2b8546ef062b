from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import PaymentStatus


@dataclass(frozen=True)
class Student:
    """Domain entity: a student owned by one teacher.

    Note: Plain data object (no DB access code). Enrolment in a class is not a
    field here; it is derived from lesson_schedules rows.
    """

    student_id: str
    student_name: str
    parent_email: Optional[str] = None
    payment_status: Optional[PaymentStatus] = None
    last_payment_date: Optional[date] = None
    invoice_amount: Optional[float] = None
