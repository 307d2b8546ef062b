from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import InvoiceStatus


@dataclass(frozen=True)
class AttendanceSummary:
    student_id: str
    attended_sessions: int
    total_sessions: int


@dataclass(frozen=True)
class InvoiceLineItem:
    description: str
    quantity: int
    unit_price: float
    total_price: float


@dataclass(frozen=True)
class Invoice:
    invoice_id: str
    invoice_number: str
    student_id: str
    total_amount: float
    invoice_date: date
    due_date: date
    status: InvoiceStatus
    notes: Optional[str] = None
    # Read-model only: joined from students for listings.
    student_name: Optional[str] = None
