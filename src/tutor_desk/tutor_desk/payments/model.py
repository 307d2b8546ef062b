from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import InvoiceStatus, PaymentMethod, PaymentStatus


@dataclass(frozen=True)
class Payment:
    payment_id: str
    invoice_id: str
    student_id: str
    amount: float
    payment_method: PaymentMethod
    payment_reference: str
    notes: Optional[str] = None


@dataclass(frozen=True)
class PaymentOutcome:
    payment: Payment
    invoice_status: InvoiceStatus
    student_status: PaymentStatus
