from __future__ import annotations

from typing import Optional, Protocol

from ..core.enums import PaymentMethod
from .model import Payment


class PaymentRepository(Protocol):
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
        raise NotImplementedError
