from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import InvoiceStatus
from .model import Invoice, InvoiceLineItem


class InvoiceRepository(Protocol):
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
        """Insert the invoice and its line item atomically."""

        raise NotImplementedError

    def get_by_id(self, *, teacher_id: str, invoice_id: str) -> Optional[Invoice]:
        raise NotImplementedError

    def list_for_teacher(self, *, teacher_id: str) -> Sequence[Invoice]:
        """Newest first, with student_name filled in."""

        raise NotImplementedError

    def update_status(self, *, teacher_id: str, invoice_id: str, status: InvoiceStatus) -> bool:
        raise NotImplementedError
