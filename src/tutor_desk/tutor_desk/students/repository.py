from __future__ import annotations

from datetime import date
from typing import Iterable, Optional, Protocol, Sequence

from ..core.enums import PaymentStatus
from .model import Student


class StudentRepository(Protocol):
    """Repository interface for Student.

    Note (DIP): services depend on this interface, not on a concrete database.
    """

    def list_for_teacher(self, *, teacher_id: str, ids: Optional[Iterable[str]] = None) -> Sequence[Student]:
        """Students owned by the teacher ordered by name; `ids` narrows the result."""

        raise NotImplementedError

    def get_by_id(self, *, teacher_id: str, student_id: str) -> Optional[Student]:
        raise NotImplementedError

    def create(self, *, teacher_id: str, student_name: str, parent_email: Optional[str] = None) -> Student:
        raise NotImplementedError

    def update_payment_status(
        self,
        *,
        teacher_id: str,
        student_id: str,
        payment_status: PaymentStatus,
        last_payment_date: date,
        invoice_amount: float,
    ) -> bool:
        raise NotImplementedError
