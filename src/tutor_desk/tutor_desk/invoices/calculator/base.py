from __future__ import annotations

from abc import ABC, abstractmethod

from ..model import AttendanceSummary


class InvoiceCalculator(ABC):
    """Calculator interface (Strategy Pattern for billing)."""

    @abstractmethod
    def billable_sessions(self, summary: AttendanceSummary) -> int:
        raise NotImplementedError

    def total(self, summary: AttendanceSummary, rate: float) -> float:
        return round(self.billable_sessions(summary) * float(rate), 2)
