from __future__ import annotations

from ..model import AttendanceSummary
from .base import InvoiceCalculator


class SessionRateCalculator(InvoiceCalculator):
    """Standard rule: bill attended sessions only, never below 0."""

    def billable_sessions(self, summary: AttendanceSummary) -> int:
        return max(int(summary.attended_sessions), 0)
