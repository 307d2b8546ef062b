from __future__ import annotations

from datetime import date
from typing import Mapping, Protocol, Sequence, Union

from .model import AttendanceEntry

# {"student_id": ..., "student_name": ..., "<iso date>": bool, ...}
AttendanceRecordPayload = Mapping[str, Union[str, bool]]


class AttendanceRepository(Protocol):
    def list_entries(self, *, teacher_id: str, class_id: str, start: date, end: date) -> Sequence[AttendanceEntry]:
        raise NotImplementedError

    def save_month(
        self,
        *,
        teacher_id: str,
        class_id: str,
        month_label: str,
        lesson_dates: Sequence[date],
        records: Sequence[AttendanceRecordPayload],
    ) -> int:
        """Write one attendance entry per (record, lesson date) in a single transaction.

        Missing schedule rows are created first. Returns the affected-row count the
        backend reports for the attendance upsert (an updated row counts twice).
        """

        raise NotImplementedError
