from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class AttendanceEntry:
    """Persisted presence of one student on one lesson date.

    At most one entry exists per (student, date); a missing entry means absent.
    """

    student_id: str
    lesson_date: date
    present: bool


@dataclass(frozen=True)
class SaveResult:
    # Rows the backend wrote; not required to equal `sent`.
    updated: int
    month: str
    sent: int
