from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class TutorClass:
    class_id: str
    class_name: str
    subject: Optional[str] = None
    hourly_rate: Optional[float] = None
    # Derived from lesson_schedules, not stored on the class row.
    student_count: int = 0

    def with_count(self, student_count: int) -> "TutorClass":
        return replace(self, student_count=int(student_count))
