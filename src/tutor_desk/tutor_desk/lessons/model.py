from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class LessonSchedule:
    """One planned lesson of a class for one student.

    The existence of at least one row links a student to a class (enrolment).
    """

    schedule_id: str
    class_id: str
    student_id: str
    lesson_date: date
