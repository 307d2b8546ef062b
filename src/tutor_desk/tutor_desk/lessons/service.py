from __future__ import annotations

from datetime import date
from typing import Iterable

from ..common.validators import require_non_empty
from ..core.exceptions import ValidationError
from .repository import LessonScheduleRepository


class LessonService:
    """Use case: enrol a student in a class by planning their lessons."""

    def __init__(self, schedules: LessonScheduleRepository):
        self._schedules = schedules

    def enroll(self, *, teacher_id: str, class_id: str, student_id: str, lesson_dates: Iterable[date]) -> int:
        class_id = require_non_empty(class_id, "Class")
        student_id = require_non_empty(student_id, "Student")

        dates = sorted(set(lesson_dates))
        if not dates:
            raise ValidationError("Pick at least one lesson date to enrol the student")

        return self._schedules.add_schedules(
            teacher_id=teacher_id,
            class_id=class_id,
            student_id=student_id,
            lesson_dates=dates,
        )
