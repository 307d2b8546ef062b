from __future__ import annotations

from datetime import date
from typing import Iterable, Protocol, Sequence

from .model import LessonSchedule


class LessonScheduleRepository(Protocol):
    def list_lesson_dates(self, *, teacher_id: str, class_id: str, start: date, end: date) -> Sequence[date]:
        """Lesson dates of the class within [start, end]; may contain duplicates."""

        raise NotImplementedError

    def list_enrolled_student_ids(self, *, teacher_id: str, class_id: str) -> set[str]:
        raise NotImplementedError

    def count_students_by_class(self, *, teacher_id: str, class_ids: Sequence[str]) -> dict[str, int]:
        """Distinct enrolled students per class id."""

        raise NotImplementedError

    def list_for_student(
        self, *, teacher_id: str, class_id: str, student_id: str, start: date, end: date
    ) -> Sequence[LessonSchedule]:
        raise NotImplementedError

    def add_schedules(self, *, teacher_id: str, class_id: str, student_id: str, lesson_dates: Iterable[date]) -> int:
        """Insert missing rows, ignore existing ones. Returns rows inserted."""

        raise NotImplementedError
