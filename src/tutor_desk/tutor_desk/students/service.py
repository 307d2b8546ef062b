from __future__ import annotations

from datetime import date
from typing import Iterable, Optional, Sequence

from ..attendance.grid import EnrollmentLookup
from ..common.validators import optional_text, require_non_empty
from ..core.exceptions import ValidationError
from ..lessons.repository import LessonScheduleRepository
from ..lessons.service import LessonService
from .model import Student
from .repository import StudentRepository


class StudentService:
    def __init__(self, students: StudentRepository, schedules: LessonScheduleRepository, lessons: LessonService):
        self._students = students
        self._schedules = schedules
        self._lessons = lessons

    def list_for_teacher(self, *, teacher_id: str, ids: Optional[Iterable[str]] = None) -> Sequence[Student]:
        return self._students.list_for_teacher(teacher_id=teacher_id, ids=ids)

    def list_for_class(self, *, teacher_id: str, class_id: str) -> Sequence[Student]:
        """Students with at least one lesson planned in the class."""

        ids = self._schedules.list_enrolled_student_ids(teacher_id=teacher_id, class_id=class_id)
        if not ids:
            return []
        return self._students.list_for_teacher(teacher_id=teacher_id, ids=sorted(ids))

    def list_for_enrollment(self, *, teacher_id: str, lookup: EnrollmentLookup) -> Sequence[Student]:
        """Students the attendance grid starts from.

        A failed lookup yields every student of the teacher; the grid then shows
        them all instead of none.
        """

        if lookup.failed:
            return self._students.list_for_teacher(teacher_id=teacher_id)
        if not lookup.student_ids:
            return []
        return self._students.list_for_teacher(teacher_id=teacher_id, ids=sorted(lookup.student_ids))

    def add_student(
        self,
        *,
        teacher_id: str,
        class_id: str,
        student_name: str,
        parent_email: Optional[str],
        lesson_dates: Iterable[date],
    ) -> Student:
        """Create a student and enrol them on the class's planned dates."""

        student_name = require_non_empty(student_name, "Student name")
        parent_email = optional_text(parent_email)
        if parent_email and "@" not in parent_email:
            raise ValidationError("Parent email is not valid")

        dates = list(lesson_dates)
        if not dates:
            raise ValidationError("The class has no lesson dates to enrol on")

        student = self._students.create(teacher_id=teacher_id, student_name=student_name, parent_email=parent_email)
        self._lessons.enroll(teacher_id=teacher_id, class_id=class_id, student_id=student.student_id, lesson_dates=dates)
        return student
