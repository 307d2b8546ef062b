from __future__ import annotations

from typing import Optional

from ..common.validators import optional_text, parse_optional_rate, require_non_empty
from ..core.exceptions import ValidationError
from ..lessons.repository import LessonScheduleRepository
from .model import TutorClass
from .repository import ClassRepository


class ClassService:
    def __init__(self, classes: ClassRepository, schedules: LessonScheduleRepository):
        self._classes = classes
        self._schedules = schedules

    def list_for_teacher(self, *, teacher_id: str) -> list[TutorClass]:
        classes = self._classes.list_for_teacher(teacher_id=teacher_id)
        counts = self._schedules.count_students_by_class(
            teacher_id=teacher_id, class_ids=[c.class_id for c in classes]
        )
        return [c.with_count(counts.get(c.class_id, 0)) for c in classes]

    def get(self, *, teacher_id: str, class_id: str) -> TutorClass:
        class_id = require_non_empty(class_id, "Class")
        tutor_class = self._classes.get_by_id(teacher_id=teacher_id, class_id=class_id)
        if not tutor_class:
            raise ValidationError("Class not found")
        return tutor_class

    def create(
        self, *, teacher_id: str, class_name: str, subject: Optional[str] = None, hourly_rate=None
    ) -> TutorClass:
        class_name = require_non_empty(class_name, "Class name")
        return self._classes.create(
            teacher_id=teacher_id,
            class_name=class_name,
            subject=optional_text(subject),
            hourly_rate=parse_optional_rate(hourly_rate),
        )

    def delete(self, *, teacher_id: str, class_id: str) -> None:
        if not self._classes.delete(teacher_id=teacher_id, class_id=class_id):
            raise ValidationError("Class could not be deleted")

    def rename(self, *, teacher_id: str, class_id: str, current_name: str, new_name: Optional[str]) -> bool:
        """Returns False when nothing changed."""

        new_name = (new_name or "").strip()
        if not new_name or new_name == current_name:
            return False
        if not self._classes.update(teacher_id=teacher_id, class_id=class_id, class_name=new_name):
            raise ValidationError("Could not update name")
        return True

    def update_rate(self, *, teacher_id: str, class_id: str, hourly_rate) -> Optional[float]:
        """Blank input clears the rate."""

        rate = parse_optional_rate(hourly_rate)
        if not self._classes.update(teacher_id=teacher_id, class_id=class_id, hourly_rate=rate):
            raise ValidationError("Could not update rate")
        return rate
