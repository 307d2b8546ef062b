from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import TutorClass


class ClassRepository(Protocol):
    def list_for_teacher(self, *, teacher_id: str) -> Sequence[TutorClass]:
        """Classes ordered by name (student_count left at 0)."""

        raise NotImplementedError

    def get_by_id(self, *, teacher_id: str, class_id: str) -> Optional[TutorClass]:
        raise NotImplementedError

    def create(
        self, *, teacher_id: str, class_name: str, subject: Optional[str], hourly_rate: Optional[float]
    ) -> TutorClass:
        raise NotImplementedError

    def delete(self, *, teacher_id: str, class_id: str) -> bool:
        raise NotImplementedError

    def update(self, *, teacher_id: str, class_id: str, **fields) -> bool:
        """Update class_name and/or hourly_rate."""

        raise NotImplementedError
