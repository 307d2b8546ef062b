from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from ..common.datetime_utils import to_iso
from ..core.constants import GRID_KEY_SEPARATOR
from ..students.model import Student
from .model import AttendanceEntry

GridKey = tuple[str, str]


class AttendanceGrid:
    """Sparse (student_id, iso_date) -> present map for one class/month view.

    Unset pairs read as absent. Keys outside the rendered dates are accepted.
    """

    def __init__(self, values: Optional[dict[GridKey, bool]] = None):
        self._values: dict[GridKey, bool] = dict(values or {})

    @staticmethod
    def form_key(student_id: str, iso_date: str) -> str:
        return f"{student_id}{GRID_KEY_SEPARATOR}{iso_date}"

    @classmethod
    def from_entries(cls, entries: Iterable[AttendanceEntry]) -> "AttendanceGrid":
        return cls({(e.student_id, to_iso(e.lesson_date)): bool(e.present) for e in entries})

    @classmethod
    def from_checked_keys(cls, keys: Iterable[str]) -> "AttendanceGrid":
        """Rebuild from submitted checkbox values ("<student_id>|<iso_date>")."""

        values: dict[GridKey, bool] = {}
        for key in keys:
            student_id, sep, iso_date = str(key).rpartition(GRID_KEY_SEPARATOR)
            if sep and student_id and iso_date:
                values[(student_id, iso_date)] = True
        return cls(values)

    def get(self, student_id: str, iso_date: str) -> bool:
        return self._values.get((student_id, iso_date), False)

    def set(self, student_id: str, iso_date: str, present: bool) -> None:
        self._values[(student_id, iso_date)] = bool(present)

    def toggle(self, student_id: str, iso_date: str) -> bool:
        value = not self.get(student_id, iso_date)
        self._values[(student_id, iso_date)] = value
        return value

    def present_count(self, student_id: str, iso_dates: Iterable[str]) -> int:
        return sum(1 for d in iso_dates if self.get(student_id, d))

    def __len__(self) -> int:
        return len(self._values)


@dataclass(frozen=True)
class EnrollmentLookup:
    """Result of fetching which students have schedule rows in a class."""

    student_ids: frozenset[str] = frozenset()
    error: Optional[str] = None

    @classmethod
    def ok(cls, student_ids: Iterable[str]) -> "EnrollmentLookup":
        return cls(student_ids=frozenset(student_ids))

    @classmethod
    def failure(cls, message: str) -> "EnrollmentLookup":
        return cls(error=message or "enrollment lookup failed")

    @property
    def failed(self) -> bool:
        return self.error is not None


def filter_enrolled(students: Sequence[Student], lookup: EnrollmentLookup) -> list[Student]:
    if lookup.failed:
        # Fail open: keep the grid usable when membership is unknown.
        return list(students)
    if not lookup.student_ids:
        return []
    return [s for s in students if s.student_id in lookup.student_ids]
