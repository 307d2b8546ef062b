from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from ..classes.model import TutorClass
from ..common.datetime_utils import parse_month_label
from ..core.exceptions import RemoteOperationError, ValidationError
from ..lessons.repository import LessonScheduleRepository
from ..students.model import Student
from .cache import LessonDateCache
from .dates import DateLike, ResolvedDates, resolve_lesson_dates
from .grid import AttendanceGrid, EnrollmentLookup, filter_enrolled
from .model import SaveResult
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AttendanceView:
    """Everything the attendance page renders for one class and month."""

    tutor_class: TutorClass
    resolved: ResolvedDates
    students: list[Student]
    grid: AttendanceGrid
    enrollment: EnrollmentLookup

    def rows(self) -> list[dict]:
        iso_dates = self.resolved.iso_dates
        return [
            {
                "student": s,
                "cells": [
                    {"iso": iso, "key": AttendanceGrid.form_key(s.student_id, iso), "present": self.grid.get(s.student_id, iso)}
                    for iso in iso_dates
                ],
                "present_count": self.grid.present_count(s.student_id, iso_dates),
            }
            for s in self.students
        ]


class AttendanceService:
    def __init__(self, attendance: AttendanceRepository, schedules: LessonScheduleRepository):
        self._attendance = attendance
        self._schedules = schedules

    def lookup_enrollment(self, *, teacher_id: str, class_id: str) -> EnrollmentLookup:
        try:
            ids = self._schedules.list_enrolled_student_ids(teacher_id=teacher_id, class_id=class_id)
        except RemoteOperationError as e:
            logger.warning("Enrollment lookup failed for class %s: %s", class_id, e)
            return EnrollmentLookup.failure(str(e))
        return EnrollmentLookup.ok(ids)

    def resolve_dates(
        self,
        *,
        teacher_id: str,
        class_id: str,
        month_label: str,
        custom_dates: Optional[Iterable[DateLike]] = None,
        cache: Optional[LessonDateCache] = None,
    ) -> ResolvedDates:
        custom = list(custom_dates or ())
        if custom:
            return resolve_lesson_dates(month_label, custom_dates=custom)

        month = parse_month_label(month_label)

        schedule_dates: list = []
        try:
            schedule_dates = list(
                self._schedules.list_lesson_dates(
                    teacher_id=teacher_id, class_id=class_id, start=month.start, end=month.end
                )
            )
        except RemoteOperationError as e:
            logger.warning("Lesson date lookup failed for class %s (%s): %s", class_id, month_label, e)

        cached = None
        if not schedule_dates and cache is not None:
            cached = cache.get(class_id, month.label)

        return resolve_lesson_dates(month_label, schedule_dates=schedule_dates, cached_dates=cached)

    def load_view(
        self,
        *,
        teacher_id: str,
        tutor_class: TutorClass,
        month_label: str,
        students: Sequence[Student],
        custom_dates: Optional[Iterable[DateLike]] = None,
        cache: Optional[LessonDateCache] = None,
        enrollment: Optional[EnrollmentLookup] = None,
    ) -> AttendanceView:
        """Pass `enrollment` when the caller already looked it up to pick `students`."""

        resolved = self.resolve_dates(
            teacher_id=teacher_id,
            class_id=tutor_class.class_id,
            month_label=month_label,
            custom_dates=custom_dates,
            cache=cache,
        )
        if enrollment is None:
            enrollment = self.lookup_enrollment(teacher_id=teacher_id, class_id=tutor_class.class_id)
        entries = self._attendance.list_entries(
            teacher_id=teacher_id,
            class_id=tutor_class.class_id,
            start=resolved.month.start,
            end=resolved.month.end,
        )
        return AttendanceView(
            tutor_class=tutor_class,
            resolved=resolved,
            students=filter_enrolled(students, enrollment),
            grid=AttendanceGrid.from_entries(entries),
            enrollment=enrollment,
        )

    @staticmethod
    def build_records(students: Sequence[Student], resolved: ResolvedDates, grid: AttendanceGrid) -> list[dict]:
        """One record per student with every resolved date set explicitly."""

        iso_dates = resolved.iso_dates
        records = []
        for student in students:
            record: dict = {"student_id": student.student_id, "student_name": student.student_name}
            for iso in iso_dates:
                record[iso] = grid.get(student.student_id, iso)
            records.append(record)
        return records

    def save(
        self,
        *,
        teacher_id: str,
        tutor_class: Optional[TutorClass],
        students: Sequence[Student],
        resolved: ResolvedDates,
        grid: AttendanceGrid,
        cache: Optional[LessonDateCache] = None,
    ) -> SaveResult:
        if tutor_class is None or not tutor_class.class_id:
            raise ValidationError("Please create or select a class before saving attendance.")
        if not students:
            raise ValidationError("Add at least one student to this class to save attendance.")

        records = self.build_records(students, resolved, grid)
        updated = self._attendance.save_month(
            teacher_id=teacher_id,
            class_id=tutor_class.class_id,
            month_label=resolved.label,
            lesson_dates=list(resolved.dates),
            records=records,
        )

        if cache is not None:
            cache.put(tutor_class.class_id, resolved.label, resolved.iso_dates)

        logger.info(
            "Saved attendance for class %s (%s): %d records sent, %d entries updated",
            tutor_class.class_id,
            resolved.label,
            len(records),
            updated,
        )
        return SaveResult(updated=int(updated), month=resolved.label, sent=len(records))
