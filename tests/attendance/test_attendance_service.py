from __future__ import annotations

from datetime import date

import pytest

from tutor_desk.attendance.cache import LessonDateCache
from tutor_desk.attendance.dates import resolve_lesson_dates
from tutor_desk.attendance.grid import AttendanceGrid, EnrollmentLookup
from tutor_desk.attendance.model import AttendanceEntry
from tutor_desk.attendance.service import AttendanceService
from tutor_desk.classes.model import TutorClass
from tutor_desk.core.enums import DateSource
from tutor_desk.core.exceptions import RemoteOperationError, ValidationError
from tutor_desk.students.model import Student


class FakeAttendanceRepo:
    def __init__(self, entries=None, error: str | None = None):
        self.entries = list(entries or [])
        self.error = error
        self.calls = []

    def list_entries(self, *, teacher_id, class_id, start, end):
        return [e for e in self.entries if start <= e.lesson_date <= end]

    def save_month(self, *, teacher_id, class_id, month_label, lesson_dates, records):
        self.calls.append(
            {"teacher_id": teacher_id, "class_id": class_id, "month_label": month_label,
             "lesson_dates": list(lesson_dates), "records": list(records)}
        )
        if self.error:
            raise RemoteOperationError(self.error)
        return len(records) * len(lesson_dates)


class FakeSchedules:
    def __init__(self, dates=None, enrolled=None, dates_error=None, enrolled_error=None):
        self.dates = list(dates or [])
        self.enrolled = set(enrolled or ())
        self.dates_error = dates_error
        self.enrolled_error = enrolled_error

    def list_lesson_dates(self, *, teacher_id, class_id, start, end):
        if self.dates_error:
            raise RemoteOperationError(self.dates_error)
        return [d for d in self.dates if start <= d <= end]

    def list_enrolled_student_ids(self, *, teacher_id, class_id):
        if self.enrolled_error:
            raise RemoteOperationError(self.enrolled_error)
        return set(self.enrolled)


TEACHER = "t1"
MATHS = TutorClass(class_id="c1", class_name="Form 2 Maths")
ANN = Student(student_id="s1", student_name="Ann")
BEN = Student(student_id="s2", student_name="Ben")


def _aug(*days):
    return resolve_lesson_dates("Aug 2025", custom_dates=[date(2025, 8, d) for d in days])


def test_save_without_class_makes_no_backend_call():
    repo = FakeAttendanceRepo()
    svc = AttendanceService(repo, FakeSchedules())

    with pytest.raises(ValidationError):
        svc.save(teacher_id=TEACHER, tutor_class=None, students=[ANN], resolved=_aug(5), grid=AttendanceGrid())

    assert repo.calls == []


def test_save_without_students_makes_no_backend_call():
    repo = FakeAttendanceRepo()
    svc = AttendanceService(repo, FakeSchedules())

    with pytest.raises(ValidationError):
        svc.save(teacher_id=TEACHER, tutor_class=MATHS, students=[], resolved=_aug(5), grid=AttendanceGrid())

    assert repo.calls == []


def test_save_sends_every_student_and_every_date():
    repo = FakeAttendanceRepo()
    svc = AttendanceService(repo, FakeSchedules())
    grid = AttendanceGrid()
    grid.set("s1", "2025-08-05", True)
    grid.set("s2", "2025-08-19", True)

    result = svc.save(
        teacher_id=TEACHER, tutor_class=MATHS, students=[ANN, BEN], resolved=_aug(5, 12, 19), grid=grid
    )

    assert len(repo.calls) == 1
    records = repo.calls[0]["records"]
    assert records == [
        {"student_id": "s1", "student_name": "Ann", "2025-08-05": True, "2025-08-12": False, "2025-08-19": False},
        {"student_id": "s2", "student_name": "Ben", "2025-08-05": False, "2025-08-12": False, "2025-08-19": True},
    ]
    assert repo.calls[0]["month_label"] == "Aug 2025"
    assert result.sent == 2
    assert result.updated == 6
    assert result.month == "Aug 2025"


def test_save_writes_cache_after_success():
    store = {}
    svc = AttendanceService(FakeAttendanceRepo(), FakeSchedules())

    svc.save(
        teacher_id=TEACHER,
        tutor_class=MATHS,
        students=[ANN],
        resolved=_aug(5, 12),
        grid=AttendanceGrid(),
        cache=LessonDateCache(store),
    )

    assert LessonDateCache(store).get("c1", "Aug 2025") == ["2025-08-05", "2025-08-12"]


def test_backend_error_propagates_and_leaves_grid_and_cache_untouched():
    store = {}
    svc = AttendanceService(FakeAttendanceRepo(error="permission denied for table attendance_records"), FakeSchedules())
    grid = AttendanceGrid()
    grid.set("s1", "2025-08-05", True)

    with pytest.raises(RemoteOperationError) as exc:
        svc.save(
            teacher_id=TEACHER,
            tutor_class=MATHS,
            students=[ANN],
            resolved=_aug(5),
            grid=grid,
            cache=LessonDateCache(store),
        )

    assert str(exc.value) == "permission denied for table attendance_records"
    assert grid.get("s1", "2025-08-05") is True
    assert len(grid) == 1
    assert store == {}


def test_resolve_dates_prefers_schedule():
    svc = AttendanceService(FakeAttendanceRepo(), FakeSchedules(dates=[date(2025, 8, 12), date(2025, 8, 5)]))

    resolved = svc.resolve_dates(teacher_id=TEACHER, class_id="c1", month_label="Aug 2025")

    assert resolved.source == DateSource.SCHEDULE
    assert resolved.iso_dates == ["2025-08-05", "2025-08-12"]


def test_resolve_dates_falls_back_to_cache_when_schedule_lookup_fails():
    store = {}
    LessonDateCache(store).put("c1", "Aug 2025", ["2025-08-07"])
    svc = AttendanceService(FakeAttendanceRepo(), FakeSchedules(dates_error="timeout"))

    resolved = svc.resolve_dates(
        teacher_id=TEACHER, class_id="c1", month_label="Aug 2025", cache=LessonDateCache(store)
    )

    assert resolved.source == DateSource.CACHE
    assert resolved.iso_dates == ["2025-08-07"]


def test_resolve_dates_full_month_when_nothing_known():
    svc = AttendanceService(FakeAttendanceRepo(), FakeSchedules())

    resolved = svc.resolve_dates(teacher_id=TEACHER, class_id="c1", month_label="Sep 2025", cache=LessonDateCache({}))

    assert resolved.source == DateSource.FULL_MONTH
    assert len(resolved) == 30


def test_load_view_filters_students_and_seeds_grid():
    entries = [AttendanceEntry(student_id="s1", lesson_date=date(2025, 8, 5), present=True)]
    svc = AttendanceService(
        FakeAttendanceRepo(entries=entries),
        FakeSchedules(dates=[date(2025, 8, 5)], enrolled={"s1"}),
    )

    view = svc.load_view(teacher_id=TEACHER, tutor_class=MATHS, month_label="Aug 2025", students=[ANN, BEN])

    assert [s.student_id for s in view.students] == ["s1"]
    assert view.grid.get("s1", "2025-08-05") is True
    rows = view.rows()
    assert rows[0]["present_count"] == 1
    assert rows[0]["cells"][0]["key"] == "s1|2025-08-05"


def test_load_view_shows_everyone_when_enrollment_lookup_fails():
    svc = AttendanceService(FakeAttendanceRepo(), FakeSchedules(enrolled_error="connection reset"))

    view = svc.load_view(teacher_id=TEACHER, tutor_class=MATHS, month_label="Aug 2025", students=[ANN, BEN])

    assert view.enrollment.failed
    assert [s.student_id for s in view.students] == ["s1", "s2"]


def test_load_view_reuses_enrollment_looked_up_by_caller():
    svc = AttendanceService(FakeAttendanceRepo(), FakeSchedules(enrolled_error="should not be queried again"))

    view = svc.load_view(
        teacher_id=TEACHER,
        tutor_class=MATHS,
        month_label="Aug 2025",
        students=[ANN, BEN],
        enrollment=EnrollmentLookup.ok({"s2"}),
    )

    assert not view.enrollment.failed
    assert [s.student_id for s in view.students] == ["s2"]
