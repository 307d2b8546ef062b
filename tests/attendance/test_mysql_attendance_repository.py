from __future__ import annotations

from datetime import date

from tutor_desk.attendance.mysql_attendance_repository import MySQLAttendanceRepository


class FakeCursor:
    def __init__(self, schedule_rows, upsert_rowcount):
        self._schedule_rows = schedule_rows
        self._upsert_rowcount = upsert_rowcount
        self._result = []
        self.rowcount = -1
        self.upserts = []

    def execute(self, sql, params=None):
        self._result = list(self._schedule_rows) if "FROM lesson_schedules" in sql else []

    def executemany(self, sql, rows):
        rows = list(rows)
        if "attendance_records" in sql:
            self.upserts.extend(rows)
            self.rowcount = self._upsert_rowcount
        else:
            self.rowcount = 0

    def fetchall(self):
        return self._result

    def close(self):
        pass


class FakeConnection:
    def __init__(self, cursor):
        self._cursor = cursor
        self.committed = False

    def cursor(self, dictionary=False):
        return self._cursor

    def commit(self):
        self.committed = True

    def rollback(self):
        pass

    def close(self):
        pass


class FakeConnectionFactory:
    def __init__(self, conn):
        self._conn = conn

    def connect(self, *, with_database=True):
        return self._conn


SCHEDULES = [
    {"id": "ls1", "student_id": "s1", "lesson_date": date(2025, 8, 5)},
    {"id": "ls2", "student_id": "s1", "lesson_date": date(2025, 8, 12)},
]


def _save(conn):
    repo = MySQLAttendanceRepository(FakeConnectionFactory(conn))
    return repo.save_month(
        teacher_id="t1",
        class_id="c1",
        month_label="Aug 2025",
        lesson_dates=[date(2025, 8, 5), date(2025, 8, 12)],
        records=[{"student_id": "s1", "student_name": "Ann", "2025-08-05": True, "2025-08-12": False}],
    )


def test_save_month_returns_backend_affected_rows():
    # one new row (1) plus one changed row (2)
    cursor = FakeCursor(SCHEDULES, upsert_rowcount=3)
    conn = FakeConnection(cursor)

    updated = _save(conn)

    assert updated == 3
    assert len(cursor.upserts) == 2
    assert sorted((r[1], r[2]) for r in cursor.upserts) == [("ls1", 1), ("ls2", 0)]
    assert conn.committed


def test_save_month_without_schedule_rows_writes_nothing():
    cursor = FakeCursor([], upsert_rowcount=5)

    assert _save(FakeConnection(cursor)) == 0
    assert cursor.upserts == []
