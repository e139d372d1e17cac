from __future__ import annotations

from datetime import date, datetime, time, timedelta, timezone

import pytest

from hostel_leave.cache.mysql_cache import MySQLLocalCache
from hostel_leave.core.enums import LeaveStatus, LeaveType
from hostel_leave.database.mysql_base import normalize_mysql_time
from hostel_leave.leaves.mysql_leave_repository import MySQLLeaveRepository


class FakeCursor:
    def __init__(self, rows):
        self._rows = list(rows)
        self.executed = []
        self.rowcount = 1
        self.lastrowid = 1

    def execute(self, sql, params=None):
        self.executed.append((" ".join(sql.split()), params))

    def fetchone(self):
        return self._rows.pop(0) if self._rows else None

    def fetchall(self):
        rows, self._rows = self._rows, []
        return rows

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


class FakeConnFactory:
    def __init__(self, rows=()):
        self.cursor = FakeCursor(rows)
        self.conn = FakeConnection(self.cursor)

    def connect(self, *, with_database=True):
        return self.conn


def test_mysql_cache_reads_and_upserts():
    factory = FakeConnFactory([{"cache_value": "[]"}])
    cache = MySQLLocalCache(factory)

    assert cache.get("leaveRequests") == "[]"
    cache.set("leaveRequests", "[1]")

    sql, params = factory.cursor.executed[-1]
    assert "ON DUPLICATE KEY UPDATE" in sql
    assert params == ("leaveRequests", "[1]")
    assert factory.conn.committed is True


def test_mysql_cache_missing_key_is_none():
    assert MySQLLocalCache(FakeConnFactory()).get("leaveRequests") is None


def test_mysql_repository_maps_rows():
    row = {
        "leave_id": 12,
        "student_id": "1",
        "student_name": "John Student",
        "leave_type": "medical",
        "from_date": date(2024, 1, 10),
        "to_date": date(2024, 1, 12),
        "from_time": timedelta(hours=8, minutes=30),
        "to_time": "18:00:00",
        "reason": "checkup",
        "status": "pending",
        "parent_approval": 1,
        "admin_approval": 0,
        "final_approval": 0,
        "created_at": datetime(2024, 1, 1, 9, 0),
        "updated_at": datetime(2024, 1, 2, 9, 0),
    }
    repo = MySQLLeaveRepository(FakeConnFactory([row]))

    record = repo.get(leave_id="12")

    assert record.id == "12"
    assert record.leave_type == LeaveType.MEDICAL
    assert record.status == LeaveStatus.PENDING
    assert record.from_time == time(8, 30)
    assert record.to_time == time(18, 0)
    assert record.parent_approval is True
    assert record.created_at.tzinfo == timezone.utc


def test_mysql_repository_ignores_non_numeric_ids():
    factory = FakeConnFactory()

    assert MySQLLeaveRepository(factory).get(leave_id="abc") is None
    assert factory.cursor.executed == []


@pytest.mark.parametrize(
    "value, expected",
    [(None, None), (time(7, 5), time(7, 5)), (timedelta(hours=25), time(1, 0)), ("09:15:00", time(9, 15))],
)
def test_normalize_mysql_time(value, expected):
    assert normalize_mysql_time(value) == expected
