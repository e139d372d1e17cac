from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime, time, timezone
from typing import Optional

import pytest

from hostel_leave.core.enums import LeaveStatus, LeaveType
from hostel_leave.leaves.model import LeaveRequest, NewLeaveRequest


def make_request(rid: str = "1", *, student_id: str = "1", status: LeaveStatus = LeaveStatus.PENDING, **overrides) -> LeaveRequest:
    created = datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc)
    record = LeaveRequest(
        id=rid,
        student_id=student_id,
        student_name="John Student",
        leave_type=LeaveType.HOME,
        from_date=date(2024, 1, 10),
        to_date=date(2024, 1, 12),
        from_time=time(0, 0),
        to_time=time(23, 59),
        reason="trip",
        status=status,
        parent_approval=False,
        admin_approval=False,
        final_approval=False,
        created_at=created,
        updated_at=created,
    )
    return replace(record, **overrides)


class InMemoryLeaves:
    """LeaveRepository fake keeping rows in insertion order."""

    def __init__(self, now: datetime):
        self._now = now
        self._next_id = 1
        self.rows: dict[str, LeaveRequest] = {}

    def create(self, *, student_id: str, student_name: str, new_request: NewLeaveRequest) -> LeaveRequest:
        rid = str(self._next_id)
        self._next_id += 1
        record = LeaveRequest(
            id=rid,
            student_id=student_id,
            student_name=student_name,
            leave_type=new_request.leave_type,
            from_date=new_request.from_date,
            to_date=new_request.to_date,
            from_time=new_request.from_time,
            to_time=new_request.to_time,
            reason=new_request.reason,
            status=LeaveStatus.PENDING,
            parent_approval=False,
            admin_approval=False,
            final_approval=False,
            created_at=self._now,
            updated_at=self._now,
        )
        self.rows[rid] = record
        return record

    def get(self, *, leave_id: str) -> Optional[LeaveRequest]:
        return self.rows.get(str(leave_id))

    def list(self, *, student_id=None, limit=500):
        items = [r for r in reversed(list(self.rows.values())) if student_id is None or r.student_id == student_id]
        return items[:limit]

    def save_decision(self, record: LeaveRequest) -> bool:
        if record.id not in self.rows:
            return False
        self.rows[record.id] = record
        return True


@pytest.fixture
def leaves_repo(fixed_now) -> InMemoryLeaves:
    return InMemoryLeaves(fixed_now)


@pytest.fixture
def make_leave():
    return make_request
