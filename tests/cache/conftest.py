from __future__ import annotations

from datetime import date, datetime, time, timezone

import pytest

from hostel_leave.core.enums import LeaveStatus, LeaveType
from hostel_leave.leaves.model import LeaveRequest


@pytest.fixture
def make_cached_leave():
    def make(rid: str) -> LeaveRequest:
        ts = datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc)
        return LeaveRequest(
            id=rid,
            student_id="1",
            student_name="John Student",
            leave_type=LeaveType.EMERGENCY,
            from_date=date(2024, 1, 10),
            to_date=date(2024, 1, 11),
            from_time=time(7, 0),
            to_time=time(20, 0),
            reason="family emergency",
            status=LeaveStatus.PENDING,
            parent_approval=True,
            admin_approval=False,
            final_approval=False,
            created_at=ts,
            updated_at=ts,
        )

    return make
