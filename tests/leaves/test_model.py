from __future__ import annotations

from datetime import date, time

import pytest

from hostel_leave.core.enums import LeaveStatus, LeaveType
from hostel_leave.core.exceptions import InvalidDateRangeError, ValidationError
from hostel_leave.leaves.model import LeaveRequest, NewLeaveRequest


def test_parse_submission_defaults_times():
    req = NewLeaveRequest.parse(leave_type="home", from_date="2024-01-10", to_date="2024-01-12", reason=" trip ")

    assert req.leave_type == LeaveType.HOME
    assert req.from_date == date(2024, 1, 10)
    assert req.to_date == date(2024, 1, 12)
    assert req.from_time == time(0, 0)
    assert req.to_time == time(23, 59)
    assert req.reason == "trip"


def test_parse_submission_keeps_given_times():
    req = NewLeaveRequest.parse(
        leave_type="one-day",
        from_date="2024-01-10",
        to_date="2024-01-10",
        from_time="08:30",
        to_time="18:00",
        reason="exam",
    )

    assert req.from_time == time(8, 30)
    assert req.to_time == time(18, 0)


@pytest.mark.parametrize(
    "kwargs",
    [
        dict(leave_type="holiday", from_date="2024-01-10", to_date="2024-01-12", reason="x"),
        dict(leave_type="home", from_date="10/01/2024", to_date="2024-01-12", reason="x"),
        dict(leave_type="home", from_date="2024-01-10", to_date="2024-01-12", reason="   "),
        dict(leave_type="home", from_date="2024-01-10", to_date="2024-01-12", reason="x", from_time="9am"),
    ],
)
def test_parse_submission_rejects_bad_input(kwargs):
    with pytest.raises(ValidationError):
        NewLeaveRequest.parse(**kwargs)


def test_parse_submission_rejects_inverted_range():
    with pytest.raises(InvalidDateRangeError):
        NewLeaveRequest.parse(leave_type="home", from_date="2024-01-12", to_date="2024-01-10", reason="x")


def test_from_dict_accepts_legacy_record_without_optional_fields():
    rec = LeaveRequest.from_dict(
        {
            "id": "3",
            "studentId": "1",
            "studentName": "John Student",
            "fromDate": "2023-12-20",
            "toDate": "2023-12-25",
            "reason": "Winter holidays",
            "status": "pending",
            "createdAt": "2023-12-18T10:00:00.000Z",
            "updatedAt": "2023-12-18T10:00:00.000Z",
        }
    )

    assert rec.leave_type == LeaveType.OTHER
    assert rec.parent_approval is False
    assert rec.admin_approval is False
    assert rec.final_approval is False
    assert rec.status == LeaveStatus.PENDING
    assert rec.created_at.tzinfo is not None


def test_dict_form_survives_a_round_trip(make_leave):
    rec = make_leave(status=LeaveStatus.APPROVED, parent_approval=True, admin_approval=True, final_approval=True)

    assert LeaveRequest.from_dict(rec.to_dict()) == rec


@pytest.mark.parametrize(
    "payload",
    [
        [],
        {"studentId": "1", "fromDate": "2024-01-10", "toDate": "2024-01-12", "createdAt": "2024-01-01T00:00:00"},
        {"id": "1", "studentId": "1", "fromDate": "2024-01-10", "toDate": "2024-01-12"},
        {"id": "1", "studentId": "1", "fromDate": "2024-01-10", "toDate": "2024-01-12", "status": "maybe", "createdAt": "2024-01-01T00:00:00"},
        {"id": "1", "studentId": "1", "fromDate": "2024-01-10", "toDate": "2024-01-12", "createdAt": "yesterday"},
    ],
)
def test_from_dict_rejects_malformed_records(payload):
    with pytest.raises(ValidationError):
        LeaveRequest.from_dict(payload)
