from __future__ import annotations

import pytest
import requests

from hostel_leave.core.enums import Decision, LeaveStatus
from hostel_leave.core.exceptions import RemoteStoreError
from hostel_leave.leaves.http_store import HttpLeaveStore
from hostel_leave.leaves.model import NewLeaveRequest


class FakeResponse:
    def __init__(self, status_code, payload=None, text=""):
        self.status_code = status_code
        self._payload = payload
        self.text = text

    def json(self):
        if self._payload is None:
            raise ValueError("no json")
        return self._payload


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def request(self, method, url, *, json=None, headers=None, timeout=None):
        self.calls.append({"method": method, "url": url, "json": json, "headers": headers, "timeout": timeout})
        if self.error:
            raise self.error
        return self.response


def _store(session, **kwargs):
    return HttpLeaveStore("http://api.test/api/", session=session, connect_timeout=2, read_timeout=7, **kwargs)


def test_create_posts_payload_with_actor_headers(student, make_leave):
    session = FakeSession(FakeResponse(201, make_leave("42").to_dict()))
    new_request = NewLeaveRequest.parse(leave_type="home", from_date="2024-01-10", to_date="2024-01-12", reason="trip")

    created = _store(session, token="abc").create(student, new_request)

    call = session.calls[0]
    assert created.id == "42"
    assert call["method"] == "POST"
    assert call["url"] == "http://api.test/api/leave"
    assert call["json"] == {
        "leaveType": "home",
        "fromDate": "2024-01-10",
        "toDate": "2024-01-12",
        "fromTime": "00:00",
        "toTime": "23:59",
        "reason": "trip",
    }
    assert call["headers"]["Authorization"] == "Bearer abc"
    assert call["headers"]["X-Actor-Id"] == student.id
    assert call["headers"]["X-Actor-Role"] == "student"
    assert call["timeout"] == (2.0, 7.0)


def test_list_parses_records(parent, make_leave):
    session = FakeSession(FakeResponse(200, [make_leave("1").to_dict(), make_leave("2").to_dict()]))

    records = _store(session).list(parent)

    assert [r.id for r in records] == ["1", "2"]
    assert "Authorization" not in session.calls[0]["headers"]


def test_update_status_sends_decision(admin, make_leave):
    rejected = make_leave("5", status=LeaveStatus.REJECTED)
    session = FakeSession(FakeResponse(200, rejected.to_dict()))

    record = _store(session).update_status(admin, "5", Decision.REJECTED)

    assert record == rejected
    assert session.calls[0]["method"] == "PUT"
    assert session.calls[0]["url"] == "http://api.test/api/leave/5"
    assert session.calls[0]["json"] == {"status": "rejected"}


def test_get_fetches_single_record(admin, make_leave):
    session = FakeSession(FakeResponse(200, make_leave("5").to_dict()))

    assert _store(session).get(admin, "5").id == "5"
    assert session.calls[0]["url"] == "http://api.test/api/leave/5"


def test_connection_error_becomes_remote_store_error(student):
    session = FakeSession(error=requests.ConnectionError("refused"))

    with pytest.raises(RemoteStoreError):
        _store(session).list(student)


def test_http_error_carries_status_code(parent):
    session = FakeSession(FakeResponse(403, {"error": "nope"}))

    with pytest.raises(RemoteStoreError) as excinfo:
        _store(session).update_status(parent, "1", Decision.APPROVED)

    assert excinfo.value.status_code == 403
    assert "nope" in str(excinfo.value)


@pytest.mark.parametrize(
    "response",
    [
        FakeResponse(200, {"items": []}),
        FakeResponse(200, None, text="<html>"),
        FakeResponse(200, [{"id": "1"}]),
    ],
)
def test_unusable_list_bodies_are_remote_errors(student, response):
    with pytest.raises(RemoteStoreError):
        _store(FakeSession(response)).list(student)
