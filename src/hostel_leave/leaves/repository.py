from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import LeaveRequest, NewLeaveRequest


class LeaveRepository(Protocol):
    """Server-side persistence for leave requests.

    Note (DIP): LeaveService depends on this interface, not on MySQL directly.
    """

    def create(self, *, student_id: str, student_name: str, new_request: NewLeaveRequest) -> LeaveRequest:
        raise NotImplementedError

    def get(self, *, leave_id: str) -> Optional[LeaveRequest]:
        raise NotImplementedError

    def list(self, *, student_id: Optional[str] = None, limit: int = 500) -> Sequence[LeaveRequest]:
        """Most recent first."""

        raise NotImplementedError

    def save_decision(self, record: LeaveRequest) -> bool:
        """Persist approvals, status and updated_at of an existing request."""

        raise NotImplementedError
