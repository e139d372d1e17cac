from __future__ import annotations

from typing import List, Protocol

from ..core.enums import Decision
from ..identity.model import Actor
from .model import LeaveRequest, NewLeaveRequest


class LeaveStore(Protocol):
    """Request/response contract of the authoritative leave store.

    Note (DIP): the registry depends on this interface, not on HTTP or on
    the offline data source directly. Failures raise ``RemoteStoreError``.
    """

    def create(self, actor: Actor, new_request: NewLeaveRequest) -> LeaveRequest:
        raise NotImplementedError

    def list(self, actor: Actor) -> List[LeaveRequest]:
        """Records visible to ``actor`` (the store filters by role)."""

        raise NotImplementedError

    def get(self, actor: Actor, leave_id: str) -> LeaveRequest:
        raise NotImplementedError

    def update_status(self, actor: Actor, leave_id: str, decision: Decision) -> LeaveRequest:
        raise NotImplementedError
