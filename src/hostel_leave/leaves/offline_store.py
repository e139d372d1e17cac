"""Offline data source with the same contract as the remote store.

Selected by configuration (``LEAVE_DATA_SOURCE=offline``) for demos and for
working without a backend. Decisions go through the shared state machine.
"""

from __future__ import annotations

import itertools
from datetime import datetime, time, timedelta
from typing import Callable, Dict, Iterable, List, Optional

from ..common.datetime_utils import now_utc, parse_iso_date
from ..core.enums import Decision, LeaveStatus, LeaveType
from ..core.exceptions import ForbiddenError, RemoteStoreError
from ..identity.model import Actor
from .model import LeaveRequest, NewLeaveRequest
from .policy import can_submit, visible_to
from .state_machine import apply_decision
from .store import LeaveStore


def demo_requests(now: datetime) -> List[LeaveRequest]:
    def make(rid, from_date, to_date, reason, status, parent, admin, created_days, updated_days, leave_type):
        return LeaveRequest(
            id=rid,
            student_id="1",
            student_name="John Student",
            leave_type=leave_type,
            from_date=parse_iso_date(from_date),
            to_date=parse_iso_date(to_date),
            from_time=time(0, 0),
            to_time=time(23, 59),
            reason=reason,
            status=status,
            parent_approval=parent,
            admin_approval=admin,
            final_approval=status == LeaveStatus.APPROVED,
            created_at=now - timedelta(days=created_days),
            updated_at=now - timedelta(days=updated_days),
        )

    return [
        make("1", "2023-10-12", "2023-10-15", "Family function", LeaveStatus.APPROVED, True, True, 7, 5, LeaveType.HOME),
        make("2", "2023-11-05", "2023-11-07", "Medical appointment", LeaveStatus.REJECTED, False, False, 14, 13, LeaveType.MEDICAL),
        make("3", "2023-12-20", "2023-12-25", "Winter holidays", LeaveStatus.PENDING, False, False, 2, 2, LeaveType.HOME),
    ]


class OfflineLeaveStore(LeaveStore):
    def __init__(
        self,
        records: Optional[Iterable[LeaveRequest]] = None,
        *,
        clock: Callable[[], datetime] = now_utc,
    ):
        self._clock = clock
        seed = list(records) if records is not None else demo_requests(clock())
        self._records: Dict[str, LeaveRequest] = {r.id: r for r in seed}
        numeric_ids = [int(rid) for rid in self._records if rid.isdigit()]
        self._ids = itertools.count(max(numeric_ids, default=0) + 1)

    def _find(self, leave_id: str) -> LeaveRequest:
        record = self._records.get(str(leave_id))
        if record is None:
            raise RemoteStoreError(f"Leave request {leave_id} not found", status_code=404)
        return record

    def create(self, actor: Actor, new_request: NewLeaveRequest) -> LeaveRequest:
        if not can_submit(actor):
            raise RemoteStoreError("Only students can submit leave requests", status_code=403)
        now = self._clock()
        record = LeaveRequest(
            id=str(next(self._ids)),
            student_id=actor.id,
            student_name=actor.name,
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
            created_at=now,
            updated_at=now,
        )
        self._records[record.id] = record
        return record

    def list(self, actor: Actor) -> List[LeaveRequest]:
        records = sorted(self._records.values(), key=lambda r: r.created_at, reverse=True)
        return visible_to(actor, records)

    def get(self, actor: Actor, leave_id: str) -> LeaveRequest:
        record = self._find(leave_id)
        if not visible_to(actor, [record]):
            raise RemoteStoreError(f"Leave request {leave_id} not found", status_code=404)
        return record

    def update_status(self, actor: Actor, leave_id: str, decision: Decision) -> LeaveRequest:
        record = self._find(leave_id)
        try:
            updated = apply_decision(record, role=actor.role, decision=decision, now=self._clock())
        except ForbiddenError as exc:
            raise RemoteStoreError(str(exc), status_code=403) from exc
        self._records[updated.id] = updated
        return updated
