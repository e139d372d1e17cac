from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Mapping, Optional

from ..cache.local_cache import LocalCache
from ..common.validators import require_choice
from ..core.constants import LEAVE_CACHE_KEY
from ..core.enums import Decision, LeaveStatus
from ..core.exceptions import (
    DegradedModeError,
    ForbiddenError,
    NotFoundError,
    RemoteStoreError,
    SubmissionFailedError,
    UnauthenticatedError,
    UpdateFailedError,
)
from ..identity.model import Actor
from ..identity.provider import IdentityProvider
from .model import LeaveRequest, NewLeaveRequest
from .policy import can_submit
from .reconciliation import SyncResult, dedupe_by_id, reconcile, write_through
from .state_machine import DECIDING_ROLES
from .store import LeaveStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LeaveSummary:
    total: int
    pending: int
    approved: int
    rejected: int

    @property
    def approval_rate(self) -> int:
        """Approved share of decided requests, in whole percent."""
        decided = self.approved + self.rejected
        return round(100 * self.approved / (decided or 1))


class LeaveRegistry:
    """In-memory set of leave requests for one session.

    The store is authoritative for writes; the local cache receives a full
    copy of the collection after every accepted change and serves reads when
    the store is unreachable.
    """

    def __init__(
        self,
        store: LeaveStore,
        cache: LocalCache,
        identity: IdentityProvider,
        *,
        cache_key: str = LEAVE_CACHE_KEY,
    ):
        self._store = store
        self._cache = cache
        self._identity = identity
        self._cache_key = cache_key
        self._records: List[LeaveRequest] = []
        self._last_error: Optional[DegradedModeError] = None

    # -------- Synchronisation --------
    @property
    def degraded(self) -> bool:
        return self._last_error is not None

    @property
    def last_error(self) -> Optional[DegradedModeError]:
        return self._last_error

    def synchronize(self) -> SyncResult:
        result = reconcile(self._identity.current_actor(), self._store, self._cache, key=self._cache_key)
        self._records = list(result.records)
        self._last_error = result.error
        return result

    def on_actor_changed(self) -> SyncResult:
        return self.synchronize()

    def _adopt(self, records: List[LeaveRequest]) -> None:
        self._records = dedupe_by_id(records)
        write_through(self._cache, self._cache_key, self._records)

    # -------- Commands --------
    def submit(self, actor: Optional[Actor], data: Mapping) -> LeaveRequest:
        if actor is None:
            raise UnauthenticatedError("You must be signed in to submit a leave request")
        if not can_submit(actor):
            raise ForbiddenError("Only students can submit leave requests")

        new_request = NewLeaveRequest.from_payload(data)
        try:
            created = self._store.create(actor, new_request)
        except RemoteStoreError as exc:
            raise SubmissionFailedError(f"Leave request was not submitted: {exc}") from exc

        self._adopt([created] + self._records)
        logger.info("Leave request %s submitted by %s", created.id, actor.id)
        return created

    def decide(self, actor: Optional[Actor], leave_id: str, decision: Decision | str) -> LeaveRequest:
        if actor is None:
            raise UnauthenticatedError("You must be signed in to decide on a leave request")
        if actor.role not in DECIDING_ROLES:
            raise ForbiddenError("Only parents and admins can decide on leave requests")
        decision = require_choice(decision, Decision, "decision")
        if self.get(leave_id) is None:
            raise NotFoundError(f"Leave request {leave_id} not found")

        try:
            confirmed = self._store.update_status(actor, str(leave_id), decision)
        except RemoteStoreError as exc:
            raise UpdateFailedError(f"Leave request {leave_id} was not updated: {exc}") from exc

        self._adopt([confirmed if r.id == confirmed.id else r for r in self._records])
        logger.info(
            "Leave request %s %s by %s (%s), status now %s",
            confirmed.id,
            decision.value,
            actor.id,
            actor.role.value,
            confirmed.status.value,
        )
        return confirmed

    def approve(self, actor: Optional[Actor], leave_id: str) -> LeaveRequest:
        return self.decide(actor, leave_id, Decision.APPROVED)

    def reject(self, actor: Optional[Actor], leave_id: str) -> LeaveRequest:
        return self.decide(actor, leave_id, Decision.REJECTED)

    # -------- Queries --------
    def all(self) -> List[LeaveRequest]:
        return list(self._records)

    def get(self, leave_id: str) -> Optional[LeaveRequest]:
        for record in self._records:
            if record.id == str(leave_id):
                return record
        return None

    def by_student(self, student_id: str) -> List[LeaveRequest]:
        return [r for r in self._records if r.student_id == str(student_id)]

    def by_status(self, status: LeaveStatus | str) -> List[LeaveRequest]:
        status = require_choice(status, LeaveStatus, "status")
        return [r for r in self._records if r.status == status]

    def pending(self) -> List[LeaveRequest]:
        return self.by_status(LeaveStatus.PENDING)

    def summary(self) -> LeaveSummary:
        return LeaveSummary(
            total=len(self._records),
            pending=len(self.by_status(LeaveStatus.PENDING)),
            approved=len(self.by_status(LeaveStatus.APPROVED)),
            rejected=len(self.by_status(LeaveStatus.REJECTED)),
        )
