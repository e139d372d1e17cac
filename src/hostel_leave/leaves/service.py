from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Callable, List, Mapping, Optional

from ..common.datetime_utils import now_utc
from ..common.validators import require_choice
from ..core.constants import DEFAULT_LIST_LIMIT
from ..core.enums import Decision, Role
from ..core.exceptions import ForbiddenError, NotFoundError, UnauthenticatedError, ValidationError
from ..identity.model import Actor
from .model import LeaveRequest, NewLeaveRequest
from .policy import can_submit, visible_to
from .repository import LeaveRepository
from .state_machine import apply_decision

logger = logging.getLogger(__name__)


class LeaveService:
    """Server-side rules behind ``/leave``."""

    def __init__(self, leaves: LeaveRepository, *, clock: Callable[[], datetime] = now_utc):
        self._leaves = leaves
        self._clock = clock

    @staticmethod
    def _require_actor(actor: Optional[Actor]) -> Actor:
        if actor is None:
            raise UnauthenticatedError("Missing actor identity")
        return actor

    def create(self, *, actor: Optional[Actor], payload: Mapping[str, Any]) -> LeaveRequest:
        actor = self._require_actor(actor)
        if not can_submit(actor):
            raise ForbiddenError("Only students can submit leave requests")

        new_request = NewLeaveRequest.from_payload(payload)
        record = self._leaves.create(student_id=actor.id, student_name=actor.name, new_request=new_request)
        logger.info("Created leave request %s for student %s", record.id, actor.id)
        return record

    def list_for(self, *, actor: Optional[Actor]) -> List[LeaveRequest]:
        actor = self._require_actor(actor)
        student_id = actor.id if actor.role == Role.STUDENT else None
        return visible_to(actor, self._leaves.list(student_id=student_id, limit=DEFAULT_LIST_LIMIT))

    def get(self, *, actor: Optional[Actor], leave_id: str) -> LeaveRequest:
        actor = self._require_actor(actor)
        record = self._leaves.get(leave_id=str(leave_id))
        if record is None or not visible_to(actor, [record]):
            raise NotFoundError(f"Leave request {leave_id} not found")
        return record

    def decide(self, *, actor: Optional[Actor], leave_id: str, status: str) -> LeaveRequest:
        actor = self._require_actor(actor)
        decision = require_choice(status, Decision, "status")

        record = self._leaves.get(leave_id=str(leave_id))
        if record is None:
            raise NotFoundError(f"Leave request {leave_id} not found")

        updated = apply_decision(record, role=actor.role, decision=decision, now=self._clock())
        if not self._leaves.save_decision(updated):
            raise ValidationError("Saving the decision failed")

        logger.info(
            "Leave request %s %s by %s %s -> %s",
            updated.id,
            decision.value,
            actor.role.value,
            actor.id,
            updated.status.value,
        )
        return updated
