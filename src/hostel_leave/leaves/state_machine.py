"""Dual-approval state machine.

Every path that records a decision (server service, offline data source)
goes through :func:`apply_decision`, so status is derived in one place.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from typing import Optional, Tuple

from ..core.enums import Decision, LeaveStatus, Role
from ..core.exceptions import ForbiddenError
from .model import LeaveRequest

DECIDING_ROLES = frozenset({Role.PARENT, Role.ADMIN})


def derive_status(
    parent_approval: bool,
    admin_approval: bool,
    last_decision: Optional[Decision] = None,
) -> Tuple[LeaveStatus, bool]:
    """Return ``(status, final_approval)`` for the two approval flags.

    A rejection just applied wins; otherwise both approvals are needed.
    Rejections are not a ratchet: once the rejecting role approves again the
    flags alone decide the outcome.
    """
    if last_decision == Decision.REJECTED:
        return LeaveStatus.REJECTED, False
    if parent_approval and admin_approval:
        return LeaveStatus.APPROVED, True
    return LeaveStatus.PENDING, False


def apply_decision(record: LeaveRequest, *, role: Role, decision: Decision, now: datetime) -> LeaveRequest:
    if role not in DECIDING_ROLES:
        raise ForbiddenError("Only parents and admins can decide on leave requests")

    approved = decision == Decision.APPROVED
    parent_approval = approved if role == Role.PARENT else record.parent_approval
    admin_approval = approved if role == Role.ADMIN else record.admin_approval

    status, final_approval = derive_status(parent_approval, admin_approval, decision)
    return replace(
        record,
        parent_approval=parent_approval,
        admin_approval=admin_approval,
        status=status,
        final_approval=final_approval,
        updated_at=now,
    )
