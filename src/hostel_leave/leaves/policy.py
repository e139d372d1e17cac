from __future__ import annotations

from typing import Iterable, List

from ..core.enums import Role
from ..identity.model import Actor
from .model import LeaveRequest


def can_submit(actor: Actor) -> bool:
    return actor.role == Role.STUDENT


def visible_to(actor: Actor, records: Iterable[LeaveRequest]) -> List[LeaveRequest]:
    """Students see their own requests; parents and admins see everything."""
    if actor.role == Role.STUDENT:
        return [r for r in records if r.student_id == actor.id]
    return list(records)
