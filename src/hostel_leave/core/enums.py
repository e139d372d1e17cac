from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Actor roles supplied by the identity provider."""

    STUDENT = "student"
    PARENT = "parent"
    ADMIN = "admin"


class LeaveType(str, Enum):
    HOME = "home"
    ONE_DAY = "one-day"
    MEDICAL = "medical"
    EMERGENCY = "emergency"
    OTHER = "other"


class LeaveStatus(str, Enum):
    """Derived status of a leave request (never set directly)."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class Decision(str, Enum):
    """What a parent or admin can answer to a request."""

    APPROVED = "approved"
    REJECTED = "rejected"

