from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Any, Mapping, Optional

from ..common.datetime_utils import format_timestamp, parse_clock_time, parse_date_field, parse_timestamp
from ..common.validators import require_choice, require_non_empty
from ..core.constants import DEFAULT_FROM_TIME, DEFAULT_TO_TIME
from ..core.enums import LeaveStatus, LeaveType
from ..core.exceptions import InvalidDateRangeError, ValidationError


@dataclass(frozen=True)
class LeaveRequest:
    """Domain entity: one student's leave request.

    Pure data object. ``status`` and ``final_approval`` are derived from the
    two approvals by the state machine and are never set on their own.
    """

    id: str
    student_id: str
    student_name: str
    leave_type: LeaveType
    from_date: date
    to_date: date
    from_time: time
    to_time: time
    reason: str
    status: LeaveStatus
    parent_approval: bool
    admin_approval: bool
    final_approval: bool
    created_at: datetime
    updated_at: datetime

    def to_dict(self) -> dict:
        """Wire/cache representation (camelCase JSON object)."""
        return {
            "id": self.id,
            "studentId": self.student_id,
            "studentName": self.student_name,
            "leaveType": self.leave_type.value,
            "fromDate": self.from_date.strftime("%Y-%m-%d"),
            "toDate": self.to_date.strftime("%Y-%m-%d"),
            "fromTime": self.from_time.strftime("%H:%M"),
            "toTime": self.to_time.strftime("%H:%M"),
            "reason": self.reason,
            "status": self.status.value,
            "parentApproval": self.parent_approval,
            "adminApproval": self.admin_approval,
            "finalApproval": self.final_approval,
            "createdAt": format_timestamp(self.created_at),
            "updatedAt": format_timestamp(self.updated_at),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LeaveRequest":
        if not isinstance(data, Mapping):
            raise ValidationError("Leave request must be a JSON object")
        try:
            record_id = str(data.get("id") or data.get("_id") or "").strip()
            if not record_id:
                raise ValidationError("Leave request id is missing")

            status = require_choice(data.get("status") or LeaveStatus.PENDING.value, LeaveStatus, "status")
            parent_approval = bool(data.get("parentApproval", False))
            admin_approval = bool(data.get("adminApproval", False))
            final_approval = data.get("finalApproval")
            if final_approval is None:
                final_approval = status == LeaveStatus.APPROVED and parent_approval and admin_approval

            created_at = parse_timestamp(str(data["createdAt"]))
            updated_at = parse_timestamp(str(data.get("updatedAt") or data["createdAt"]))

            return cls(
                id=record_id,
                student_id=str(data["studentId"]),
                student_name=str(data.get("studentName") or ""),
                leave_type=require_choice(data.get("leaveType") or LeaveType.OTHER.value, LeaveType, "leaveType"),
                from_date=parse_date_field(str(data["fromDate"]), "fromDate"),
                to_date=parse_date_field(str(data["toDate"]), "toDate"),
                from_time=parse_clock_time(data.get("fromTime"), "fromTime", DEFAULT_FROM_TIME),
                to_time=parse_clock_time(data.get("toTime"), "toTime", DEFAULT_TO_TIME),
                reason=str(data.get("reason") or ""),
                status=status,
                parent_approval=parent_approval,
                admin_approval=admin_approval,
                final_approval=bool(final_approval),
                created_at=created_at,
                updated_at=updated_at,
            )
        except KeyError as exc:
            raise ValidationError(f"Leave request field {exc.args[0]} is missing") from exc
        except (TypeError, ValueError) as exc:
            raise ValidationError(f"Leave request is malformed: {exc}") from exc


@dataclass(frozen=True)
class NewLeaveRequest:
    """Validated submission payload (what a student fills in)."""

    leave_type: LeaveType
    from_date: date
    to_date: date
    from_time: time
    to_time: time
    reason: str

    @classmethod
    def parse(
        cls,
        *,
        leave_type: str,
        from_date: str,
        to_date: str,
        reason: str,
        from_time: Optional[str] = None,
        to_time: Optional[str] = None,
    ) -> "NewLeaveRequest":
        parsed_type = require_choice(leave_type, LeaveType, "leaveType")
        start = parse_date_field(from_date, "fromDate")
        end = parse_date_field(to_date, "toDate")
        if end < start:
            raise InvalidDateRangeError("toDate must be on or after fromDate")

        return cls(
            leave_type=parsed_type,
            from_date=start,
            to_date=end,
            from_time=parse_clock_time(from_time, "fromTime", DEFAULT_FROM_TIME),
            to_time=parse_clock_time(to_time, "toTime", DEFAULT_TO_TIME),
            reason=require_non_empty(reason, "reason"),
        )

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "NewLeaveRequest":
        if not isinstance(payload, Mapping):
            raise ValidationError("Request body must be a JSON object")
        return cls.parse(
            leave_type=str(payload.get("leaveType") or ""),
            from_date=str(payload.get("fromDate") or ""),
            to_date=str(payload.get("toDate") or ""),
            reason=str(payload.get("reason") or ""),
            from_time=payload.get("fromTime"),
            to_time=payload.get("toTime"),
        )

    def to_payload(self) -> dict:
        """Body of ``POST /leave``."""
        return {
            "leaveType": self.leave_type.value,
            "fromDate": self.from_date.strftime("%Y-%m-%d"),
            "toDate": self.to_date.strftime("%Y-%m-%d"),
            "fromTime": self.from_time.strftime("%H:%M"),
            "toTime": self.to_time.strftime("%H:%M"),
            "reason": self.reason,
        }
