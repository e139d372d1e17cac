from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, Optional, Sequence

from ..common.datetime_utils import now_utc
from ..core.enums import LeaveStatus, LeaveType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_time
from .model import LeaveRequest, NewLeaveRequest
from .repository import LeaveRepository

_COLUMNS = """
    leave_id, student_id, student_name, leave_type,
    from_date, to_date, from_time, to_time, reason,
    status, parent_approval, admin_approval, final_approval,
    created_at, updated_at
"""


def _to_db_time(value: datetime) -> datetime:
    # DATETIME columns hold naive UTC.
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def _from_db_time(value: datetime) -> datetime:
    return value.replace(tzinfo=timezone.utc) if value.tzinfo is None else value


def _row_to_request(r: Dict[str, Any]) -> LeaveRequest:
    return LeaveRequest(
        id=str(r["leave_id"]),
        student_id=str(r["student_id"]),
        student_name=r["student_name"],
        leave_type=LeaveType(r["leave_type"]),
        from_date=r["from_date"],
        to_date=r["to_date"],
        from_time=normalize_mysql_time(r["from_time"]),
        to_time=normalize_mysql_time(r["to_time"]),
        reason=r["reason"],
        status=LeaveStatus(r["status"]),
        parent_approval=bool(r["parent_approval"]),
        admin_approval=bool(r["admin_approval"]),
        final_approval=bool(r["final_approval"]),
        created_at=_from_db_time(r["created_at"]),
        updated_at=_from_db_time(r["updated_at"]),
    )


class MySQLLeaveRepository(LeaveRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(self, *, student_id: str, student_name: str, new_request: NewLeaveRequest) -> LeaveRequest:
        now = _to_db_time(now_utc())
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO leave_requests(
                    student_id, student_name, leave_type, from_date, to_date,
                    from_time, to_time, reason, status,
                    parent_approval, admin_approval, final_approval, created_at, updated_at
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,0,0,0,%s,%s)
                """,
                (
                    str(student_id),
                    student_name,
                    new_request.leave_type.value,
                    new_request.from_date,
                    new_request.to_date,
                    new_request.from_time,
                    new_request.to_time,
                    new_request.reason,
                    LeaveStatus.PENDING.value,
                    now,
                    now,
                ),
            )
            leave_id = int(cur.lastrowid)
            cur.execute(f"SELECT {_COLUMNS} FROM leave_requests WHERE leave_id=%s", (leave_id,))
            return _row_to_request(fetchone(cur))

    def get(self, *, leave_id: str) -> Optional[LeaveRequest]:
        if not str(leave_id).isdigit():
            return None
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM leave_requests WHERE leave_id=%s", (int(leave_id),))
            r = fetchone(cur)
            return _row_to_request(r) if r else None

    def list(self, *, student_id: Optional[str] = None, limit: int = 500) -> Sequence[LeaveRequest]:
        clauses = ["1=1"]
        params: list[object] = []

        if student_id is not None:
            clauses.append("student_id=%s")
            params.append(str(student_id))

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM leave_requests
                WHERE {where}
                ORDER BY created_at DESC, leave_id DESC
                LIMIT %s
                """,
                tuple(params + [int(limit)]),
            )
            return [_row_to_request(r) for r in fetchall(cur)]

    def save_decision(self, record: LeaveRequest) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE leave_requests
                SET parent_approval=%s, admin_approval=%s, final_approval=%s,
                    status=%s, updated_at=%s
                WHERE leave_id=%s
                """,
                (
                    int(record.parent_approval),
                    int(record.admin_approval),
                    int(record.final_approval),
                    record.status.value,
                    _to_db_time(record.updated_at),
                    int(record.id),
                ),
            )
            return cur.rowcount > 0
