from __future__ import annotations

from datetime import date, datetime, time, timezone
from typing import Optional

from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_date_field(value: str, field_name: str) -> date:
    v = str(value or "").strip()
    # Stored records may carry a full timestamp (e.g. 2024-01-10T00:00:00.000Z).
    try:
        return parse_iso_date(v[:10])
    except ValueError:
        raise ValidationError(f"{field_name} must be a date (YYYY-MM-DD)")


def parse_clock_time(value: Optional[str], field_name: str, default: str) -> time:
    v = str(value or "").strip() or default
    try:
        return datetime.strptime(v[:5], "%H:%M").time()
    except ValueError:
        raise ValidationError(f"{field_name} must be a time (HH:MM)")


def parse_timestamp(value: str) -> datetime:
    v = str(value or "").strip()
    if v.endswith("Z"):
        v = v[:-1] + "+00:00"
    return datetime.fromisoformat(v)


def format_timestamp(value: datetime) -> str:
    return value.isoformat()


def now_utc() -> datetime:
    """Current time (UTC, timezone-aware).

    Note: Wrapped so tests can patch/mock easier.
    """
    return datetime.now(timezone.utc)
