"""Fetch, deduplicate and adopt a canonical set of leave requests."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from ..cache.local_cache import LocalCache
from ..cache.snapshot import dump_requests, load_requests
from ..core.exceptions import DegradedModeError, RemoteStoreError
from ..identity.model import Actor
from .model import LeaveRequest
from .store import LeaveStore

logger = logging.getLogger(__name__)


def dedupe_by_id(records: Iterable[LeaveRequest]) -> List[LeaveRequest]:
    """Keep the last record seen for each id.

    Result order follows each id's last occurrence in ``records``.
    """
    by_id: Dict[str, LeaveRequest] = {}
    for record in records:
        by_id.pop(record.id, None)
        by_id[record.id] = record
    return list(by_id.values())


@dataclass(frozen=True)
class SyncResult:
    records: List[LeaveRequest] = field(default_factory=list)
    degraded: bool = False
    error: Optional[DegradedModeError] = None


def read_cached(cache: LocalCache, key: str) -> Optional[List[LeaveRequest]]:
    """Cached snapshot, or None when absent, malformed or unreadable."""
    try:
        text = cache.get(key)
    except Exception as exc:
        logger.warning("Local cache read failed, treating as empty: %s", exc)
        return None
    return load_requests(text)


def write_through(cache: LocalCache, key: str, records: Iterable[LeaveRequest]) -> bool:
    """Mirror the collection into the cache. A failed write only leaves the cache stale."""
    try:
        cache.set(key, dump_requests(records))
    except Exception as exc:
        logger.warning("Local cache write failed, cached copy is stale: %s", exc)
        return False
    return True


def reconcile(actor: Optional[Actor], store: LeaveStore, cache: LocalCache, *, key: str) -> SyncResult:
    if actor is None:
        return SyncResult()

    try:
        fetched = store.list(actor)
    except RemoteStoreError as exc:
        cached = read_cached(cache, key)
        records = dedupe_by_id(cached) if cached is not None else []
        logger.warning(
            "Leave store unavailable, serving %d cached request(s): %s",
            len(records),
            exc,
        )
        error = DegradedModeError(f"Serving cached leave requests: {exc}")
        error.__cause__ = exc
        return SyncResult(records=records, degraded=True, error=error)

    records = dedupe_by_id(fetched)
    write_through(cache, key, records)
    return SyncResult(records=records)
