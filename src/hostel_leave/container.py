from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from types import ModuleType
from typing import Optional

from .cache.file_cache import JsonFileCache
from .cache.local_cache import LocalCache, MemoryCache
from .cache.mysql_cache import MySQLLocalCache
from .core.constants import DEFAULT_CONNECT_TIMEOUT, DEFAULT_READ_TIMEOUT, LEAVE_CACHE_KEY
from .database.connection import DBConfig, DatabaseConnection
from .identity.provider import IdentityProvider, SessionIdentity
from .leaves.http_store import HttpLeaveStore
from .leaves.mysql_leave_repository import MySQLLeaveRepository
from .leaves.offline_store import OfflineLeaveStore
from .leaves.registry import LeaveRegistry
from .leaves.service import LeaveService
from .leaves.store import LeaveStore


@dataclass(frozen=True)
class Container:
    """Server-side wiring (Flask app behind ``/leave``)."""

    conn: DatabaseConnection
    leaves_repo: MySQLLeaveRepository
    leave_service: LeaveService


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))
    leaves_repo = MySQLLeaveRepository(conn)
    leave_service = LeaveService(leaves_repo)
    return Container(conn=conn, leaves_repo=leaves_repo, leave_service=leave_service)


def build_store(settings: ModuleType) -> LeaveStore:
    source = str(getattr(settings, "LEAVE_DATA_SOURCE", "remote")).lower()
    if source == "offline":
        return OfflineLeaveStore()
    if source != "remote":
        raise ValueError(f"Unknown LEAVE_DATA_SOURCE: {source!r}")
    return HttpLeaveStore(
        str(getattr(settings, "LEAVE_API_URL")),
        token=getattr(settings, "LEAVE_API_TOKEN", None) or None,
        connect_timeout=float(getattr(settings, "LEAVE_API_CONNECT_TIMEOUT", DEFAULT_CONNECT_TIMEOUT)),
        read_timeout=float(getattr(settings, "LEAVE_API_READ_TIMEOUT", DEFAULT_READ_TIMEOUT)),
    )


def build_cache(settings: ModuleType) -> LocalCache:
    backend = str(getattr(settings, "LEAVE_CACHE_BACKEND", "file")).lower()
    if backend == "memory":
        return MemoryCache()
    if backend == "file":
        return JsonFileCache(Path(getattr(settings, "LEAVE_CACHE_PATH")))
    if backend == "mysql":
        return MySQLLocalCache(DatabaseConnection.get_instance(DBConfig.from_mapping(settings.DB_CONFIG)))
    raise ValueError(f"Unknown LEAVE_CACHE_BACKEND: {backend!r}")


def build_registry(settings: ModuleType, *, identity: Optional[IdentityProvider] = None) -> LeaveRegistry:
    """Client-side wiring: one registry per session."""
    return LeaveRegistry(
        build_store(settings),
        build_cache(settings),
        identity or SessionIdentity(),
        cache_key=str(getattr(settings, "LEAVE_CACHE_KEY", LEAVE_CACHE_KEY)),
    )
