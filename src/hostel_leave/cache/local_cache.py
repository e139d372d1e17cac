from __future__ import annotations

from typing import Dict, Optional, Protocol


class LocalCache(Protocol):
    """Durable key-value store holding serialized snapshots.

    Values are whole documents: ``set`` always overwrites, never patches.
    """

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        raise NotImplementedError

    def remove(self, key: str) -> None:
        raise NotImplementedError


class MemoryCache(LocalCache):
    """Process-local cache (testing configuration)."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)
