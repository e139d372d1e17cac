from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .local_cache import LocalCache


class MySQLLocalCache(LocalCache):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self, key: str) -> Optional[str]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT cache_value FROM local_cache WHERE cache_key=%s", (key,))
            r = fetchone(cur)
            return str(r["cache_value"]) if r else None

    def set(self, key: str, value: str) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO local_cache(cache_key, cache_value)
                VALUES(%s,%s)
                ON DUPLICATE KEY UPDATE cache_value=VALUES(cache_value), updated_at=CURRENT_TIMESTAMP
                """,
                (key, value),
            )

    def remove(self, key: str) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM local_cache WHERE cache_key=%s", (key,))
