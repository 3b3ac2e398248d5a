from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone

KV_TABLE = "kv_store"


class MySQLKeyValueStorage:
    """Key-value storage on a single MySQL table (``kv_store``)."""

    def __init__(self, conn: DatabaseConnection):
        self._conn = conn

    def get(self, key: str) -> Optional[str]:
        with db_cursor(self._conn) as (_, cur):
            cur.execute(f"SELECT value FROM {KV_TABLE} WHERE `key` = %s", (key,))
            row = fetchone(cur)
        return row["value"] if row else None

    def set(self, key: str, value: str) -> None:
        with db_cursor(self._conn) as (_, cur):
            cur.execute(
                f"INSERT INTO {KV_TABLE} (`key`, value) VALUES (%s, %s) "
                "ON DUPLICATE KEY UPDATE value = VALUES(value)",
                (key, value),
            )

    def keys(self) -> Sequence[str]:
        with db_cursor(self._conn) as (_, cur):
            cur.execute(f"SELECT `key` FROM {KV_TABLE} ORDER BY `key`")
            rows = fetchall(cur)
        return [r["key"] for r in rows]
