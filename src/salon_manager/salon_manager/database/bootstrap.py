from __future__ import annotations

import logging

from .connection import DBConfig, DatabaseConnection
from .mysql_base import db_cursor, fetchall

logger = logging.getLogger(__name__)

KV_TABLE_DDL = """
CREATE TABLE IF NOT EXISTS kv_store (
    `key` VARCHAR(64) NOT NULL PRIMARY KEY,
    value LONGTEXT NOT NULL,
    updated_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP ON UPDATE CURRENT_TIMESTAMP
) CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci
"""


def ensure_database_exists(db_config: dict) -> None:
    target = DBConfig.from_dict(db_config)
    conn = DatabaseConnection(target).connect(with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{target.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci;"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(db_config: dict) -> None:
    """Create the database and the key-value table if missing (idempotent)."""

    ensure_database_exists(db_config)
    with db_cursor(DatabaseConnection(DBConfig.from_dict(db_config)), dictionary=False) as (_, cur):
        cur.execute(KV_TABLE_DDL)
    logger.info("kv_store table ready in %s", db_config.get("database"))


def list_tables(db_config: dict) -> list[str]:
    with db_cursor(DatabaseConnection(DBConfig.from_dict(db_config)), dictionary=False) as (_, cur):
        cur.execute("SHOW TABLES")
        rows = fetchall(cur)
    return [str(r[0]) for r in rows]
