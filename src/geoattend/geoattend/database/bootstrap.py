from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable

from ..core.constants import DEFAULT_OFFICE_SETTINGS
from .connection import DBConfig, DatabaseConnection

logger = logging.getLogger(__name__)


_SKIPPED = re.compile(r"^\s*(CREATE\s+DATABASE|USE)\b", re.IGNORECASE)


def schema_statements(sql: str) -> Iterable[str]:
    """Split a DDL script on trailing semicolons.

    Comment lines are dropped, as are CREATE DATABASE and USE statements: the
    target database comes from DB_CONFIG.
    """
    lines = [line for line in sql.splitlines() if not line.strip().startswith("--")]
    for chunk in "\n".join(lines).split(";\n"):
        stmt = chunk.strip().rstrip(";").strip()
        if stmt and not _SKIPPED.match(stmt):
            yield stmt


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


def apply_schema(db_config: dict, *, schema_path: str | Path) -> None:
    ensure_database_exists(db_config)

    sql = Path(schema_path).read_text(encoding="utf-8")
    conn = DatabaseConnection(DBConfig.from_dict(db_config)).connect()
    try:
        cur = conn.cursor()
        for stmt in schema_statements(sql):
            cur.execute(stmt)
        conn.commit()
    finally:
        conn.close()
    logger.info("Schema applied from %s", schema_path)


def ensure_default_settings(db_config: dict) -> None:
    """Insert the default office settings row unless one already exists."""

    defaults = DEFAULT_OFFICE_SETTINGS
    conn = DatabaseConnection(DBConfig.from_dict(db_config)).connect()
    try:
        cur = conn.cursor()
        cur.execute(
            """
            INSERT IGNORE INTO office_settings(
                settings_id, latitude, longitude, radius_m, work_start, work_end, late_tolerance_minutes
            )
            VALUES(1,%s,%s,%s,%s,%s,%s)
            """,
            (
                defaults["latitude"],
                defaults["longitude"],
                defaults["radius_m"],
                defaults["work_start"],
                defaults["work_end"],
                defaults["late_tolerance_minutes"],
            ),
        )
        conn.commit()
    finally:
        conn.close()


def list_tables(db_config: dict) -> list[str]:
    conn = DatabaseConnection(DBConfig.from_dict(db_config)).connect()
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()
