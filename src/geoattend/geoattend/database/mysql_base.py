from __future__ import annotations

from contextlib import contextmanager
from datetime import time, timedelta
from typing import Any, Dict, List, Optional

import mysql.connector
from mysql.connector import errorcode

from ..common.datetime_utils import parse_hhmm
from ..core.exceptions import CollaboratorError, PermissionDeniedError
from .connection import DatabaseConnection

PERSISTENCE = "persistence"

_ACCESS_DENIED_ERRNOS = frozenset(
    {
        errorcode.ER_ACCESS_DENIED_ERROR,
        errorcode.ER_DBACCESS_DENIED_ERROR,
        errorcode.ER_TABLEACCESS_DENIED_ERROR,
        errorcode.ER_COLUMNACCESS_DENIED_ERROR,
        errorcode.ER_SPECIFIC_ACCESS_DENIED_ERROR,
    }
)


def translate_mysql_error(exc: mysql.connector.Error) -> CollaboratorError:
    if getattr(exc, "errno", None) in _ACCESS_DENIED_ERRNOS:
        return PermissionDeniedError(PERSISTENCE, "Permission denied by the attendance store")
    return CollaboratorError(PERSISTENCE, f"Attendance store unavailable: {getattr(exc, 'msg', None) or exc}")


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    try:
        conn = conn_factory.connect()
    except mysql.connector.Error as exc:
        raise translate_mysql_error(exc) from exc
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except mysql.connector.Error as exc:
        conn.rollback()
        raise translate_mysql_error(exc) from exc
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def to_time_of_day(value: Any) -> Optional[time]:
    """MySQL TIME columns come back as ``timedelta`` (or ``str`` from the pure driver)."""
    if value is None or isinstance(value, time):
        return value
    if isinstance(value, timedelta):
        seconds = int(value.total_seconds()) % 86400
        return time(seconds // 3600, seconds % 3600 // 60, seconds % 60)
    if isinstance(value, str):
        return parse_hhmm(value)
    raise TypeError(f"Unsupported TIME value: {value!r}")
