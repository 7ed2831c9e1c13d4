from __future__ import annotations

from contextlib import contextmanager
from datetime import time, timedelta
from typing import Any, Dict, List, Optional

import mysql.connector

from ..core.exceptions import ConflictError, DomainError, StorageError
from .connection import DatabaseConnection

ER_DUP_ENTRY = 1062
ER_NO_SUCH_TABLE = 1146
ER_BAD_DB_ERROR = 1049
ER_ACCESS_DENIED_ERROR = 1045
CR_CONN_HOST_ERROR = 2003
CR_UNKNOWN_HOST = 2005

_CONNECTION_ERRNOS = {ER_BAD_DB_ERROR, ER_ACCESS_DENIED_ERROR, CR_CONN_HOST_ERROR, CR_UNKNOWN_HOST}


def translate_error(e: mysql.connector.Error) -> DomainError:
    """Map a driver error onto the domain error taxonomy, keeping its message."""

    errno = getattr(e, "errno", None)
    msg = getattr(e, "msg", None) or str(e)
    if errno == ER_DUP_ENTRY:
        return ConflictError(msg)
    if errno == ER_NO_SUCH_TABLE:
        return StorageError(f"Database not set up. Run scripts/init_db.py to create the schema ({msg})")
    if errno in _CONNECTION_ERRNOS:
        return StorageError(f"Database connection failed: {msg}")
    return StorageError(f"Database error: {msg}")


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    try:
        conn = conn_factory.connect()
    except mysql.connector.Error as e:
        raise translate_error(e) from e

    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except mysql.connector.Error as e:
        conn.rollback()
        raise translate_error(e) from e
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


def normalize_mysql_time(value: Any) -> Optional[time]:
    """Normalize MySQL TIME values across connector implementations.

    mysql-connector returns TIME columns as ``timedelta``; some setups hand
    back ``time`` or an 'HH:MM:SS' string instead.
    """

    if value is None:
        return None

    if isinstance(value, time):
        return value

    if isinstance(value, timedelta):
        total_seconds = int(value.total_seconds()) % 86400
        return time(hour=total_seconds // 3600, minute=(total_seconds % 3600) // 60, second=total_seconds % 60)

    if isinstance(value, str):
        parts = value.strip().split(":")
        if len(parts) < 2:
            raise ValueError(f"Invalid time string: {value!r}")
        seconds = int(parts[2]) if len(parts) >= 3 and parts[2] else 0
        return time(hour=int(parts[0]), minute=int(parts[1]), second=seconds)

    raise TypeError(f"Unsupported MySQL TIME value type: {type(value)!r}")
