from __future__ import annotations

import logging
from contextlib import contextmanager
from datetime import time, timedelta
from typing import Any, Dict, List, Optional

from mysql.connector import errors as mysql_errors

from ..core.exceptions import ConflictError
from .connection import DatabaseConnection

logger = logging.getLogger(__name__)

ER_DUP_ENTRY = 1062


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """Yield (connection, cursor); commit on success, roll back on any error."""
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except Exception:
        logger.warning("Rolling back transaction", exc_info=True)
        conn.rollback()
        raise
    finally:
        conn.close()


@contextmanager
def unique_violation(message: str):
    """Turn a duplicate-key error from a UNIQUE index into a ConflictError."""
    try:
        yield
    except mysql_errors.IntegrityError as e:
        if e.errno != ER_DUP_ENTRY:
            raise
        raise ConflictError(message) from e


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def normalize_mysql_time(value: Any) -> Optional[time]:
    """Normalize MySQL TIME values across connector implementations.

    mysql-connector can return TIME as a datetime.time, a datetime.timedelta
    or a string like '08:30:00'.
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
