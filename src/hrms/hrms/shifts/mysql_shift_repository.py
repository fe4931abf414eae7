from __future__ import annotations

from datetime import time
from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_time
from .model import ShiftConfig
from .repository import ShiftRepository

_COLUMNS = "shift_id, name, start_time, end_time, grace_minutes, is_ramadan, is_active"


def _to_shift(r: Dict[str, Any]) -> ShiftConfig:
    return ShiftConfig(
        shift_id=int(r["shift_id"]),
        name=r["name"],
        start_time=normalize_mysql_time(r["start_time"]),
        end_time=normalize_mysql_time(r["end_time"]),
        grace_minutes=int(r.get("grace_minutes") or 0),
        is_ramadan=bool(r.get("is_ramadan")),
        is_active=bool(r.get("is_active")),
    )


class MySQLShiftRepository(ShiftRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[ShiftConfig]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM shift_configs ORDER BY name")
            return [_to_shift(r) for r in fetchall(cur)]

    def get_by_id(self, shift_id: int) -> Optional[ShiftConfig]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM shift_configs WHERE shift_id=%s", (int(shift_id),))
            r = fetchone(cur)
            return _to_shift(r) if r else None

    def get_active(self) -> Optional[ShiftConfig]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM shift_configs
                WHERE is_active=1
                ORDER BY is_ramadan DESC, shift_id
                LIMIT 1
                """
            )
            r = fetchone(cur)
            return _to_shift(r) if r else None

    def create(
        self,
        *,
        name: str,
        start_time: time,
        end_time: time,
        grace_minutes: int,
        is_ramadan: bool,
        is_active: bool,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO shift_configs(name, start_time, end_time, grace_minutes, is_ramadan, is_active)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (name, start_time, end_time, int(grace_minutes), int(is_ramadan), int(is_active)),
            )
            return int(cur.lastrowid)

    def update(
        self,
        *,
        shift_id: int,
        name: str,
        start_time: time,
        end_time: time,
        grace_minutes: int,
        is_ramadan: bool,
        is_active: bool,
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE shift_configs
                SET name=%s, start_time=%s, end_time=%s, grace_minutes=%s, is_ramadan=%s, is_active=%s
                WHERE shift_id=%s
                """,
                (name, start_time, end_time, int(grace_minutes), int(is_ramadan), int(is_active), int(shift_id)),
            )
            return cur.rowcount > 0

    def set_active(self, shift_id: int, *, is_active: bool) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE shift_configs SET is_active=%s WHERE shift_id=%s",
                (int(is_active), int(shift_id)),
            )
            return cur.rowcount > 0

    def delete(self, shift_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM shift_configs WHERE shift_id=%s", (int(shift_id),))
            return cur.rowcount > 0
