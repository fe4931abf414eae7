from __future__ import annotations

from typing import Any, Dict, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import EmployeeActivity
from .repository import ActivityRepository

_COLUMNS = "activity_id, employee_id, device_id, active_app, active_time, created_at, screenshot"


def _to_activity(r: Dict[str, Any]) -> EmployeeActivity:
    return EmployeeActivity(
        activity_id=int(r["activity_id"]),
        employee_id=int(r["employee_id"]),
        device_id=str(r["device_id"]),
        active_app=r.get("active_app"),
        active_time=int(r.get("active_time") or 0),
        created_at=r["created_at"],
        screenshot=r.get("screenshot"),
    )


class MySQLActivityRepository(ActivityRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[EmployeeActivity]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employee_activity ORDER BY created_at DESC")
            return [_to_activity(r) for r in fetchall(cur)]

    def list_for_device(self, *, employee_id: int, device_id: str) -> Sequence[EmployeeActivity]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM employee_activity
                WHERE employee_id=%s AND device_id=%s
                ORDER BY created_at DESC
                """,
                (int(employee_id), device_id),
            )
            return [_to_activity(r) for r in fetchall(cur)]
