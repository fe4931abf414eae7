from __future__ import annotations

from datetime import date, datetime
from typing import Any, Dict, Optional, Sequence

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, unique_violation
from .model import AttendanceExportRow, AttendanceRecord
from .repository import AttendanceRepository

_COLUMNS = "attendance_id, employee_id, work_date, check_in, check_out, status, shift_id, remarks"

_ALREADY_MARKED = "Attendance has already been marked for this day"


def _to_record(r: Dict[str, Any]) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=int(r["attendance_id"]),
        employee_id=int(r["employee_id"]),
        work_date=r["work_date"],
        check_in=r.get("check_in"),
        check_out=r.get("check_out"),
        status=AttendanceStatus(r["status"]),
        shift_id=r.get("shift_id"),
        remarks=r.get("remarks"),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_employee_and_date(self, employee_id: int, work_date: date) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM attendance WHERE employee_id=%s AND work_date=%s",
                (int(employee_id), work_date),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def list_for_date(self, work_date: date) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM attendance WHERE work_date=%s", (work_date,))
            return [_to_record(r) for r in fetchall(cur)]

    def list_recent_for_employee(self, employee_id: int, limit: int) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance
                WHERE employee_id=%s
                ORDER BY work_date DESC
                LIMIT %s
                """,
                (int(employee_id), int(limit)),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def list_for_employee_between(self, employee_id: int, start: date, end: date) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance
                WHERE employee_id=%s AND work_date BETWEEN %s AND %s
                ORDER BY work_date
                """,
                (int(employee_id), start, end),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def create(
        self,
        *,
        employee_id: int,
        work_date: date,
        status: AttendanceStatus,
        check_in: Optional[datetime],
        check_out: Optional[datetime],
        shift_id: Optional[int],
        remarks: Optional[str] = None,
    ) -> int:
        with unique_violation(_ALREADY_MARKED), db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance(employee_id, work_date, status, check_in, check_out, shift_id, remarks)
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                """,
                (int(employee_id), work_date, status.value, check_in, check_out, shift_id, remarks),
            )
            return int(cur.lastrowid)

    def count_with_status(self, work_date: date, status: AttendanceStatus) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT COUNT(*) AS n FROM attendance WHERE work_date=%s AND status=%s",
                (work_date, status.value),
            )
            r = fetchone(cur)
            return int(r["n"]) if r else 0

    def export_rows_for_date(self, work_date: date) -> Sequence[AttendanceExportRow]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT a.work_date, a.status, a.check_in, a.check_out,
                       e.first_name, e.last_name, d.name AS department_name
                FROM attendance a
                JOIN employees e ON e.employee_id = a.employee_id
                LEFT JOIN departments d ON d.department_id = e.department_id
                WHERE a.work_date=%s
                ORDER BY e.first_name, e.last_name
                """,
                (work_date,),
            )
            return [
                AttendanceExportRow(
                    work_date=r["work_date"],
                    first_name=r["first_name"],
                    last_name=r["last_name"],
                    department_name=r.get("department_name"),
                    status=AttendanceStatus(r["status"]),
                    check_in=r.get("check_in"),
                    check_out=r.get("check_out"),
                )
                for r in fetchall(cur)
            ]
