from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional, Sequence

from ..core.enums import RequestStatus
from ..core.exceptions import NotFoundError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import LeaveBalance, LeaveBalanceRow, LeaveRequest, LeaveRequestRow, LeaveType
from .repository import LeaveBalanceRepository, LeaveRequestRepository, LeaveTypeRepository


def _to_leave_type(r: Dict[str, Any]) -> LeaveType:
    return LeaveType(
        leave_type_id=int(r["leave_type_id"]),
        name=r["name"],
        description=r.get("description"),
        is_paid=bool(r.get("is_paid")),
        default_days=int(r.get("default_days") or 0),
    )


def _to_request(r: Dict[str, Any]) -> LeaveRequest:
    return LeaveRequest(
        request_id=int(r["request_id"]),
        employee_id=int(r["employee_id"]),
        leave_type_id=int(r["leave_type_id"]),
        start_date=r["start_date"],
        end_date=r["end_date"],
        reason=r.get("reason") or "",
        status=RequestStatus(r["status"]),
        created_at=r["created_at"],
    )


def _to_request_row(r: Dict[str, Any]) -> LeaveRequestRow:
    return LeaveRequestRow(
        request_id=int(r["request_id"]),
        employee_id=int(r["employee_id"]),
        employee_name=f"{r['first_name']} {r['last_name']}",
        department_name=r.get("department_name"),
        leave_type_id=int(r["leave_type_id"]),
        leave_type_name=r["leave_type_name"],
        start_date=r["start_date"],
        end_date=r["end_date"],
        reason=r.get("reason") or "",
        status=RequestStatus(r["status"]),
        created_at=r["created_at"],
    )


def _to_balance(r: Dict[str, Any]) -> LeaveBalance:
    return LeaveBalance(
        balance_id=int(r["balance_id"]),
        employee_id=int(r["employee_id"]),
        leave_type_id=int(r["leave_type_id"]),
        year=int(r["year"]),
        total_days=float(r.get("total_days") or 0),
        used_days=float(r.get("used_days") or 0),
    )


_REQUEST_ROW_SELECT = """
    SELECT r.request_id, r.employee_id, r.leave_type_id, r.start_date, r.end_date,
           r.reason, r.status, r.created_at,
           e.first_name, e.last_name, d.name AS department_name, t.name AS leave_type_name
    FROM leave_requests r
    JOIN employees e ON e.employee_id = r.employee_id
    JOIN leave_types t ON t.leave_type_id = r.leave_type_id
    LEFT JOIN departments d ON d.department_id = e.department_id
"""


class MySQLLeaveTypeRepository(LeaveTypeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[LeaveType]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT leave_type_id, name, description, is_paid, default_days FROM leave_types ORDER BY name")
            return [_to_leave_type(r) for r in fetchall(cur)]

    def get_by_id(self, leave_type_id: int) -> Optional[LeaveType]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT leave_type_id, name, description, is_paid, default_days FROM leave_types WHERE leave_type_id=%s",
                (int(leave_type_id),),
            )
            r = fetchone(cur)
            return _to_leave_type(r) if r else None

    def create(self, *, name: str, description: Optional[str], is_paid: bool, default_days: int) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO leave_types(name, description, is_paid, default_days) VALUES(%s,%s,%s,%s)",
                (name, description, int(is_paid), int(default_days)),
            )
            return int(cur.lastrowid)

    def update(
        self,
        *,
        leave_type_id: int,
        name: str,
        description: Optional[str],
        is_paid: bool,
        default_days: int,
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE leave_types
                SET name=%s, description=%s, is_paid=%s, default_days=%s
                WHERE leave_type_id=%s
                """,
                (name, description, int(is_paid), int(default_days), int(leave_type_id)),
            )
            return cur.rowcount > 0

    def delete(self, leave_type_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM leave_types WHERE leave_type_id=%s", (int(leave_type_id),))
            return cur.rowcount > 0


class MySQLLeaveRequestRepository(LeaveRequestRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(self, *, employee_id: int, leave_type_id: int, start_date: date, end_date: date, reason: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO leave_requests(employee_id, leave_type_id, start_date, end_date, reason, status)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (int(employee_id), int(leave_type_id), start_date, end_date, reason, RequestStatus.PENDING.value),
            )
            return int(cur.lastrowid)

    def get_by_id(self, request_id: int) -> Optional[LeaveRequest]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT request_id, employee_id, leave_type_id, start_date, end_date, reason, status, created_at
                FROM leave_requests
                WHERE request_id=%s
                """,
                (int(request_id),),
            )
            r = fetchone(cur)
            return _to_request(r) if r else None

    def list_rows(
        self,
        *,
        status: Optional[RequestStatus] = None,
        employee_id: Optional[int] = None,
        limit: int = 200,
    ) -> Sequence[LeaveRequestRow]:
        clauses = ["1=1"]
        params: list[object] = []

        if status is not None:
            clauses.append("r.status=%s")
            params.append(status.value)
        if employee_id is not None:
            clauses.append("r.employee_id=%s")
            params.append(int(employee_id))

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                {_REQUEST_ROW_SELECT}
                WHERE {where}
                ORDER BY r.created_at DESC, r.request_id DESC
                LIMIT %s
                """,
                tuple(params + [int(limit)]),
            )
            return [_to_request_row(r) for r in fetchall(cur)]

    def decide(self, *, request_id: int, status: RequestStatus) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE leave_requests SET status=%s WHERE request_id=%s AND status=%s",
                (status.value, int(request_id), RequestStatus.PENDING.value),
            )
            return cur.rowcount > 0

    def approve(self, *, request_id: int, balance_id: Optional[int], days: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            if balance_id is not None:
                cur.execute("SELECT balance_id FROM leave_balances WHERE balance_id=%s FOR UPDATE", (int(balance_id),))
                if not fetchone(cur):
                    raise NotFoundError("Leave balance not found")
            cur.execute(
                "UPDATE leave_requests SET status=%s WHERE request_id=%s AND status=%s",
                (RequestStatus.APPROVED.value, int(request_id), RequestStatus.PENDING.value),
            )
            if cur.rowcount == 0:
                return False
            if balance_id is not None:
                cur.execute(
                    "UPDATE leave_balances SET used_days = used_days + %s WHERE balance_id=%s",
                    (int(days), int(balance_id)),
                )
            return True

    def list_approved_covering(self, day: date) -> Sequence[LeaveRequest]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT request_id, employee_id, leave_type_id, start_date, end_date, reason, status, created_at
                FROM leave_requests
                WHERE status=%s AND start_date <= %s AND end_date >= %s
                """,
                (RequestStatus.APPROVED.value, day, day),
            )
            return [_to_request(r) for r in fetchall(cur)]

    def list_upcoming_approved(self, *, employee_id: int, from_date: date, limit: int) -> Sequence[LeaveRequestRow]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                {_REQUEST_ROW_SELECT}
                WHERE r.employee_id=%s AND r.status=%s AND r.start_date >= %s
                ORDER BY r.start_date
                LIMIT %s
                """,
                (int(employee_id), RequestStatus.APPROVED.value, from_date, int(limit)),
            )
            return [_to_request_row(r) for r in fetchall(cur)]


class MySQLLeaveBalanceRepository(LeaveBalanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_employee(self, *, employee_id: int, year: int) -> Sequence[LeaveBalanceRow]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT b.balance_id, b.employee_id, b.leave_type_id, b.year, b.total_days, b.used_days,
                       t.name, t.description, t.is_paid, t.default_days
                FROM leave_balances b
                JOIN leave_types t ON t.leave_type_id = b.leave_type_id
                WHERE b.employee_id=%s AND b.year=%s
                ORDER BY t.name
                """,
                (int(employee_id), int(year)),
            )
            return [LeaveBalanceRow(balance=_to_balance(r), leave_type=_to_leave_type(r)) for r in fetchall(cur)]

    def list_for_year(self, year: int) -> Sequence[LeaveBalance]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT balance_id, employee_id, leave_type_id, year, total_days, used_days
                FROM leave_balances
                WHERE year=%s
                """,
                (int(year),),
            )
            return [_to_balance(r) for r in fetchall(cur)]

    def get_by_id(self, balance_id: int) -> Optional[LeaveBalance]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT balance_id, employee_id, leave_type_id, year, total_days, used_days
                FROM leave_balances
                WHERE balance_id=%s
                """,
                (int(balance_id),),
            )
            r = fetchone(cur)
            return _to_balance(r) if r else None

    def find(self, *, employee_id: int, leave_type_id: int, year: int) -> Optional[LeaveBalance]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT balance_id, employee_id, leave_type_id, year, total_days, used_days
                FROM leave_balances
                WHERE employee_id=%s AND leave_type_id=%s AND year=%s
                """,
                (int(employee_id), int(leave_type_id), int(year)),
            )
            r = fetchone(cur)
            return _to_balance(r) if r else None

    def set_total_days(self, balance_id: int, total_days: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE leave_balances SET total_days=%s WHERE balance_id=%s",
                (total_days, int(balance_id)),
            )
            return cur.rowcount > 0
