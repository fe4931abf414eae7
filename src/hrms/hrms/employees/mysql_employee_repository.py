from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional, Sequence

from ..core.enums import Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, unique_violation
from .model import Employee, EmployeeListRow
from .repository import EmployeeRepository

_COLUMNS = """
    employee_id, first_name, last_name, email, password_hash, role, position,
    department_id, hire_date, probation_end_date, phone, is_permanent, is_active
"""

_DUPLICATE_EMAIL = "An employee with this email already exists"


def _to_employee(row: Dict[str, Any]) -> Employee:
    return Employee(
        employee_id=int(row["employee_id"]),
        first_name=row["first_name"],
        last_name=row["last_name"],
        email=row["email"],
        password_hash=row["password_hash"],
        role=Role(row["role"]),
        position=row.get("position") or "",
        department_id=row.get("department_id"),
        hire_date=row.get("hire_date"),
        probation_end_date=row.get("probation_end_date"),
        phone=row.get("phone"),
        is_permanent=bool(row.get("is_permanent", False)),
        is_active=bool(row.get("is_active", True)),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE employee_id=%s", (int(employee_id),))
            row = fetchone(cur)
            return _to_employee(row) if row else None

    def get_by_email(self, email: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE email=%s", (email,))
            row = fetchone(cur)
            return _to_employee(row) if row else None

    def create(
        self,
        *,
        first_name: str,
        last_name: str,
        email: str,
        password_hash: str,
        role: Role,
        position: str,
        department_id: Optional[int],
        hire_date: date,
        probation_end_date: Optional[date],
        phone: Optional[str],
    ) -> int:
        with unique_violation(_DUPLICATE_EMAIL), db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO employees(
                    first_name, last_name, email, password_hash, role, position,
                    department_id, hire_date, probation_end_date, phone, is_permanent
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,0)
                """,
                (
                    first_name,
                    last_name,
                    email,
                    password_hash,
                    role.value,
                    position,
                    department_id,
                    hire_date,
                    probation_end_date,
                    phone,
                ),
            )
            return int(cur.lastrowid)

    def update(
        self,
        *,
        employee_id: int,
        first_name: str,
        last_name: str,
        email: str,
        position: str,
        department_id: Optional[int],
        hire_date: date,
        probation_end_date: Optional[date],
        phone: Optional[str],
        is_permanent: bool,
    ) -> bool:
        with unique_violation(_DUPLICATE_EMAIL), db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE employees
                SET first_name=%s, last_name=%s, email=%s, position=%s, department_id=%s,
                    hire_date=%s, probation_end_date=%s, phone=%s, is_permanent=%s
                WHERE employee_id=%s
                """,
                (
                    first_name,
                    last_name,
                    email,
                    position,
                    department_id,
                    hire_date,
                    probation_end_date,
                    phone,
                    int(is_permanent),
                    int(employee_id),
                ),
            )
            return cur.rowcount > 0

    def update_profile(self, *, employee_id: int, first_name: str, last_name: str, phone: Optional[str]) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE employees SET first_name=%s, last_name=%s, phone=%s WHERE employee_id=%s",
                (first_name, last_name, phone, int(employee_id)),
            )
            return cur.rowcount > 0

    def set_active(self, employee_id: int, *, is_active: bool) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE employees SET is_active=%s WHERE employee_id=%s",
                (1 if is_active else 0, int(employee_id)),
            )
            return cur.rowcount > 0

    def list_active(self, *, offset: int, limit: int) -> Sequence[EmployeeListRow]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT e.employee_id, e.first_name, e.last_name, e.email, e.position, e.hire_date,
                       e.role, e.is_permanent, e.is_active, d.name AS department_name
                FROM employees e
                LEFT JOIN departments d ON d.department_id = e.department_id
                WHERE e.is_active = 1
                ORDER BY e.first_name, e.employee_id
                LIMIT %s OFFSET %s
                """,
                (int(limit), int(offset)),
            )
            rows = fetchall(cur)
            return [
                EmployeeListRow(
                    employee_id=int(r["employee_id"]),
                    first_name=r["first_name"],
                    last_name=r["last_name"],
                    email=r["email"],
                    position=r.get("position") or "",
                    hire_date=r.get("hire_date"),
                    department_name=r.get("department_name"),
                    role=Role(r["role"]),
                    is_permanent=bool(r.get("is_permanent")),
                    is_active=bool(r.get("is_active")),
                )
                for r in rows
            ]

    def count_all(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS n FROM employees")
            row = fetchone(cur)
            return int(row["n"]) if row else 0
