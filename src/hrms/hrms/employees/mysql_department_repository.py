from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .department_model import Department
from .department_repository import DepartmentRepository


class MySQLDepartmentRepository(DepartmentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Department]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT d.department_id, d.name, d.description, d.created_at,
                       COUNT(e.employee_id) AS employee_count
                FROM departments d
                LEFT JOIN employees e ON e.department_id = d.department_id AND e.is_active = 1
                GROUP BY d.department_id, d.name, d.description, d.created_at
                ORDER BY d.name
                """
            )
            rows = fetchall(cur)
            return [
                Department(
                    department_id=int(r["department_id"]),
                    name=r["name"],
                    description=r.get("description"),
                    created_at=r.get("created_at"),
                    employee_count=int(r.get("employee_count") or 0),
                )
                for r in rows
            ]

    def get_by_id(self, department_id: int) -> Optional[Department]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT department_id, name, description, created_at FROM departments WHERE department_id=%s",
                (int(department_id),),
            )
            r = fetchone(cur)
            if not r:
                return None
            return Department(
                department_id=int(r["department_id"]),
                name=r["name"],
                description=r.get("description"),
                created_at=r.get("created_at"),
            )

    def create(self, *, name: str, description: Optional[str]) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("INSERT INTO departments(name, description) VALUES(%s,%s)", (name, description))
            return int(cur.lastrowid)

    def update(self, *, department_id: int, name: str, description: Optional[str]) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE departments SET name=%s, description=%s WHERE department_id=%s",
                (name, description, int(department_id)),
            )
            return cur.rowcount > 0

    def delete(self, department_id: int) -> bool:
        # Both statements share one transaction in db_cursor.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE employees SET department_id=NULL WHERE department_id=%s", (int(department_id),))
            cur.execute("DELETE FROM departments WHERE department_id=%s", (int(department_id),))
            return cur.rowcount > 0
