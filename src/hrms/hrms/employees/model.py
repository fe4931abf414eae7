from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee.

    Note: plain data object, no database access code here.
    """

    employee_id: int
    first_name: str
    last_name: str
    email: str
    password_hash: str
    role: Role
    position: str
    department_id: Optional[int]
    hire_date: Optional[date]
    probation_end_date: Optional[date] = None
    phone: Optional[str] = None
    is_permanent: bool = False
    is_active: bool = True

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


@dataclass(frozen=True)
class EmployeeListRow:
    """Read-model for the admin employee table (joined with department)."""

    employee_id: int
    first_name: str
    last_name: str
    email: str
    position: str
    hire_date: Optional[date]
    department_name: Optional[str]
    role: Role
    is_permanent: bool
    is_active: bool
