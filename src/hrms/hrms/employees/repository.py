from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import Role
from .model import Employee, EmployeeListRow


class EmployeeRepository(Protocol):
    """Repository interface for Employee.

    Note (DIP): services depend on this interface, not on a concrete database.
    """

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[Employee]:
        raise NotImplementedError

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
        raise NotImplementedError

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
        raise NotImplementedError

    def update_profile(self, *, employee_id: int, first_name: str, last_name: str, phone: Optional[str]) -> bool:
        raise NotImplementedError

    def set_active(self, employee_id: int, *, is_active: bool) -> bool:
        raise NotImplementedError

    def list_active(self, *, offset: int, limit: int) -> Sequence[EmployeeListRow]:
        """Active employees ordered by first name."""

        raise NotImplementedError

    def count_all(self) -> int:
        raise NotImplementedError
