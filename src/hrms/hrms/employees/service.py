from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional, Sequence

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_email, require_min_length, require_non_empty, require_positive_id
from ..core.constants import DEFAULT_PAGE_SIZE, MIN_PASSWORD_LENGTH
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, AuthorizationError, ConflictError, NotFoundError, ValidationError
from .model import Employee, EmployeeListRow
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionEmployee:
    """What we store into the Flask session after login."""

    employee_id: int
    full_name: str
    email: str
    role: Role


@dataclass(frozen=True)
class EmployeeForm:
    first_name: str
    last_name: str
    email: str
    position: str
    hire_date: date
    department_id: Optional[int] = None
    probation_end_date: Optional[date] = None
    phone: Optional[str] = None
    is_permanent: bool = False


class AuthService:
    """Use case: authenticate an employee (login)."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def authenticate(self, email: str, password: str) -> SessionEmployee:
        employee = self._employees.get_by_email((email or "").strip().lower())
        if not employee or not employee.is_active:
            raise AuthenticationError("Invalid email or password")

        try:
            ok = check_password_hash(employee.password_hash, password or "")
        except ValueError:
            # placeholder or corrupted hashes
            ok = False

        if not ok:
            raise AuthenticationError("Invalid email or password")

        return SessionEmployee(
            employee_id=employee.employee_id,
            full_name=employee.full_name,
            email=employee.email,
            role=employee.role,
        )


class EmployeeService:
    """Use case: manage employees (admin) and own profile (self-service)."""

    def __init__(self, employees: EmployeeRepository, *, page_size: int = DEFAULT_PAGE_SIZE):
        self._employees = employees
        self._page_size = int(page_size)

    @staticmethod
    def _validate(form: EmployeeForm) -> EmployeeForm:
        if not form.hire_date:
            raise ValidationError("Hire date is required")
        if form.probation_end_date and form.hire_date and form.probation_end_date < form.hire_date:
            raise ValidationError("Probation end date cannot be earlier than hire date")
        return EmployeeForm(
            first_name=require_non_empty(form.first_name, "First name"),
            last_name=require_non_empty(form.last_name, "Last name"),
            email=require_email(form.email),
            position=require_non_empty(form.position, "Position"),
            hire_date=form.hire_date,
            department_id=require_positive_id(form.department_id, "Department") if form.department_id else None,
            probation_end_date=form.probation_end_date,
            phone=(form.phone or "").strip() or None,
            is_permanent=bool(form.is_permanent),
        )

    def create_employee(self, *, current_role: Role, form: EmployeeForm, password: str) -> int:
        if current_role != Role.ADMIN:
            raise AuthorizationError("You do not have permission")

        form = self._validate(form)
        require_min_length(password, "Password", MIN_PASSWORD_LENGTH)

        if self._employees.get_by_email(form.email):
            raise ConflictError("An employee with this email already exists")

        employee_id = self._employees.create(
            first_name=form.first_name,
            last_name=form.last_name,
            email=form.email,
            password_hash=generate_password_hash(password),
            role=Role.EMPLOYEE,
            position=form.position,
            department_id=form.department_id,
            hire_date=form.hire_date,
            probation_end_date=form.probation_end_date,
            phone=form.phone,
        )
        logger.info("Created employee %s <%s>", employee_id, form.email)
        return employee_id

    def update_employee(self, *, current_role: Role, employee_id: int, form: EmployeeForm) -> None:
        if current_role != Role.ADMIN:
            raise AuthorizationError("You do not have permission")

        if not self._employees.get_by_id(int(employee_id)):
            raise NotFoundError("Employee not found")

        form = self._validate(form)
        other = self._employees.get_by_email(form.email)
        if other and other.employee_id != int(employee_id):
            raise ConflictError("An employee with this email already exists")

        if not self._employees.update(
            employee_id=int(employee_id),
            first_name=form.first_name,
            last_name=form.last_name,
            email=form.email,
            position=form.position,
            department_id=form.department_id,
            hire_date=form.hire_date,
            probation_end_date=form.probation_end_date,
            phone=form.phone,
            is_permanent=form.is_permanent,
        ):
            raise ValidationError("Failed to update employee")

    def deactivate_employee(self, *, current_role: Role, current_employee_id: int, employee_id: int) -> None:
        if current_role != Role.ADMIN:
            raise AuthorizationError("You do not have permission")
        if int(employee_id) == int(current_employee_id):
            raise ValidationError("You cannot deactivate your own account")

        employee = self._employees.get_by_id(int(employee_id))
        if not employee:
            raise NotFoundError("Employee not found")

        if not self._employees.set_active(employee.employee_id, is_active=False):
            raise ValidationError("Failed to deactivate employee")
        logger.info("Deactivated employee %s", employee.employee_id)

    def list_active(self, *, page: int = 1, page_size: Optional[int] = None) -> Sequence[EmployeeListRow]:
        size = int(page_size or self._page_size)
        page = max(int(page), 1)
        return self._employees.list_active(offset=(page - 1) * size, limit=size)

    def get_profile(self, employee_id: int) -> Employee:
        employee = self._employees.get_by_id(int(employee_id))
        if not employee:
            raise NotFoundError("Employee not found")
        return employee

    def update_profile(self, *, employee_id: int, first_name: str, last_name: str, phone: Optional[str]) -> None:
        self.get_profile(employee_id)
        if not self._employees.update_profile(
            employee_id=int(employee_id),
            first_name=require_non_empty(first_name, "First name"),
            last_name=require_non_empty(last_name, "Last name"),
            phone=(phone or "").strip() or None,
        ):
            raise ValidationError("Failed to update profile")
