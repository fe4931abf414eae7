from __future__ import annotations

import pytest

from src.hrms.hrms.core.enums import Role
from src.hrms.hrms.core.exceptions import AuthorizationError, NotFoundError, ValidationError


def test_departments_list_active_employee_counts(services, repos):
    eng = services.department_service.create(current_role=Role.ADMIN, name="Engineering", description="Builders")
    hr = services.department_service.create(current_role=Role.ADMIN, name="HR")
    repos.employees.add(department_id=eng)
    repos.employees.add(department_id=eng)
    repos.employees.add(department_id=eng, is_active=False)

    counts = {d.name: d.employee_count for d in services.department_service.list_departments()}

    assert counts == {"Engineering": 2, "HR": 0}
    assert repos.departments.get_by_id(hr).description is None


def test_department_name_is_required(services):
    with pytest.raises(ValidationError):
        services.department_service.create(current_role=Role.ADMIN, name="  ")


def test_delete_department_clears_employees(services, repos):
    eng = services.department_service.create(current_role=Role.ADMIN, name="Engineering")
    emp = repos.employees.add(department_id=eng)

    services.department_service.delete(current_role=Role.ADMIN, department_id=eng)

    assert repos.employees.get_by_id(emp.employee_id).department_id is None
    assert services.department_service.list_departments() == []


def test_update_unknown_department(services):
    with pytest.raises(NotFoundError):
        services.department_service.update(current_role=Role.ADMIN, department_id=7, name="X")


def test_employee_cannot_manage_departments(services):
    with pytest.raises(AuthorizationError):
        services.department_service.create(current_role=Role.EMPLOYEE, name="X")
