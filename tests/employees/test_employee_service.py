from __future__ import annotations

from datetime import date

import pytest
from werkzeug.security import generate_password_hash

from src.hrms.hrms.core.enums import Role
from src.hrms.hrms.core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from src.hrms.hrms.employees.service import EmployeeForm


def _form(**overrides) -> EmployeeForm:
    data = dict(
        first_name="Lan",
        last_name="Tran",
        email="Lan.Tran@Example.com",
        position="Engineer",
        hire_date=date(2025, 6, 1),
    )
    data.update(overrides)
    return EmployeeForm(**data)


def test_login_with_valid_credentials(services, repos):
    repos.employees.add(email="lan@example.com", password_hash=generate_password_hash("secret1"), role=Role.ADMIN)

    who = services.auth_service.authenticate(" LAN@example.com ", "secret1")

    assert who.email == "lan@example.com"
    assert who.role == Role.ADMIN


@pytest.mark.parametrize("email, password", [("lan@example.com", "wrong"), ("nobody@example.com", "secret1")])
def test_login_rejects_bad_credentials(services, repos, email, password):
    repos.employees.add(email="lan@example.com", password_hash=generate_password_hash("secret1"))

    with pytest.raises(AuthenticationError):
        services.auth_service.authenticate(email, password)


def test_login_rejects_inactive_and_unusable_hash(services, repos):
    repos.employees.add(email="gone@example.com", password_hash=generate_password_hash("secret1"), is_active=False)
    repos.employees.add(email="broken@example.com", password_hash="not-a-hash")

    with pytest.raises(AuthenticationError):
        services.auth_service.authenticate("gone@example.com", "secret1")
    with pytest.raises(AuthenticationError):
        services.auth_service.authenticate("broken@example.com", "secret1")


def test_create_employee(services, repos):
    employee_id = services.employee_service.create_employee(current_role=Role.ADMIN, form=_form(), password="secret1")

    created = repos.employees.get_by_id(employee_id)
    assert created.email == "lan.tran@example.com"
    assert created.role == Role.EMPLOYEE
    assert services.auth_service.authenticate("lan.tran@example.com", "secret1").employee_id == employee_id


def test_create_employee_duplicate_email(services, repos):
    repos.employees.add(email="lan.tran@example.com")

    with pytest.raises(ConflictError):
        services.employee_service.create_employee(current_role=Role.ADMIN, form=_form(), password="secret1")


def test_probation_cannot_end_before_hire(services):
    with pytest.raises(ValidationError, match="Probation"):
        services.employee_service.create_employee(
            current_role=Role.ADMIN,
            form=_form(probation_end_date=date(2025, 5, 31)),
            password="secret1",
        )


@pytest.mark.parametrize(
    "overrides",
    [{"first_name": " "}, {"email": "not-an-email"}, {"position": ""}, {"hire_date": None}],
)
def test_create_employee_validation(services, overrides):
    with pytest.raises(ValidationError):
        services.employee_service.create_employee(current_role=Role.ADMIN, form=_form(**overrides), password="secret1")


def test_short_password_is_rejected(services):
    with pytest.raises(ValidationError):
        services.employee_service.create_employee(current_role=Role.ADMIN, form=_form(), password="123")


def test_employee_cannot_create_employees(services):
    with pytest.raises(AuthorizationError):
        services.employee_service.create_employee(current_role=Role.EMPLOYEE, form=_form(), password="secret1")


def test_update_employee(services, repos):
    emp = repos.employees.add()

    services.employee_service.update_employee(
        current_role=Role.ADMIN,
        employee_id=emp.employee_id,
        form=_form(position="Lead", is_permanent=True),
    )

    updated = repos.employees.get_by_id(emp.employee_id)
    assert updated.position == "Lead"
    assert updated.is_permanent is True


def test_update_employee_email_taken_by_other(services, repos):
    repos.employees.add(email="lan.tran@example.com")
    emp = repos.employees.add()

    with pytest.raises(ConflictError):
        services.employee_service.update_employee(current_role=Role.ADMIN, employee_id=emp.employee_id, form=_form())


def test_deactivate_hides_from_listing(services, repos):
    admin = repos.employees.add(role=Role.ADMIN)
    emp = repos.employees.add()

    services.employee_service.deactivate_employee(
        current_role=Role.ADMIN, current_employee_id=admin.employee_id, employee_id=emp.employee_id
    )

    assert repos.employees.get_by_id(emp.employee_id).is_active is False
    assert [r.employee_id for r in services.employee_service.list_active()] == [admin.employee_id]


def test_cannot_deactivate_self(services, repos):
    admin = repos.employees.add(role=Role.ADMIN)

    with pytest.raises(ValidationError):
        services.employee_service.deactivate_employee(
            current_role=Role.ADMIN, current_employee_id=admin.employee_id, employee_id=admin.employee_id
        )


def test_deactivate_unknown(services):
    with pytest.raises(NotFoundError):
        services.employee_service.deactivate_employee(current_role=Role.ADMIN, current_employee_id=1, employee_id=42)


def test_listing_pages(services, repos):
    for i in range(25):
        repos.employees.add(first_name=f"E{i:02d}")

    assert len(services.employee_service.list_active(page=1)) == 10
    assert len(services.employee_service.list_active(page=3)) == 5
    assert len(services.employee_service.list_active(page=1, page_size=20)) == 20
    assert len(services.employee_service.list_active(page=0)) == 10


def test_update_own_profile(services, repos):
    emp = repos.employees.add()

    services.employee_service.update_profile(
        employee_id=emp.employee_id, first_name=" Mai ", last_name="Pham", phone=" 0123 "
    )

    profile = services.employee_service.get_profile(emp.employee_id)
    assert profile.full_name == "Mai Pham"
    assert profile.phone == "0123"
