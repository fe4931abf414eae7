from __future__ import annotations

from flask import Flask, session

from ..common.datetime_utils import parse_iso_date
from ..common.web import (
    admin_required,
    api_view,
    current_employee_id,
    current_role,
    int_arg,
    json_body,
    login_required,
    ok,
)
from ..container import Container
from .service import EmployeeForm


def _form_from(body: dict) -> EmployeeForm:
    hire_date = body.get("hire_date")
    probation = body.get("probation_end_date")
    return EmployeeForm(
        first_name=body.get("first_name", ""),
        last_name=body.get("last_name", ""),
        email=body.get("email", ""),
        position=body.get("position", ""),
        hire_date=parse_iso_date(hire_date) if hire_date else None,
        department_id=body.get("department_id") or None,
        probation_end_date=parse_iso_date(probation) if probation else None,
        phone=body.get("phone"),
        is_permanent=bool(body.get("is_permanent", False)),
    )


def register(app: Flask, container: Container) -> None:
    @app.route("/api/auth/login", methods=["POST"], endpoint="login")
    @api_view
    def login():
        body = json_body()
        s_emp = container.auth_service.authenticate(body.get("email", ""), body.get("password", ""))

        session.permanent = bool(body.get("remember_me"))

        session["employee_id"] = s_emp.employee_id
        session["name"] = s_emp.full_name
        session["role"] = s_emp.role.value
        return ok(s_emp, message="Signed in")

    @app.route("/api/auth/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return ok(message="Signed out")

    @app.route("/api/me", methods=["GET"], endpoint="my_profile")
    @login_required
    @api_view
    def my_profile():
        employee = container.employee_service.get_profile(current_employee_id())
        data = {
            "employee_id": employee.employee_id,
            "first_name": employee.first_name,
            "last_name": employee.last_name,
            "email": employee.email,
            "phone": employee.phone,
            "position": employee.position,
            "department_id": employee.department_id,
            "hire_date": employee.hire_date,
            "probation_end_date": employee.probation_end_date,
            "is_permanent": employee.is_permanent,
            "role": employee.role.value,
        }
        return ok(data)

    @app.route("/api/me", methods=["PUT"], endpoint="edit_profile")
    @login_required
    @api_view
    def edit_profile():
        body = json_body()
        container.employee_service.update_profile(
            employee_id=current_employee_id(),
            first_name=body.get("first_name", ""),
            last_name=body.get("last_name", ""),
            phone=body.get("phone"),
        )
        session["name"] = f"{body.get('first_name', '').strip()} {body.get('last_name', '').strip()}"
        return ok(message="Profile updated")

    @app.route("/api/admin/employees", methods=["GET"], endpoint="admin_employees")
    @admin_required
    @api_view
    def admin_employees():
        rows = container.employee_service.list_active(page=int_arg("page", 1), page_size=int_arg("page_size", 0) or None)
        return ok(rows)

    @app.route("/api/admin/employees", methods=["POST"], endpoint="add_employee")
    @admin_required
    @api_view
    def add_employee():
        body = json_body()
        employee_id = container.employee_service.create_employee(
            current_role=current_role(),
            form=_form_from(body),
            password=body.get("password", ""),
        )
        return ok({"employee_id": employee_id}, message="Employee created", status=201)

    @app.route("/api/admin/employees/<int:employee_id>", methods=["PUT"], endpoint="edit_employee")
    @admin_required
    @api_view
    def edit_employee(employee_id: int):
        container.employee_service.update_employee(
            current_role=current_role(),
            employee_id=employee_id,
            form=_form_from(json_body()),
        )
        return ok(message="Employee updated")

    @app.route("/api/admin/employees/<int:employee_id>", methods=["DELETE"], endpoint="deactivate_employee")
    @admin_required
    @api_view
    def deactivate_employee(employee_id: int):
        container.employee_service.deactivate_employee(
            current_role=current_role(),
            current_employee_id=current_employee_id(),
            employee_id=employee_id,
        )
        return ok(message="Employee deactivated")

    @app.route("/api/admin/departments", methods=["GET"], endpoint="admin_departments")
    @admin_required
    @api_view
    def admin_departments():
        return ok(container.department_service.list_departments())

    @app.route("/api/admin/departments", methods=["POST"], endpoint="add_department")
    @admin_required
    @api_view
    def add_department():
        body = json_body()
        department_id = container.department_service.create(
            current_role=current_role(),
            name=body.get("name", ""),
            description=body.get("description"),
        )
        return ok({"department_id": department_id}, message="Department created", status=201)

    @app.route("/api/admin/departments/<int:department_id>", methods=["PUT"], endpoint="edit_department")
    @admin_required
    @api_view
    def edit_department(department_id: int):
        body = json_body()
        container.department_service.update(
            current_role=current_role(),
            department_id=department_id,
            name=body.get("name", ""),
            description=body.get("description"),
        )
        return ok(message="Department updated")

    @app.route("/api/admin/departments/<int:department_id>", methods=["DELETE"], endpoint="delete_department")
    @admin_required
    @api_view
    def delete_department(department_id: int):
        container.department_service.delete(current_role=current_role(), department_id=department_id)
        return ok(message="Department deleted")
