from __future__ import annotations

from datetime import date, time

import pytest
from werkzeug.security import generate_password_hash

from src.hrms.hrms.core.enums import Role
from src.hrms.hrms.main import create_app


@pytest.fixture
def people(repos):
    admin = repos.employees.add(
        first_name="Admin", email="admin@example.com", password_hash=generate_password_hash("admin123"), role=Role.ADMIN
    )
    staff = repos.employees.add(
        first_name="Lan", email="lan@example.com", password_hash=generate_password_hash("secret1")
    )
    return admin, staff


@pytest.fixture
def client(services, people):
    app = create_app(services, settings_module="config.testing")
    return app.test_client()


def _login(client, email, password):
    return client.post("/api/auth/login", json={"email": email, "password": password})


def test_login_and_profile(client):
    resp = _login(client, "lan@example.com", "secret1")
    assert resp.status_code == 200
    assert resp.get_json()["data"]["role"] == "employee"

    me = client.get("/api/me").get_json()
    assert me["data"]["email"] == "lan@example.com"
    assert me["data"]["hire_date"] == "2024-01-01"


def test_bad_login_is_401(client):
    resp = _login(client, "lan@example.com", "nope")

    assert resp.status_code == 401
    assert resp.get_json() == {"success": False, "message": "Invalid email or password"}


def test_endpoints_need_a_session(client):
    assert client.get("/api/me").status_code == 401
    assert client.get("/api/admin/employees").status_code == 401


def test_admin_endpoints_reject_employees(client):
    _login(client, "lan@example.com", "secret1")

    assert client.get("/api/admin/employees").status_code == 403


def test_logout_clears_session(client):
    _login(client, "lan@example.com", "secret1")
    client.post("/api/auth/logout")

    assert client.get("/api/me").status_code == 401


def test_mark_attendance_over_http(client, people, standard_shift):
    _, staff = people
    _login(client, "admin@example.com", "admin123")

    resp = client.post(
        "/api/admin/attendance",
        json={"employee_id": staff.employee_id, "status": "present", "check_in_time": "09:20", "check_out_time": "18:00"},
    )

    assert resp.status_code == 201
    body = resp.get_json()["data"]
    assert body["status"] == "late"
    assert body["check_in"] == "09:20"
    assert body["remarks"] == "Late by 20 minutes"

    again = client.post("/api/admin/attendance", json={"employee_id": staff.employee_id, "status": "absent"})
    assert again.status_code == 409


def test_mark_without_active_shift_is_409(client, people):
    _, staff = people
    _login(client, "admin@example.com", "admin123")

    resp = client.post("/api/admin/attendance", json={"employee_id": staff.employee_id, "status": "absent"})

    assert resp.status_code == 409
    assert resp.get_json()["message"] == "No active shift configuration found"


def test_mark_past_day_is_400(client, people, standard_shift):
    _, staff = people
    _login(client, "admin@example.com", "admin123")

    resp = client.post(
        "/api/admin/attendance",
        json={"employee_id": staff.employee_id, "date": "2020-01-01", "status": "present", "check_in_time": "09:00"},
    )

    assert resp.status_code == 400


def test_roster_and_csv_export(client, people, standard_shift):
    _, staff = people
    _login(client, "admin@example.com", "admin123")
    client.post("/api/admin/attendance", json={"employee_id": staff.employee_id, "status": "wfh"})

    roster = client.get("/api/admin/attendance").get_json()["data"]
    assert roster["is_current_day"] is True
    statuses = {row["employee"]["employee_id"]: row["attendance"] for row in roster["rows"]}
    assert statuses[staff.employee_id]["status"] == "wfh"

    export = client.get(f"/api/admin/attendance/export.csv?date={date.today():%Y-%m-%d}")
    assert export.status_code == 200
    assert export.mimetype == "text/csv"
    assert f"attendance-{date.today():%Y-%m-%d}.csv" in export.headers["Content-Disposition"]
    text = export.data.decode("utf-8-sig")
    assert text.splitlines()[0] == "Date,Employee,Department,Status,Check In,Check Out"


def test_bad_date_query_is_400(client):
    _login(client, "admin@example.com", "admin123")

    assert client.get("/api/admin/attendance?date=yesterday").status_code == 400


def test_active_shift_endpoint(client, standard_shift):
    _login(client, "lan@example.com", "secret1")

    data = client.get("/api/shifts/active").get_json()["data"]

    assert data["start_time"] == "09:00"
    assert data["grace_minutes"] == 15


def test_leave_flow_over_http(client, repos, people):
    annual = repos.leave_types.create(name="Annual")
    _login(client, "lan@example.com", "secret1")

    created = client.post(
        "/api/me/leaves",
        json={"leave_type_id": annual, "start_date": "2026-05-04", "end_date": "2026-05-05", "reason": "Trip"},
    )
    assert created.status_code == 201
    request_id = created.get_json()["data"]["request_id"]

    _login(client, "admin@example.com", "admin123")
    assert client.post(f"/api/admin/leaves/{request_id}/approve").status_code == 200
    assert client.post(f"/api/admin/leaves/{request_id}/reject").status_code == 400

    approved = client.get("/api/admin/leaves?status=approved").get_json()["data"]
    assert [r["request_id"] for r in approved] == [request_id]


def test_create_employee_over_http(client, repos):
    _login(client, "admin@example.com", "admin123")

    resp = client.post(
        "/api/admin/employees",
        json={
            "first_name": "Minh",
            "last_name": "Le",
            "email": "minh@example.com",
            "position": "Analyst",
            "hire_date": "2026-01-05",
            "probation_end_date": "2026-04-05",
            "password": "secret1",
        },
    )

    assert resp.status_code == 201
    employee_id = resp.get_json()["data"]["employee_id"]
    assert repos.employees.get_by_id(employee_id).probation_end_date == date(2026, 4, 5)

    dup = client.post(
        "/api/admin/employees",
        json={"first_name": "M", "last_name": "L", "email": "minh@example.com", "position": "A", "hire_date": "2026-01-05", "password": "secret1"},
    )
    assert dup.status_code == 409


def test_shift_admin_over_http(client, repos):
    _login(client, "admin@example.com", "admin123")

    resp = client.post(
        "/api/admin/shifts",
        json={"name": "Night", "start_time": "22:00", "end_time": "06:00", "grace_minutes": 10, "is_active": True},
    )

    assert resp.status_code == 201
    shift = repos.shifts.get_by_id(resp.get_json()["data"]["shift_id"])
    assert shift.start_time == time(22, 0)
    assert client.post(f"/api/admin/shifts/{shift.shift_id}/active", json={"is_active": False}).status_code == 200
    assert repos.shifts.get_by_id(shift.shift_id).is_active is False


def test_dashboards(client, people):
    _login(client, "lan@example.com", "secret1")
    mine = client.get("/api/dashboard").get_json()["data"]
    assert mine["present_days"] == 0

    _login(client, "admin@example.com", "admin123")
    stats = client.get("/api/admin/dashboard").get_json()["data"]
    assert stats["total_employees"] == 2


def test_unknown_route_is_json_404(client):
    resp = client.get("/api/nope")

    assert resp.status_code == 404
    assert resp.get_json()["success"] is False


def test_shift_edit_without_flags_keeps_it_active(client, repos, standard_shift):
    _login(client, "admin@example.com", "admin123")

    resp = client.put(
        f"/api/admin/shifts/{standard_shift.shift_id}",
        json={"name": "Standard", "start_time": "08:00", "end_time": "17:00", "grace_minutes": 10},
    )

    assert resp.status_code == 200
    assert repos.shifts.get_by_id(standard_shift.shift_id).is_active is True
    assert client.get("/api/shifts/active").get_json()["data"]["start_time"] == "08:00"


@pytest.mark.parametrize("employee_id", ["abc", None, -3])
def test_mark_with_bad_employee_id_is_400(client, standard_shift, employee_id):
    _login(client, "admin@example.com", "admin123")

    resp = client.post("/api/admin/attendance", json={"employee_id": employee_id, "status": "absent"})

    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Employee is not valid"


def test_non_object_json_body_is_400(client, standard_shift):
    _login(client, "admin@example.com", "admin123")

    resp = client.post("/api/admin/attendance", json=[1, 2])

    assert resp.status_code == 400
    assert resp.get_json()["success"] is False


def test_create_employee_with_bad_department_is_400(client):
    _login(client, "admin@example.com", "admin123")

    resp = client.post(
        "/api/admin/employees",
        json={
            "first_name": "Minh",
            "last_name": "Le",
            "email": "minh@example.com",
            "position": "Analyst",
            "department_id": "zz",
            "hire_date": "2026-01-05",
            "password": "secret1",
        },
    )

    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Department is not valid"


def test_mark_with_malformed_check_in_is_400(client, people, standard_shift):
    _, staff = people
    _login(client, "admin@example.com", "admin123")

    resp = client.post(
        "/api/admin/attendance",
        json={"employee_id": staff.employee_id, "status": "present", "check_in_time": "09:1099"},
    )

    assert resp.status_code == 400
