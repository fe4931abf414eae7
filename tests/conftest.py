import os
import sys
from datetime import date, time
from types import SimpleNamespace

import pytest

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

os.environ.setdefault("APP_ENV", "testing")

from src.hrms.hrms.container import build_services  # noqa: E402
from tests.fakes import (  # noqa: E402
    FakeActivityRepo,
    FakeAttendanceRepo,
    FakeDepartmentRepo,
    FakeEmployeeRepo,
    FakeLeaveBalanceRepo,
    FakeLeaveRequestRepo,
    FakeLeaveTypeRepo,
    FakeShiftRepo,
)

# A Wednesday.
TODAY = date(2026, 3, 4)


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def repos():
    departments = FakeDepartmentRepo()
    employees = FakeEmployeeRepo(departments)
    departments.employees = employees
    leave_types = FakeLeaveTypeRepo()
    leave_balances = FakeLeaveBalanceRepo(leave_types)
    return SimpleNamespace(
        departments=departments,
        employees=employees,
        shifts=FakeShiftRepo(),
        attendance=FakeAttendanceRepo(employees),
        leave_types=leave_types,
        leave_requests=FakeLeaveRequestRepo(employees, leave_types, leave_balances),
        leave_balances=leave_balances,
        activity=FakeActivityRepo(),
    )


@pytest.fixture
def standard_shift(repos):
    return repos.shifts.add(
        name="Standard",
        start_time=time(9, 0),
        end_time=time(18, 0),
        grace_minutes=15,
        is_ramadan=False,
        is_active=True,
    )


@pytest.fixture
def services(repos):
    return build_services(
        employees=repos.employees,
        departments=repos.departments,
        shifts=repos.shifts,
        attendance=repos.attendance,
        leave_types=repos.leave_types,
        leave_requests=repos.leave_requests,
        leave_balances=repos.leave_balances,
        activity=repos.activity,
        page_size=10,
    )
