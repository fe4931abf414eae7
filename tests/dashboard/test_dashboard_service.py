from __future__ import annotations

from datetime import date, datetime, timedelta

import pytest

from src.hrms.hrms.core.enums import AttendanceStatus, RequestStatus, Role
from src.hrms.hrms.core.exceptions import AuthorizationError


def _record(repos, employee_id, day, status, check_in=None):
    repos.attendance.create(
        employee_id=employee_id,
        work_date=day,
        status=status,
        check_in=datetime.combine(day, check_in) if check_in else None,
        check_out=None,
        shift_id=1,
    )


def test_admin_stats(services, repos, today):
    annual = repos.leave_types.create(name="Annual")
    a = repos.employees.add()
    b = repos.employees.add()
    c = repos.employees.add()
    _record(repos, a.employee_id, today, AttendanceStatus.PRESENT)
    _record(repos, b.employee_id, today, AttendanceStatus.LATE)
    _record(repos, a.employee_id, today - timedelta(days=1), AttendanceStatus.PRESENT)
    repos.leave_requests.add(
        employee_id=c.employee_id,
        leave_type_id=annual,
        start_date=today,
        end_date=today,
        reason="Rest",
        status=RequestStatus.APPROVED,
    )
    pending = repos.leave_requests.add(
        employee_id=b.employee_id, leave_type_id=annual, start_date=today, end_date=today, reason="Later"
    )

    stats = services.dashboard_service.admin_stats(current_role=Role.ADMIN, today=today)

    assert stats.total_employees == 3
    assert stats.present_today == 1
    assert stats.on_leave == 1
    assert [r.request_id for r in stats.pending_requests] == [pending.request_id]


def test_admin_stats_requires_admin(services, today):
    with pytest.raises(AuthorizationError):
        services.dashboard_service.admin_stats(current_role=Role.EMPLOYEE, today=today)


def test_employee_stats(services, repos, today):
    annual = repos.leave_types.create(name="Annual")
    emp = repos.employees.add()
    _record(repos, emp.employee_id, date(2026, 3, 2), AttendanceStatus.PRESENT)
    _record(repos, emp.employee_id, date(2026, 3, 3), AttendanceStatus.ABSENT)
    _record(repos, emp.employee_id, today, AttendanceStatus.PRESENT)
    # Previous month does not count.
    _record(repos, emp.employee_id, date(2026, 2, 27), AttendanceStatus.PRESENT)
    repos.leave_requests.add(
        employee_id=emp.employee_id,
        leave_type_id=annual,
        start_date=date(2026, 3, 20),
        end_date=date(2026, 3, 20),
        reason="Trip",
        status=RequestStatus.APPROVED,
    )
    repos.leave_requests.add(
        employee_id=emp.employee_id,
        leave_type_id=annual,
        start_date=date(2026, 4, 1),
        end_date=date(2026, 4, 2),
        reason="Visit",
    )

    stats = services.dashboard_service.employee_stats(employee_id=emp.employee_id, today=today)

    assert stats.present_days == 2
    assert stats.absent_days == 1
    assert stats.pending_requests == 1
    assert stats.total_leaves == 1
    assert [u.start_date for u in stats.upcoming_leaves] == [date(2026, 3, 20)]
    assert [a.date for a in stats.recent_activity] == sorted((a.date for a in stats.recent_activity), reverse=True)
    assert stats.recent_activity[0].kind == "leave"
    assert {a.kind for a in stats.recent_activity} == {"attendance", "leave"}


def test_recent_activity_describes_attendance_times(services, repos, today):
    emp = repos.employees.add()
    _record(repos, emp.employee_id, today, AttendanceStatus.LATE, check_in=datetime(2026, 3, 4, 9, 30).time())

    stats = services.dashboard_service.employee_stats(employee_id=emp.employee_id, today=today)

    assert stats.recent_activity[0].details == "09:30 - Not checked out"
    assert stats.recent_activity[0].status == "late"
