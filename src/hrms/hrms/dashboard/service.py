from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional, Sequence

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import month_bounds
from ..core.constants import RECENT_ACTIVITY_LIMIT, UPCOMING_LEAVES_LIMIT
from ..core.enums import AttendanceStatus, RequestStatus, Role
from ..core.exceptions import AuthorizationError
from ..employees.repository import EmployeeRepository
from ..leaves.model import LeaveRequestRow
from ..leaves.repository import LeaveRequestRepository


@dataclass(frozen=True)
class AdminStats:
    total_employees: int
    present_today: int
    on_leave: int
    pending_requests: Sequence[LeaveRequestRow]


@dataclass(frozen=True)
class RecentActivity:
    kind: str
    date: date
    status: str
    details: Optional[str] = None


@dataclass(frozen=True)
class EmployeeStats:
    present_days: int
    absent_days: int
    pending_requests: int
    total_leaves: int
    recent_activity: Sequence[RecentActivity] = field(default_factory=list)
    upcoming_leaves: Sequence[LeaveRequestRow] = field(default_factory=list)


class DashboardService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        employees: EmployeeRepository,
        leave_requests: LeaveRequestRepository,
    ):
        self._attendance = attendance
        self._employees = employees
        self._leave_requests = leave_requests

    def admin_stats(self, *, current_role: Role, today: Optional[date] = None) -> AdminStats:
        if current_role != Role.ADMIN:
            raise AuthorizationError("You do not have permission")

        today = today or date.today()
        return AdminStats(
            total_employees=self._employees.count_all(),
            present_today=self._attendance.count_with_status(today, AttendanceStatus.PRESENT),
            on_leave=len(self._leave_requests.list_approved_covering(today)),
            pending_requests=self._leave_requests.list_rows(status=RequestStatus.PENDING),
        )

    def employee_stats(self, *, employee_id: int, today: Optional[date] = None) -> EmployeeStats:
        today = today or date.today()
        first, last = month_bounds(today)

        month = self._attendance.list_for_employee_between(int(employee_id), first, last)
        leaves = self._leave_requests.list_rows(employee_id=int(employee_id))

        recent: list[RecentActivity] = []
        for a in self._attendance.list_recent_for_employee(int(employee_id), RECENT_ACTIVITY_LIMIT):
            check_in = a.check_in.strftime("%H:%M") if a.check_in else "-"
            check_out = a.check_out.strftime("%H:%M") if a.check_out else "Not checked out"
            recent.append(RecentActivity(kind="attendance", date=a.work_date, status=a.status.value, details=f"{check_in} - {check_out}"))
        # list_rows is newest first
        for r in leaves[:RECENT_ACTIVITY_LIMIT]:
            recent.append(
                RecentActivity(
                    kind="leave",
                    date=r.start_date,
                    status=r.status.value,
                    details=f"{r.leave_type_name} ({r.start_date:%Y-%m-%d} - {r.end_date:%Y-%m-%d})",
                )
            )
        recent.sort(key=lambda x: x.date, reverse=True)

        return EmployeeStats(
            present_days=sum(1 for a in month if a.status == AttendanceStatus.PRESENT),
            absent_days=sum(1 for a in month if a.status == AttendanceStatus.ABSENT),
            pending_requests=sum(1 for r in leaves if r.status == RequestStatus.PENDING),
            total_leaves=sum(1 for r in leaves if r.status == RequestStatus.APPROVED),
            recent_activity=recent,
            upcoming_leaves=self._leave_requests.list_upcoming_approved(
                employee_id=int(employee_id), from_date=today, limit=UPCOMING_LEAVES_LIMIT
            ),
        )
