from __future__ import annotations

import csv
import io
import logging
from datetime import date, datetime
from typing import Optional, Sequence

from ..common.datetime_utils import parse_hhmm
from ..core.constants import DEFAULT_HISTORY_LIMIT, DEFAULT_PAGE_SIZE
from ..core.enums import MARKABLE_STATUSES, AttendanceStatus, Role
from ..core.exceptions import AuthorizationError, ConflictError, NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from ..leaves.repository import LeaveRequestRepository
from ..shifts.service import ShiftService
from .factory import AttendanceStrategyFactory
from .model import AttendanceMark, AttendanceRecord, RosterEntry
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)

EXPORT_HEADER = ["Date", "Employee", "Department", "Status", "Check In", "Check Out"]

_STATUS_LABELS = {
    AttendanceStatus.PRESENT: "Present",
    AttendanceStatus.ABSENT: "Absent",
    AttendanceStatus.HALF_DAY: "Half-day",
    AttendanceStatus.REMOTE: "Remote",
    AttendanceStatus.LEAVE: "Leave",
    AttendanceStatus.LATE: "Late",
    AttendanceStatus.WFH: "Wfh",
}

_STATUS_BADGES = {
    AttendanceStatus.PRESENT: "bg-green-100 text-green-800",
    AttendanceStatus.ABSENT: "bg-red-100 text-red-800",
    AttendanceStatus.HALF_DAY: "bg-yellow-100 text-yellow-800",
    AttendanceStatus.REMOTE: "bg-blue-100 text-blue-800",
    AttendanceStatus.LEAVE: "bg-purple-100 text-purple-800",
    AttendanceStatus.LATE: "bg-orange-100 text-orange-800",
    AttendanceStatus.WFH: "bg-indigo-100 text-indigo-800",
}


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        employees: EmployeeRepository,
        shifts: ShiftService,
        leave_requests: LeaveRequestRepository,
        *,
        strategy_factory: AttendanceStrategyFactory | None = None,
        page_size: int = DEFAULT_PAGE_SIZE,
    ):
        self._attendance = attendance
        self._employees = employees
        self._shifts = shifts
        self._leave_requests = leave_requests
        self._factory = strategy_factory or AttendanceStrategyFactory()
        self._page_size = int(page_size)

    def mark_attendance(
        self,
        *,
        current_role: Role,
        employee_id: int,
        work_date: date,
        status: Optional[str],
        check_in_time: Optional[str] = None,
        check_out_time: Optional[str] = None,
        today: Optional[date] = None,
    ) -> AttendanceRecord:
        """Write the day's attendance for one employee.

        ``absent``, ``remote`` and ``wfh`` are stored exactly as picked.
        ``present``, ``late`` and ``half-day`` need a check-in time, and the
        stored status is then decided from the active shift and the times,
        whichever of the three the operator picked.
        """

        if current_role != Role.ADMIN:
            raise AuthorizationError("You do not have permission")

        today = today or date.today()
        if work_date != today:
            raise ValidationError("Attendance can only be marked for the current day")

        if not status:
            raise ValidationError("Please select an attendance status")
        try:
            chosen = AttendanceStatus(status)
        except ValueError:
            raise ValidationError(f"Unknown attendance status {status!r}")
        if chosen not in MARKABLE_STATUSES:
            raise ValidationError(f"Attendance status {chosen.value!r} cannot be marked directly")

        shift = self._shifts.get_active_shift()

        employee = self._employees.get_by_id(int(employee_id))
        if not employee or not employee.is_active:
            raise NotFoundError("Employee not found")

        if self._attendance.get_for_employee_and_date(employee.employee_id, work_date):
            raise ConflictError("Attendance has already been marked for this day")

        final_status = chosen
        check_in: Optional[datetime] = None
        check_out: Optional[datetime] = None
        remarks: Optional[str] = None

        if chosen.is_timed:
            mark = self._parse_mark(check_in_time, check_out_time)
            decision = self._factory.decide(shift=shift, check_in=mark.check_in_time, check_out=mark.check_out_time)
            final_status = decision.status
            remarks = decision.note
            check_in = datetime.combine(work_date, mark.check_in_time)
            if mark.check_out_time is not None:
                check_out = datetime.combine(work_date, mark.check_out_time)

        attendance_id = self._attendance.create(
            employee_id=employee.employee_id,
            work_date=work_date,
            status=final_status,
            check_in=check_in,
            check_out=check_out,
            shift_id=shift.shift_id,
            remarks=remarks,
        )
        logger.info(
            "Marked employee %s on %s as %s (picked %s, shift %s)",
            employee.employee_id,
            work_date,
            final_status.value,
            chosen.value,
            shift.shift_id,
        )
        return AttendanceRecord(
            attendance_id=attendance_id,
            employee_id=employee.employee_id,
            work_date=work_date,
            check_in=check_in,
            check_out=check_out,
            status=final_status,
            shift_id=shift.shift_id,
            remarks=remarks,
        )

    @staticmethod
    def _parse_mark(check_in_time: Optional[str], check_out_time: Optional[str]) -> AttendanceMark:
        check_in = parse_hhmm(check_in_time)
        if check_in is None:
            raise ValidationError("Check-in time is required")
        return AttendanceMark(check_in_time=check_in, check_out_time=parse_hhmm(check_out_time))

    def daily_roster(self, *, current_role: Role, work_date: date, page: int = 1) -> list[RosterEntry]:
        """Active employees for one page, each with the day's record.

        Employees on approved leave with no record get a synthesized
        ``leave`` record (id 0, never persisted).
        """

        if current_role != Role.ADMIN:
            raise AuthorizationError("You do not have permission")

        page = max(int(page), 1)
        employees = self._employees.list_active(offset=(page - 1) * self._page_size, limit=self._page_size)

        by_employee: dict[int, AttendanceRecord] = {}
        for rec in self._attendance.list_for_date(work_date):
            by_employee.setdefault(rec.employee_id, rec)
        for leave in self._leave_requests.list_approved_covering(work_date):
            by_employee.setdefault(
                leave.employee_id,
                AttendanceRecord(
                    attendance_id=0,
                    employee_id=leave.employee_id,
                    work_date=work_date,
                    check_in=None,
                    check_out=None,
                    status=AttendanceStatus.LEAVE,
                    shift_id=None,
                    remarks="On approved leave",
                ),
            )

        return [RosterEntry(employee=e, record=by_employee.get(e.employee_id)) for e in employees]

    def export_day_csv(self, *, current_role: Role, work_date: date) -> str:
        if current_role != Role.ADMIN:
            raise AuthorizationError("You do not have permission")

        out = io.StringIO()
        writer = csv.writer(out, lineterminator="\n")
        writer.writerow(EXPORT_HEADER)
        for r in self._attendance.export_rows_for_date(work_date):
            writer.writerow(
                [
                    r.work_date.strftime("%Y-%m-%d"),
                    f"{r.first_name} {r.last_name}",
                    r.department_name or "-",
                    r.status.value,
                    r.check_in.strftime("%H:%M:%S") if r.check_in else "-",
                    r.check_out.strftime("%H:%M:%S") if r.check_out else "-",
                ]
            )
        return out.getvalue()

    def my_attendance(self, employee_id: int, *, limit: int = DEFAULT_HISTORY_LIMIT) -> Sequence[AttendanceRecord]:
        return self._attendance.list_recent_for_employee(int(employee_id), int(limit))

    @staticmethod
    def to_ui(r: AttendanceRecord) -> dict:
        # Times are only meaningful on the timed statuses.
        timed = r.status.is_timed
        return {
            "attendance_id": r.attendance_id,
            "employee_id": r.employee_id,
            "date": r.work_date.strftime("%Y-%m-%d"),
            "check_in": r.check_in.strftime("%H:%M") if timed and r.check_in else "-",
            "check_out": r.check_out.strftime("%H:%M") if timed and r.check_out else "-",
            "status": r.status.value,
            "label": _STATUS_LABELS.get(r.status, r.status.value),
            "badge": _STATUS_BADGES.get(r.status, "bg-gray-100 text-gray-800"),
            "shift_id": r.shift_id,
            "remarks": r.remarks or "",
        }
