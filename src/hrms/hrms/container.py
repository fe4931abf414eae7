from __future__ import annotations

from dataclasses import dataclass

from .activity.mysql_activity_repository import MySQLActivityRepository
from .activity.service import ActivityService
from .attendance.factory import AttendanceStrategyFactory
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_PAGE_SIZE
from .dashboard.service import DashboardService
from .database.connection import DBConfig, DatabaseConnection
from .employees.department_service import DepartmentService
from .employees.mysql_department_repository import MySQLDepartmentRepository
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.service import AuthService, EmployeeService
from .leaves.mysql_leave_repository import (
    MySQLLeaveBalanceRepository,
    MySQLLeaveRequestRepository,
    MySQLLeaveTypeRepository,
)
from .leaves.service import LeaveService, LeaveTypeService
from .shifts.mysql_shift_repository import MySQLShiftRepository
from .shifts.service import ShiftService


@dataclass(frozen=True)
class Container:
    auth_service: AuthService
    employee_service: EmployeeService
    department_service: DepartmentService
    shift_service: ShiftService
    attendance_service: AttendanceService
    leave_type_service: LeaveTypeService
    leave_service: LeaveService
    activity_service: ActivityService
    dashboard_service: DashboardService


def build_services(
    *,
    employees,
    departments,
    shifts,
    attendance,
    leave_types,
    leave_requests,
    leave_balances,
    activity,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> Container:
    """Wire services over any repository implementations (MySQL or in-memory)."""

    shift_service = ShiftService(shifts)
    return Container(
        auth_service=AuthService(employees),
        employee_service=EmployeeService(employees, page_size=page_size),
        department_service=DepartmentService(departments),
        shift_service=shift_service,
        attendance_service=AttendanceService(
            attendance,
            employees,
            shift_service,
            leave_requests,
            strategy_factory=AttendanceStrategyFactory(),
            page_size=page_size,
        ),
        leave_type_service=LeaveTypeService(leave_types),
        leave_service=LeaveService(leave_requests, leave_types, leave_balances, employees),
        activity_service=ActivityService(activity),
        dashboard_service=DashboardService(attendance, employees, leave_requests),
    )


def build_container(*, db_config: dict, page_size: int = DEFAULT_PAGE_SIZE) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    return build_services(
        employees=MySQLEmployeeRepository(conn),
        departments=MySQLDepartmentRepository(conn),
        shifts=MySQLShiftRepository(conn),
        attendance=MySQLAttendanceRepository(conn),
        leave_types=MySQLLeaveTypeRepository(conn),
        leave_requests=MySQLLeaveRequestRepository(conn),
        leave_balances=MySQLLeaveBalanceRepository(conn),
        activity=MySQLActivityRepository(conn),
        page_size=page_size,
    )
