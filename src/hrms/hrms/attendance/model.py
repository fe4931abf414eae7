from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Optional

from ..core.enums import AttendanceStatus
from ..employees.model import EmployeeListRow


@dataclass(frozen=True)
class AttendanceMark:
    """Raw times for one employee's day, as entered by whoever records attendance."""

    check_in_time: time
    check_out_time: Optional[time] = None


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one employee's attendance for one day. Written once."""

    attendance_id: int
    employee_id: int
    work_date: date
    check_in: Optional[datetime]
    check_out: Optional[datetime]
    status: AttendanceStatus
    shift_id: Optional[int]
    remarks: Optional[str] = None


@dataclass(frozen=True)
class RosterEntry:
    """Daily roster line: an active employee and what is known about their day."""

    employee: EmployeeListRow
    record: Optional[AttendanceRecord]


@dataclass(frozen=True)
class AttendanceExportRow:
    """Read-model for the daily CSV export (joined with employee and department)."""

    work_date: date
    first_name: str
    last_name: str
    department_name: Optional[str]
    status: AttendanceStatus
    check_in: Optional[datetime]
    check_out: Optional[datetime]
