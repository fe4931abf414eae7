from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import RequestStatus


@dataclass(frozen=True)
class LeaveType:
    leave_type_id: int
    name: str
    description: Optional[str]
    is_paid: bool
    default_days: int


@dataclass(frozen=True)
class LeaveRequest:
    request_id: int
    employee_id: int
    leave_type_id: int
    start_date: date
    end_date: date
    reason: str
    status: RequestStatus
    created_at: datetime

    def covers(self, day: date) -> bool:
        return self.start_date <= day <= self.end_date


@dataclass(frozen=True)
class LeaveRequestRow:
    """Read-model for request tables (joined with employee, department and leave type)."""

    request_id: int
    employee_id: int
    employee_name: str
    department_name: Optional[str]
    leave_type_id: int
    leave_type_name: str
    start_date: date
    end_date: date
    reason: str
    status: RequestStatus
    created_at: datetime


@dataclass(frozen=True)
class LeaveBalance:
    balance_id: int
    employee_id: int
    leave_type_id: int
    year: int
    total_days: float
    used_days: float = 0

    @property
    def remaining_days(self) -> float:
        return self.total_days - self.used_days


@dataclass(frozen=True)
class LeaveBalanceRow:
    """Balance joined with its leave type, for the self-service view."""

    balance: LeaveBalance
    leave_type: LeaveType
