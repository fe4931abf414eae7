from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import RequestStatus
from .model import LeaveBalance, LeaveBalanceRow, LeaveRequest, LeaveRequestRow, LeaveType


class LeaveTypeRepository(Protocol):
    def list_all(self) -> Sequence[LeaveType]:
        raise NotImplementedError

    def get_by_id(self, leave_type_id: int) -> Optional[LeaveType]:
        raise NotImplementedError

    def create(self, *, name: str, description: Optional[str], is_paid: bool, default_days: int) -> int:
        raise NotImplementedError

    def update(
        self,
        *,
        leave_type_id: int,
        name: str,
        description: Optional[str],
        is_paid: bool,
        default_days: int,
    ) -> bool:
        raise NotImplementedError

    def delete(self, leave_type_id: int) -> bool:
        raise NotImplementedError


class LeaveRequestRepository(Protocol):
    def create(self, *, employee_id: int, leave_type_id: int, start_date: date, end_date: date, reason: str) -> int:
        raise NotImplementedError

    def get_by_id(self, request_id: int) -> Optional[LeaveRequest]:
        raise NotImplementedError

    def list_rows(
        self,
        *,
        status: Optional[RequestStatus] = None,
        employee_id: Optional[int] = None,
        limit: int = 200,
    ) -> Sequence[LeaveRequestRow]:
        """Requests newest first."""

        raise NotImplementedError

    def decide(self, *, request_id: int, status: RequestStatus) -> bool:
        """Move a pending request to approved/rejected. False if it was not pending."""

        raise NotImplementedError

    def approve(self, *, request_id: int, balance_id: Optional[int], days: int) -> bool:
        """Approve a pending request and add ``days`` to the balance's used days in one transaction.

        False if the request was not pending. Raises NotFoundError, leaving the
        request pending, when ``balance_id`` names no balance.
        """

        raise NotImplementedError

    def list_approved_covering(self, day: date) -> Sequence[LeaveRequest]:
        raise NotImplementedError

    def list_upcoming_approved(self, *, employee_id: int, from_date: date, limit: int) -> Sequence[LeaveRequestRow]:
        raise NotImplementedError


class LeaveBalanceRepository(Protocol):
    def list_for_employee(self, *, employee_id: int, year: int) -> Sequence[LeaveBalanceRow]:
        raise NotImplementedError

    def list_for_year(self, year: int) -> Sequence[LeaveBalance]:
        raise NotImplementedError

    def get_by_id(self, balance_id: int) -> Optional[LeaveBalance]:
        raise NotImplementedError

    def find(self, *, employee_id: int, leave_type_id: int, year: int) -> Optional[LeaveBalance]:
        raise NotImplementedError

    def set_total_days(self, balance_id: int, total_days: int) -> bool:
        raise NotImplementedError
