from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional, Sequence

from ..common.datetime_utils import working_days_between
from ..common.validators import require_non_empty, require_non_negative_int, require_positive_id
from ..core.enums import RequestStatus, Role
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from ..employees.model import EmployeeListRow
from ..employees.repository import EmployeeRepository
from .model import LeaveBalance, LeaveBalanceRow, LeaveRequestRow, LeaveType
from .repository import LeaveBalanceRepository, LeaveRequestRepository, LeaveTypeRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BalanceMatrix:
    """Admin view: every active employee against every leave type for one year."""

    year: int
    employees: Sequence[EmployeeListRow]
    leave_types: Sequence[LeaveType]
    balances: Sequence[LeaveBalance]

    def get(self, employee_id: int, leave_type_id: int) -> Optional[LeaveBalance]:
        for b in self.balances:
            if b.employee_id == employee_id and b.leave_type_id == leave_type_id:
                return b
        return None


class LeaveTypeService:
    def __init__(self, leave_types: LeaveTypeRepository):
        self._types = leave_types

    def list_types(self) -> Sequence[LeaveType]:
        return self._types.list_all()

    def create(
        self,
        *,
        current_role: Role,
        name: str,
        description: Optional[str] = None,
        is_paid: bool = True,
        default_days=0,
    ) -> int:
        if current_role != Role.ADMIN:
            raise AuthorizationError("You do not have permission")

        return self._types.create(
            name=require_non_empty(name, "Leave type name"),
            description=(description or "").strip() or None,
            is_paid=bool(is_paid),
            default_days=require_non_negative_int(default_days, "Default days"),
        )

    def update(
        self,
        *,
        current_role: Role,
        leave_type_id: int,
        name: str,
        description: Optional[str] = None,
        is_paid: bool = True,
        default_days=0,
    ) -> None:
        if current_role != Role.ADMIN:
            raise AuthorizationError("You do not have permission")

        if not self._types.get_by_id(int(leave_type_id)):
            raise NotFoundError("Leave type not found")

        self._types.update(
            leave_type_id=int(leave_type_id),
            name=require_non_empty(name, "Leave type name"),
            description=(description or "").strip() or None,
            is_paid=bool(is_paid),
            default_days=require_non_negative_int(default_days, "Default days"),
        )

    def delete(self, *, current_role: Role, leave_type_id: int) -> None:
        if current_role != Role.ADMIN:
            raise AuthorizationError("You do not have permission")

        if not self._types.delete(int(leave_type_id)):
            raise NotFoundError("Leave type not found")


class LeaveService:
    """Use cases: leave requests, approval workflow and balances."""

    def __init__(
        self,
        requests: LeaveRequestRepository,
        leave_types: LeaveTypeRepository,
        balances: LeaveBalanceRepository,
        employees: EmployeeRepository,
    ):
        self._requests = requests
        self._types = leave_types
        self._balances = balances
        self._employees = employees

    def submit_request(
        self,
        *,
        employee_id: int,
        leave_type_id,
        start_date: date,
        end_date: date,
        reason: str,
    ) -> int:
        if not leave_type_id:
            raise ValidationError("Please select a leave type")
        leave_type_id = require_positive_id(leave_type_id, "Leave type")

        employee = self._employees.get_by_id(int(employee_id))
        if not employee or not employee.is_active:
            raise NotFoundError("Employee not found")
        if not self._types.get_by_id(leave_type_id):
            raise NotFoundError("Leave type not found")
        if end_date < start_date:
            raise ValidationError("End date must be on or after start date")

        request_id = self._requests.create(
            employee_id=employee.employee_id,
            leave_type_id=leave_type_id,
            start_date=start_date,
            end_date=end_date,
            reason=require_non_empty(reason, "Reason"),
        )
        logger.info("Employee %s requested leave %s (%s..%s)", employee.employee_id, request_id, start_date, end_date)
        return request_id

    def list_requests(self, *, current_role: Role, status: Optional[RequestStatus] = None) -> Sequence[LeaveRequestRow]:
        if current_role != Role.ADMIN:
            raise AuthorizationError("You do not have permission")
        return self._requests.list_rows(status=status)

    def my_requests(self, employee_id: int) -> Sequence[LeaveRequestRow]:
        return self._requests.list_rows(employee_id=int(employee_id))

    def approve(self, *, current_role: Role, request_id) -> None:
        req = self._pending_request(current_role=current_role, request_id=request_id)

        balance = self._balances.find(
            employee_id=req.employee_id,
            leave_type_id=req.leave_type_id,
            year=req.start_date.year,
        )
        if not balance:
            logger.warning(
                "No %s balance for employee %s leave type %s; approved without deduction",
                req.start_date.year,
                req.employee_id,
                req.leave_type_id,
            )

        days = working_days_between(req.start_date, req.end_date)
        if not self._requests.approve(
            request_id=req.request_id,
            balance_id=balance.balance_id if balance else None,
            days=days,
        ):
            raise ValidationError("Leave request has already been decided")
        logger.info("Leave request %s approved (%s working days)", req.request_id, days)

    def reject(self, *, current_role: Role, request_id) -> None:
        req = self._pending_request(current_role=current_role, request_id=request_id)
        if not self._requests.decide(request_id=req.request_id, status=RequestStatus.REJECTED):
            raise ValidationError("Leave request has already been decided")
        logger.info("Leave request %s rejected", req.request_id)

    def _pending_request(self, *, current_role: Role, request_id):
        if current_role != Role.ADMIN:
            raise AuthorizationError("You do not have permission")
        if not request_id:
            raise ValidationError("Invalid leave request ID")

        req = self._requests.get_by_id(require_positive_id(request_id, "Leave request ID"))
        if not req:
            raise NotFoundError("Leave request not found")
        if req.status != RequestStatus.PENDING:
            raise ValidationError("Leave request has already been decided")
        return req

    def my_balances(self, *, employee_id: int, year: int) -> Sequence[LeaveBalanceRow]:
        return self._balances.list_for_employee(employee_id=int(employee_id), year=int(year))

    def balance_matrix(self, *, current_role: Role, year: int) -> BalanceMatrix:
        if current_role != Role.ADMIN:
            raise AuthorizationError("You do not have permission")
        return BalanceMatrix(
            year=int(year),
            employees=self._employees.list_active(offset=0, limit=10_000),
            leave_types=self._types.list_all(),
            balances=self._balances.list_for_year(int(year)),
        )

    def update_balance(self, *, current_role: Role, balance_id: int, total_days) -> None:
        if current_role != Role.ADMIN:
            raise AuthorizationError("You do not have permission")

        total = require_non_negative_int(total_days, "Total days")

        if not self._balances.get_by_id(int(balance_id)):
            raise NotFoundError("Leave balance not found")
        self._balances.set_total_days(int(balance_id), total)
