from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceExportRow, AttendanceRecord


class AttendanceRepository(Protocol):
    def get_for_employee_and_date(self, employee_id: int, work_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def list_for_date(self, work_date: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_recent_for_employee(self, employee_id: int, limit: int) -> Sequence[AttendanceRecord]:
        """Newest work_date first."""

        raise NotImplementedError

    def list_for_employee_between(self, employee_id: int, start: date, end: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def create(
        self,
        *,
        employee_id: int,
        work_date: date,
        status: AttendanceStatus,
        check_in: Optional[datetime],
        check_out: Optional[datetime],
        shift_id: Optional[int],
        remarks: Optional[str] = None,
    ) -> int:
        raise NotImplementedError

    def count_with_status(self, work_date: date, status: AttendanceStatus) -> int:
        raise NotImplementedError

    def export_rows_for_date(self, work_date: date) -> Sequence[AttendanceExportRow]:
        raise NotImplementedError
