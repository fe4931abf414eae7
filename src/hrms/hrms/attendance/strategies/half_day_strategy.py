from __future__ import annotations

from datetime import time
from typing import Optional

from ...core.enums import AttendanceStatus
from ...shifts.model import ShiftConfig
from ..timing import shortfall_minutes, worked_minutes
from .base import AttendanceStrategy, StatusDecision


class AfternoonArrivalStrategy(AttendanceStrategy):
    """Late check-in at or after noon counts as half a day."""

    def decide(self, *, shift: ShiftConfig, check_in: time, check_out: Optional[time]) -> StatusDecision:
        return StatusDecision(
            status=AttendanceStatus.HALF_DAY,
            note=f"Checked in at {check_in.strftime('%H:%M')}, after noon",
        )


class EarlyDepartureStrategy(AttendanceStrategy):
    """On-time check-in but left far short of the shift length."""

    def decide(self, *, shift: ShiftConfig, check_in: time, check_out: Optional[time]) -> StatusDecision:
        if check_out is None:
            raise ValueError("EarlyDepartureStrategy needs a check-out time")
        return StatusDecision(
            status=AttendanceStatus.HALF_DAY,
            note=(
                f"Worked {worked_minutes(check_in, check_out)} minutes, "
                f"{shortfall_minutes(shift, check_in, check_out)} short of shift"
            ),
        )
