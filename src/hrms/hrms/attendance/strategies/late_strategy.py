from __future__ import annotations

from datetime import time
from typing import Optional

from ...core.enums import AttendanceStatus
from ...shifts.model import ShiftConfig
from ..timing import minutes_late
from .base import AttendanceStrategy, StatusDecision


class LateStrategy(AttendanceStrategy):
    """Late check-in, before noon."""

    def decide(self, *, shift: ShiftConfig, check_in: time, check_out: Optional[time]) -> StatusDecision:
        return StatusDecision(
            status=AttendanceStatus.LATE,
            note=f"Late by {minutes_late(shift, check_in)} minutes",
        )
