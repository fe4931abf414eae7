from __future__ import annotations

from datetime import time
from typing import Optional

from ...core.enums import AttendanceStatus
from ...shifts.model import ShiftConfig
from .base import AttendanceStrategy, StatusDecision


class NormalStrategy(AttendanceStrategy):
    """Checked in within grace and worked (close to) the full shift."""

    def decide(self, *, shift: ShiftConfig, check_in: time, check_out: Optional[time]) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.PRESENT)
