from __future__ import annotations

from dataclasses import dataclass
from datetime import time
from typing import Optional

from ..common.datetime_utils import minutes_since_midnight
from ..core.constants import HALF_DAY_SHORTFALL_MINUTES, NOON_MINUTES
from ..core.enums import AttendanceStatus
from ..shifts.model import ShiftConfig
from .strategies.base import AttendanceStrategy, StatusDecision
from .strategies.half_day_strategy import AfternoonArrivalStrategy, EarlyDepartureStrategy
from .strategies.late_strategy import LateStrategy
from .strategies.normal_strategy import NormalStrategy
from .timing import minutes_late, shortfall_minutes


@dataclass
class AttendanceStrategyFactory:
    """Factory Pattern: choose the status strategy for a day's raw times.

    The choice depends only on the shift and the two times, so the same
    inputs always give the same strategy.
    """

    def for_marks(self, *, shift: ShiftConfig, check_in: time, check_out: Optional[time] = None) -> AttendanceStrategy:
        if minutes_late(shift, check_in) > shift.grace_minutes:
            # Checkout is irrelevant once the arrival is already late.
            if minutes_since_midnight(check_in) >= NOON_MINUTES:
                return AfternoonArrivalStrategy()
            return LateStrategy()

        if check_out is not None and shortfall_minutes(shift, check_in, check_out) >= HALF_DAY_SHORTFALL_MINUTES:
            return EarlyDepartureStrategy()
        return NormalStrategy()

    def decide(self, *, shift: ShiftConfig, check_in: time, check_out: Optional[time] = None) -> StatusDecision:
        strategy = self.for_marks(shift=shift, check_in=check_in, check_out=check_out)
        return strategy.decide(shift=shift, check_in=check_in, check_out=check_out)


def classify(shift: ShiftConfig, check_in: time, check_out: Optional[time] = None) -> AttendanceStatus:
    """Attendance status for one day: present, late or half-day."""
    return AttendanceStrategyFactory().decide(shift=shift, check_in=check_in, check_out=check_out).status
