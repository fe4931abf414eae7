"""Minute arithmetic shared by the attendance rules.

All values are minutes since midnight in [0, 1440). Shifts may cross
midnight; the wrap corrections assume a shift spans less than 24 hours and
that nobody checks in more than 12 hours before the shift starts.
"""

from __future__ import annotations

from datetime import time

from ..common.datetime_utils import minutes_since_midnight
from ..core.constants import MIDNIGHT_WRAP_MINUTES, MINUTES_PER_DAY
from ..shifts.model import ShiftConfig


def minutes_late(shift: ShiftConfig, check_in: time) -> int:
    late = minutes_since_midnight(check_in) - minutes_since_midnight(shift.start_time)
    if late < MIDNIGHT_WRAP_MINUTES:
        late += MINUTES_PER_DAY
    return late


def worked_minutes(check_in: time, check_out: time) -> int:
    worked = minutes_since_midnight(check_out) - minutes_since_midnight(check_in)
    if worked < 0:
        worked += MINUTES_PER_DAY
    return worked


def expected_minutes(shift: ShiftConfig) -> int:
    expected = minutes_since_midnight(shift.end_time) - minutes_since_midnight(shift.start_time)
    if expected < 0:
        expected += MINUTES_PER_DAY
    return expected


def shortfall_minutes(shift: ShiftConfig, check_in: time, check_out: time) -> int:
    """How much shorter the worked span was than the shift length."""
    return expected_minutes(shift) - worked_minutes(check_in, check_out)
