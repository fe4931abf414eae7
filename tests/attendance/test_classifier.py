from __future__ import annotations

from datetime import time

import pytest

from src.hrms.hrms.attendance.factory import classify
from src.hrms.hrms.core.enums import AttendanceStatus
from src.hrms.hrms.shifts.model import ShiftConfig

DAY_SHIFT = ShiftConfig(shift_id=1, name="Standard", start_time=time(9, 0), end_time=time(18, 0), grace_minutes=15)
NIGHT_SHIFT = ShiftConfig(shift_id=2, name="Night", start_time=time(22, 0), end_time=time(6, 0), grace_minutes=10)


@pytest.mark.parametrize(
    "check_in, check_out, expected",
    [
        (time(9, 0), None, AttendanceStatus.PRESENT),
        (time(9, 10), None, AttendanceStatus.PRESENT),
        (time(9, 20), None, AttendanceStatus.LATE),
        (time(13, 0), None, AttendanceStatus.HALF_DAY),
        (time(9, 0), time(13, 30), AttendanceStatus.HALF_DAY),
        (time(9, 0), time(17, 0), AttendanceStatus.PRESENT),
    ],
)
def test_day_shift_examples(check_in, check_out, expected):
    assert classify(DAY_SHIFT, check_in, check_out) == expected


def test_arriving_exactly_at_end_of_grace_is_on_time():
    assert classify(DAY_SHIFT, time(9, 15)) == AttendanceStatus.PRESENT
    assert classify(DAY_SHIFT, time(9, 16)) == AttendanceStatus.LATE


def test_late_arrival_at_noon_is_half_day():
    assert classify(DAY_SHIFT, time(12, 0)) == AttendanceStatus.HALF_DAY
    assert classify(DAY_SHIFT, time(11, 59)) == AttendanceStatus.LATE


def test_early_arrival_is_present():
    assert classify(DAY_SHIFT, time(7, 45), time(18, 0)) == AttendanceStatus.PRESENT


def test_checkout_is_ignored_once_late():
    assert classify(DAY_SHIFT, time(9, 20), time(10, 0)) == AttendanceStatus.LATE
    assert classify(DAY_SHIFT, time(13, 0), time(22, 0)) == AttendanceStatus.HALF_DAY


def test_shortfall_of_exactly_four_hours_is_half_day():
    # 540 expected, 300 worked
    assert classify(DAY_SHIFT, time(9, 0), time(14, 0)) == AttendanceStatus.HALF_DAY
    assert classify(DAY_SHIFT, time(9, 0), time(14, 1)) == AttendanceStatus.PRESENT


def test_overtime_is_present():
    assert classify(DAY_SHIFT, time(9, 0), time(21, 0)) == AttendanceStatus.PRESENT


def test_night_shift_wraps_around_midnight():
    assert classify(NIGHT_SHIFT, time(21, 50)) == AttendanceStatus.PRESENT
    assert classify(NIGHT_SHIFT, time(21, 55), time(6, 0)) == AttendanceStatus.PRESENT
    assert classify(NIGHT_SHIFT, time(22, 0), time(2, 0)) == AttendanceStatus.HALF_DAY


def test_night_shift_check_in_after_midnight_is_late():
    # 00:30 is 150 minutes after a 22:00 start once wrapped.
    assert classify(NIGHT_SHIFT, time(0, 30)) == AttendanceStatus.LATE


def test_late_evening_arrival_counts_as_half_day():
    # The noon cut-off is absolute, so any late arrival after 12:00 is half-day.
    assert classify(NIGHT_SHIFT, time(22, 30)) == AttendanceStatus.HALF_DAY


def test_zero_grace_means_one_minute_is_late():
    shift = ShiftConfig(shift_id=3, name="Strict", start_time=time(8, 0), end_time=time(16, 0), grace_minutes=0)
    assert classify(shift, time(8, 0)) == AttendanceStatus.PRESENT
    assert classify(shift, time(8, 1)) == AttendanceStatus.LATE


def test_classify_is_deterministic():
    results = {classify(DAY_SHIFT, time(9, 20), time(18, 0)) for _ in range(50)}
    assert results == {AttendanceStatus.LATE}


@pytest.mark.parametrize("hour", range(24))
def test_result_is_always_a_timed_status(hour):
    for minute in (0, 29, 59):
        for check_out in (None, time(0, 0), time(12, 0), time(23, 59)):
            assert classify(DAY_SHIFT, time(hour, minute), check_out) in {
                AttendanceStatus.PRESENT,
                AttendanceStatus.LATE,
                AttendanceStatus.HALF_DAY,
            }
