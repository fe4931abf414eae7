from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Account role used for authorization."""

    ADMIN = "admin"
    EMPLOYEE = "employee"


class AttendanceStatus(str, Enum):
    """Attendance status values stored in the database."""

    PRESENT = "present"
    ABSENT = "absent"
    HALF_DAY = "half-day"
    REMOTE = "remote"
    LEAVE = "leave"
    LATE = "late"
    WFH = "wfh"

    @property
    def is_timed(self) -> bool:
        """Statuses that carry check-in/out times and go through classification."""
        return self in TIMED_STATUSES


TIMED_STATUSES = frozenset({AttendanceStatus.PRESENT, AttendanceStatus.LATE, AttendanceStatus.HALF_DAY})

# Statuses an operator may pick directly when marking a day.
MARKABLE_STATUSES = frozenset(
    {
        AttendanceStatus.PRESENT,
        AttendanceStatus.ABSENT,
        AttendanceStatus.HALF_DAY,
        AttendanceStatus.REMOTE,
        AttendanceStatus.WFH,
    }
)


class RequestStatus(str, Enum):
    """Leave request approval workflow."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
