from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class EmployeeActivity:
    """One activity sample reported by an employee's device agent."""

    activity_id: int
    employee_id: int
    device_id: str
    active_app: Optional[str]
    active_time: int
    created_at: datetime
    screenshot: Optional[str] = None


@dataclass
class DeviceSummary:
    employee_id: int
    device_id: str
    last_active: datetime
    total_activities: int = 1
