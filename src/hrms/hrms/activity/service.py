from __future__ import annotations

from typing import Sequence

from ..common.validators import require_non_empty
from ..core.enums import Role
from ..core.exceptions import AuthorizationError
from .model import DeviceSummary, EmployeeActivity
from .repository import ActivityRepository


class ActivityService:
    """Read-only views over device activity samples (admin)."""

    def __init__(self, activity: ActivityRepository):
        self._activity = activity

    def list_devices(self, *, current_role: Role) -> list[DeviceSummary]:
        if current_role != Role.ADMIN:
            raise AuthorizationError("You do not have permission")

        devices: dict[tuple[int, str], DeviceSummary] = {}
        # Samples arrive newest first, so the first one seen per device is its last activity.
        for a in self._activity.list_all():
            key = (a.employee_id, a.device_id)
            summary = devices.get(key)
            if summary is None:
                devices[key] = DeviceSummary(employee_id=a.employee_id, device_id=a.device_id, last_active=a.created_at)
            else:
                summary.total_activities += 1
        return list(devices.values())

    def device_activity(self, *, current_role: Role, employee_id: int, device_id: str) -> Sequence[EmployeeActivity]:
        if current_role != Role.ADMIN:
            raise AuthorizationError("You do not have permission")
        return self._activity.list_for_device(
            employee_id=int(employee_id),
            device_id=require_non_empty(device_id, "Device"),
        )
