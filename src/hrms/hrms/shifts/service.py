from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..common.datetime_utils import parse_hhmm
from ..common.validators import require_non_empty, require_non_negative_int
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, MissingActiveShiftError, NotFoundError, ValidationError
from .model import ShiftConfig
from .repository import ShiftRepository

logger = logging.getLogger(__name__)


class ShiftService:
    """Use case: shift configuration (system settings)."""

    def __init__(self, shifts: ShiftRepository):
        self._shifts = shifts

    def list_shifts(self) -> Sequence[ShiftConfig]:
        return self._shifts.list_all()

    def get_active_shift(self) -> ShiftConfig:
        shift = self._shifts.get_active()
        if not shift:
            raise MissingActiveShiftError("No active shift configuration found")
        return shift

    def _clean(self, *, name: str, start_time: str, end_time: str, grace_minutes) -> dict:
        start = parse_hhmm(start_time)
        end = parse_hhmm(end_time)
        if start is None or end is None:
            raise ValidationError("Shift start and end times are required")
        return {
            "name": require_non_empty(name, "Shift name"),
            "start_time": start,
            "end_time": end,
            "grace_minutes": require_non_negative_int(grace_minutes, "Grace period"),
        }

    def create_shift(
        self,
        *,
        current_role: Role,
        name: str,
        start_time: str,
        end_time: str,
        grace_minutes,
        is_ramadan: bool = False,
        is_active: bool = False,
    ) -> int:
        if current_role != Role.ADMIN:
            raise AuthorizationError("You do not have permission")

        fields = self._clean(name=name, start_time=start_time, end_time=end_time, grace_minutes=grace_minutes)
        shift_id = self._shifts.create(**fields, is_ramadan=bool(is_ramadan), is_active=bool(is_active))
        logger.info("Created shift %s (%s)", shift_id, fields["name"])
        return shift_id

    def update_shift(
        self,
        *,
        current_role: Role,
        shift_id: int,
        name: str,
        start_time: str,
        end_time: str,
        grace_minutes,
        is_ramadan: Optional[bool] = None,
        is_active: Optional[bool] = None,
    ) -> None:
        """Replace a shift's times and name. Flags left as None keep their stored value."""

        if current_role != Role.ADMIN:
            raise AuthorizationError("You do not have permission")

        current = self._shifts.get_by_id(int(shift_id))
        if not current:
            raise NotFoundError("Shift not found")
        if is_ramadan is None:
            is_ramadan = current.is_ramadan
        if is_active is None:
            is_active = current.is_active

        fields = self._clean(name=name, start_time=start_time, end_time=end_time, grace_minutes=grace_minutes)
        if not self._shifts.update(
            shift_id=int(shift_id), **fields, is_ramadan=bool(is_ramadan), is_active=bool(is_active)
        ):
            raise ValidationError("Failed to update shift")

    def set_active(self, *, current_role: Role, shift_id: int, is_active: bool) -> None:
        if current_role != Role.ADMIN:
            raise AuthorizationError("You do not have permission")

        if not self._shifts.set_active(int(shift_id), is_active=bool(is_active)):
            raise NotFoundError("Shift not found")
        logger.info("Shift %s active=%s", shift_id, bool(is_active))

    def delete_shift(self, *, current_role: Role, shift_id: int) -> None:
        if current_role != Role.ADMIN:
            raise AuthorizationError("You do not have permission")

        if not self._shifts.delete(int(shift_id)):
            raise NotFoundError("Shift not found")
