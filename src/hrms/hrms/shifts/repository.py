from __future__ import annotations

from datetime import time
from typing import Optional, Protocol, Sequence

from .model import ShiftConfig


class ShiftRepository(Protocol):
    def list_all(self) -> Sequence[ShiftConfig]:
        raise NotImplementedError

    def get_by_id(self, shift_id: int) -> Optional[ShiftConfig]:
        raise NotImplementedError

    def get_active(self) -> Optional[ShiftConfig]:
        """Return the active shift, preferring a Ramadan shift when several are active."""

        raise NotImplementedError

    def create(
        self,
        *,
        name: str,
        start_time: time,
        end_time: time,
        grace_minutes: int,
        is_ramadan: bool,
        is_active: bool,
    ) -> int:
        raise NotImplementedError

    def update(
        self,
        *,
        shift_id: int,
        name: str,
        start_time: time,
        end_time: time,
        grace_minutes: int,
        is_ramadan: bool,
        is_active: bool,
    ) -> bool:
        raise NotImplementedError

    def set_active(self, shift_id: int, *, is_active: bool) -> bool:
        raise NotImplementedError

    def delete(self, shift_id: int) -> bool:
        raise NotImplementedError
