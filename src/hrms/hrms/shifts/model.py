from __future__ import annotations

from dataclasses import dataclass
from datetime import time


@dataclass(frozen=True)
class ShiftConfig:
    """Domain entity: a named daily work window with a grace period."""

    shift_id: int
    name: str
    start_time: time
    end_time: time
    grace_minutes: int = 0
    is_ramadan: bool = False
    is_active: bool = False
