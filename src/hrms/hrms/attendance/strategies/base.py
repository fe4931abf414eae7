from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import time
from typing import Optional

from ...core.enums import AttendanceStatus
from ...shifts.model import ShiftConfig


@dataclass(frozen=True)
class StatusDecision:
    status: AttendanceStatus
    note: Optional[str] = None


class AttendanceStrategy(ABC):
    """Strategy Pattern: encapsulate how we describe an attendance status."""

    @abstractmethod
    def decide(self, *, shift: ShiftConfig, check_in: time, check_out: Optional[time]) -> StatusDecision:
        raise NotImplementedError
