from __future__ import annotations

from typing import Protocol, Sequence

from .model import EmployeeActivity


class ActivityRepository(Protocol):
    def list_all(self) -> Sequence[EmployeeActivity]:
        """All samples, newest first."""

        raise NotImplementedError

    def list_for_device(self, *, employee_id: int, device_id: str) -> Sequence[EmployeeActivity]:
        """Samples of one device, newest first."""

        raise NotImplementedError
