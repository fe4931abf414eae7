from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .department_model import Department


class DepartmentRepository(Protocol):
    def list_all(self) -> Sequence[Department]:
        """Departments ordered by name, with their active employee count."""

        raise NotImplementedError

    def get_by_id(self, department_id: int) -> Optional[Department]:
        raise NotImplementedError

    def create(self, *, name: str, description: Optional[str]) -> int:
        raise NotImplementedError

    def update(self, *, department_id: int, name: str, description: Optional[str]) -> bool:
        raise NotImplementedError

    def delete(self, department_id: int) -> bool:
        """Detach employees from the department, then delete it."""

        raise NotImplementedError
