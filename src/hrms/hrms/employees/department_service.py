from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..common.validators import require_non_empty
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, NotFoundError
from .department_model import Department
from .department_repository import DepartmentRepository

logger = logging.getLogger(__name__)


class DepartmentService:
    def __init__(self, departments: DepartmentRepository):
        self._departments = departments

    def list_departments(self) -> Sequence[Department]:
        return self._departments.list_all()

    def create(self, *, current_role: Role, name: str, description: Optional[str] = None) -> int:
        if current_role != Role.ADMIN:
            raise AuthorizationError("You do not have permission")

        return self._departments.create(
            name=require_non_empty(name, "Department name"),
            description=(description or "").strip() or None,
        )

    def update(self, *, current_role: Role, department_id: int, name: str, description: Optional[str] = None) -> None:
        if current_role != Role.ADMIN:
            raise AuthorizationError("You do not have permission")

        if not self._departments.get_by_id(int(department_id)):
            raise NotFoundError("Department not found")

        self._departments.update(
            department_id=int(department_id),
            name=require_non_empty(name, "Department name"),
            description=(description or "").strip() or None,
        )

    def delete(self, *, current_role: Role, department_id: int) -> None:
        if current_role != Role.ADMIN:
            raise AuthorizationError("You do not have permission")

        if not self._departments.delete(int(department_id)):
            raise NotFoundError("Department not found")
        logger.info("Deleted department %s", department_id)
