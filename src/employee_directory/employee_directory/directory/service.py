from __future__ import annotations

import logging

from ..common.validators import require_non_empty
from ..core.exceptions import DepartmentNotFoundError
from .model import Department
from .repository import DirectoryRepository

logger = logging.getLogger(__name__)


class DirectoryService:
    """Use case: add employees to departments and list them alphabetically."""

    def __init__(self, directory: DirectoryRepository):
        self._directory = directory

    def add(self, name: str, department: str) -> None:
        name = require_non_empty(name, "Employee name")
        department = require_non_empty(department, "Department")

        self._directory.append(department=department, name=name)
        logger.debug("added %r to %r", name, department)

    def list_department(self, department: str) -> list[str]:
        employees = self._directory.get_employees(department)
        if employees is None:
            logger.debug("lookup miss for department %r", department)
            raise DepartmentNotFoundError(department)
        return sorted(employees)

    def list_all(self) -> list[Department]:
        out: list[Department] = []
        for department in sorted(self._directory.list_departments()):
            employees = self._directory.get_employees(department) or ()
            out.append(Department(name=department, employees=tuple(sorted(employees))))
        return out

    def department_count(self) -> int:
        return len(self._directory.list_departments())
