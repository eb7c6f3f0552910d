from __future__ import annotations

from typing import Optional, Sequence

from .repository import DirectoryRepository


class InMemoryDirectoryRepository(DirectoryRepository):
    """Process-lifetime store; a department key exists only once someone was added to it."""

    def __init__(self):
        self._employees_by_department: dict[str, list[str]] = {}

    def append(self, *, department: str, name: str) -> None:
        self._employees_by_department.setdefault(department, []).append(name)

    def get_employees(self, department: str) -> Optional[Sequence[str]]:
        employees = self._employees_by_department.get(department)
        if employees is None:
            return None
        return list(employees)

    def list_departments(self) -> Sequence[str]:
        return list(self._employees_by_department)
