from __future__ import annotations

from typing import Sequence

from ...core.constants import MSG_DEPARTMENT_NOT_FOUND, MSG_PEOPLE_IN
from ...core.exceptions import DepartmentNotFoundError
from ...directory.service import DirectoryService
from ..model import ListDepartment
from .base import CommandHandler, HandlerResult


def department_block(department: str, employees: Sequence[str]) -> list[str]:
    return [MSG_PEOPLE_IN.format(department=department), *employees]


class ListDepartmentHandler(CommandHandler):
    """One department, names sorted; a miss is reported, not raised."""

    def handle(self, command: ListDepartment, directory: DirectoryService) -> HandlerResult:
        try:
            employees = directory.list_department(command.department)
        except DepartmentNotFoundError as e:
            return HandlerResult(lines=(MSG_DEPARTMENT_NOT_FOUND.format(department=e.department),))
        return HandlerResult(lines=tuple(department_block(command.department, employees)))
