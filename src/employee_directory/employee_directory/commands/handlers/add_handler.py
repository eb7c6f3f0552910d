from __future__ import annotations

from ...core.constants import MSG_ADDED
from ...directory.service import DirectoryService
from ..model import AddEmployee
from .base import CommandHandler, HandlerResult


class AddEmployeeHandler(CommandHandler):
    """Append the employee, then confirm."""

    def handle(self, command: AddEmployee, directory: DirectoryService) -> HandlerResult:
        directory.add(command.name, command.department)
        return HandlerResult(lines=(MSG_ADDED.format(name=command.name, department=command.department),))
