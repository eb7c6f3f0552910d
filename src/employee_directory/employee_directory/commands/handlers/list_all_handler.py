from __future__ import annotations

from ...core.constants import MSG_LISTING_ALL
from ...directory.service import DirectoryService
from ..model import ListAll
from .base import CommandHandler, HandlerResult
from .list_handler import department_block


class ListAllHandler(CommandHandler):
    """Every department in alphabetical order, each with its sorted names."""

    def handle(self, command: ListAll, directory: DirectoryService) -> HandlerResult:
        lines = [MSG_LISTING_ALL]
        for department in directory.list_all():
            lines.extend(department_block(department.name, department.employees))
        return HandlerResult(lines=tuple(lines))
