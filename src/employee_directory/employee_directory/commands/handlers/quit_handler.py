from __future__ import annotations

from ...core.constants import MSG_EXITING
from ...directory.service import DirectoryService
from ..model import Quit
from .base import CommandHandler, HandlerResult


class QuitHandler(CommandHandler):
    """Terminal state of the loop."""

    def handle(self, command: Quit, directory: DirectoryService) -> HandlerResult:
        return HandlerResult(lines=(MSG_EXITING,), stop=True)
