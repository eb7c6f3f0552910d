from __future__ import annotations

import logging

from ...core.constants import MSG_INVALID
from ...directory.service import DirectoryService
from ..model import Command
from .base import CommandHandler, HandlerResult

logger = logging.getLogger(__name__)


class InvalidHandler(CommandHandler):
    """Report the parse failure; the directory is left untouched."""

    def handle(self, command: Command, directory: DirectoryService) -> HandlerResult:
        message = getattr(command, "message", MSG_INVALID)
        logger.debug("invalid command: %s", message)
        return HandlerResult(lines=(message,))
