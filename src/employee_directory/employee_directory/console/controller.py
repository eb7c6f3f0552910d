from __future__ import annotations

import logging

from ..commands.factory import CommandHandlerFactory
from ..commands.handlers.base import HandlerResult
from ..commands.model import Command
from ..core.exceptions import DomainError
from ..directory.service import DirectoryService

logger = logging.getLogger(__name__)


class DirectoryController:
    """Thin layer between the console loop and the directory service."""

    def __init__(self, directory: DirectoryService, *, handler_factory: CommandHandlerFactory | None = None):
        self._directory = directory
        self._factory = handler_factory or CommandHandlerFactory()

    def handle(self, command: Command) -> HandlerResult:
        handler = self._factory.for_command(command)
        try:
            return handler.handle(command, self._directory)
        except DomainError as e:
            logger.info("command rejected: %s", e)
            return HandlerResult(lines=(str(e),))

    def department_count(self) -> int:
        return self._directory.department_count()
