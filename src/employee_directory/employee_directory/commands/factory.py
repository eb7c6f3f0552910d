from __future__ import annotations

from dataclasses import dataclass, field

from ..core.enums import CommandKind
from .handlers.add_handler import AddEmployeeHandler
from .handlers.base import CommandHandler
from .handlers.invalid_handler import InvalidHandler
from .handlers.list_all_handler import ListAllHandler
from .handlers.list_handler import ListDepartmentHandler
from .handlers.quit_handler import QuitHandler
from .model import Command


def _default_handlers() -> dict[CommandKind, CommandHandler]:
    return {
        CommandKind.ADD_EMPLOYEE: AddEmployeeHandler(),
        CommandKind.LIST_DEPARTMENT: ListDepartmentHandler(),
        CommandKind.LIST_ALL: ListAllHandler(),
        CommandKind.QUIT: QuitHandler(),
        CommandKind.INVALID: InvalidHandler(),
    }


@dataclass
class CommandHandlerFactory:
    """Factory Pattern: choose the handler for a parsed command.

    Anything without a registered handler falls back to the invalid handler,
    so dispatch never fails.
    """

    handlers: dict[CommandKind, CommandHandler] = field(default_factory=_default_handlers)
    fallback: CommandHandler = field(default_factory=InvalidHandler)

    def for_command(self, command: Command) -> CommandHandler:
        kind = getattr(command, "kind", None)
        return self.handlers.get(kind, self.fallback)
